"""
simple_results — standardized outcome representation for operations.

Separates "did it succeed" from "what went wrong": operations return a
Result (no value) or an ObjectResult[T] (with a value) that aggregates
errors and warnings, so diagnostics from nested operations can be merged
instead of raised.

    from simple_results import Failure, FailureKind, Result

    MISSING_NAME = Failure("USR-001", FailureKind.ERROR, "Name is required")

    def validate(cmd: dict) -> Result:
        if not cmd.get("name"):
            return Result.fail(MISSING_NAME)
        return Result.success()

    outcome = Result.empty().merge_in(validate(cmd)).merge_in(validate_address(cmd))
"""

from simple_results.failure import Failure, FailureKind
from simple_results.result import Result
from simple_results.object_result import ObjectResult
from simple_results.assertions import ResultAssertions

__all__ = [
    "Failure",
    "FailureKind",
    "Result",
    "ObjectResult",
    "ResultAssertions",
]

__version__ = "1.0.0"
