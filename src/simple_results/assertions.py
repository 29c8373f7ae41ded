"""
Test assertions for Result and ObjectResult values.

Expressive assert helpers that produce clear failure messages, for use in
pytest suites of code that returns results.

Usage in tests:
    from simple_results import ResultAssertions

    def test_create_user():
        result = create_user(valid_command)
        user = ResultAssertions.assert_success(result)
        assert user.name == "Alice"

    def test_invalid_email():
        result = create_user(bad_command)
        ResultAssertions.assert_has_error(result, "USR-002")
        ResultAssertions.assert_failure_count(result, errors=1, warnings=0)
"""

from __future__ import annotations

from typing import Any, TypeVar

from simple_results.failure import Failure
from simple_results.object_result import ObjectResult
from simple_results.result import Result

T = TypeVar("T")


def _describe(failures: tuple[Failure, ...]) -> str:
    return "; ".join(str(f) for f in failures) or "none"


class ResultAssertions:
    """Expressive test assertions for results."""

    @staticmethod
    def assert_success(result: Result | ObjectResult[T], message: str = "") -> T | None:
        """
        Assert the result has no failures and return its value.

        Returns None for a plain Result.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success, (
            f"Expected success but got failures: {_describe(result.get_failures())}{context}"
        )
        return result.value if isinstance(result, ObjectResult) else None

    @staticmethod
    def assert_failure(result: Result | ObjectResult[Any], message: str = "") -> tuple[Failure, ...]:
        """
        Assert the result carries at least one failure and return them all.

            failures = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure, f"Expected failures but got a success{context}"
        return result.get_failures()

    @staticmethod
    def assert_has_error(result: Result | ObjectResult[Any], code: str) -> Failure:
        """Assert an error with the given code is present and return it."""
        for failure in result.errors:
            if failure.code == code:
                return failure
        raise AssertionError(
            f"Expected error with code {code!r} but errors were: {_describe(result.errors)}"
        )

    @staticmethod
    def assert_has_warning(result: Result | ObjectResult[Any], code: str) -> Failure:
        """Assert a warning with the given code is present and return it."""
        for failure in result.warnings:
            if failure.code == code:
                return failure
        raise AssertionError(
            f"Expected warning with code {code!r} but warnings were: {_describe(result.warnings)}"
        )

    @staticmethod
    def assert_failure_count(
        result: Result | ObjectResult[Any],
        errors: int | None = None,
        warnings: int | None = None,
    ) -> None:
        """Assert bucket sizes; a None count is not checked."""
        if errors is not None:
            assert len(result.errors) == errors, (
                f"Expected {errors} error(s) but got {len(result.errors)}: "
                f"{_describe(result.errors)}"
            )
        if warnings is not None:
            assert len(result.warnings) == warnings, (
                f"Expected {warnings} warning(s) but got {len(result.warnings)}: "
                f"{_describe(result.warnings)}"
            )

    @staticmethod
    def assert_value(result: ObjectResult[T], expected_value: Any) -> None:
        """Assert the carried value equals expected_value, whatever the failure state."""
        assert result.value == expected_value, (
            f"Expected value {expected_value!r} but got {result.value!r}"
        )
