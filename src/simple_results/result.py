"""
Result — aggregate of failures for operations that return no value.

A Result collects zero or more Failures and partitions them by kind into
two ordered buckets, errors and warnings. Failures are data: nothing in
here raises for a failed operation. The success/failure state is derived
from the buckets on every access, never stored.

    ┌──────────────┐  merge_in  ┌──────────────┐
    │ Result       │◀───────────│ Result       │
    │  errors   [] │            │  errors   [] │
    │  warnings [] │            │  warnings [] │
    └──────────────┘            └──────────────┘

Instances are created only through the factories (empty, success, fail,
from_failure, from_failures), so the bucket invariant cannot be bypassed:

    >>> result = Result.success()
    >>> result.is_success
    True
    >>> Result.fail(Failure("001", FailureKind.ERROR, "Boom")).has_errors
    True
"""

from __future__ import annotations

from typing import Iterable

from simple_results.failure import Failure, FailureKind

EMPTY_FAILURES_MESSAGE = "Failure initialization requires to be initialized with failure."

# Only the factories below hold this token.
_FACTORY_TOKEN = object()


def _check_failures(failures: tuple[object, ...]) -> None:
    for failure in failures:
        if not isinstance(failure, Failure):
            raise TypeError(
                f"Expected Failure instances, got {type(failure).__name__}: {failure!r}"
            )


class Result:
    """
    Mutable aggregate of errors and warnings with no payload.

    Mutators (add_failure, merge_in) work in place and return the same
    instance so calls can be chained:

        Result.empty().add_failure(missing_name).merge_in(validate_address(cmd))
    """

    __slots__ = ("_errors", "_warnings")

    def __init__(self, *, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                "Result cannot be constructed directly; "
                "use Result.empty(), Result.success() or Result.fail()"
            )
        self._errors: list[Failure] = []
        self._warnings: list[Failure] = []

    # ──────────────────────── Buckets ────────────────────────

    @property
    def errors(self) -> tuple[Failure, ...]:
        """Failures of kind ERROR, in insertion order."""
        return tuple(self._errors)

    @property
    def warnings(self) -> tuple[Failure, ...]:
        """Failures of kind WARNING, in insertion order."""
        return tuple(self._warnings)

    # ──────────────────────── Introspection ────────────────────────

    @property
    def is_success(self) -> bool:
        """True when there is neither an error nor a warning."""
        return not self._errors and not self._warnings

    @property
    def is_failure(self) -> bool:
        """True when there is at least one error or warning."""
        return not self.is_success

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self._warnings)

    # ──────────────────────── Mutation ────────────────────────

    def add_failure(self, *failures: Failure) -> Result:
        """
        Append failures to the matching bucket, keeping arrival order.

        Raises TypeError if any argument is not a Failure; nothing is
        appended in that case.
        """
        _check_failures(failures)
        self._errors.extend(f for f in failures if f.kind is FailureKind.ERROR)
        self._warnings.extend(f for f in failures if f.kind is FailureKind.WARNING)
        return self

    def merge_in(self, other: Result) -> Result:
        """
        Append all of other's errors, then all of its warnings.

        other is left untouched. Merging a result into itself duplicates
        its failures once.
        """
        errors, warnings = other.errors, other.warnings
        self._errors.extend(errors)
        self._warnings.extend(warnings)
        return self

    def get_failures(self) -> tuple[Failure, ...]:
        """
        Snapshot of every failure, errors before warnings.

        Later mutation of this Result does not change a returned snapshot.
        """
        return (*self._errors, *self._warnings)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def empty() -> Result:
        """Create a Result with no failures, for neutral/no-op contexts."""
        return Result(_token=_FACTORY_TOKEN)

    @staticmethod
    def success() -> Result:
        """Create a Result with no failures, for operation outcomes."""
        return Result(_token=_FACTORY_TOKEN)

    @staticmethod
    def fail(*failures: Failure) -> Result:
        """
        Create a failed Result holding the given failures.

        A failed result must carry at least one failure: calling this with
        no arguments raises ValueError.
        """
        if not failures:
            raise ValueError(EMPTY_FAILURES_MESSAGE)
        return Result(_token=_FACTORY_TOKEN).add_failure(*failures)

    @staticmethod
    def from_failure(failure: Failure) -> Result:
        """Convert a single Failure into a failed Result."""
        return Result.fail(failure)

    @staticmethod
    def from_failures(failures: Iterable[Failure]) -> Result:
        """Convert a sequence of Failures into a failed Result."""
        return Result.fail(*failures)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` holds only on success."""
        return self.is_success

    def __repr__(self) -> str:
        return f"Result(errors={self._errors!r}, warnings={self._warnings!r})"
