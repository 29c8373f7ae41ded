"""
ObjectResult — failure aggregate that also carries a value.

ObjectResult[T] owns a private Result and delegates every piece of
failure bookkeeping to it; it is not a Result subclass. The carried
value is independent of the failure state: a failed result may still
hold a value, and a successful one may hold None.

    >>> res = ObjectResult.success(42)
    >>> res.value, res.is_success
    (42, True)
"""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from simple_results.failure import Failure
from simple_results.result import Result

T = TypeVar("T")

# Only the factories below hold this token.
_FACTORY_TOKEN = object()


class ObjectResult(Generic[T]):
    """
    Mutable aggregate of errors and warnings plus an optional value.

    `value` is a plain attribute: read it, or assign it after creation.
    """

    __slots__ = ("_result", "value")

    def __init__(self, value: T | None = None, *, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                "ObjectResult cannot be constructed directly; "
                "use ObjectResult.success(), ObjectResult.empty() or ObjectResult.fail()"
            )
        self._result = Result.empty()
        self.value: T | None = value

    # ──────────────────────── Buckets ────────────────────────

    @property
    def errors(self) -> tuple[Failure, ...]:
        """Failures of kind ERROR, in insertion order."""
        return self._result.errors

    @property
    def warnings(self) -> tuple[Failure, ...]:
        """Failures of kind WARNING, in insertion order."""
        return self._result.warnings

    # ──────────────────────── Introspection ────────────────────────

    @property
    def is_success(self) -> bool:
        """True when there is neither an error nor a warning."""
        return self._result.is_success

    @property
    def is_failure(self) -> bool:
        """True when there is at least one error or warning."""
        return self._result.is_failure

    @property
    def has_errors(self) -> bool:
        return self._result.has_errors

    @property
    def has_warnings(self) -> bool:
        return self._result.has_warnings

    # ──────────────────────── Mutation ────────────────────────

    def add_failure(self, *failures: Failure) -> ObjectResult[T]:
        """Append failures to the matching bucket, keeping arrival order."""
        self._result.add_failure(*failures)
        return self

    def merge_in(
        self, other: ObjectResult[T] | Result, override_value: bool = False
    ) -> ObjectResult[T]:
        """
        Append other's errors and warnings, optionally taking its value.

        With override_value the receiver's value becomes other.value, even
        when that is None. Without it the receiver's value is never touched.
        A plain Result has no value, so it can only be merged without
        override_value.
        """
        if override_value:
            if not isinstance(other, ObjectResult):
                raise TypeError("override_value requires an ObjectResult to take the value from")
            self.value = other.value
        self._result.add_failure(*other.get_failures())
        return self

    def get_failures(self) -> tuple[Failure, ...]:
        """Snapshot of every failure, errors before warnings."""
        return self._result.get_failures()

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> ObjectResult[T]:
        """Create a successful ObjectResult holding value."""
        return ObjectResult(value, _token=_FACTORY_TOKEN)

    @staticmethod
    def empty(value: T | None = None) -> ObjectResult[T]:
        """Create an ObjectResult with no failures and, optionally, a value."""
        return ObjectResult(value, _token=_FACTORY_TOKEN)

    @staticmethod
    def fail(*failures: Failure) -> ObjectResult[T]:
        """
        Create a failed ObjectResult with no value.

        Raises ValueError when called with no failures, like Result.fail.
        """
        failed: ObjectResult[T] = ObjectResult(_token=_FACTORY_TOKEN)
        failed._result = Result.fail(*failures)
        return failed

    @staticmethod
    def from_value(value: T) -> ObjectResult[T]:
        """Convert a bare value into a successful ObjectResult."""
        return ObjectResult.success(value)

    @staticmethod
    def from_failure(failure: Failure) -> ObjectResult[T]:
        """Convert a single Failure into a failed ObjectResult."""
        return ObjectResult.fail(failure)

    @staticmethod
    def from_failures(failures: Iterable[Failure]) -> ObjectResult[T]:
        """Convert a sequence of Failures into a failed ObjectResult."""
        return ObjectResult.fail(*failures)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Truthy only on success, regardless of the carried value."""
        return self._result.is_success

    def __repr__(self) -> str:
        return (
            f"ObjectResult(value={self.value!r}, "
            f"errors={list(self.errors)!r}, warnings={list(self.warnings)!r})"
        )
