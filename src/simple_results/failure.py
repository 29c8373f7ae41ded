"""
Failure — one structured diagnostic entry.

A Failure is pure data: a caller-assigned code, a kind tag that decides
which bucket of a Result it lands in, a message, and an optional
description. Failures are usually predefined in catalogs owned by the
calling code and shared across results.

    >>> f = Failure("001", FailureKind.WARNING, "Title")
    >>> str(f)
    'Warning:001. Message: Title.'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique


@unique
class FailureKind(Enum):
    """
    Severity tag of a Failure.

    The meaning of each kind is left to the caller; results only use it
    to partition failures into errors and warnings.
    """

    WARNING = "Warning"
    """Non-critical failure."""

    ERROR = "Error"
    """Critical failure."""


@dataclass(frozen=True, slots=True)
class Failure:
    """
    Immutable failure descriptor.

    >>> Failure("001", FailureKind.WARNING, "Title", "Long description").description
    'Long description'
    """

    code: str
    kind: FailureKind
    message: str
    description: str | None = None

    def __post_init__(self) -> None:
        # Accept the display value ("Error"/"Warning") as well as the member.
        if not isinstance(self.kind, FailureKind):
            object.__setattr__(self, "kind", FailureKind(self.kind))

    @property
    def is_error(self) -> bool:
        return self.kind is FailureKind.ERROR

    @property
    def is_warning(self) -> bool:
        return self.kind is FailureKind.WARNING

    def __str__(self) -> str:
        if self.description is not None:
            return (
                f"{self.kind.value}:{self.code}. Message: {self.message}. "
                f"Description: {self.description}."
            )
        return f"{self.kind.value}:{self.code}. Message: {self.message}."
