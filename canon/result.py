"""
Structured outcomes for engine operations.

Every public operation returns a :class:`Result` instead of raising: either a
success payload (``value``) or a failure (``error`` kind plus a
human-readable ``reason``).  A failed result never carries a value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


class ErrorKind(str, Enum):
    """Failure taxonomy shared by the address and numeral engines."""

    INVALID_FORMAT   = "InvalidFormat"
    UNSUPPORTED_BASE = "UnsupportedBase"
    NEGATIVE_VALUE   = "NegativeValue"
    EXPANSION_FAILED = "ExpansionFailed"
    OUT_OF_RANGE     = "OutOfRange"

    def __str__(self) -> str:
        return self.value


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged success/failure value.

    ``T`` is the payload type (``Result[str]`` for addresses and digit strings,
    ``Result[int]`` for decoded values).  Build with :meth:`success` or
    :meth:`failure`; ``ok`` tells them apart.
    """

    value:  Optional[T] = None
    error:  Optional[ErrorKind] = None
    reason: str = ""

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("a failed Result cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, reason: str) -> "Result[T]":
        return cls(error=error, reason=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the payload, or raise ``ValueError`` with the failure reason."""
        if self.error is not None:
            raise ValueError(f"{self.error}: {self.reason}")
        return self.value

    def __str__(self) -> str:
        if self.ok:
            return str(self.value)
        return f"{self.error}: {self.reason}"
