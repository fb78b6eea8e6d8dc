"""
Result-returning numeral conversions.

One arbitrary-width code path serves every integer width; the fixed widths
(8/16/32/64-bit unsigned) are thin adapters that only add a range check:

    to_binary_u8(255)            → Result("11111111")
    to_binary_u8(256)            → Result(OutOfRange)
    to_binary(2**70)             → Result("1" + "0" * 70)

``to_binary`` / ``to_hex`` take either a digit string or an integer, matching
on the argument type:

    to_binary("ff")   hex digits    → binary digits
    to_binary(255)    integer       → binary digits
    to_hex("1111")    binary digits → hex digits
    to_hex(255)       integer       → hex digits
"""

from __future__ import annotations

import numbers
from enum import IntEnum
from functools import partial
from typing import Optional

from canon.result import ErrorKind, Result

from .digits import (
    binary_to_hex,
    binary_to_integer,
    hex_to_binary,
    hex_to_integer,
    integer_to_binary,
    integer_to_hex,
    is_binary,
    is_hex,
)

_BASES = (2, 16)


class Width(IntEnum):
    """Native unsigned integer widths, in bits."""

    U8  = 8
    U16 = 16
    U32 = 32
    U64 = 64


# ---------------------------------------------------------------------------
# Precondition checks
# ---------------------------------------------------------------------------

def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_range(value: int, width: Optional[Width]) -> Optional[Result]:
    """Failure result when *value* is negative or wider than *width*."""
    if value < 0:
        return Result.failure(
            ErrorKind.NEGATIVE_VALUE, f"Integer must not be negative, got {value}."
        )
    if width is not None and value.bit_length() > int(width):
        return Result.failure(
            ErrorKind.OUT_OF_RANGE,
            f"{value} does not fit in an unsigned {int(width)}-bit integer.",
        )
    return None


def _check_integer(value, width: Optional[Width]) -> Optional[Result]:
    if not _is_integer(value):
        return Result.failure(
            ErrorKind.INVALID_FORMAT,
            f"Expected an integer, got {type(value).__name__}.",
        )
    return _check_range(int(value), width)


# ---------------------------------------------------------------------------
# Public conversions
# ---------------------------------------------------------------------------

def to_binary(
    value,
    keep_leading_zeros: bool = False,
    width: Optional[Width] = None,
) -> Result[str]:
    """Convert hex digits or a non-negative integer to binary digits.

    Args:
        value:              Hex digit string, or an integer.
        keep_leading_zeros: Hex input keeps four bits per hex digit.  Integer
                            input is zero-padded to *width*; without a width
                            there is nothing to pad to and the flag has no
                            effect (``to_binary(5, True)`` → ``"101"``).
        width:              Optional fixed width the value must fit in.
    """
    if isinstance(value, str):
        if not is_hex(value):
            return Result.failure(ErrorKind.INVALID_FORMAT, "Invalid hex digits provided.")
        digits = value.strip().lower()
        if width is not None:
            failure = _check_range(hex_to_integer(digits), width)
            if failure is not None:
                return failure
        return Result.success(hex_to_binary(digits, keep_leading_zeros))

    failure = _check_integer(value, width)
    if failure is not None:
        return failure
    bits = integer_to_binary(int(value))
    if keep_leading_zeros and width is not None:
        bits = bits.zfill(int(width))
    return Result.success(bits)


def to_hex(value, width: Optional[Width] = None) -> Result[str]:
    """Convert binary digits or a non-negative integer to hex digits.

    *width* is a range check only: the output is never padded or trimmed to
    it.  Binary input keeps one hex digit per four-bit group, so leading zero
    groups survive (``to_hex("000000001", width=Width.U8)`` → ``"001"``).
    """
    if isinstance(value, str):
        if not is_binary(value):
            return Result.failure(ErrorKind.INVALID_FORMAT, "Invalid binary digits provided.")
        digits = value.strip()
        if width is not None:
            failure = _check_range(binary_to_integer(digits), width)
            if failure is not None:
                return failure
        return Result.success(binary_to_hex(digits))

    failure = _check_integer(value, width)
    if failure is not None:
        return failure
    return Result.success(integer_to_hex(int(value)))


def to_decimal(text: str, base: int, width: Optional[Width] = None) -> Result[int]:
    """Read *text* as a base-2 or base-16 numeral and return its integer value.

    Any *base* other than 2 or 16 is rejected with ``UnsupportedBase``.
    """
    if not _is_integer(base) or base not in _BASES:
        return Result.failure(
            ErrorKind.UNSUPPORTED_BASE, f"Base must be 2 or 16, got {base!r}."
        )

    if base == 2:
        if not is_binary(text):
            return Result.failure(ErrorKind.INVALID_FORMAT, "Invalid binary digits provided.")
        value = binary_to_integer(text.strip())
    else:
        if not is_hex(text):
            return Result.failure(ErrorKind.INVALID_FORMAT, "Invalid hex digits provided.")
        value = hex_to_integer(text.strip().lower())

    failure = _check_range(value, width)
    if failure is not None:
        return failure
    return Result.success(value)


# ---------------------------------------------------------------------------
# Fixed-width adapters
# ---------------------------------------------------------------------------

to_binary_u8  = partial(to_binary, width=Width.U8)
to_binary_u16 = partial(to_binary, width=Width.U16)
to_binary_u32 = partial(to_binary, width=Width.U32)
to_binary_u64 = partial(to_binary, width=Width.U64)

to_hex_u8  = partial(to_hex, width=Width.U8)
to_hex_u16 = partial(to_hex, width=Width.U16)
to_hex_u32 = partial(to_hex, width=Width.U32)
to_hex_u64 = partial(to_hex, width=Width.U64)

to_decimal_u8  = partial(to_decimal, width=Width.U8)
to_decimal_u16 = partial(to_decimal, width=Width.U16)
to_decimal_u32 = partial(to_decimal, width=Width.U32)
to_decimal_u64 = partial(to_decimal, width=Width.U64)
