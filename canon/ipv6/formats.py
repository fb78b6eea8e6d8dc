"""
IPv6 address forms beyond colon-hex text.

Supported forms
---------------
std      Expanded notation   2001:0db8:85a3:0000:0000:8a2e:0370:7334
b4       32-char hex         20010db885a3000000008a2e03707334
b1       128-char binary     00100000000000010000110110111000...
int      128-bit integer     42540766452641154071740215577757643572
nibbles  numpy uint8[32]     one element per hex digit

b4 ↔ std is plain regrouping; b1 and int go through the digit-string
helpers in :mod:`canon.numerals` so no width limit applies.
"""

from __future__ import annotations

import numpy as np

from canon.numerals import (
    hex_to_binary,
    hex_to_integer,
    integer_to_hex,
)
from canon.result import ErrorKind, Result

from .expand import expand

_NIBBLES  = 32
_SEGMENTS = 8
ADDRESS_BITS = 128


# ---------------------------------------------------------------------------
# Text forms
# ---------------------------------------------------------------------------

def b4_to_std(b4: str) -> str:
    """Convert 32-char hex string to full standard IPv6 notation."""
    if len(b4) != _NIBBLES:
        raise ValueError(f"Expected {_NIBBLES}-char hex string, got {len(b4)}")
    return ":".join(b4[i : i + 4] for i in range(0, _NIBBLES, 4))


def to_b4(text: str) -> Result[str]:
    """IPv6 literal → 32 lowercase hex chars, no colons."""
    expanded = expand(text)
    if not expanded.ok:
        return expanded
    return Result.success(expanded.value.replace(":", ""))


def to_b1(text: str) -> Result[str]:
    """IPv6 literal → 128-char binary string (leading zeros kept)."""
    b4 = to_b4(text)
    if not b4.ok:
        return b4
    return Result.success(hex_to_binary(b4.value, keep_leading_zeros=True))


def to_int(text: str) -> Result[int]:
    """IPv6 literal → its 128-bit integer value."""
    b4 = to_b4(text)
    if not b4.ok:
        return b4
    return Result.success(hex_to_integer(b4.value))


def from_int(value: int) -> Result[str]:
    """128-bit integer → expanded IPv6 address."""
    if not isinstance(value, int) or isinstance(value, bool):
        return Result.failure(
            ErrorKind.INVALID_FORMAT, f"Expected an integer, got {type(value).__name__}."
        )
    if value < 0:
        return Result.failure(
            ErrorKind.NEGATIVE_VALUE, f"Address value must not be negative, got {value}."
        )
    if value.bit_length() > ADDRESS_BITS:
        return Result.failure(
            ErrorKind.OUT_OF_RANGE, f"{value} does not fit in {ADDRESS_BITS} bits."
        )
    return Result.success(b4_to_std(integer_to_hex(value).zfill(_NIBBLES)))


# ---------------------------------------------------------------------------
# Nibble arrays
# ---------------------------------------------------------------------------

def to_nibbles(expanded: str) -> np.ndarray:
    """Expanded address → uint8 array of its 32 hex nibbles."""
    b4 = expanded.replace(":", "")
    if len(b4) != _NIBBLES:
        raise ValueError(f"Expected an expanded address, got {expanded!r}")
    return np.array([int(c, 16) for c in b4], dtype=np.uint8)


def nibble_matrix(addresses: list[str]) -> np.ndarray:
    """Stack expanded addresses into an (n, 32) uint8 matrix."""
    if not addresses:
        return np.zeros((0, _NIBBLES), dtype=np.uint8)
    return np.stack([to_nibbles(a) for a in addresses])


def zero_segment_mask(arrs: np.ndarray) -> np.ndarray:
    """Boolean mask of all-zero segments: shape (8,) or (n, 8)."""
    segs = arrs.reshape(arrs.shape[:-1] + (_SEGMENTS, 4))
    return ~segs.any(axis=-1)


def zero_runs(expanded: str) -> list[tuple[int, int]]:
    """Return ``(start, length)`` for every maximal run of zero segments.

    Runs are listed left to right; a lone zero segment is a run of length 1.
    """
    zero = zero_segment_mask(to_nibbles(expanded)).astype(np.int8)
    edges = np.diff(np.concatenate(([0], zero, [0])))
    starts = np.flatnonzero(edges == 1)
    stops  = np.flatnonzero(edges == -1)
    return [(int(s), int(e - s)) for s, e in zip(starts, stops)]
