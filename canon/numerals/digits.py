"""
Digit-string arithmetic for non-negative integers.

Formats
-------
hex     lowercase hexadecimal digits, no ``0x`` prefix      "0f"
binary  binary digits, no ``0b`` prefix                     "1111"
int     Python integer, unbounded                          15

Hex and binary are handled one nibble at a time so the width of a numeral is
never limited by a machine word.  Values that fit in ``NATIVE_BITS`` use the
built-in conversions; wider values go through the binary intermediate form.

These helpers assume their input was already checked with :func:`is_hex` /
:func:`is_binary` (and sanitized) and raise ``ValueError`` when it was not.
"""

from __future__ import annotations

import re

NATIVE_BITS = 64

_HEX = "0123456789abcdef"
_NIBBLE_BITS = {c: format(i, "04b") for i, c in enumerate(_HEX)}
_BITS_NIBBLE = {bits: c for c, bits in _NIBBLE_BITS.items()}

_HEX_RE    = re.compile(r"[0-9a-f]+")
_BINARY_RE = re.compile(r"[01]+")


# ---------------------------------------------------------------------------
# Character-class checks
# ---------------------------------------------------------------------------

def is_hex(s: str) -> bool:
    """True if *s* is a non-empty string of hex digits (case-insensitive)."""
    if not isinstance(s, str):
        return False
    return _HEX_RE.fullmatch(s.strip().lower()) is not None


def is_binary(s: str) -> bool:
    """True if *s* is a non-empty string of binary digits."""
    if not isinstance(s, str):
        return False
    return _BINARY_RE.fullmatch(s.strip()) is not None


# ---------------------------------------------------------------------------
# hex <-> binary
# ---------------------------------------------------------------------------

def hex_to_binary(hex_digits: str, keep_leading_zeros: bool = False) -> str:
    """Hex digits → binary digits, four bits per hex character.

    With ``keep_leading_zeros`` the result is exactly ``4 * len(hex_digits)``
    bits long; otherwise the leading zeros are stripped (``"00"`` → ``"0"``).
    """
    if not hex_digits:
        raise ValueError("Expected at least one hex digit")
    try:
        bits = "".join(_NIBBLE_BITS[c] for c in hex_digits)
    except KeyError as e:
        raise ValueError(f"Not a hex digit: {e.args[0]!r}") from None

    if keep_leading_zeros:
        return bits
    return bits.lstrip("0") or "0"


def binary_to_hex(binary_digits: str) -> str:
    """Binary digits → hex digits.

    When the length is not a multiple of four, the leading ``len % 4`` bits
    form the first (short) group.
    """
    if not binary_digits:
        raise ValueError("Expected at least one binary digit")

    head = len(binary_digits) % 4
    groups = [binary_digits[:head]] if head else []
    groups.extend(binary_digits[i : i + 4] for i in range(head, len(binary_digits), 4))

    try:
        return "".join(_BITS_NIBBLE[g.zfill(4)] for g in groups)
    except KeyError as e:
        raise ValueError(f"Not a binary group: {e.args[0]!r}") from None


# ---------------------------------------------------------------------------
# int <-> binary
# ---------------------------------------------------------------------------

def integer_to_binary(integer: int) -> str:
    """Non-negative integer → binary digits (no leading zeros; 0 → ``"0"``)."""
    if integer < 0:
        raise ValueError(f"Expected a non-negative integer, got {integer}")
    if integer.bit_length() <= NATIVE_BITS:
        return format(integer, "b")
    return _subtract_powers_of_two(integer)


def _subtract_powers_of_two(integer: int) -> str:
    """Binary digits by repeated subtraction of the greatest power of two.

    Walks the exponent from the highest set bit down to 0: a place value that
    still fits in the remainder emits ``1`` and is subtracted, otherwise
    ``0`` is emitted.
    """
    remainder = integer
    bits: list[str] = []
    for exponent in range(integer.bit_length() - 1, -1, -1):
        place_value = 2 ** exponent
        if place_value <= remainder:
            bits.append("1")
            remainder -= place_value
        else:
            bits.append("0")
    return "".join(bits) or "0"


def binary_to_integer(binary_digits: str) -> int:
    """Binary digits → integer, as the sum of ``2**position`` for each set bit."""
    if not binary_digits:
        raise ValueError("Expected at least one binary digit")

    total = 0
    for position, bit in enumerate(reversed(binary_digits)):
        if bit == "1":
            total += 2 ** position
        elif bit != "0":
            raise ValueError(f"Not a binary digit: {bit!r}")
    return total


# ---------------------------------------------------------------------------
# int <-> hex
# ---------------------------------------------------------------------------

def hex_to_integer(hex_digits: str) -> int:
    """Hex digits → integer; native parse up to ``NATIVE_BITS`` bits."""
    if len(hex_digits) * 4 <= NATIVE_BITS:
        if not is_hex(hex_digits):
            raise ValueError(f"Not hex digits: {hex_digits!r}")
        return int(hex_digits, 16)
    return binary_to_integer(hex_to_binary(hex_digits, keep_leading_zeros=True))


def integer_to_hex(integer: int) -> str:
    """Non-negative integer → hex digits (no leading zeros; 0 → ``"0"``)."""
    if integer < 0:
        raise ValueError(f"Expected a non-negative integer, got {integer}")
    if integer.bit_length() <= NATIVE_BITS:
        return format(integer, "x")
    return binary_to_hex(integer_to_binary(integer))
