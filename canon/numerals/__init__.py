"""
Numeral base conversion: binary, hexadecimal and unbounded integers.

Usage
-----
    from canon.numerals import to_binary, to_decimal, Width

    to_binary("ff").value                 # "11111111"
    to_decimal("1" * 68, 2).value         # 295147905179352825855
    to_binary(300, width=Width.U8).error  # ErrorKind.OUT_OF_RANGE
"""

from __future__ import annotations

from .convert import (
    Width,
    to_binary,
    to_binary_u8,
    to_binary_u16,
    to_binary_u32,
    to_binary_u64,
    to_decimal,
    to_decimal_u8,
    to_decimal_u16,
    to_decimal_u32,
    to_decimal_u64,
    to_hex,
    to_hex_u8,
    to_hex_u16,
    to_hex_u32,
    to_hex_u64,
)
from .digits import (
    NATIVE_BITS,
    binary_to_hex,
    binary_to_integer,
    hex_to_binary,
    hex_to_integer,
    integer_to_binary,
    integer_to_hex,
    is_binary,
    is_hex,
)

__all__ = [
    "NATIVE_BITS",
    "Width",
    # checks
    "is_hex",
    "is_binary",
    # digit-string helpers
    "hex_to_binary",
    "binary_to_hex",
    "integer_to_binary",
    "binary_to_integer",
    "hex_to_integer",
    "integer_to_hex",
    # Result-returning conversions
    "to_binary",
    "to_hex",
    "to_decimal",
    "to_binary_u8",
    "to_binary_u16",
    "to_binary_u32",
    "to_binary_u64",
    "to_hex_u8",
    "to_hex_u16",
    "to_hex_u32",
    "to_hex_u64",
    "to_decimal_u8",
    "to_decimal_u16",
    "to_decimal_u32",
    "to_decimal_u64",
]
