"""
Tests for Result-returning numeral conversions.

Checks:
1. to_binary / to_hex on digit strings and integers
2. to_decimal base handling
3. Fixed-width adapters and range checks
4. Error kinds for every rejected input
"""

import pytest

from canon.numerals import (
    Width,
    integer_to_binary,
    to_binary,
    to_binary_u8,
    to_binary_u16,
    to_binary_u64,
    to_decimal,
    to_decimal_u8,
    to_decimal_u32,
    to_hex,
    to_hex_u8,
    to_hex_u32,
)
from canon.result import ErrorKind


# =============================================================================
# to_binary
# =============================================================================


class TestToBinary:
    """to_binary on hex strings and integers"""

    def test_hex_ff(self) -> None:
        result = to_binary("ff")
        assert result.ok
        assert result.value == "11111111"

    def test_hex_keep_leading_zeros(self) -> None:
        assert to_binary("0F", keep_leading_zeros=True).value == "00001111"
        assert to_binary("0F").value == "1111"

    def test_integer(self) -> None:
        assert to_binary(10).value == "1010"
        assert to_binary(0).value == "0"

    def test_integer_beyond_64_bits(self) -> None:
        assert to_binary(2 ** 70).value == "1" + "0" * 70

    def test_integer_padded_to_width(self) -> None:
        assert to_binary(5, keep_leading_zeros=True, width=Width.U8).value == "00000101"

    def test_integer_without_width_not_padded(self) -> None:
        """keep_leading_zeros has nothing to pad to without a width"""
        assert to_binary(5, keep_leading_zeros=True).value == "101"

    def test_invalid_hex(self) -> None:
        result = to_binary("xyz")
        assert result.error is ErrorKind.INVALID_FORMAT
        assert result.value is None

    @pytest.mark.parametrize("value", ["", None, 1.5, True])
    def test_rejected_types(self, value) -> None:
        assert to_binary(value).error is ErrorKind.INVALID_FORMAT

    def test_negative(self) -> None:
        assert to_binary(-1).error is ErrorKind.NEGATIVE_VALUE

    def test_hex_too_wide_for_width(self) -> None:
        assert to_binary("1ff", width=Width.U8).error is ErrorKind.OUT_OF_RANGE


# =============================================================================
# to_hex
# =============================================================================


class TestToHex:
    """to_hex on binary strings and integers"""

    def test_byte_255(self) -> None:
        assert to_hex(255, width=Width.U8).value == "ff"
        assert to_hex_u8(255).value == "ff"

    def test_binary(self) -> None:
        assert to_hex("1111").value == "f"
        assert to_hex("100000000").value == "100"

    def test_integer_beyond_64_bits(self) -> None:
        assert to_hex(2 ** 64).value == "1" + "0" * 16

    def test_invalid_binary(self) -> None:
        assert to_hex("1012").error is ErrorKind.INVALID_FORMAT
        assert to_hex("").error is ErrorKind.INVALID_FORMAT

    def test_negative(self) -> None:
        assert to_hex(-255).error is ErrorKind.NEGATIVE_VALUE

    def test_binary_too_wide_for_width(self) -> None:
        assert to_hex("1" * 33, width=Width.U32).error is ErrorKind.OUT_OF_RANGE

    def test_width_is_range_check_only(self) -> None:
        """Binary input keeps its zero groups; width neither pads nor trims"""
        assert to_hex("000000001", width=Width.U8).value == "001"
        assert to_hex(1, width=Width.U8).value == "1"


# =============================================================================
# to_decimal
# =============================================================================


class TestToDecimal:
    """to_decimal with base 2 and 16"""

    def test_binary_68_ones(self) -> None:
        result = to_decimal("1" * 68, 2)
        assert result.ok
        assert result.value == 295147905179352825855
        assert result.value > 2 ** 64 - 1

    def test_hex(self) -> None:
        assert to_decimal("ff", 16).value == 255
        assert to_decimal("FF", 16).value == 255

    def test_equivalent_representations(self) -> None:
        assert to_decimal("0f", 16).value == to_decimal("1111", 2).value == 15

    @pytest.mark.parametrize("base", [0, 8, 10, 36, "16", None])
    def test_unsupported_base(self, base) -> None:
        result = to_decimal("101", base)
        assert result.error is ErrorKind.UNSUPPORTED_BASE
        assert result.value is None

    def test_wrong_digits_for_base(self) -> None:
        assert to_decimal("12", 2).error is ErrorKind.INVALID_FORMAT
        assert to_decimal("fg", 16).error is ErrorKind.INVALID_FORMAT

    def test_empty(self) -> None:
        assert to_decimal("", 16).error is ErrorKind.INVALID_FORMAT
        assert to_decimal(None, 2).error is ErrorKind.INVALID_FORMAT


# =============================================================================
# FIXED WIDTHS
# =============================================================================


class TestFixedWidths:
    """Adapters over the arbitrary-width path"""

    def test_u8_bounds(self) -> None:
        assert to_binary_u8(255).value == "11111111"
        assert to_binary_u8(256).error is ErrorKind.OUT_OF_RANGE

    def test_u16(self) -> None:
        assert to_binary_u16(65535).value == "1" * 16
        assert to_binary_u16(65536).error is ErrorKind.OUT_OF_RANGE

    def test_u32_hex(self) -> None:
        assert to_hex_u32(2 ** 32 - 1).value == "ffffffff"
        assert to_hex_u32(2 ** 32).error is ErrorKind.OUT_OF_RANGE

    def test_u64(self) -> None:
        assert to_binary_u64(2 ** 64 - 1).value == "1" * 64
        assert to_binary_u64(2 ** 64).error is ErrorKind.OUT_OF_RANGE

    def test_decimal_widths(self) -> None:
        assert to_decimal_u8("ff", 16).value == 255
        assert to_decimal_u8("100", 16).error is ErrorKind.OUT_OF_RANGE
        assert to_decimal_u32("1" * 33, 2).error is ErrorKind.OUT_OF_RANGE

    def test_plain_int_width_accepted(self) -> None:
        assert to_binary(7, width=8).value == "111"


# =============================================================================
# SYMMETRY
# =============================================================================


class TestBaseSymmetry:
    """Conversions round-trip through to_decimal, beyond 64 bits too"""

    @pytest.mark.parametrize(
        "n", [0, 1, 15, 255, 2 ** 32, 2 ** 64 - 1, 2 ** 64, 2 ** 127 + 1, 3 ** 90]
    )
    def test_symmetry(self, n: int) -> None:
        assert to_decimal(to_hex(n).value, 16).value == n
        assert to_decimal(integer_to_binary(n), 2).value == n
        assert to_decimal(to_binary(n).value, 2).value == n
