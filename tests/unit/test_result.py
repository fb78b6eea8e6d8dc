"""
Tests for the Result type and error kinds.
"""

import dataclasses

import pytest

from canon.result import ErrorKind, Result


class TestResult:
    """Result construction and access"""

    def test_success(self) -> None:
        result = Result.success("::1")
        assert result.ok
        assert result.error is None
        assert result.unwrap() == "::1"
        assert str(result) == "::1"

    def test_success_with_zero(self) -> None:
        """A falsy payload is still a success"""
        result = Result.success(0)
        assert result.ok
        assert result.unwrap() == 0

    def test_failure(self) -> None:
        result = Result.failure(ErrorKind.UNSUPPORTED_BASE, "Base must be 2 or 16, got 8.")
        assert not result.ok
        assert result.value is None
        assert str(result) == "UnsupportedBase: Base must be 2 or 16, got 8."

    def test_unwrap_failure_raises(self) -> None:
        result = Result.failure(ErrorKind.INVALID_FORMAT, "bad")
        with pytest.raises(ValueError, match="InvalidFormat: bad"):
            result.unwrap()

    def test_failure_cannot_carry_value(self) -> None:
        with pytest.raises(ValueError):
            Result(value="x", error=ErrorKind.INVALID_FORMAT)

    def test_immutable(self) -> None:
        result = Result.success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2

    def test_payload_type_parameter(self) -> None:
        """Result is generic over its payload type"""
        text: Result[str] = Result[str].success("::1")
        number: Result[int] = Result[int].failure(ErrorKind.OUT_OF_RANGE, "too wide")
        assert text.value == "::1"
        assert number.value is None
        assert isinstance(text, Result)


class TestErrorKind:
    """Error kind names"""

    def test_values(self) -> None:
        assert [str(k) for k in ErrorKind] == [
            "InvalidFormat",
            "UnsupportedBase",
            "NegativeValue",
            "ExpansionFailed",
            "OutOfRange",
        ]

    def test_str_enum(self) -> None:
        assert ErrorKind.NEGATIVE_VALUE == "NegativeValue"
