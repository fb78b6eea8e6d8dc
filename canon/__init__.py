"""
IPv6 address canonicalization and numeral base conversion.

Every public operation returns a :class:`~canon.result.Result`; nothing here
prints or raises for bad user input.
"""

from __future__ import annotations

from .ipv6 import Validation, abbreviate, expand, is_valid_ipv6, validate
from .numerals import Width, is_binary, is_hex, to_binary, to_decimal, to_hex
from .result import ErrorKind, Result

__all__ = [
    "ErrorKind",
    "Result",
    "Validation",
    "Width",
    "validate",
    "is_valid_ipv6",
    "expand",
    "abbreviate",
    "is_hex",
    "is_binary",
    "to_binary",
    "to_hex",
    "to_decimal",
]
