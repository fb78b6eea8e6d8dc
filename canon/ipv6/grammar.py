"""
IPv6 literal grammar checks.

Accepted literals
-----------------
full      1:2:3:4:5:6:7:8        eight segments, seven colons
elided    2001:db8::1            one ``::`` standing for two or more zero segments
edges     ::1   fe80::   ::      ``::`` may open or close the literal

Segments are 1–4 hex digits.  Input is trimmed and lower-cased first.
Zone ids (``%eth0``) and dotted-quad tails are not part of the grammar.

The checks run in a fixed order and stop at the first violation, so the
reason returned is always the earliest rule broken.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEGMENTS = 8
_MAX_EXPLICIT_WITH_ELISION = _SEGMENTS - 2   # "::" must stand for >= 2 segments

_BAD_CHAR_RE  = re.compile(r"[^0-9a-f:]")
_HEX_RUN_RE   = re.compile(r"[0-9a-f]+")
_SEGMENT_RE   = re.compile(r"[0-9a-f]{1,4}")
_FULL_FORM_RE = re.compile(r"(?:[0-9a-f]{1,4}:){7}[0-9a-f]{1,4}")


@dataclass(frozen=True)
class Validation:
    """Outcome of :func:`validate`; truthy when the literal is valid."""

    valid:  bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


_VALID = Validation(True)


def sanitize(text: str) -> str:
    """Trim surrounding whitespace and lower-case *text*."""
    return text.strip().lower()


def validate(text: str) -> Validation:
    """Check *text* against the IPv6 literal grammar.

    Returns a :class:`Validation` whose ``reason`` names the first rule the
    literal breaks (empty when valid).
    """
    if not isinstance(text, str):
        return Validation(False, "IPv6 address must be a string.")
    addr = sanitize(text)

    if not addr:
        return Validation(False, "IPv6 address cannot be empty.")

    if _BAD_CHAR_RE.search(addr):
        return Validation(False, "Not valid IPv6 character(s).")

    if (addr[0] == ":" and not addr.startswith("::")) or (
        addr[-1] == ":" and not addr.endswith("::")
    ):
        return Validation(False, "Single colon used at the beginning or the end.")

    if ":::" in addr:
        return Validation(False, "Colon used more than twice contiguously.")

    if addr.count("::") > 1:
        return Validation(False, "Double-colon used more than once.")

    if any(len(run) > 4 for run in _HEX_RUN_RE.findall(addr)):
        return Validation(False, "A segment can only have a max of four hex digits.")

    if "::" not in addr:
        if not _FULL_FORM_RE.fullmatch(addr):
            return Validation(
                False, "Without a double-colon an address needs exactly eight segments."
            )
        return _VALID

    if len(_SEGMENT_RE.findall(addr)) > _MAX_EXPLICIT_WITH_ELISION:
        return Validation(
            False, "Double-colon must stand for at least two zero segments."
        )

    return _VALID


def is_valid_ipv6(text: str) -> bool:
    """Return True if *text* is a valid IPv6 literal."""
    return validate(text).valid
