"""
Expansion of IPv6 literals to the full eight-segment form.

    2001:db8::1  →  2001:0db8:0000:0000:0000:0000:0000:0001

Every segment is left-padded to four hex digits and the ``::`` elision is
replaced by as many ``0000`` segments as are needed to reach eight.
Expansion is idempotent.
"""

from __future__ import annotations

import re

from canon.result import ErrorKind, Result

from .grammar import sanitize, validate

_SEGMENTS     = 8
_ZERO_SEGMENT = "0000"
_SEGMENT_RE   = re.compile(r"[0-9a-f]{1,4}")

ALL_ZERO = ":".join([_ZERO_SEGMENT] * _SEGMENTS)


def expand(text: str) -> Result[str]:
    """Expand an IPv6 literal.

    Returns a successful :class:`~canon.result.Result` holding the expanded
    address, or an ``InvalidFormat`` failure carrying the grammar reason.
    """
    check = validate(text)
    if not check:
        return Result.failure(ErrorKind.INVALID_FORMAT, check.reason)
    return Result.success(_expand_valid(sanitize(text)))


def _expand_valid(addr: str) -> str:
    """Expand a sanitized literal that already passed :func:`validate`."""
    if addr == "::":
        return ALL_ZERO

    segments = [seg.zfill(4) for seg in _SEGMENT_RE.findall(addr)]

    if addr.endswith("::"):
        while len(segments) < _SEGMENTS:
            segments.append(_ZERO_SEGMENT)
    elif "::" in addr:
        # The empty token left by splitting on ":" marks the elided slot.
        at = addr.split(":").index("")
        while len(segments) < _SEGMENTS:
            segments.insert(at, _ZERO_SEGMENT)

    if len(segments) != _SEGMENTS:
        raise ValueError(f"Expected {_SEGMENTS} segments, got {len(segments)}")
    return ":".join(segments)
