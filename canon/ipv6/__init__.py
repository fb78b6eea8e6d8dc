"""
IPv6 literal canonicalization: validate → expand → abbreviate.

Algorithm
---------
  1. **Validate** — the literal is trimmed, lower-cased and checked against
     the colon-hex grammar (segment sizes, colon usage, a single ``::``).
     The first broken rule is returned as a reason string.

  2. **Expand** — every segment is padded to four hex digits and ``::`` is
     filled with ``0000`` segments until there are eight.

  3. **Abbreviate** — leading zeros are stripped per segment and the
     longest run of two or more zero segments (leftmost on ties) becomes
     ``::``.

Usage
-----
    from canon.ipv6 import abbreviate, expand

    expand("2001:db8::1").value          # "2001:0db8:0000:0000:0000:0000:0000:0001"
    abbreviate("2001:0db8:0:0:1:0:0:0").value   # "2001:db8:0:0:1::"
"""

from __future__ import annotations

from .abbreviate import abbreviate
from .expand import ALL_ZERO, expand
from .formats import (
    b4_to_std,
    from_int,
    nibble_matrix,
    to_b1,
    to_b4,
    to_int,
    to_nibbles,
    zero_runs,
    zero_segment_mask,
)
from .grammar import Validation, is_valid_ipv6, validate

__all__ = [
    "ALL_ZERO",
    "Validation",
    "validate",
    "is_valid_ipv6",
    "expand",
    "abbreviate",
    "b4_to_std",
    "to_b4",
    "to_b1",
    "to_int",
    "from_int",
    "to_nibbles",
    "nibble_matrix",
    "zero_segment_mask",
    "zero_runs",
]
