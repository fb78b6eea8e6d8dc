"""
Batch canonicalization metrics.

Metrics
-------
  total                literals read (blank lines and comments excluded)
  valid / invalid      literals accepted / rejected by the grammar
  valid_rate           valid / total
  unique               distinct addresses among the valid literals
  already_expanded     literals that were already in expanded form
  already_abbreviated  literals that were already in abbreviated form
  elided               abbreviations containing ``::``
  rejections           rejection reason → count
  zero_segments_mean   mean number of all-zero segments per valid address

All functions are pure (no I/O).
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Optional

from canon.ipv6 import nibble_matrix, zero_segment_mask
from canon.ipv6.grammar import sanitize


# ─── Zero-segment statistics ─────────────────────────────────────────────────

def zero_segments_mean(expanded: list[str]) -> Optional[float]:
    """Mean count of all-zero segments per address (None for no addresses)."""
    if not expanded:
        return None
    mask = zero_segment_mask(nibble_matrix(expanded))
    return float(mask.sum(axis=1).mean())


# ─── Core metrics ─────────────────────────────────────────────────────────────

def compute_metrics(
    canonical: Iterable[tuple[str, str, str]],
    rejected:  Iterable[tuple[str, str]],
) -> Dict[str, object]:
    """Compute batch metrics.

    Parameters
    ----------
    canonical:
        ``(literal, expanded, abbreviated)`` for every accepted literal.
    rejected:
        ``(literal, reason)`` for every rejected literal.
    """
    canonical = list(canonical)
    rejected  = list(rejected)

    n_valid   = len(canonical)
    n_invalid = len(rejected)
    n_total   = n_valid + n_invalid

    expanded = [exp for _, exp, _ in canonical]

    return {
        "total":               n_total,
        "valid":               n_valid,
        "invalid":             n_invalid,
        "valid_rate":          n_valid / n_total if n_total else 0.0,
        "unique":              len(set(expanded)),
        "already_expanded":    sum(1 for lit, exp, _ in canonical if sanitize(lit) == exp),
        "already_abbreviated": sum(1 for lit, _, abb in canonical if sanitize(lit) == abb),
        "elided":              sum(1 for _, _, abb in canonical if "::" in abb),
        "rejections":          dict(Counter(reason for _, reason in rejected).most_common()),
        "zero_segments_mean":  zero_segments_mean(expanded),
    }
