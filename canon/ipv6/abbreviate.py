"""
Abbreviation of IPv6 addresses to their shortest literal.

    0000:0000:0003:0000:0000:0000:0000:0008  →  0:0:3::8

Steps
-----
1. Expand the input (so any valid literal is accepted, already short or not).
2. Strip leading zeros from every segment; ``0000`` becomes ``0``.
3. Replace the longest run of two or more zero segments with ``::``.
   Equal-length runs: the leftmost wins.  A lone zero segment stays ``0``.

Runs are found at segment level, so the trailing ``0`` of a segment such as
``10`` never joins a zero run.
"""

from __future__ import annotations

from typing import Optional

from canon.result import ErrorKind, Result

from .expand import expand
from .formats import zero_runs
from .grammar import validate

_MIN_RUN = 2


def abbreviate(text: str) -> Result[str]:
    """Abbreviate an IPv6 literal.

    Fails with ``InvalidFormat`` when *text* is not a valid literal and with
    ``ExpansionFailed`` when the internal expansion step fails.
    """
    check = validate(text)
    if not check:
        return Result.failure(ErrorKind.INVALID_FORMAT, check.reason)

    expanded = expand(text)
    if not expanded.ok:
        return Result.failure(
            ErrorKind.EXPANSION_FAILED, f"Expanding part failed: {expanded.reason}"
        )
    return Result.success(_abbreviate_expanded(expanded.value))


def _abbreviate_expanded(expanded: str) -> str:
    segments = [seg.lstrip("0") or "0" for seg in expanded.split(":")]

    run = _longest_zero_run(expanded)
    if run is None:
        return ":".join(segments)

    start, length = run
    head = ":".join(segments[:start])
    tail = ":".join(segments[start + length :])
    return f"{head}::{tail}"


def _longest_zero_run(expanded: str) -> Optional[tuple[int, int]]:
    """Leftmost of the longest zero runs spanning at least two segments."""
    best: Optional[tuple[int, int]] = None
    for start, length in zero_runs(expanded):
        if length < _MIN_RUN:
            continue
        if best is None or length > best[1]:
            best = (start, length)
    return best
