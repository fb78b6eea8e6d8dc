"""
Batch report formatting and persistence.
"""

from __future__ import annotations

import json
from typing import Any, Dict


def print_report(metrics: Dict[str, Any]) -> None:
    """Print a formatted metrics report to stdout."""
    source = metrics.get("input", "?")

    def fmt_int(v):   return f"{v:,}"        if isinstance(v, int)   else str(v)
    def fmt_pct(v):   return f"{v*100:.2f}%" if isinstance(v, float) else "—"
    def fmt_num(v):   return f"{v:.2f}"      if isinstance(v, float) else "—"

    sep = "─" * 50
    print()
    print(sep)
    print(f"  IPv6 Canonicalization Report — {source}")
    print(sep)
    print(f"  Literals      : {fmt_int(metrics.get('total', 0))}")
    print(f"  Valid         : {fmt_int(metrics.get('valid', 0))}")
    print(f"  Invalid       : {fmt_int(metrics.get('invalid', 0))}")
    print(f"  Valid rate    : {fmt_pct(metrics.get('valid_rate', 0.0))}")
    print(sep)
    print(f"  Unique        : {fmt_int(metrics.get('unique', 0))}")
    print(f"  Already full  : {fmt_int(metrics.get('already_expanded', 0))}")
    print(f"  Already short : {fmt_int(metrics.get('already_abbreviated', 0))}")
    print(f"  Elided (::)   : {fmt_int(metrics.get('elided', 0))}")
    print(f"  Zero segs/addr: {fmt_num(metrics.get('zero_segments_mean'))}")
    rejections = metrics.get("rejections") or {}
    if rejections:
        print(sep)
        for reason, count in rejections.items():
            print(f"  {fmt_int(count):>8}  {reason}")
    print(sep)
    print()


def save_report(metrics: Dict[str, Any], path: str) -> None:
    """Persist metrics as JSON."""
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2, default=str)
