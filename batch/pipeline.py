"""
Batch canonicalization of an IPv6 literal file.

    literals → validate → expand → abbreviate → outputs + metrics

Input is one literal per line; blank lines and ``#`` comments are skipped.
Rejected literals do not stop the run, they are collected with their reason.

Output files (in --output-dir)
------------------------------
expanded.txt      one expanded address per accepted literal, input order
abbreviated.txt   one abbreviated address per accepted literal, input order
rejected.txt      ``literal<TAB>reason`` per rejected literal
metrics.json      metrics dict (see batch.metrics)

Usage example
-------------
python -m batch.pipeline \\
    --input /data/seeds.txt \\
    --output-dir /data/canonical
"""

from __future__ import annotations

import argparse
import os
import time

from canon.ipv6 import abbreviate, expand

from .metrics import compute_metrics
from .report import print_report, save_report

# ─── Constants ────────────────────────────────────────────────────────────────

EXPANDED_FILE    = "expanded.txt"
ABBREVIATED_FILE = "abbreviated.txt"
REJECTED_FILE    = "rejected.txt"
DEFAULT_REPORT   = "metrics.json"


# ─── Literal file helpers ────────────────────────────────────────────────────

def load_literals(path: str) -> list[str]:
    """Read one literal per line; skip blanks and comments."""
    result = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                result.append(line)
    return result


def write_lines(path: str, lines: list[str]) -> None:
    with open(path, "w") as f:
        for line in lines:
            f.write(line + "\n")


# ─── Canonicalization ────────────────────────────────────────────────────────

def canonicalize(
    literals: list[str],
) -> tuple[list[tuple[str, str, str]], list[tuple[str, str]]]:
    """Split *literals* into ``(literal, expanded, abbreviated)`` and
    ``(literal, reason)`` lists, both in input order."""
    canonical: list[tuple[str, str, str]] = []
    rejected:  list[tuple[str, str]]      = []

    for literal in literals:
        expanded = expand(literal)
        if not expanded.ok:
            rejected.append((literal, expanded.reason))
            continue
        abbreviated = abbreviate(expanded.value)
        if not abbreviated.ok:
            rejected.append((literal, abbreviated.reason))
            continue
        canonical.append((literal, expanded.value, abbreviated.value))

    return canonical, rejected


# ─── Full pipeline ────────────────────────────────────────────────────────────

def run_pipeline(
    input_path:  str,
    output_dir:  str,
    report_name: str = DEFAULT_REPORT,
    quiet:       bool = False,
) -> dict:
    """Canonicalize *input_path* into *output_dir* and return the metrics dict."""
    if not input_path:
        raise ValueError("--input is required.")
    if not output_dir:
        raise ValueError("--output-dir is required.")
    os.makedirs(output_dir, exist_ok=True)

    # ── Load literals ────────────────────────────────────────────────────────
    print(f"[batch] Loading literals: {input_path}")
    literals = load_literals(input_path)
    print(f"[batch] {len(literals):,} literals loaded.")

    # ── Canonicalize ─────────────────────────────────────────────────────────
    t0 = time.time()
    canonical, rejected = canonicalize(literals)
    print(
        f"[batch] {len(canonical):,} accepted, {len(rejected):,} rejected "
        f"in {time.time() - t0:.1f}s."
    )

    # ── Write outputs ────────────────────────────────────────────────────────
    write_lines(os.path.join(output_dir, EXPANDED_FILE), [e for _, e, _ in canonical])
    write_lines(os.path.join(output_dir, ABBREVIATED_FILE), [a for _, _, a in canonical])
    write_lines(
        os.path.join(output_dir, REJECTED_FILE),
        [f"{lit}\t{reason}" for lit, reason in rejected],
    )

    # ── Compute metrics ───────────────────────────────────────────────────────
    metrics = compute_metrics(canonical, rejected)
    metrics["input"] = input_path

    # ── Report & save ─────────────────────────────────────────────────────────
    metrics_path = os.path.join(output_dir, report_name)
    if not quiet:
        print_report(metrics)
    save_report(metrics, metrics_path)
    print(f"[batch] Metrics saved to {metrics_path}")

    return metrics


# ─── CLI ──────────────────────────────────────────────────────────────────────

def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Batch IPv6 canonicalization (expand + abbreviate)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--input", "-i", required=True,
                   help="IPv6 literal file (one per line)")
    p.add_argument("--output-dir", "-o", required=True,
                   help="Directory for all output files")
    p.add_argument("--report-name", default=DEFAULT_REPORT,
                   help=f"Metrics file name inside --output-dir (default: {DEFAULT_REPORT})")
    p.add_argument("--quiet", "-q", action="store_true",
                   help="Do not print the metrics report")
    return p.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    run_pipeline(
        input_path  = args.input,
        output_dir  = args.output_dir,
        report_name = args.report_name,
        quiet       = args.quiet,
    )
