#!/usr/bin/env python
"""Batch complexity sweep over track lengths.

This script orchestrates the full sweep workflow:

1. Race the standard roster on every track length in ``LENGTHS``.
2. Compare the observed action counts against the closed forms.
3. Fit the empirical growth exponent of each racer.
4. Save results to ``results/complexity_sweep.json`` and print a summary.

Usage
-----
::

    python scripts/run_complexity_sweep.py
"""

from __future__ import annotations

import json
import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from ru_racing.core.analysis import (  # noqa: E402
    expected_actions,
    growth_exponents,
    sweep_action_counts,
)
from ru_racing.core.racer import RacerKind  # noqa: E402

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

LENGTHS: list[int] = [2, 4, 8, 16, 32, 64, 128, 256]
RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "complexity_sweep.json")


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the sweep, check closed forms, and save the results."""
    print("=" * 60)
    print("ALGORITHMIC GRAND PRIX COMPLEXITY SWEEP")
    print("=" * 60)
    print()

    # -- Step 1: Simulate ------------------------------------------------------
    print(f"[1/3] Racing {len(LENGTHS)} track lengths: {LENGTHS}")
    frame = sweep_action_counts(LENGTHS)
    print()

    # -- Step 2: Closed-form check --------------------------------------------
    print("[2/3] Checking closed-form action counts")
    mismatches: list[str] = []
    for length in LENGTHS:
        for kind in RacerKind:
            observed = int(frame.loc[length, kind.value])
            expected = expected_actions(kind, length)
            if observed != expected:
                mismatches.append(
                    f"{kind.value} @ N={length}: {observed} != {expected}"
                )
    if mismatches:
        for line in mismatches:
            print(f"      MISMATCH {line}")
    else:
        print("      All action counts match.")
    print()

    # -- Step 3: Fit and save --------------------------------------------------
    print("[3/3] Fitting growth exponents")
    exponents = growth_exponents(frame)
    for name, exponent in exponents.items():
        print(f"      {name:<16} p = {exponent:.3f}")
    print()

    output: dict[str, object] = {
        "lengths": LENGTHS,
        "action_counts": {
            kind.value: [int(v) for v in frame[kind.value]] for kind in RacerKind
        },
        "steps": [int(v) for v in frame["steps"]],
        "growth_exponents": exponents,
        "closed_form_mismatches": mismatches,
    }
    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, sort_keys=True)
    print(f"Results written to {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
