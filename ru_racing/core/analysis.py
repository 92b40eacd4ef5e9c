"""Complexity analysis for the RU Racing simulation engine.

Runs full races over a range of track lengths and compares the observed
action counts against the closed forms each strategy is designed to hit.
A least-squares fit on log-log axes recovers the empirical growth
exponent of each racer (about 1 for O(N), 2 for O(N^2)).
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from ru_racing.core.race import Race
from ru_racing.core.racer import RacerKind
from ru_racing.core.strategy import UnknownRacerError
from ru_racing.core.track import Track

# ---------------------------------------------------------------------------
# Closed forms
# ---------------------------------------------------------------------------


def expected_actions(kind: RacerKind, length: int) -> int:
    """Return the number of actions *kind* needs to finish a lap.

    With ``T = length.bit_length()`` (that is ``ceil(log2(length + 1))``):

        ScarletKnight   N
        StarbucksTruck  1 + (N - 1) * (N + 1) = N^2
        LogNExpress     T
        NLogNExpress    T + (T - 1) * N

    Raises:
        ValueError: If length < 1.
        UnknownRacerError: If *kind* is not one of the four racers.
    """
    if length < 1:
        raise ValueError("length must be >= 1.")
    teleports: int = length.bit_length()
    if kind is RacerKind.SCARLET_KNIGHT:
        return length
    if kind is RacerKind.STARBUCKS_TRUCK:
        return length * length
    if kind is RacerKind.LOGN_EXPRESS:
        return teleports
    if kind is RacerKind.NLOGN_EXPRESS:
        return teleports + (teleports - 1) * length
    raise UnknownRacerError(f"No closed form for racer kind '{kind}'.")


# ---------------------------------------------------------------------------
# Sweeps
# ---------------------------------------------------------------------------


def sweep_action_counts(lengths: Sequence[int]) -> pd.DataFrame:
    """Race the standard roster on each track length.

    Args:
        lengths: Track lengths to simulate (each >= 1).

    Returns:
        DataFrame indexed by ``length`` with one column per racer name
        holding the actions taken, plus a ``steps`` column with the number
        of simulation steps the race lasted.

    Raises:
        ValueError: If *lengths* is empty or contains a length < 1.
    """
    if len(lengths) == 0:
        raise ValueError("lengths must not be empty.")

    rows: list[dict[str, int]] = []
    for length in lengths:
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}.")
        race = Race(Track(length=int(length)))
        race.simulate()
        row: dict[str, int] = {"length": int(length), "steps": race.steps}
        for racer in race.racers:
            row[racer.name] = racer.actions_count
        rows.append(row)

    return pd.DataFrame(rows).set_index("length")


def estimate_growth_exponent(
    lengths: Sequence[int] | np.ndarray,
    counts: Sequence[int] | np.ndarray,
) -> float:
    """Estimate ``p`` in ``counts ~ c * lengths ** p``.

    Fits a straight line to ``log(counts)`` against ``log(lengths)`` and
    returns its slope.

    Raises:
        ValueError: If fewer than two points are given, the sizes differ,
            or any value is < 1.
    """
    x = np.asarray(lengths, dtype=float)
    y = np.asarray(counts, dtype=float)
    if x.shape != y.shape:
        raise ValueError("lengths and counts must have the same shape.")
    if x.size < 2:
        raise ValueError("at least two points are required.")
    if np.any(x < 1.0) or np.any(y < 1.0):
        raise ValueError("lengths and counts must all be >= 1.")
    # Two points at the same length give no slope.
    if np.unique(x).size < 2:
        raise ValueError("lengths must contain at least two distinct values.")

    slope, _intercept = np.polyfit(np.log(x), np.log(y), deg=1)
    return float(slope)


def growth_exponents(frame: pd.DataFrame) -> dict[str, float]:
    """Return the fitted growth exponent of every racer in a sweep frame."""
    lengths = frame.index.to_numpy()
    return {
        kind.value: estimate_growth_exponent(lengths, frame[kind.value].to_numpy())
        for kind in RacerKind
        if kind.value in frame.columns
    }
