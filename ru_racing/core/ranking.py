"""Standings for the RU Racing simulation engine.

Racers are ordered by distance travelled (farthest first), then by actions
taken (fewest first).  Racers tied on both keep their input order, which
is why a stable insertion sort is used.
"""

from __future__ import annotations

from collections.abc import Sequence

from ru_racing.core.racer import Racer


def is_higher_rank(a: Racer, b: Racer) -> bool:
    """Return ``True`` if *a* should be ranked strictly ahead of *b*."""
    if a.distance != b.distance:
        return a.distance > b.distance
    return a.actions_count < b.actions_count


def rank_racers(racers: Sequence[Racer] | None) -> list[Racer]:
    """Return a ranked copy of *racers*.

    The input sequence is not modified.

    Args:
        racers: Racers to rank.  ``None`` yields an empty list.

    Returns:
        New list ordered from first to last place.
    """
    if racers is None:
        return []

    ranked: list[Racer] = list(racers)
    for i in range(1, len(ranked)):
        key = ranked[i]
        j = i - 1
        while j >= 0 and is_higher_rank(key, ranked[j]):
            ranked[j + 1] = ranked[j]
            j -= 1
        ranked[j + 1] = key
    return ranked
