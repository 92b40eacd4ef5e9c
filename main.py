"""CLI entrypoint for the RU Racing Algorithmic Grand Prix."""

from __future__ import annotations

import logging
import sys

from ru_racing import __version__
from ru_racing.config import load_tracks
from ru_racing.core.race import Race
from ru_racing.core.racer import RacerKind


def main() -> None:
    """Race the four standard racers on every configured track."""
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )

    print(f"RU Racing: The Algorithmic Grand Prix v{__version__}")
    print("=" * 56)

    # -- Load tracks ----------------------------------------------------------
    tracks = load_tracks()
    print(f"\n{len(tracks)} tracks loaded")
    for i, track in enumerate(tracks, start=1):
        print(f"  T{i:02d}: {track.name} ({track.length} steps)")

    # -- Race each track ------------------------------------------------------
    for track in tracks:
        race = Race(track)
        standings = race.simulate()

        print(f"\n{track.name} -- finished in {race.steps} steps")
        print(f"  {'Pos':>3}  {'Racer':<16}  {'Class':<10}  {'Dist':>5}  {'Actions':>8}")
        print(f"  {'---':>3}  {'-' * 16:<16}  {'-' * 10:<10}  {'-----':>5}  {'--------':>8}")
        for pos, racer in enumerate(standings, start=1):
            complexity = (
                racer.kind.complexity if isinstance(racer.kind, RacerKind) else "?"
            )
            print(
                f"  {pos:3d}  {racer.symbol} {racer.name:<14}  {complexity:<10}  "
                f"{racer.distance:5d}  {racer.actions_count:8d}"
            )

    print("\nGrand Prix complete.")


if __name__ == "__main__":
    sys.exit(main() or 0)
