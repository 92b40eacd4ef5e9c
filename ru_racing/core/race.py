"""Step-based race orchestrator for the RU Racing simulation engine.

A race advances in discrete steps.  In every step each racer that has not
yet finished takes exactly ONE action through its strategy, in roster
order.  The race stops when every racer has finished or when the step
cutoff is reached, and the final standings are returned.

The simulation is fully deterministic: the outcome depends only on the
track length and the cutoff.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from enum import Enum

import pandas as pd

from ru_racing.core.history import RacerHistory
from ru_racing.core.racer import Racer, RacerKind
from ru_racing.core.ranking import rank_racers
from ru_racing.core.strategy import apply_action_strategy, resolve_strategy
from ru_racing.core.track import Track

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_ROSTER: tuple[RacerKind, ...] = (
    RacerKind.SCARLET_KNIGHT,
    RacerKind.STARBUCKS_TRUCK,
    RacerKind.LOGN_EXPRESS,
    RacerKind.NLOGN_EXPRESS,
)

UNBOUNDED: int = sys.maxsize

_STANDINGS_COLUMNS: list[str] = [
    "rank",
    "name",
    "symbol",
    "complexity",
    "distance",
    "actions",
    "battery",
    "finished",
]


class RaceStatus(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


# ---------------------------------------------------------------------------
# Race
# ---------------------------------------------------------------------------


class Race:
    """One Algorithmic Grand Prix on a single track.

    Attributes:
        track: The shared track.
        racers: Every racer in roster order, finished or not.
        steps: Total simulation steps executed so far.
        status: ``RUNNING`` until a call to :meth:`simulate` returns.
    """

    def __init__(self, track: Track, racers: Sequence[Racer] | None = None) -> None:
        """Set up the race.

        Args:
            track: Track to race on.
            racers: Optional custom roster.  Defaults to the four standard
                racers; the charging racers get a capacity equal to the
                track length.

        Raises:
            ValueError: If the track is missing or invalid, the roster is
                empty, lists a racer twice, or a racer is on a different track.
            UnknownRacerError: If a racer's kind has no strategy.
        """
        if track is None:
            raise ValueError("Track cannot be None.")
        if not isinstance(track, Track):
            raise ValueError(f"Expected a Track, got {type(track).__name__}.")

        if racers is None:
            roster = [Racer.for_kind(kind, track) for kind in DEFAULT_ROSTER]
        else:
            roster = list(racers)
            if not roster:
                raise ValueError("racers must not be empty.")
            if len({id(r) for r in roster}) != len(roster):
                raise ValueError("racers must be distinct.")
            for racer in roster:
                if racer.track != track:
                    raise ValueError(
                        f"Racer '{racer.name}' is not on track '{track.name}'."
                    )
                resolve_strategy(racer.kind)

        self._track: Track = track
        self._racers: tuple[Racer, ...] = tuple(roster)
        self._steps: int = 0
        self._status: RaceStatus = RaceStatus.RUNNING

    # -- Accessors -----------------------------------------------------------

    @property
    def track(self) -> Track:
        return self._track

    @property
    def racers(self) -> tuple[Racer, ...]:
        return self._racers

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def status(self) -> RaceStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        """Whether every racer has crossed the finish line."""
        return all(r.finished for r in self._racers)

    def histories(self) -> list[RacerHistory]:
        """Return each racer's action history in roster order."""
        return [r.history for r in self._racers]

    # -- Simulation ----------------------------------------------------------

    def simulate(self, cutoff: int | None = None) -> list[Racer]:
        """Run the race until everyone finishes or *cutoff* steps elapse.

        Each step first checks whether all racers have finished; if not,
        every unfinished racer takes exactly one action.  Calling this
        again after a cutoff resumes from the current state.

        Args:
            cutoff: Maximum number of steps to run in this call.  ``None``
                means unbounded; negative values are treated as 0.

        Returns:
            The racers ranked by :func:`rank_racers`.
        """
        limit: int = UNBOUNDED if cutoff is None else max(0, cutoff)
        self._status = RaceStatus.RUNNING

        taken = 0
        while taken < limit:
            active = [r for r in self._racers if not r.finished]
            if not active:
                break

            for racer in active:
                apply_action_strategy(racer)
                if racer.finished:
                    logger.debug(
                        "%s finished on step %d after %d actions",
                        racer.name,
                        self._steps + 1,
                        racer.actions_count,
                    )

            taken += 1
            self._steps += 1
            logger.debug("step %d: %d racer(s) acted", self._steps, len(active))

        self._status = RaceStatus.TERMINATED
        logger.info(
            "Race on %s terminated after %d step(s) (%s)",
            self._track.name,
            self._steps,
            "all finished" if self.is_over else "cutoff reached",
        )
        return self.rank_racers()

    # -- Standings -----------------------------------------------------------

    def rank_racers(self) -> list[Racer]:
        """Rank the current state without simulating further."""
        return rank_racers(self._racers)

    def standings_frame(self) -> pd.DataFrame:
        """Return the current standings as a DataFrame, first place first."""
        rows = []
        for position, racer in enumerate(self.rank_racers(), start=1):
            rows.append(
                {
                    "rank": position,
                    "name": racer.name,
                    "symbol": racer.symbol,
                    "complexity": racer.kind.complexity,
                    "distance": racer.distance,
                    "actions": racer.actions_count,
                    "battery": racer.battery,
                    "finished": racer.finished,
                }
            )
        return pd.DataFrame(rows, columns=_STANDINGS_COLUMNS)
