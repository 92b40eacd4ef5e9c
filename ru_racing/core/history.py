"""Per-racer action history for the RU Racing simulation engine.

Every charge or teleport a racer performs appends one immutable snapshot
to its :class:`RacerHistory`.  The history exists purely for playback and
reporting; the strategy engine, the orchestrator, and the ranker never
read it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass

import pandas as pd

CHARGE: str = "charge"
TELEPORT: str = "teleport"

_FRAME_COLUMNS: list[str] = [
    "action_index",
    "action",
    "distance",
    "battery",
    "actions_count",
]


@dataclass(frozen=True)
class RacerSnapshot:
    """State of a racer immediately after one action.

    Attributes:
        action_index: 1-based index of the action within the race.
        action: Either ``"charge"`` or ``"teleport"``.
        distance: Distance travelled after the action.
        battery: Battery level after the action.
        actions_count: Total actions taken after the action.
    """

    action_index: int
    action: str
    distance: int
    battery: int
    actions_count: int

    def __post_init__(self) -> None:
        if self.action not in (CHARGE, TELEPORT):
            raise ValueError(f"Unknown action '{self.action}'.")
        if self.action_index < 1:
            raise ValueError("action_index must be >= 1.")


class RacerHistory:
    """Ordered record of the snapshots produced by one racer."""

    __slots__ = ("racer_name", "_snapshots")

    def __init__(self, racer_name: str = "") -> None:
        self.racer_name: str = racer_name
        self._snapshots: list[RacerSnapshot] = []

    def record(self, snapshot: RacerSnapshot) -> None:
        """Append a snapshot taken after an action."""
        self._snapshots.append(snapshot)

    @property
    def snapshots(self) -> tuple[RacerSnapshot, ...]:
        return tuple(self._snapshots)

    def at(self, action_index: int) -> RacerSnapshot:
        """Return the snapshot recorded for the given 1-based action.

        Raises:
            IndexError: If no such action has been recorded.
        """
        if not 1 <= action_index <= len(self._snapshots):
            raise IndexError(
                f"No snapshot for action {action_index} "
                f"({len(self._snapshots)} recorded)."
            )
        return self._snapshots[action_index - 1]

    def clear(self) -> None:
        self._snapshots.clear()

    def to_frame(self) -> pd.DataFrame:
        """Return the history as a DataFrame with one row per action."""
        rows = [asdict(s) for s in self._snapshots]
        return pd.DataFrame(rows, columns=_FRAME_COLUMNS)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[RacerSnapshot]:
        return iter(self._snapshots)
