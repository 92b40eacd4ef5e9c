"""Racer model for the RU Racing simulation engine.

A racer owns its mutable race state (position, battery, action counter)
and exposes exactly two mutations, :meth:`Racer.charge_battery` and
:meth:`Racer.teleport`.  Each of them counts one action and records one
history snapshot, so an action can never be taken without being counted
and recorded.
"""

from __future__ import annotations

from enum import Enum

from ru_racing.core.history import CHARGE, TELEPORT, RacerHistory, RacerSnapshot
from ru_racing.core.track import Track

# ---------------------------------------------------------------------------
# Racer kinds
# ---------------------------------------------------------------------------


class RacerKind(Enum):
    """The four competitors of the Algorithmic Grand Prix.

    Each member's value is the racer's canonical name.
    """

    SCARLET_KNIGHT = "ScarletKnight"
    STARBUCKS_TRUCK = "StarbucksTruck"
    LOGN_EXPRESS = "LogNExpress"
    NLOGN_EXPRESS = "NLogNExpress"

    @property
    def symbol(self) -> str:
        """Display glyph shown next to the racer's name."""
        return _SYMBOLS[self]

    @property
    def complexity(self) -> str:
        """Big-O label of the racer's movement strategy."""
        return _COMPLEXITY[self]

    @property
    def charges(self) -> bool:
        """Whether this racer must charge its battery before teleporting."""
        return self in (RacerKind.STARBUCKS_TRUCK, RacerKind.NLOGN_EXPRESS)

    @classmethod
    def from_name(cls, name: str) -> RacerKind | None:
        """Return the kind whose canonical name is *name*, or ``None``."""
        try:
            return cls(name)
        except ValueError:
            return None


_SYMBOLS: dict[RacerKind, str] = {
    RacerKind.SCARLET_KNIGHT: "⚔",
    RacerKind.STARBUCKS_TRUCK: "🚚",
    RacerKind.LOGN_EXPRESS: "🚎",
    RacerKind.NLOGN_EXPRESS: "🚌",
}

_COMPLEXITY: dict[RacerKind, str] = {
    RacerKind.SCARLET_KNIGHT: "O(N)",
    RacerKind.STARBUCKS_TRUCK: "O(N^2)",
    RacerKind.LOGN_EXPRESS: "O(log N)",
    RacerKind.NLOGN_EXPRESS: "O(N log N)",
}


# ---------------------------------------------------------------------------
# Racer state
# ---------------------------------------------------------------------------


class Racer:
    """Mutable per-racer state during a race.

    Attributes:
        name: Racer identifier; selects the strategy through :attr:`kind`.
        kind: The matching :class:`RacerKind`, or the raw name when it is
            not one of the four known racers.
        symbol: Display glyph.
        track: Shared, read-only track.
        charge_capacity: Charges required before a teleport (0 for racers
            that never charge).
        battery: Current charge level in ``[0, charge_capacity]``.
        distance: Steps travelled in ``[0, track.length]``.
        actions_count: Number of actions taken so far.
        history: Recorder that receives one snapshot per action.
    """

    __slots__ = (
        "name",
        "kind",
        "symbol",
        "track",
        "charge_capacity",
        "battery",
        "distance",
        "actions_count",
        "history",
    )

    def __init__(
        self,
        name: str,
        symbol: str,
        track: Track,
        charge_capacity: int,
        history: RacerHistory | None = None,
    ) -> None:
        """Initialise a racer at the start line with a full battery.

        Args:
            name: Racer identifier.
            symbol: Display glyph.
            track: Track to race on.
            charge_capacity: Battery capacity; the battery starts full.
            history: Optional recorder.  A fresh :class:`RacerHistory` is
                created when omitted.

        Raises:
            ValueError: If the track is missing, the name is empty, or the
                capacity is not a non-negative integer.
        """
        if track is None or not isinstance(track, Track):
            raise ValueError("Track cannot be None.")
        if not name:
            raise ValueError("Racer name must not be empty.")
        if isinstance(charge_capacity, bool) or not isinstance(charge_capacity, int):
            raise ValueError("charge_capacity must be an integer.")
        if charge_capacity < 0:
            raise ValueError("charge_capacity must be >= 0.")
        self.name: str = name
        self.kind: RacerKind | str = RacerKind.from_name(name) or name
        self.symbol: str = symbol
        self.track: Track = track
        self.charge_capacity: int = charge_capacity
        self.battery: int = charge_capacity
        self.distance: int = 0
        self.actions_count: int = 0
        self.history: RacerHistory = (
            history if history is not None else RacerHistory(name)
        )

    @classmethod
    def for_kind(cls, kind: RacerKind, track: Track) -> Racer:
        """Build the standard racer for *kind* on *track*."""
        capacity = track.length if kind.charges else 0
        return cls(kind.value, kind.symbol, track, capacity)

    # -- Derived state -------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.distance == self.track.length

    @property
    def remaining(self) -> int:
        return self.track.length - self.distance

    @property
    def battery_full(self) -> bool:
        return self.battery == self.charge_capacity

    # -- Actions -------------------------------------------------------------

    def charge_battery(self) -> None:
        """Spend one action charging the battery by one unit."""
        self.battery = min(self.battery + 1, self.charge_capacity)
        self._complete_action(CHARGE)

    def teleport(self, steps: int) -> int:
        """Spend one action teleporting forward.

        The move is clamped to the remaining distance and consumes the
        whole battery.

        Args:
            steps: Requested move distance (>= 1).

        Returns:
            The distance actually moved.

        Raises:
            ValueError: If *steps* < 1 or the racer has already finished.
        """
        if steps < 1:
            raise ValueError("teleport steps must be >= 1.")
        if self.finished:
            raise ValueError(f"{self.name} has already finished the race.")
        moved: int = min(steps, self.remaining)
        self.distance += moved
        self.battery = 0
        self._complete_action(TELEPORT)
        return moved

    def _complete_action(self, action: str) -> None:
        self.actions_count += 1
        self.history.record(
            RacerSnapshot(
                action_index=self.actions_count,
                action=action,
                distance=self.distance,
                battery=self.battery,
                actions_count=self.actions_count,
            )
        )

    def __repr__(self) -> str:
        return (
            f"Racer(name={self.name!r}, distance={self.distance}, "
            f"battery={self.battery}/{self.charge_capacity}, "
            f"actions={self.actions_count})"
        )
