"""Tests for per-racer history snapshots."""

import pytest

from ru_racing.core.history import RacerHistory, RacerSnapshot
from ru_racing.core.race import Race
from ru_racing.core.racer import Racer, RacerKind
from ru_racing.core.track import Track


def _finished_truck(length: int = 3) -> Racer:
    race = Race(Track(length=length))
    race.simulate()
    return next(r for r in race.racers if r.kind is RacerKind.STARBUCKS_TRUCK)


def test_one_snapshot_per_action() -> None:
    """Each charge and teleport appends exactly one snapshot."""
    truck = _finished_truck(3)
    history = truck.history
    assert len(history) == truck.actions_count == 9
    assert [s.action_index for s in history] == list(range(1, 10))
    assert [s.action for s in history][:5] == [
        "teleport",
        "charge",
        "charge",
        "charge",
        "teleport",
    ]


def test_snapshot_reflects_post_action_state() -> None:
    """Snapshots capture distance and battery right after the action."""
    truck = _finished_truck(3)
    first = truck.history.at(1)
    assert (first.distance, first.battery, first.actions_count) == (1, 0, 1)
    fourth = truck.history.at(4)
    assert (fourth.distance, fourth.battery) == (1, 3)


def test_at_out_of_range() -> None:
    history = RacerHistory("empty")
    with pytest.raises(IndexError, match="No snapshot"):
        history.at(1)


def test_to_frame() -> None:
    """The DataFrame export has one row per action in order."""
    truck = _finished_truck(2)
    frame = truck.history.to_frame()
    assert list(frame.columns) == [
        "action_index",
        "action",
        "distance",
        "battery",
        "actions_count",
    ]
    assert len(frame) == 4
    assert list(frame["distance"]) == [1, 1, 1, 2]
    assert frame["distance"].is_monotonic_increasing


def test_empty_history_frame() -> None:
    frame = RacerHistory().to_frame()
    assert frame.empty
    assert "distance" in frame.columns


def test_clear() -> None:
    history = RacerHistory("x")
    history.record(
        RacerSnapshot(action_index=1, action="charge", distance=0, battery=1, actions_count=1)
    )
    assert len(history) == 1
    history.clear()
    assert len(history) == 0
    assert history.snapshots == ()


def test_snapshot_validation() -> None:
    with pytest.raises(ValueError, match="Unknown action"):
        RacerSnapshot(action_index=1, action="sprint", distance=0, battery=0, actions_count=1)
    with pytest.raises(ValueError, match="action_index"):
        RacerSnapshot(action_index=0, action="charge", distance=0, battery=0, actions_count=0)
