"""Tests for the Track and Racer models."""

from dataclasses import FrozenInstanceError

import pytest

from ru_racing.core.history import RacerHistory
from ru_racing.core.racer import Racer, RacerKind
from ru_racing.core.track import Track

# ---------------------------------------------------------------------------
# Track
# ---------------------------------------------------------------------------


def test_track_requires_positive_integer_length() -> None:
    """Zero, negative, fractional and boolean lengths are rejected."""
    for bad in (0, -3):
        with pytest.raises(ValueError, match="> 0"):
            Track(length=bad)
    for bad in (2.5, True, "8"):
        with pytest.raises(ValueError, match="integer"):
            Track(length=bad)  # type: ignore[arg-type]


def test_track_is_immutable() -> None:
    """Track length cannot change after creation."""
    track = Track(length=8)
    with pytest.raises(FrozenInstanceError):
        track.length = 9  # type: ignore[misc]


def test_track_name_must_not_be_empty() -> None:
    with pytest.raises(ValueError, match="name"):
        Track(length=4, name="")


# ---------------------------------------------------------------------------
# RacerKind
# ---------------------------------------------------------------------------


def test_racer_kind_metadata() -> None:
    """Each kind carries its symbol, complexity label and charging flag."""
    assert RacerKind.SCARLET_KNIGHT.symbol == "⚔"
    assert RacerKind.STARBUCKS_TRUCK.complexity == "O(N^2)"
    assert [k for k in RacerKind if k.charges] == [
        RacerKind.STARBUCKS_TRUCK,
        RacerKind.NLOGN_EXPRESS,
    ]
    assert RacerKind.from_name("NLogNExpress") is RacerKind.NLOGN_EXPRESS
    assert RacerKind.from_name("Bicycle") is None


# ---------------------------------------------------------------------------
# Racer construction
# ---------------------------------------------------------------------------


def test_for_kind_sets_capacity_from_track() -> None:
    """Charging racers get capacity N and start full; others get 0."""
    track = Track(length=12)
    truck = Racer.for_kind(RacerKind.STARBUCKS_TRUCK, track)
    knight = Racer.for_kind(RacerKind.SCARLET_KNIGHT, track)
    assert (truck.charge_capacity, truck.battery) == (12, 12)
    assert (knight.charge_capacity, knight.battery) == (0, 0)
    assert truck.kind is RacerKind.STARBUCKS_TRUCK
    assert truck.symbol == "🚚"
    assert truck.distance == 0
    assert truck.actions_count == 0
    assert not truck.finished


def test_racer_rejects_invalid_arguments() -> None:
    track = Track(length=3)
    with pytest.raises(ValueError, match="Track cannot be None"):
        Racer("ScarletKnight", "⚔", None, 0)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="name"):
        Racer("", "?", track, 0)
    with pytest.raises(ValueError, match="charge_capacity"):
        Racer("ScarletKnight", "⚔", track, -1)
    for bad in ("5", None, 2.0, True):
        with pytest.raises(ValueError, match="charge_capacity must be an integer"):
            Racer("StarbucksTruck", "🚚", track, bad)  # type: ignore[arg-type]


def test_racer_uses_supplied_history() -> None:
    """An injected recorder receives the racer's snapshots."""
    recorder = RacerHistory("custom")
    racer = Racer("ScarletKnight", "⚔", Track(length=2), 0, history=recorder)
    racer.teleport(1)
    assert racer.history is recorder
    assert len(recorder) == 1


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


def test_teleport_clamps_to_remaining_distance() -> None:
    """A long jump stops exactly at the finish line."""
    racer = Racer("LogNExpress", "🚎", Track(length=3), 0)
    moved = racer.teleport(10)
    assert moved == 3
    assert racer.distance == 3
    assert racer.finished
    assert racer.actions_count == 1


def test_teleport_consumes_battery() -> None:
    """Teleporting resets the battery to zero."""
    racer = Racer("NLogNExpress", "🚌", Track(length=5), 5)
    assert racer.battery_full
    racer.teleport(1)
    assert racer.battery == 0
    assert not racer.battery_full


def test_teleport_rejects_invalid_moves() -> None:
    racer = Racer("ScarletKnight", "⚔", Track(length=1), 0)
    with pytest.raises(ValueError, match=">= 1"):
        racer.teleport(0)
    racer.teleport(1)
    with pytest.raises(ValueError, match="already finished"):
        racer.teleport(1)
    assert racer.actions_count == 1


def test_charge_is_capped_at_capacity() -> None:
    """Charging a full battery still costs an action but adds nothing."""
    racer = Racer("StarbucksTruck", "🚚", Track(length=2), 2)
    racer.charge_battery()
    assert racer.battery == 2
    assert racer.actions_count == 1
    assert racer.distance == 0


def test_distance_is_monotonic() -> None:
    """Distance never decreases across a sequence of actions."""
    racer = Racer("NLogNExpress", "🚌", Track(length=4), 4)
    seen = [racer.distance]
    racer.teleport(1)
    seen.append(racer.distance)
    for _ in range(4):
        racer.charge_battery()
        seen.append(racer.distance)
    racer.teleport(2)
    seen.append(racer.distance)
    assert seen == sorted(seen)
    assert racer.distance == 3
    assert racer.remaining == 1


def test_racer_kind_properties_are_documented() -> None:
    """Every public RacerKind property carries a docstring."""
    for attr in ("symbol", "complexity", "charges"):
        assert vars(RacerKind)[attr].__doc__
