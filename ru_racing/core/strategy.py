"""Movement strategies for the RU Racing simulation engine.

Each strategy is a stateless function that takes one racer and performs
exactly ONE action on it, either a charge or a teleport.  A ``None`` or
already-finished racer is left untouched.

    ScarletKnight   O(N)        teleport 1 step every action
    StarbucksTruck  O(N^2)      charge N times, then teleport 1 step
    LogNExpress     O(log N)    teleport 1, 2, 4, 8, ... steps
    NLogNExpress    O(N log N)  charge N times, then teleport 1, 2, 4, ...

Both charging racers start with a full battery, so their first action is
always a teleport.
"""

from __future__ import annotations

from collections.abc import Callable

from ru_racing.core.racer import Racer, RacerKind

StrategyFn = Callable[[Racer], None]


class UnknownRacerError(ValueError):
    """Raised when no strategy exists for a racer's kind."""


def _is_idle(racer: Racer | None) -> bool:
    return racer is None or racer.finished


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def apply_scarlet_knight_action(racer: Racer | None) -> None:
    """O(N): move one step per action, never charging."""
    if _is_idle(racer):
        return
    racer.teleport(1)


def apply_starbucks_truck_action(racer: Racer | None) -> None:
    """O(N^2): teleport one step on a full battery, otherwise charge.

    A track of length N takes N teleports.  Every teleport after the first
    is preceded by N charges, for N^2 actions in total.
    """
    if _is_idle(racer):
        return
    if racer.battery_full:
        racer.teleport(1)
    else:
        racer.charge_battery()


def apply_logn_express_action(racer: Racer | None) -> None:
    """O(log N): the k-th action (0-based) moves 2**k steps."""
    if _is_idle(racer):
        return
    jump: int = 1 << racer.actions_count
    racer.teleport(max(1, min(jump, racer.remaining)))


def apply_nlogn_express_action(racer: Racer | None) -> None:
    """O(N log N): charge to full, then teleport the next power of two.

    The jump is 1 from the start line and otherwise
    ``2 ** (floor(log2(distance)) + 1)``, so positions run 1, 3, 7, 15, ...
    ``int.bit_length`` gives ``floor(log2(d)) + 1`` exactly for ``d >= 1``
    and 0 for ``d == 0``.
    """
    if _is_idle(racer):
        return
    if racer.battery < racer.charge_capacity:
        racer.charge_battery()
        return
    jump: int = 1 << racer.distance.bit_length()
    racer.teleport(max(1, min(jump, racer.remaining)))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


STRATEGIES: dict[RacerKind, StrategyFn] = {
    RacerKind.SCARLET_KNIGHT: apply_scarlet_knight_action,
    RacerKind.STARBUCKS_TRUCK: apply_starbucks_truck_action,
    RacerKind.LOGN_EXPRESS: apply_logn_express_action,
    RacerKind.NLOGN_EXPRESS: apply_nlogn_express_action,
}


def resolve_strategy(kind: RacerKind | str) -> StrategyFn:
    """Return the strategy function for *kind*.

    Raises:
        UnknownRacerError: If *kind* is not one of the four racers.
    """
    if isinstance(kind, str):
        resolved = RacerKind.from_name(kind)
        if resolved is None:
            raise UnknownRacerError(f"No strategy for racer kind '{kind}'.")
        kind = resolved
    try:
        return STRATEGIES[kind]
    except KeyError:
        raise UnknownRacerError(f"No strategy for racer kind '{kind}'.") from None


def apply_action_strategy(racer: Racer | None) -> None:
    """Apply one action to *racer* using the strategy for its kind.

    ``None`` and finished racers are ignored before the kind is resolved.

    Raises:
        UnknownRacerError: If the racer's kind has no strategy.
    """
    if _is_idle(racer):
        return
    resolve_strategy(racer.kind)(racer)
