"""Core simulation modules for the RU Racing engine."""

from ru_racing.core.analysis import (
    estimate_growth_exponent,
    expected_actions,
    growth_exponents,
    sweep_action_counts,
)
from ru_racing.core.history import RacerHistory, RacerSnapshot
from ru_racing.core.race import DEFAULT_ROSTER, Race, RaceStatus
from ru_racing.core.racer import Racer, RacerKind
from ru_racing.core.ranking import is_higher_rank, rank_racers
from ru_racing.core.strategy import (
    STRATEGIES,
    UnknownRacerError,
    apply_action_strategy,
    apply_logn_express_action,
    apply_nlogn_express_action,
    apply_scarlet_knight_action,
    apply_starbucks_truck_action,
    resolve_strategy,
)
from ru_racing.core.track import Track

__all__ = [
    "DEFAULT_ROSTER",
    "Race",
    "RaceStatus",
    "Racer",
    "RacerHistory",
    "RacerKind",
    "RacerSnapshot",
    "STRATEGIES",
    "Track",
    "UnknownRacerError",
    "apply_action_strategy",
    "apply_logn_express_action",
    "apply_nlogn_express_action",
    "apply_scarlet_knight_action",
    "apply_starbucks_truck_action",
    "estimate_growth_exponent",
    "expected_actions",
    "growth_exponents",
    "is_higher_rank",
    "rank_racers",
    "resolve_strategy",
    "sweep_action_counts",
]
