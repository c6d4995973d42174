"""Iterated Prisoner's Dilemma strategies, matches and all-vs-all tournaments."""

from .engine import COOPERATE, DEFECT, MatchResult, Payoffs, RoundRecord, play_match
from .errors import InvalidRoundsError, UnknownStrategyError
from .strategies import ALL_STRATEGIES, BaseStrategy, StrategyCatalogue
from .tournament import Standing, run_all_vs_all, run_single_match, run_tournament

__all__ = [
    "ALL_STRATEGIES",
    "BaseStrategy",
    "COOPERATE",
    "DEFECT",
    "InvalidRoundsError",
    "MatchResult",
    "Payoffs",
    "RoundRecord",
    "Standing",
    "StrategyCatalogue",
    "UnknownStrategyError",
    "play_match",
    "run_all_vs_all",
    "run_single_match",
    "run_tournament",
]
