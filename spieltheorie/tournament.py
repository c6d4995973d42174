"""Shared tournament helpers used by both CLI and the web UI."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterator, List, Sequence, Union

from .engine import MatchResult, Payoffs, play_match, validate_rounds
from .errors import InvalidRoundsError
from .strategies import StrategyCatalogue, StrategyFactory, default_catalogue

logger = logging.getLogger(__name__)

CatalogueLike = Union[StrategyCatalogue, Sequence[StrategyFactory]]
MatchCallback = Callable[[int, int, MatchResult], None]


@dataclass(frozen=True)
class Standing:
    name: str
    total_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"strategy": self.name, "total_score": self.total_score}


def parse_rounds(value: Any) -> int:
    """Turn user-supplied round-count text into a positive int."""
    if isinstance(value, bool):
        raise InvalidRoundsError(f"Invalid number of rounds: {value!r}")
    if isinstance(value, int):
        rounds = value
    else:
        try:
            rounds = int(str(value).strip())
        except ValueError:
            raise InvalidRoundsError(f"Invalid number of rounds: {value!r}") from None
    if rounds <= 0:
        raise InvalidRoundsError(f"Number of rounds must be positive, got {rounds}")
    return rounds


def make_rng(seed: int | None = None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def list_available_strategies(catalogue: StrategyCatalogue | None = None) -> List[Dict[str, str]]:
    """Return metadata about all built-in strategies."""
    if catalogue is None:
        catalogue = default_catalogue()
    return [{"name": name, "description": catalogue.describe(name)} for name in catalogue]


def resolve_strategies(
    catalogue: StrategyCatalogue,
    only: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> StrategyCatalogue:
    """Select strategies based on optional inclusion/exclusion lists."""
    selected = [catalogue.resolve(x) for x in only] if only else catalogue.names()
    dropped = {catalogue.resolve(x) for x in exclude} if exclude else set()
    return catalogue.subset([name for name in selected if name not in dropped])


def _factories(catalogue: CatalogueLike) -> List[StrategyFactory]:
    if isinstance(catalogue, StrategyCatalogue):
        return catalogue.factories()
    return list(catalogue)


def _all_pairs(
    factories: List[StrategyFactory],
    rounds: int,
    payoffs: Payoffs,
    on_match_done: MatchCallback | None,
) -> Iterator[MatchResult]:
    total = len(factories) ** 2
    done = 0
    for make_a in factories:
        for make_b in factories:
            # Fresh instances on each side, including self-pairings.
            result = play_match(make_a(), make_b(), rounds, payoffs)
            done += 1
            if on_match_done:
                on_match_done(done, total, result)
            yield result


def run_all_vs_all(
    catalogue: CatalogueLike,
    rounds: int,
    payoffs: Payoffs | None = None,
    on_match_done: MatchCallback | None = None,
) -> List[Standing]:
    """Play every ordered pairing (self-pairings included) and rank by total score.

    Each strategy name collects the scores of every side it played. Ties keep
    catalogue order.
    """
    rounds = validate_rounds(rounds)
    if payoffs is None:
        payoffs = Payoffs()
    factories = _factories(catalogue)
    if not factories:
        raise ValueError("Need at least one strategy to run a tournament")

    totals: Dict[str, int] = {}
    for make in factories:
        totals.setdefault(make().name(), 0)

    logger.info("All-vs-all: %d strategies, %d matches of %d rounds", len(totals), len(factories) ** 2, rounds)
    for result in _all_pairs(factories, rounds, payoffs, on_match_done):
        totals[result.player_a] += result.score_a
        totals[result.player_b] += result.score_b

    standings = [Standing(name, score) for name, score in totals.items()]
    standings.sort(key=lambda s: -s.total_score)
    if standings:
        logger.info("All-vs-all finished, leader %s with %d", standings[0].name, standings[0].total_score)
    return standings


def run_single_match(
    name_a: str,
    name_b: str,
    rounds: int,
    *,
    catalogue: StrategyCatalogue | None = None,
    seed: int | None = None,
    payoffs: Payoffs | None = None,
) -> MatchResult:
    """Resolve two names to fresh instances and play them against each other."""
    rounds = validate_rounds(rounds)
    if catalogue is None:
        catalogue = default_catalogue(rng=make_rng(seed))
    player_a = catalogue.create(name_a)
    player_b = catalogue.create(name_b)
    return play_match(player_a, player_b, rounds, payoffs)


def run_tournament(
    *,
    rounds: int = 200,
    seed: int | None = None,
    payoffs: Payoffs | None = None,
    only: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    catalogue: StrategyCatalogue | None = None,
    on_match_done: MatchCallback | None = None,
) -> Dict[str, Any]:
    """Run a full all-vs-all tournament and return serialized results."""
    rounds = validate_rounds(rounds)
    if payoffs is None:
        payoffs = Payoffs()
    if catalogue is None:
        catalogue = default_catalogue(rng=make_rng(seed))
    selected = resolve_strategies(catalogue, only=only, exclude=exclude)
    if not len(selected):
        raise ValueError("Need at least one strategy to run a tournament")

    matches: List[Dict[str, Any]] = []

    def record(done: int, total: int, result: MatchResult) -> None:
        matches.append(
            {
                "A": result.player_a,
                "B": result.player_b,
                "rounds": result.rounds,
                "score_A": result.score_a,
                "score_B": result.score_b,
                "history_A": "".join(result.moves_a),
                "history_B": "".join(result.moves_b),
            }
        )
        if on_match_done:
            on_match_done(done, total, result)

    standings = run_all_vs_all(selected, rounds, payoffs, on_match_done=record)

    return {
        "params": {
            "rounds": rounds,
            "seed": seed,
            "payoffs": asdict(payoffs),
        },
        "strategies": selected.names(),
        "matches": matches,
        "standings": [s.to_dict() for s in standings],
    }
