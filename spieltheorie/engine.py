from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .errors import InvalidRoundsError

logger = logging.getLogger(__name__)

Move = str  # "C" or "D"

COOPERATE: Move = "C"
DEFECT: Move = "D"


@dataclass(frozen=True)
class Payoffs:
    T: int = 10  # Temptation to defect
    R: int = 7  # Reward for mutual cooperation
    P: int = 1  # Punishment for mutual defection
    S: int = 0  # Sucker payoff


def play_round(a: Move, b: Move, p: Payoffs) -> tuple[int, int]:
    if a == COOPERATE and b == COOPERATE:
        return p.R, p.R
    if a == COOPERATE and b == DEFECT:
        return p.S, p.T
    if a == DEFECT and b == COOPERATE:
        return p.T, p.S
    return p.P, p.P


def validate_rounds(rounds: Any) -> int:
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
        raise InvalidRoundsError(f"Round count must be a positive integer, got {rounds!r}")
    return rounds


class HistoryView:
    """Read-only view over a player's move list.

    The engine keeps appending to the underlying list; strategies only get
    reads (indexing, slicing, iteration, ``len``, ``count``, ``in``).
    """

    __slots__ = ("_data",)

    def __init__(self, data: List[Move]):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._data)

    def __contains__(self, item) -> bool:
        return item in self._data

    def __bool__(self) -> bool:
        return bool(self._data)

    def count(self, move: Move) -> int:
        return self._data.count(move)

    def __repr__(self) -> str:
        return f"HistoryView({self._data!r})"


@dataclass(frozen=True)
class RoundRecord:
    """One simulated round; scores are cumulative after the round."""

    round: int
    move_a: Move
    move_b: Move
    payoff_a: int
    payoff_b: int
    score_a: int
    score_b: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "move_A": self.move_a,
            "move_B": self.move_b,
            "payoff_A": self.payoff_a,
            "payoff_B": self.payoff_b,
            "score_A": self.score_a,
            "score_B": self.score_b,
        }


@dataclass
class MatchResult:
    player_a: str
    player_b: str
    rounds: int
    moves_a: List[Move] = field(default_factory=list)
    moves_b: List[Move] = field(default_factory=list)
    score_a: int = 0
    score_b: int = 0
    trace: List[RoundRecord] = field(default_factory=list)

    @property
    def winner(self) -> Optional[str]:
        """Name of the higher scorer, ``None`` on a draw."""
        if self.score_a > self.score_b:
            return self.player_a
        if self.score_b > self.score_a:
            return self.player_b
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": {"A": self.player_a, "B": self.player_b},
            "rounds": self.rounds,
            "history": {"A": "".join(self.moves_a), "B": "".join(self.moves_b)},
            "scores": {"A": self.score_a, "B": self.score_b},
            "winner": self.winner,
            "trace": [record.to_dict() for record in self.trace],
        }


def _check_players(player_a, player_b) -> None:
    if player_a is player_b and player_a.stateful:
        raise ValueError(
            f"{player_a.name()} keeps per-match state; both sides need their own instance"
        )


def iter_rounds(player_a, player_b, rounds: int, payoffs: Payoffs | None = None) -> Iterator[RoundRecord]:
    """Yield each round of a match as soon as it has been played.

    Both players decide from the histories as they stood before the round,
    so neither sees the other's current move.
    """
    rounds = validate_rounds(rounds)
    _check_players(player_a, player_b)
    if payoffs is None:
        payoffs = Payoffs()

    a_hist: List[Move] = []
    b_hist: List[Move] = []
    a_view = HistoryView(a_hist)
    b_view = HistoryView(b_hist)
    total_a = 0
    total_b = 0
    for r in range(rounds):
        a_move = player_a.next_move(r, b_view)
        b_move = player_b.next_move(r, a_view)
        a_hist.append(a_move)
        b_hist.append(b_move)
        s_a, s_b = play_round(a_move, b_move, payoffs)
        total_a += s_a
        total_b += s_b
        yield RoundRecord(r, a_move, b_move, s_a, s_b, total_a, total_b)


def play_match(player_a, player_b, rounds: int, payoffs: Payoffs | None = None) -> MatchResult:
    result = MatchResult(player_a=player_a.name(), player_b=player_b.name(), rounds=rounds)
    for record in iter_rounds(player_a, player_b, rounds, payoffs):
        result.moves_a.append(record.move_a)
        result.moves_b.append(record.move_b)
        result.trace.append(record)
        result.score_a = record.score_a
        result.score_b = record.score_b
    logger.debug(
        "%s vs %s over %d rounds: %d-%d",
        result.player_a,
        result.player_b,
        rounds,
        result.score_a,
        result.score_b,
    )
    return result
