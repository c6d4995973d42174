import random

import pytest

from spieltheorie.engine import COOPERATE, DEFECT
from spieltheorie.strategies import BaseStrategy, default_catalogue


class ScriptedRng:
    """Stand-in for random.Random that hands out preset draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)


class Scripted(BaseStrategy):
    """Plays a fixed sequence of moves, repeating the last one."""

    def __init__(self, moves, label="Scripted"):
        self.moves = moves
        self.label = label
        super().__init__()

    def next_move(self, round_index, opp_history):
        return self.moves[min(round_index, len(self.moves) - 1)]


@pytest.fixture
def always_defect():
    return lambda: Scripted(DEFECT, label="Always Defect")


@pytest.fixture
def always_cooperate():
    return lambda: Scripted(COOPERATE, label="Always Cooperate")


@pytest.fixture
def catalogue():
    return default_catalogue(rng=random.Random(1234))
