from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import Sequence

# Shared by every strategy built without an explicit generator.
_PROCESS_RNG = random.Random(time.time_ns())


def process_rng() -> random.Random:
    return _PROCESS_RNG


class BaseStrategy(ABC):
    """
    Base class for strategies. Implement next_move and, for strategies with
    private memory, set ``stateful = True`` and override reset.
    next_move should return "C" or "D".
    """

    label = ""
    stateful = False

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else process_rng()
        self.reset()

    def name(self) -> str:
        return self.label or self.__class__.__name__

    def reset(self) -> None:
        # Reset any internal state at the start of a match
        pass

    @abstractmethod
    def next_move(self, round_index: int, opp_history: Sequence[str]) -> str:
        ...

    def __repr__(self):
        return f"{self.name()}"
