from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Tullock(BaseStrategy):
    """Cooperates, testing the opponent with a defection 5% of the time."""
    label = "Tullock"
    def next_move(self, round_index, opp_history):
        if self.rng.random() < 0.05:
            return DEFECT
        return COOPERATE
