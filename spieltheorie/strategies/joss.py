from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Joss(BaseStrategy):
    """Tit-for-tat that sneaks in a defection 10% of the time."""
    label = "Joss"
    sneak = 0.1
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        if self.rng.random() < self.sneak:
            return DEFECT
        return opp_history[-1]
