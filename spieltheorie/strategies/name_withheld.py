from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class NameWithheld(BaseStrategy):
    """Tit-for-tat with a 5% chance of defecting anyway."""
    label = "Name Withheld"
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        if self.rng.random() < 0.05:
            return DEFECT
        return opp_history[-1]
