from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class SteinRapoport(BaseStrategy):
    """Tit-for-tat that forgives a defection one time in five."""
    label = "Stein & Rapoport"
    forgiveness = 0.2
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        last = opp_history[-1]
        if last == DEFECT and self.rng.random() < self.forgiveness:
            return COOPERATE
        return last
