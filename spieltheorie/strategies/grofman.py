from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Grofman(BaseStrategy):
    """Defects every fifth round starting with the first, otherwise cooperates."""
    label = "Grofman"
    def next_move(self, round_index, opp_history):
        if round_index % 5 == 0:
            return DEFECT
        return COOPERATE
