from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Graaskamp(BaseStrategy):
    """Defects while more than half of the opponent's moves so far were defections."""
    label = "Graaskamp"
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        if opp_history.count(DEFECT) / len(opp_history) > 0.5:
            return DEFECT
        return COOPERATE
