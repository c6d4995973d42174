from ..engine import COOPERATE
from .base import BaseStrategy
class Davis(BaseStrategy):
    """Cooperates for the first ten rounds, then plays tit-for-tat."""
    label = "Davis"
    grace_rounds = 10
    def next_move(self, round_index, opp_history):
        if round_index < self.grace_rounds:
            return COOPERATE
        return opp_history[-1]
