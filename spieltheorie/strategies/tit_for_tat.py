from ..engine import COOPERATE
from .base import BaseStrategy
class TitForTat(BaseStrategy):
    """Cooperates first, then mirrors the opponent's last move."""
    label = "Tit-for-Tat"
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        return opp_history[-1]
