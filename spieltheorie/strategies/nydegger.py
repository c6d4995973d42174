from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Nydegger(BaseStrategy):
    """
    Opens C, D, C to probe the opponent. Round 3 cooperates only if the
    opponent cooperated through the whole probe, then plays tit-for-tat.
    """
    label = "Nydegger"
    opening = (COOPERATE, DEFECT, COOPERATE)
    def next_move(self, round_index, opp_history):
        if round_index < len(self.opening):
            return self.opening[round_index]
        if round_index == len(self.opening):
            if all(move == COOPERATE for move in opp_history[:3]):
                return COOPERATE
            return DEFECT
        return opp_history[-1]
