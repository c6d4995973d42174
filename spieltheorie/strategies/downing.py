from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Downing(BaseStrategy):
    """
    Tallies the opponent's moves one round at a time and cooperates only
    while cooperations outnumber defections.
    """
    label = "Downing"
    stateful = True
    def reset(self):
        super().reset()
        self.coop_count = 0
        self.defect_count = 0
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            self.reset()
            return COOPERATE
        if opp_history[-1] == COOPERATE:
            self.coop_count += 1
        else:
            self.defect_count += 1
        if self.coop_count > self.defect_count:
            return COOPERATE
        return DEFECT
