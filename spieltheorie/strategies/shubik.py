from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Shubik(BaseStrategy):
    """Answers each defection with two rounds of defection."""
    label = "Shubik"
    stateful = True
    def reset(self):
        super().reset()
        self.punish = 0
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            self.reset()
            return COOPERATE
        if self.punish > 0:
            self.punish -= 1
            return DEFECT
        if opp_history[-1] == DEFECT:
            self.punish = 1  # this round plus the next one
            return DEFECT
        return COOPERATE
