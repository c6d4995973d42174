from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Friedman(BaseStrategy):
    """Grim trigger: cooperates until the first defection, then defects forever."""
    label = "Friedman"
    stateful = True
    def reset(self):
        super().reset()
        self.triggered = False
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            self.reset()
            return COOPERATE
        if self.triggered:
            return DEFECT
        if opp_history[-1] == DEFECT:
            self.triggered = True
            return DEFECT
        return COOPERATE
