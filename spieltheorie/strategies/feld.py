from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class Feld(BaseStrategy):
    """Defection probability grows linearly, reaching certainty at round 200."""
    label = "Feld"
    horizon = 200
    def next_move(self, round_index, opp_history):
        p_defect = min(round_index / self.horizon, 1.0)
        if self.rng.random() < p_defect:
            return DEFECT
        return COOPERATE
