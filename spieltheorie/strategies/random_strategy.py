from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class RandomStrategy(BaseStrategy):
    """Cooperates or defects with equal probability."""
    label = "Random"
    def next_move(self, round_index, opp_history):
        return COOPERATE if self.rng.random() < 0.5 else DEFECT
