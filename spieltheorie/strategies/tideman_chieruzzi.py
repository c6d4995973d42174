from ..engine import COOPERATE, DEFECT
from .base import BaseStrategy
class TidemanChieruzzi(BaseStrategy):
    """
    Tit-for-tat that forgives a defection when fewer than half of the
    opponent's last five moves were defections.
    """
    label = "Tideman & Chieruzzi"
    window = 5
    def next_move(self, round_index, opp_history):
        if round_index == 0 or not opp_history:
            return COOPERATE
        last = opp_history[-1]
        if last == DEFECT:
            recent = opp_history[max(0, len(opp_history) - self.window):]
            # len // 2 rounds down for odd windows
            if recent.count(DEFECT) < len(recent) // 2:
                return COOPERATE
        return last
