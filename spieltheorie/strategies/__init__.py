from .base import BaseStrategy
from .tit_for_tat import TitForTat
from .random_strategy import RandomStrategy
from .tideman_chieruzzi import TidemanChieruzzi
from .nydegger import Nydegger
from .grofman import Grofman
from .shubik import Shubik
from .stein_rapoport import SteinRapoport
from .friedman import Friedman
from .davis import Davis
from .graaskamp import Graaskamp
from .downing import Downing
from .feld import Feld
from .joss import Joss
from .tullock import Tullock
from .name_withheld import NameWithheld
from .catalogue import StrategyCatalogue, StrategyFactory, canon

ALL_STRATEGIES = [
    TitForTat,
    RandomStrategy,
    TidemanChieruzzi,
    Nydegger,
    Grofman,
    Shubik,
    SteinRapoport,
    Friedman,
    Davis,
    Graaskamp,
    Downing,
    Feld,
    Joss,
    Tullock,
    NameWithheld,
]


def default_catalogue(rng=None) -> StrategyCatalogue:
    """The full fifteen-strategy catalogue, optionally bound to ``rng``."""
    return StrategyCatalogue(ALL_STRATEGIES, rng=rng)
