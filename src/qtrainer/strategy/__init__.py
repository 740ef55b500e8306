from .explore import EpsilonGreedyExploration, RandomExploration
from .learn import QLearning
from .terminate import AnyOf, FixedIterations, SinkStates, TimeLimit

__all__ = [
    "EpsilonGreedyExploration",
    "RandomExploration",
    "QLearning",
    "AnyOf",
    "FixedIterations",
    "SinkStates",
    "TimeLimit",
]
