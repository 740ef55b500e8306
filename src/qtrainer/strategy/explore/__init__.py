"""
Exploration strategies.
"""

from .epsilon_greedy import EpsilonGreedyExploration
from .random_exploration import RandomExploration

__all__ = ["EpsilonGreedyExploration", "RandomExploration"]
