"""
Learning (value updating) strategies.
"""

from .q_learning import QLearning

__all__ = ["QLearning"]
