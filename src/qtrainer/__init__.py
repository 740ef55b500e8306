# src/qtrainer/__init__.py

# --- Version of the qtrainer package ---

__version__ = "0.6.0"


# --- MDP contracts ---
from .core.abstract.mdp import BaseAgent, BaseState

# --- Strategy contracts ---
from .core.abstract.strategy import (
    BaseExplorationStrategy,
    BaseLearningStrategy,
    BaseTerminationStrategy,
)

# --- Q-table ---
from .core.abstract.q_table import BaseQTableManager
from .core.q_table import QTableManager

# --- Strategies ---
from .strategy import (
    AnyOf,
    EpsilonGreedyExploration,
    FixedIterations,
    QLearning,
    RandomExploration,
    SinkStates,
    TimeLimit,
)

# --- Trainer ---
from .trainer import AgentTrainer

# --- Configuration ---
from .config import TrainingConfig

# --- Logging ---
from .logger import TrainingTraceLogger


# --- Convenience function to get the package version ---
def get_version():
    return __version__


import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
