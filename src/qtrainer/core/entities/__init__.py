from .q_table import QTableStats
from .training import (
    ExplorationSettings,
    LearningSettings,
    TerminationSettings,
    TrainingSettings,
    TrainingSummary,
)

__all__ = [
    "QTableStats",
    "LearningSettings",
    "ExplorationSettings",
    "TerminationSettings",
    "TrainingSettings",
    "TrainingSummary",
]
