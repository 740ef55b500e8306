from .base_exploration_strategy import BaseExplorationStrategy
from .base_learning_strategy import BaseLearningStrategy
from .base_termination_strategy import BaseTerminationStrategy

__all__ = [
    "BaseExplorationStrategy",
    "BaseLearningStrategy",
    "BaseTerminationStrategy",
]
