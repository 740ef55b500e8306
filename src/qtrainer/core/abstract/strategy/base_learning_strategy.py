from abc import ABC, abstractmethod
from typing import Optional


class BaseLearningStrategy(ABC):
    """
    Abstract base class for value update rules.

    A learning strategy computes the new value of the (state, action) pair that
    was just taken from its old value, the reward received and the best value
    reachable from the next state.
    """

    @property
    def default_value(self) -> float:
        """Value assumed for table entries that were never written."""
        return 0.0

    @abstractmethod
    def update(
        self,
        old_value: Optional[float],
        reward: float,
        best_next_value: Optional[float],
    ) -> float:
        """
        Compute the updated value.

        Args:
            old_value: Stored value of the pair, None if never written
            reward: Reward observed after taking the action
            best_next_value: Best value over the actions legal from the next
                state, None if the next state is terminal

        Returns:
            float: The new value to store
        """
        pass
