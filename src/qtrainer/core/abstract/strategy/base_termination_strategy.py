from abc import ABC, abstractmethod

from qtrainer.core.abstract.mdp.base_state import BaseState


class BaseTerminationStrategy(ABC):
    """
    Abstract base class for termination strategies. A termination strategy is
    polled once after every value update and may keep state between calls.
    """

    @abstractmethod
    def should_stop(self, state: BaseState) -> bool:
        """
        Decide whether training ends now.

        Args:
            state: The agent's state after the step that just completed

        Returns:
            bool: True to stop training
        """
        pass

    def reset(self) -> None:
        """Forget anything accumulated by previous calls."""
        pass
