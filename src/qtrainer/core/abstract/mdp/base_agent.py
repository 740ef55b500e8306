import random
from abc import ABC, abstractmethod
from typing import Any, Optional

from qtrainer.core.abstract.mdp.base_state import BaseState


class BaseAgent(ABC):
    """
    Abstract base class for an agent acting inside a Markov decision process.

    The agent owns exactly one current state and may carry any private fields
    it needs. During training the trainer is the only caller.
    """

    @abstractmethod
    def current_state(self) -> BaseState:
        """
        Return the live current state.

        The returned reference stays valid until the next call to take_action.
        """
        pass

    @abstractmethod
    def take_action(self, action: Any) -> None:
        """
        Apply an action, mutating the agent's current state.

        Args:
            action: One of the actions returned by current_state().actions().
                Anything else is undefined behaviour left to the implementation.
        """
        pass

    @abstractmethod
    def reward(self) -> float:
        """
        Reward for the current state, i.e. the state produced by the most
        recent take_action call. Must be deterministic given that state.
        """
        pass

    def take_random_action(self, rng: Optional[random.Random] = None) -> Optional[Any]:
        """
        Take a uniformly random legal action.

        Args:
            rng: Random generator to draw from (module level generator if None)

        Returns:
            The action taken, or None if the current state is terminal
        """
        action = self.current_state().random_action(rng)
        if action is not None:
            self.take_action(action)
        return action
