import copy
import random
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class BaseState(ABC):
    """
    Abstract base class for a state of a Markov decision process.

    A state is used as a value-table key, so subclasses must implement
    ``__eq__`` and ``__hash__`` consistently: two states considered equal must
    hash identically. Frozen dataclasses satisfy this out of the box.
    """

    @abstractmethod
    def actions(self) -> Sequence[Any]:
        """
        Enumerate the actions that are legal from this state.

        The order must be stable, it is used to break ties between equally
        valued actions. An empty sequence marks a terminal state.

        Returns:
            Sequence of hashable actions
        """
        pass

    def clone(self) -> "BaseState":
        """
        Return a logical copy of this state that shares nothing mutable with it.

        Returns:
            BaseState copy
        """
        return copy.deepcopy(self)

    def is_terminal(self) -> bool:
        return len(self.actions()) == 0

    def random_action(self, rng: Optional[random.Random] = None) -> Optional[Any]:
        """
        Pick a uniformly random legal action.

        Args:
            rng: Random generator to draw from (module level generator if None)

        Returns:
            The chosen action, or None if this state is terminal
        """
        actions = self.actions()
        if not actions:
            return None
        return (rng or random).choice(list(actions))
