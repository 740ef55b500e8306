from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from qtrainer.core.abstract.mdp.base_state import BaseState

if TYPE_CHECKING:
    from qtrainer.core.abstract.q_table.base_q_table_manager import BaseQTableManager


class BaseExplorationStrategy(ABC):
    """
    Abstract base class for exploration strategies, deciding which action the
    trainer tries next.
    """

    @abstractmethod
    def pick_action(self, state: BaseState, q_table: "BaseQTableManager") -> Optional[Any]:
        """
        Select the next action to take from a state.

        Args:
            state: The agent's current state
            q_table: Read access to the values learned so far

        Returns:
            An action legal from the state, or None if it has no legal actions
        """
        pass
