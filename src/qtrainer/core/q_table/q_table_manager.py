"""
Tabular Q-table used by the trainer.

The update formula itself is delegated to a learning strategy; the manager
resolves the lookups around it (old value, best next value) and stores the
result.
"""

import logging
from typing import Any

from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.q_table.base_q_table_manager import BaseQTableManager
from qtrainer.core.abstract.strategy.base_learning_strategy import BaseLearningStrategy

logger = logging.getLogger(__name__)


class QTableManager(BaseQTableManager):
    """
    In-memory Q-table updated one transition at a time.
    """

    def update_policy(
        self,
        s: BaseState,
        a: Any,
        R: float,
        s_prime: BaseState,
        learning_strategy: BaseLearningStrategy,
    ) -> float:
        """
        Apply one learning update for a transition.

        Args:
            s: State the action was taken from
            a: Action taken
            R: Reward received after the action
            s_prime: Next state
            learning_strategy: Rule computing the new value

        Returns:
            float: Updated value for (s, a)
        """
        # Get Q(s, a), None if never written
        Q_sa = self.Q_table.get((s, a))

        # Best value from the next state, None if s_prime is terminal
        max_Q_s_prime = self.max_value(s_prime, learning_strategy.default_value)

        new_Q_sa = learning_strategy.update(Q_sa, R, max_Q_s_prime)

        # Update the Q-table and mark the state as seen
        self._store(s, a, new_Q_sa)

        logger.debug("Q-update: %s -> %.4f", Q_sa, new_Q_sa)

        return new_Q_sa
