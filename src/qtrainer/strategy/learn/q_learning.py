"""
Standard tabular Q-learning update rule.
"""

import logging
from typing import Optional

from qtrainer.core.abstract.strategy.base_learning_strategy import BaseLearningStrategy

logger = logging.getLogger(__name__)


class QLearning(BaseLearningStrategy):
    """
    Q-learning value update:

        Q(s, a) <- Q(s, a) + alpha * (R + gamma * max_a' Q(s', a') - Q(s, a))

    Missing Q(s, a) entries start from ``initial_value``. When the next state
    is terminal, ``terminal_value`` stands in for the max over its actions.
    """

    def __init__(
        self,
        alpha: float,
        gamma: float,
        initial_value: float = 0.0,
        terminal_value: float = 0.0,
    ):
        """
        Args:
            alpha: Learning rate, in [0, 1]
            gamma: Discount factor, in [0, 1]
            initial_value: Value of table entries that were never written
            terminal_value: Best next value assumed when the next state has no actions
        """
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {alpha}")
        if not 0.0 <= gamma <= 1.0:
            raise ValueError(f"gamma must be in [0, 1], got {gamma}")

        self.alpha = alpha
        self.gamma = gamma
        self.initial_value = initial_value
        self.terminal_value = terminal_value

    @property
    def default_value(self) -> float:
        return self.initial_value

    def update(
        self,
        old_value: Optional[float],
        reward: float,
        best_next_value: Optional[float],
    ) -> float:
        Q_sa = self.initial_value if old_value is None else old_value
        max_next = self.terminal_value if best_next_value is None else best_next_value

        new_Q_sa = Q_sa + self.alpha * (reward + self.gamma * max_next - Q_sa)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Formula: {Q_sa:.4f} + {self.alpha:.2f} * ({reward:.2f} + {self.gamma:.2f} * {max_next:.4f} - {Q_sa:.4f})"
            )

        return new_Q_sa

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(alpha={self.alpha}, gamma={self.gamma}, "
            f"initial_value={self.initial_value}, terminal_value={self.terminal_value})"
        )
