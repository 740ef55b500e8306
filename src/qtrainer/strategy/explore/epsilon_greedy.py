import random
from typing import Any, Optional

from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.q_table.base_q_table_manager import BaseQTableManager
from qtrainer.core.abstract.strategy.base_exploration_strategy import BaseExplorationStrategy


class EpsilonGreedyExploration(BaseExplorationStrategy):
    """
    Explores with probability epsilon, otherwise exploits the greedy action of
    the table. Unvisited actions count as ``default_value``, which should match
    the learning strategy's default so both agree on what an empty entry is
    worth.
    """

    def __init__(self, epsilon: float = 0.1, default_value: float = 0.0, seed: Optional[int] = None):
        """
        Args:
            epsilon: Probability of picking a random action, in [0, 1]
            default_value: Value assumed for actions without a stored entry
            seed: Seed of the internal random generator
        """
        if not 0.0 <= epsilon <= 1.0:
            raise ValueError(f"epsilon must be in [0, 1], got {epsilon}")
        self.epsilon = epsilon
        self.default_value = default_value
        self.rng = random.Random(seed)

    def pick_action(self, state: BaseState, q_table: BaseQTableManager) -> Optional[Any]:
        if self.rng.random() < self.epsilon:
            return state.random_action(self.rng)
        return q_table.greedy_action(state, self.default_value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(epsilon={self.epsilon}, default_value={self.default_value})"
