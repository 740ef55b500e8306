import random
from typing import Any, Optional

from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.q_table.base_q_table_manager import BaseQTableManager
from qtrainer.core.abstract.strategy.base_exploration_strategy import BaseExplorationStrategy


class RandomExploration(BaseExplorationStrategy):
    """
    Always explores: picks uniformly among the legal actions, ignoring the table.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def pick_action(self, state: BaseState, q_table: BaseQTableManager) -> Optional[Any]:
        return state.random_action(self.rng)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
