from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy


class SinkStates(BaseTerminationStrategy):
    """Stops as soon as the agent reaches a terminal state (no legal actions)."""

    def should_stop(self, state: BaseState) -> bool:
        return state.is_terminal()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
