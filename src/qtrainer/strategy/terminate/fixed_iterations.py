from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy


class FixedIterations(BaseTerminationStrategy):
    """
    Stops after a fixed number of value updates, regardless of the state.
    The first ``iterations - 1`` calls return False, the ``iterations``-th
    returns True.
    """

    def __init__(self, iterations: int):
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")
        self.iterations = iterations
        self.count = 0

    def should_stop(self, state: BaseState) -> bool:
        self.count += 1
        return self.count >= self.iterations

    def reset(self) -> None:
        self.count = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(iterations={self.iterations})"
