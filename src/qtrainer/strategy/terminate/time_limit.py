import time
from typing import Callable

from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy


class TimeLimit(BaseTerminationStrategy):
    """
    Stops once a wall-clock budget is spent. The timer starts when the
    strategy is created (or reset) and the clock is polled on every call.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        if seconds <= 0:
            raise ValueError(f"seconds must be positive, got {seconds}")
        self.seconds = seconds
        self.clock = clock
        self.started_at = self.clock()

    def should_stop(self, state: BaseState) -> bool:
        return self.clock() - self.started_at >= self.seconds

    def reset(self) -> None:
        self.started_at = self.clock()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seconds={self.seconds})"
