from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy


class AnyOf(BaseTerminationStrategy):
    """
    Combines termination strategies: stops as soon as one of them says so.
    Every member is polled on each call so stateful members keep counting.
    """

    def __init__(self, *strategies: BaseTerminationStrategy):
        if not strategies:
            raise ValueError("AnyOf needs at least one termination strategy")
        self.strategies = list(strategies)

    def should_stop(self, state: BaseState) -> bool:
        decisions = [strategy.should_stop(state) for strategy in self.strategies]
        return any(decisions)

    def reset(self) -> None:
        for strategy in self.strategies:
            strategy.reset()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(s) for s in self.strategies)})"
