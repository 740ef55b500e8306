import logging
from typing import Optional, Tuple

from qtrainer.core.abstract.integrations.base_config import BaseConfig
from qtrainer.core.abstract.strategy.base_exploration_strategy import BaseExplorationStrategy
from qtrainer.core.abstract.strategy.base_learning_strategy import BaseLearningStrategy
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy
from qtrainer.core.entities.training import TrainingSettings
from qtrainer.strategy.explore import EpsilonGreedyExploration, RandomExploration
from qtrainer.strategy.learn import QLearning
from qtrainer.strategy.terminate import FixedIterations, SinkStates, TimeLimit

# Set up logger
logger = logging.getLogger(__name__)


class TrainingConfig(BaseConfig):
    """
    Configuration of a training run: learning rule parameters, exploration and
    termination strategy. Reads a YAML file with three sections::

        learning:
          alpha: 0.2
          gamma: 0.01
          initial_value: 2.0
        exploration:
          strategy: random
          seed: 42
        termination:
          strategy: fixed_iterations
          iterations: 100000

    and builds the matching strategy objects.
    """

    settings_model = TrainingSettings

    def __init__(self, config_path: Optional[str] = None, preload: bool = False):
        super().__init__(config_path=config_path, preload=preload)

    def get_settings(self) -> TrainingSettings:
        return super().get_settings()

    def build_learning_strategy(self) -> BaseLearningStrategy:
        learning = self.get_settings().learning
        return QLearning(
            alpha=learning.alpha,
            gamma=learning.gamma,
            initial_value=learning.initial_value,
            terminal_value=learning.terminal_value,
        )

    def build_exploration_strategy(self) -> BaseExplorationStrategy:
        settings = self.get_settings()
        exploration = settings.exploration
        if exploration.strategy == "epsilon_greedy":
            # Unvisited actions are worth what the learning rule assumes for them
            return EpsilonGreedyExploration(
                epsilon=exploration.epsilon,
                default_value=settings.learning.initial_value,
                seed=exploration.seed,
            )
        return RandomExploration(seed=exploration.seed)

    def build_termination_strategy(self) -> BaseTerminationStrategy:
        termination = self.get_settings().termination
        if termination.strategy == "sink_states":
            return SinkStates()
        if termination.strategy == "time_limit":
            return TimeLimit(seconds=termination.seconds)
        return FixedIterations(termination.iterations)

    def build_strategies(
        self,
    ) -> Tuple[BaseLearningStrategy, BaseTerminationStrategy, BaseExplorationStrategy]:
        """
        Build all three strategies, in the order AgentTrainer.train takes them.

        Returns:
            Tuple of (learning, termination, exploration) strategies
        """
        strategies = (
            self.build_learning_strategy(),
            self.build_termination_strategy(),
            self.build_exploration_strategy(),
        )
        logger.info("Built training strategies: %r, %r, %r", *strategies)
        return strategies
