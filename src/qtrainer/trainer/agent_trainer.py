"""
Agent trainer: owns the learned Q-table and runs the training loop

    explore -> act -> observe reward -> update -> check termination

until the termination strategy decides to stop.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple

from qtrainer.core.abstract.mdp.base_agent import BaseAgent
from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_exploration_strategy import BaseExplorationStrategy
from qtrainer.core.abstract.strategy.base_learning_strategy import BaseLearningStrategy
from qtrainer.core.abstract.strategy.base_termination_strategy import BaseTerminationStrategy
from qtrainer.core.entities.training import TrainingSummary
from qtrainer.core.q_table.q_table_manager import QTableManager

logger = logging.getLogger(__name__)


class AgentTrainer:
    """
    Learns action values for an agent. After training, the trainer can be
    queried for the expected value of an action in a state, or for the best
    known action of a state.
    """

    def __init__(self):
        self.q_table = QTableManager()
        self.last_summary: Optional[TrainingSummary] = None

    def train(
        self,
        agent: BaseAgent,
        learning_strategy: BaseLearningStrategy,
        termination_strategy: BaseTerminationStrategy,
        exploration_strategy: BaseExplorationStrategy,
    ) -> None:
        """
        Train on the given agent until the termination strategy decides to stop.

        The agent is mutated in place and the learned values accumulate into
        this trainer's table across calls. Training also ends, without an
        update, when the exploration strategy finds no action to take.

        Args:
            agent: Agent to act with, used exclusively by this call
            learning_strategy: Value update rule
            termination_strategy: Polled after every update
            exploration_strategy: Picks the action of each step
        """
        summary = TrainingSummary()
        steps = 0

        logger.info(
            "Training started with %r, %r, %r",
            learning_strategy,
            exploration_strategy,
            termination_strategy,
        )

        while True:
            s_t = agent.current_state()
            action = exploration_strategy.pick_action(s_t, self.q_table)
            if action is None:
                logger.info("No legal action from the current state, stopping after %d steps", steps)
                summary.stopped_early = True
                break

            # The agent may mutate its state object in place
            s_t = s_t.clone()

            agent.take_action(action)
            s_t_next = agent.current_state()
            r_t_next = agent.reward()

            self.q_table.update_policy(s_t, action, r_t_next, s_t_next, learning_strategy)
            steps += 1

            if termination_strategy.should_stop(s_t_next):
                break

        stats = self.q_table.get_stats()
        summary.steps = steps
        summary.q_entries = stats.q_entries
        summary.seen_states = stats.seen_states
        summary.finished_at = datetime.now(timezone.utc)
        self.last_summary = summary

        logger.info(
            "Training finished after %d steps: %d state-action pairs, %d states",
            steps,
            stats.q_entries,
            stats.seen_states,
        )

    def expected_value(self, state: BaseState, action: Any) -> Optional[float]:
        """
        Learned value of an action in a state, or None if nothing was learned for it.
        """
        return self.q_table.get(state, action)

    def expected_values(self, state: BaseState) -> Dict[Any, float]:
        """
        All learned values of a state, by action. Empty if nothing was learned.
        """
        return self.q_table.get_action_values(state)

    def best_action(self, state: BaseState) -> Optional[Any]:
        """
        Best known action for a state.

        Among the state's legal actions that have a learned value, returns the
        highest valued one; ties go to the action listed first by
        state.actions(). Returns None if the state has no legal actions or
        none of them has a learned value.
        """
        return self.q_table.best_action(state)

    def learned_values(self) -> Mapping[Tuple[Any, Any], float]:
        """Read-only view of the learned (state, action) -> value table."""
        return self.q_table.view_q_table()

    def export_learned_values(self) -> Dict[Any, Dict[Any, float]]:
        """Copy of the learned values as { state: { action: value } }."""
        return self.q_table.export_q_table()

    def import_learned_values(self, values: Mapping[Any, Mapping[Any, float]]) -> None:
        """Replace all learned values with { state: { action: value } }."""
        self.q_table.import_q_table(values)
        logger.info("Imported %d state-action pairs", len(self.q_table))
