from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from qtrainer.core.abstract.mdp.base_state import BaseState
from qtrainer.core.abstract.strategy.base_learning_strategy import BaseLearningStrategy
from qtrainer.core.entities.q_table import QTableStats


class BaseQTableManager(ABC):
    """
    Sparse action-value table keyed by (state, action) pairs.

    Entries are created lazily by update_policy and never evicted. Reads of
    missing entries return None (or the caller's default), never raise.
    """

    def __init__(self):
        # Internal structure: (state, action) -> value
        self.Q_table: Dict[Tuple[Any, Any], float] = {}
        self.seen_states: set = set()
        # Per-state view of the same values: state -> { action: value }
        self._state_index: Dict[Any, Dict[Any, float]] = {}

    @abstractmethod
    def update_policy(
        self,
        s: BaseState,
        a: Any,
        R: float,
        s_prime: BaseState,
        learning_strategy: BaseLearningStrategy,
    ) -> float:
        pass

    def get(self, s: Any, a: Any) -> Optional[float]:
        return self.Q_table.get((s, a))

    def Q(self, s: Any, a: Any, default: float = 0.0) -> float:
        return self.Q_table.get((s, a), default)

    def set_value(self, s: Any, a: Any, value: float) -> None:
        self._store(s, a, float(value))

    def _store(self, s: Any, a: Any, value: float) -> None:
        self.Q_table[(s, a)] = value
        self._state_index.setdefault(s, {})[a] = value
        self.seen_states.add(s)

    def max_value(self, state: BaseState, default: float = 0.0) -> Optional[float]:
        """
        Best value over the actions legal from a state.

        Args:
            state: State whose actions are considered
            default: Value used for actions without a stored entry

        Returns:
            The maximum value, or None if the state has no legal actions
        """
        if state.is_terminal():
            return None
        actions = state.actions()
        return max(self.Q_table.get((state, action), default) for action in actions)

    def best_action(self, state: BaseState) -> Optional[Any]:
        """
        Greedy action for a state.

        Only legal actions with a stored value are candidates. Ties go to the
        action declared first by state.actions().

        Returns:
            The best action, or None if no legal action has a stored value
        """
        best, best_value = None, None
        for action in state.actions():
            value = self.Q_table.get((state, action))
            if value is None:
                continue
            if best_value is None or value > best_value:
                best, best_value = action, value
        return best

    def greedy_action(self, state: BaseState, default: float = 0.0) -> Optional[Any]:
        """
        Argmax over every legal action, reading missing entries as ``default``
        the same way max_value does. Ties go to the first declared action.

        Returns:
            The greedy action, or None if the state has no legal actions
        """
        best, best_value = None, None
        for action in state.actions():
            value = self.Q_table.get((state, action), default)
            if best_value is None or value > best_value:
                best, best_value = action, value
        return best

    def get_action_values(self, state: Any) -> Dict[Any, float]:
        """Stored values of one state by action, read from the per-state index."""
        return dict(self._state_index.get(state, {}))

    def get_q_table(self) -> Dict:
        return dict(self.Q_table)

    def view_q_table(self) -> Mapping[Tuple[Any, Any], float]:
        return MappingProxyType(self.Q_table)

    def export_q_table(self) -> Dict[Any, Dict[Any, float]]:
        """
        Copy the table into a nested { state: { action: value } } mapping.
        """
        return {state: dict(actions) for state, actions in self._state_index.items()}

    def import_q_table(self, nested_q: Mapping[Any, Mapping[Any, float]]) -> None:
        """
        Replace the whole table with a nested { state: { action: value } } mapping.
        """
        self.clear()

        for state, actions in nested_q.items():
            self.seen_states.add(state)
            for action, value in actions.items():
                self._store(state, action, float(value))

    def get_stats(self) -> QTableStats:
        values = self.Q_table.values()
        return QTableStats(
            q_entries=len(self.Q_table),
            seen_states=len(self.seen_states),
            min_value=min(values) if values else None,
            max_value=max(values) if values else None,
        )

    def clear(self) -> None:
        self.Q_table.clear()
        self._state_index.clear()
        self.seen_states.clear()

    def __len__(self) -> int:
        return len(self.Q_table)

    def __contains__(self, key: Tuple[Any, Any]) -> bool:
        return key in self.Q_table
