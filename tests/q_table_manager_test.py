"""Tests for the sparse Q-table."""

from __future__ import annotations

import pytest

from conftest import ADVANCE, ChainState, GridAction, GridState, TerminalState, TwoActionState
from qtrainer import QLearning, QTableManager


@pytest.fixture
def q_table() -> QTableManager:
    return QTableManager()


class TestLookups:
    def test_missing_entry_reads_as_none(self, q_table: QTableManager):
        assert q_table.get(GridState(0, 0), GridAction.UP) is None
        assert len(q_table) == 0

    def test_missing_entry_uses_caller_default(self, q_table: QTableManager):
        assert q_table.Q(GridState(0, 0), GridAction.UP, default=2.0) == 2.0

    def test_keys_use_logical_equality(self, q_table: QTableManager):
        q_table.set_value(GridState(3, 4), GridAction.LEFT, 1.5)

        assert q_table.get(GridState(3, 4), GridAction.LEFT) == 1.5
        assert (GridState(3, 4), GridAction.LEFT) in q_table

    def test_max_value_defaults_missing_actions(self, q_table: QTableManager):
        state = GridState(1, 1)
        q_table.set_value(state, GridAction.DOWN, -5.0)

        assert q_table.max_value(state, default=-1.0) == -1.0
        assert q_table.max_value(state, default=-10.0) == -5.0

    def test_max_value_of_terminal_state_is_none(self, q_table: QTableManager):
        assert q_table.max_value(TerminalState(), default=3.0) is None

    def test_get_action_values(self, q_table: QTableManager):
        state = GridState(2, 2)
        q_table.set_value(state, GridAction.UP, 1.0)
        q_table.set_value(state, GridAction.RIGHT, 2.0)
        q_table.set_value(GridState(5, 5), GridAction.UP, 9.0)

        assert q_table.get_action_values(state) == {GridAction.UP: 1.0, GridAction.RIGHT: 2.0}
        assert q_table.get_action_values(GridState(7, 7)) == {}

    def test_action_values_follow_updates(self, q_table: QTableManager):
        learning = QLearning(alpha=0.5, gamma=0.0)
        s, s_prime = ChainState(2, 4), ChainState(3, 4)

        q_table.update_policy(s, ADVANCE, 10.0, s_prime, learning)
        q_table.update_policy(s, ADVANCE, 10.0, s_prime, learning)

        assert q_table.get_action_values(s) == {ADVANCE: pytest.approx(7.5)}

    def test_action_values_are_a_copy(self, q_table: QTableManager):
        state = GridState(2, 2)
        q_table.set_value(state, GridAction.UP, 1.0)

        q_table.get_action_values(state)[GridAction.UP] = 50.0

        assert q_table.get(state, GridAction.UP) == 1.0

    def test_terminal_states_have_no_actions(self):
        assert TerminalState().is_terminal() is True
        assert ChainState(3, 4).is_terminal() is True
        assert ChainState(0, 4).is_terminal() is False


class TestBestAction:
    def test_picks_highest_value(self, q_table: QTableManager):
        state = GridState(0, 0)
        q_table.set_value(state, GridAction.UP, -3.0)
        q_table.set_value(state, GridAction.RIGHT, -1.0)
        q_table.set_value(state, GridAction.LEFT, -2.0)

        assert q_table.best_action(state) == GridAction.RIGHT

    def test_ties_go_to_first_declared_action(self, q_table: QTableManager):
        state = TwoActionState()
        q_table.set_value(state, "second", 1.0)
        q_table.set_value(state, "first", 1.0)

        assert q_table.best_action(state) == "first"

    def test_unvalued_actions_are_not_candidates(self, q_table: QTableManager):
        state = GridState(0, 0)
        q_table.set_value(state, GridAction.LEFT, -100.0)

        assert q_table.best_action(state) == GridAction.LEFT

    def test_none_without_values(self, q_table: QTableManager):
        assert q_table.best_action(GridState(0, 0)) is None

    def test_none_for_terminal_state(self, q_table: QTableManager):
        assert q_table.best_action(TerminalState()) is None


class TestGreedyAction:
    def test_unvalued_actions_read_as_default(self, q_table: QTableManager):
        state = GridState(0, 0)
        q_table.set_value(state, GridAction.LEFT, -5.0)

        assert q_table.greedy_action(state, default=2.0) == GridAction.UP
        assert q_table.greedy_action(state, default=-9.0) == GridAction.LEFT

    def test_ties_go_to_first_declared_action(self, q_table: QTableManager):
        state = TwoActionState()
        q_table.set_value(state, "second", 1.0)

        assert q_table.greedy_action(state, default=1.0) == "first"

    def test_empty_table_picks_first_action(self, q_table: QTableManager):
        assert q_table.greedy_action(GridState(4, 4)) == GridAction.UP

    def test_none_for_terminal_state(self, q_table: QTableManager):
        assert q_table.greedy_action(TerminalState(), default=5.0) is None


class TestUpdatePolicy:
    def test_update_uses_initial_value_for_missing_entries(self, q_table: QTableManager):
        learning = QLearning(alpha=0.5, gamma=0.5, initial_value=2.0)
        s, s_prime = ChainState(0, 4), ChainState(1, 4)

        value = q_table.update_policy(s, ADVANCE, 1.0, s_prime, learning)

        # 2.0 + 0.5 * (1.0 + 0.5 * 2.0 - 2.0)
        assert value == pytest.approx(2.0)
        assert q_table.get(s, ADVANCE) == pytest.approx(2.0)
        assert s in q_table.seen_states

    def test_update_uses_stored_next_values(self, q_table: QTableManager):
        learning = QLearning(alpha=1.0, gamma=0.5, initial_value=0.0)
        s, s_prime = ChainState(0, 4), ChainState(1, 4)
        q_table.set_value(s_prime, ADVANCE, 8.0)

        assert q_table.update_policy(s, ADVANCE, 1.0, s_prime, learning) == pytest.approx(5.0)

    def test_update_into_terminal_state_uses_terminal_value(self, q_table: QTableManager):
        learning = QLearning(alpha=1.0, gamma=0.5, initial_value=100.0, terminal_value=-2.0)
        s, s_prime = ChainState(2, 4), ChainState(3, 4)

        assert q_table.update_policy(s, ADVANCE, 10.0, s_prime, learning) == pytest.approx(9.0)

    def test_update_overwrites_existing_entry(self, q_table: QTableManager):
        learning = QLearning(alpha=0.5, gamma=0.0)
        s, s_prime = ChainState(2, 4), ChainState(3, 4)

        q_table.update_policy(s, ADVANCE, 10.0, s_prime, learning)
        q_table.update_policy(s, ADVANCE, 10.0, s_prime, learning)

        assert q_table.get(s, ADVANCE) == pytest.approx(7.5)
        assert len(q_table) == 1


class TestSnapshots:
    def test_export_nests_by_state(self, q_table: QTableManager):
        q_table.set_value(GridState(0, 0), GridAction.UP, 1.0)
        q_table.set_value(GridState(0, 0), GridAction.DOWN, 2.0)
        q_table.set_value(GridState(1, 0), GridAction.UP, 3.0)

        assert q_table.export_q_table() == {
            GridState(0, 0): {GridAction.UP: 1.0, GridAction.DOWN: 2.0},
            GridState(1, 0): {GridAction.UP: 3.0},
        }

    def test_import_replaces_everything(self, q_table: QTableManager):
        q_table.set_value(GridState(9, 9), GridAction.UP, 1.0)

        q_table.import_q_table({GridState(0, 0): {GridAction.LEFT: 4}})

        assert q_table.get(GridState(9, 9), GridAction.UP) is None
        assert q_table.get(GridState(0, 0), GridAction.LEFT) == 4.0
        assert q_table.seen_states == {GridState(0, 0)}
        assert q_table.get_action_values(GridState(9, 9)) == {}
        assert q_table.get_action_values(GridState(0, 0)) == {GridAction.LEFT: 4.0}

    def test_view_is_read_only(self, q_table: QTableManager):
        q_table.set_value(GridState(0, 0), GridAction.UP, 1.0)
        view = q_table.view_q_table()

        with pytest.raises(TypeError):
            view[(GridState(0, 0), GridAction.UP)] = 5.0
        assert view[(GridState(0, 0), GridAction.UP)] == 1.0

    def test_stats(self, q_table: QTableManager):
        empty = q_table.get_stats()
        assert empty.q_entries == 0
        assert empty.min_value is None
        assert empty.max_value is None

        q_table.set_value(GridState(0, 0), GridAction.UP, -1.0)
        q_table.set_value(GridState(0, 0), GridAction.DOWN, 4.0)
        stats = q_table.get_stats()

        assert stats.q_entries == 2
        assert stats.seen_states == 1
        assert stats.min_value == -1.0
        assert stats.max_value == 4.0

    def test_clear(self, q_table: QTableManager):
        q_table.set_value(GridState(0, 0), GridAction.UP, 1.0)
        q_table.clear()

        assert len(q_table) == 0
        assert not q_table.seen_states
        assert q_table.get_action_values(GridState(0, 0)) == {}
        assert q_table.export_q_table() == {}
