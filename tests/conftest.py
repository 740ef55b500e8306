"""Shared MDP fixtures for the qtrainer tests.

- A 21x21 toroidal grid where the reward is the negative Euclidean distance to (10, 10).
- A deterministic chain ending in a single terminal state with a known reward.
- A counter whose state object the agent mutates in place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List

import pytest

from qtrainer import BaseAgent, BaseState

GRID_SIZE = 21
GRID_TARGET = (10, 10)


class GridAction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


@dataclass(frozen=True)
class GridState(BaseState):
    x: int
    y: int

    def actions(self) -> List[GridAction]:
        return [GridAction.UP, GridAction.DOWN, GridAction.LEFT, GridAction.RIGHT]

    def clone(self) -> "GridState":
        # Immutable, nothing to copy
        return self


class GridAgent(BaseAgent):
    def __init__(self, x: int = 0, y: int = 0):
        self.state = GridState(x, y)

    def current_state(self) -> GridState:
        return self.state

    def take_action(self, action: GridAction) -> None:
        dx, dy = action.value
        self.state = GridState((self.state.x + dx) % GRID_SIZE, (self.state.y + dy) % GRID_SIZE)

    def reward(self) -> float:
        tx, ty = GRID_TARGET
        return -math.sqrt((tx - self.state.x) ** 2 + (ty - self.state.y) ** 2)


ADVANCE = "advance"


@dataclass(frozen=True)
class ChainState(BaseState):
    position: int
    length: int

    def actions(self) -> List[str]:
        if self.position >= self.length - 1:
            return []
        return [ADVANCE]


class ChainAgent(BaseAgent):
    """Walks a chain 0 -> 1 -> ... -> length-1; only reaching the end pays."""

    def __init__(self, length: int = 4, final_reward: float = 10.0):
        self.length = length
        self.final_reward = final_reward
        self.state = ChainState(0, length)

    def reset(self) -> None:
        self.state = ChainState(0, self.length)

    def current_state(self) -> ChainState:
        return self.state

    def take_action(self, action: str) -> None:
        self.state = ChainState(self.state.position + 1, self.length)

    def reward(self) -> float:
        return self.final_reward if self.state.position == self.length - 1 else 0.0


class CounterState(BaseState):
    """Mutable state compared by value."""

    def __init__(self, value: int = 0):
        self.value = value

    def actions(self) -> List[str]:
        return ["increment"]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CounterState) and other.value == self.value

    def __hash__(self) -> int:
        return hash(("counter", self.value))

    def __repr__(self) -> str:
        return f"CounterState({self.value})"


class CounterAgent(BaseAgent):
    def __init__(self):
        self.state = CounterState(0)

    def current_state(self) -> CounterState:
        return self.state

    def take_action(self, action: str) -> None:
        self.state.value += 1

    def reward(self) -> float:
        return float(self.state.value)


@dataclass(frozen=True)
class TerminalState(BaseState):
    name: str = "sink"

    def actions(self) -> List[str]:
        return []


class TerminalAgent(BaseAgent):
    def __init__(self):
        self.state = TerminalState()
        self.actions_taken = 0

    def current_state(self) -> TerminalState:
        return self.state

    def take_action(self, action: str) -> None:
        self.actions_taken += 1

    def reward(self) -> float:
        return 0.0


@dataclass(frozen=True)
class TwoActionState(BaseState):
    """Single state with a declared action order, used for tie breaking."""

    def actions(self) -> List[str]:
        return ["first", "second"]


@pytest.fixture
def grid_agent() -> GridAgent:
    return GridAgent(0, 0)


@pytest.fixture
def chain_agent() -> ChainAgent:
    return ChainAgent(length=4, final_reward=10.0)


@pytest.fixture
def counter_agent() -> CounterAgent:
    return CounterAgent()


@pytest.fixture
def terminal_agent() -> TerminalAgent:
    return TerminalAgent()
