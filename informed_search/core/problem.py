# Defines the interface a problem domain hands to the search engine (states, actions, successor relation).
# informed_search/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, NamedTuple, Protocol


class Action(Protocol):
    """A labelled transition. Only `cost` (non-negative) is read by the engine."""
    cost: float


class State(Protocol):
    """
    A point in the search space.

    - must be hashable, with __eq__ consistent with __hash__
    - successor() returns every (action, next_state) pair leaving this state;
      it is called once per expansion and nothing is cached
    """
    def __hash__(self) -> int: ...
    def __eq__(self, other: Any) -> bool: ...
    def successor(self) -> Iterable[ActionStatePair]: ...


class ActionStatePair(NamedTuple):
    action: Action
    state: State


@dataclass(frozen=True)
class StepAction:
    """Ready-made action: a label plus a step cost."""
    label: Hashable
    cost: float = 1.0

    def __str__(self) -> str:
        return str(self.label)


Heuristic = Callable[[State], float]
GoalTest = Callable[[State], bool]


def zero_heuristic(state: State) -> float:
    return 0.0


@dataclass(frozen=True)
class RouteProblem:
    """A ready-to-search instance: start and goal states plus a heuristic for them."""
    start: State
    goal: State
    heuristic: Heuristic = zero_heuristic
