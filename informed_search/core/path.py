# informed_search/core/path.py
#This code provides the solution Path and the function that rebuilds it from a goal node in the search tree.
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
from .node import Node
from .problem import Action, ActionStatePair, State


@dataclass(frozen=True)
class Path:
    start: State
    steps: Tuple[ActionStatePair, ...] = ()

    @property
    def actions(self) -> List[Action]:
        return [step.action for step in self.steps]

    @property
    def states(self) -> List[State]:
        return [self.start] + [step.state for step in self.steps]

    @property
    def goal(self) -> State:
        return self.steps[-1].state if self.steps else self.start

    @property
    def cost(self) -> float:
        return float(sum(step.action.cost for step in self.steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ActionStatePair]:
        return iter(self.steps)

    def __str__(self) -> str:
        return " -> ".join(str(s) for s in self.states)


def reconstruct_path(node: Node) -> Path:
    steps = []
    cur = node
    while cur.parent is not None:
        steps.append(ActionStatePair(cur.action, cur.state))
        cur = cur.parent
    steps.reverse()
    return Path(start=cur.state, steps=tuple(steps))
