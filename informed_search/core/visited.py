# informed_search/core/visited.py
from __future__ import annotations
from typing import Dict, Iterator, Optional
from .node import Node
from .problem import Action, State


class VisitedTable:
    """
    State -> Node, one entry per distinct state ever generated.

    This table owns every node of a run; fringes only hold references into it.
    Entries are never dropped. The only mutation after add() is relax().
    """
    def __init__(self) -> None:
        self._nodes: Dict[State, Node] = {}

    def add(self, node: Node) -> None:
        if node.state in self._nodes:
            raise ValueError(f"state already has a node: {node.state!r}")
        self._nodes[node.state] = node

    def get(self, state: State) -> Optional[Node]:
        return self._nodes.get(state)

    def relax(self, node: Node, parent: Node, action: Action) -> bool:
        """Point `node` at `parent` via `action` if that is strictly cheaper. Returns True on update."""
        if node.cost > action.cost + parent.cost:
            node.parent = parent
            node.action = action
            return True
        return False

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __contains__(self, state: object) -> bool:
        return state in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[State]:
        return iter(self._nodes)
