# informed_search/core/node.py
# A Node wraps a State with a back-pointer to the best-known parent and the action taken from it.
from __future__ import annotations
from typing import Iterator, Optional
from .problem import Action, State


class Node:
    """
    Search-tree record. `parent` and `action` are rewired in place when a
    cheaper way to `state` turns up, so cost and depth are always read off
    the current parent chain rather than stored.
    """
    __slots__ = ("state", "parent", "action")

    def __init__(self, state: State, parent: Optional[Node] = None, action: Optional[Action] = None):
        self.state = state
        self.parent = parent
        self.action = action

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def lineage(self) -> Iterator[Node]:
        """Yield this node, then its parent, and so on up to the root."""
        cur: Optional[Node] = self
        while cur is not None:
            yield cur
            cur = cur.parent

    @property
    def cost(self) -> float:
        """g(n): 0 for the root, else parent.cost + action.cost."""
        total = 0
        for n in self.lineage():
            if n.parent is not None:
                total += n.action.cost
        return total

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.lineage()) - 1

    def __repr__(self) -> str:
        return f"Node({self.state!r}, action={self.action!r}, cost={self.cost})"
