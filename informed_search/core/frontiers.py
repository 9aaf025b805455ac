# informed_search/core/frontiers.py
# Fringes: the ordered worklist of generated-but-not-expanded nodes, lowest evaluation first.
from __future__ import annotations
import heapq
from typing import Callable, Iterator, List, Protocol, Tuple
from .node import Node

Evaluation = Callable[[Node], float]


class Fringe(Protocol):
    def push(self, node: Node) -> None: ...
    def pop(self) -> Node: ...
    def peek(self) -> Node: ...
    def __len__(self) -> int: ...


class LinearFringe:
    """
    Sorted list with scan-and-insert.

    push() walks front to back and puts the node just before the first
    incumbent whose evaluation is strictly greater, or at the end. Equal
    scores therefore stay in insertion order (first found is popped first).
    Incumbent scores are re-read on every scan; nodes already queued are
    never moved, even if relaxation has lowered their score.
    O(n) per push.
    """
    def __init__(self, evaluation: Evaluation):
        self.evaluation = evaluation
        self.q: List[Node] = []

    def push(self, node: Node) -> None:
        score = self.evaluation(node)
        for i, other in enumerate(self.q):
            if score < self.evaluation(other):
                self.q.insert(i, node)
                return
        self.q.append(node)

    def pop(self) -> Node:
        return self.q.pop(0)

    def peek(self) -> Node:
        return self.q[0]

    def __len__(self) -> int: return len(self.q)
    def __bool__(self) -> bool: return bool(self.q)
    def __iter__(self) -> Iterator[Node]: return iter(self.q)
    def __contains__(self, node: object) -> bool:
        return any(n is node for n in self.q)


class HeapFringe:
    """Min-heap by evaluation(x) taken at push time; counter keeps equal scores FIFO."""
    def __init__(self, evaluation: Evaluation):
        self.evaluation = evaluation
        self.h: List[Tuple[float, int, Node]] = []
        self.counter = 0  # tie-breaker for stability

    def push(self, node: Node) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.evaluation(node), self.counter, node))

    def pop(self) -> Node:
        return heapq.heappop(self.h)[2]

    def peek(self) -> Node:
        return self.h[0][2]

    def __len__(self) -> int: return len(self.h)
    def __bool__(self) -> bool: return bool(self.h)
    def __iter__(self) -> Iterator[Node]:
        return (entry[2] for entry in sorted(self.h, key=lambda e: (e[0], e[1])))
    def __contains__(self, node: object) -> bool:
        return any(entry[2] is node for entry in self.h)


FringeFactory = Callable[[Evaluation], Fringe]
