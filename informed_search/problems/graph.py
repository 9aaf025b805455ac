# informed_search/problems/graph.py
#This code defines an explicit directed weighted graph whose vertices can be searched as States.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Tuple
from ..core.problem import ActionStatePair, StepAction


class WeightedGraph:
    """Directed graph: {from: [(to, cost), ...]}, edges kept in insertion order."""
    def __init__(self):
        self.adjacency: Dict[Hashable, List[Tuple[Hashable, float]]] = {}

    def add_vertex(self, name: Hashable) -> None:
        self.adjacency.setdefault(name, [])

    def add_edge(self, u: Hashable, v: Hashable, cost: float = 1.0) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self.adjacency[u].append((v, float(cost)))

    def add_undirected_edge(self, u: Hashable, v: Hashable, cost: float = 1.0) -> None:
        self.add_edge(u, v, cost)
        self.add_edge(v, u, cost)

    def neighbors(self, name: Hashable) -> List[Tuple[Hashable, float]]:
        return self.adjacency.get(name, [])

    def state(self, name: Hashable) -> GraphState:
        return GraphState(self, name)

    @classmethod
    def from_edges(cls, edges, undirected: bool = False) -> "WeightedGraph":
        """Build from (u, v, cost) triples."""
        g = cls()
        for u, v, cost in edges:
            if undirected:
                g.add_undirected_edge(u, v, cost)
            else:
                g.add_edge(u, v, cost)
        return g

    def __contains__(self, name: object) -> bool:
        return name in self.adjacency

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.adjacency)


@dataclass(frozen=True, eq=False)
class GraphState:
    graph: WeightedGraph = field(repr=False)
    name: Hashable

    def successor(self) -> List[ActionStatePair]:
        return [
            ActionStatePair(StepAction(f"{self.name}->{v}", cost), GraphState(self.graph, v))
            for v, cost in self.graph.neighbors(self.name)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphState):
            return NotImplemented
        return self.graph is other.graph and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.graph), self.name))

    def __str__(self) -> str:
        return str(self.name)
