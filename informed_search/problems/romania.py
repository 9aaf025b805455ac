# informed_search/problems/romania.py
from __future__ import annotations
from typing import Dict, Mapping

from ..core.problem import Heuristic, RouteProblem, zero_heuristic
from .graph import GraphState, WeightedGraph


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_ROADS = [
    ("Arad", "Zerind", 75), ("Arad", "Sibiu", 140), ("Arad", "Timisoara", 118),
    ("Zerind", "Oradea", 71), ("Oradea", "Sibiu", 151),
    ("Sibiu", "Fagaras", 99), ("Sibiu", "Rimnicu Vilcea", 80),
    ("Timisoara", "Lugoj", 111), ("Lugoj", "Mehadia", 70), ("Mehadia", "Drobeta", 75),
    ("Drobeta", "Craiova", 120), ("Craiova", "Rimnicu Vilcea", 146), ("Craiova", "Pitesti", 138),
    ("Rimnicu Vilcea", "Pitesti", 97), ("Fagaras", "Bucharest", 211), ("Pitesti", "Bucharest", 101),
    ("Bucharest", "Giurgiu", 90), ("Bucharest", "Urziceni", 85),
    ("Urziceni", "Vaslui", 142), ("Urziceni", "Hirsova", 98), ("Hirsova", "Eforie", 86),
    ("Vaslui", "Iasi", 92), ("Iasi", "Neamt", 87),
]

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}

ROMANIA = WeightedGraph.from_edges(_ROADS, undirected=True)


# --- Problem definition -------------------------------------------------------

class StraightLineDistance:
    """h(s) = straight-line distance to Bucharest. Zero for cities missing from the table."""
    def __init__(self, table: Mapping[str, int] = _SLD):
        self.table = table

    def __call__(self, state: GraphState) -> float:
        return float(self.table.get(state.name, 0))


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RouteProblem:
    """
    Factory for the standard AIMA Romania route-finding problem.
    States are city names; step cost is road distance.
    The straight-line heuristic is only meaningful for goal == "Bucharest";
    for any other goal the zero heuristic is used.
    """
    for city in (start, goal):
        if city not in ROMANIA:
            raise KeyError(f"unknown city: {city!r}")
    h: Heuristic = StraightLineDistance() if goal == "Bucharest" else zero_heuristic
    return RouteProblem(ROMANIA.state(start), ROMANIA.state(goal), h)
