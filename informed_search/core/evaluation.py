# informed_search/core/evaluation.py
# Evaluation functions f(n) that decide fringe order. Lower is expanded first.
from __future__ import annotations
from typing import Callable, Protocol
from .node import Node
from .problem import Heuristic


class Evaluation(Protocol):
    def __call__(self, node: Node) -> float: ...


class UniformCost:
    """f = g (Dijkstra / uniform-cost search)."""
    name = "UCS"

    def __call__(self, node: Node) -> float:
        return node.cost


class GreedyBestFirst:
    """f = h"""
    name = "Greedy"

    def __init__(self, h: Heuristic):
        self.h = h

    def __call__(self, node: Node) -> float:
        return float(self.h(node.state))


class AStar:
    """f = g + h. Optimal when h is admissible and consistent."""
    name = "A*"

    def __init__(self, h: Heuristic):
        self.h = h

    def __call__(self, node: Node) -> float:
        return node.cost + float(self.h(node.state))


class WeightedAStar:
    """
    Weighted A*: f = g + w*h (w>1 focuses search; not optimal in general).
    """
    def __init__(self, h: Heuristic, weight: float = 1.5):
        self.h = h
        self.weight = float(weight)
        self.name = f"WeightedA*(w={self.weight})"

    def __call__(self, node: Node) -> float:
        return node.cost + self.weight * float(self.h(node.state))


class PureBestFirst:
    """Any domain scoring function over nodes."""
    name = "BestFirst"

    def __init__(self, score: Callable[[Node], float]):
        self.score = score

    def __call__(self, node: Node) -> float:
        return float(self.score(node))
