# informed_search/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.evaluation import AStar
from ..core.problem import Heuristic, zero_heuristic

def a_star_search(start, goal=None, h: Optional[Heuristic] = None, is_goal=None, **kwargs):
    return best_first_search(start, AStar(h or zero_heuristic), goal=goal,
                             is_goal=is_goal, name="A*", **kwargs)
