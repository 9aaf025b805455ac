# informed_search/algorithms/weighted_astar.py
# This code implements the Weighted A* search algorithm, which is a variant of A* that uses a weight factor to balance between path cost and heuristic.
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.config import get_settings
from ..core.evaluation import WeightedAStar
from ..core.metrics import SearchResult
from ..core.problem import Heuristic, zero_heuristic

def weighted_a_star_search(start, goal=None, h: Optional[Heuristic] = None,
                           w: Optional[float] = None, is_goal=None, **kwargs) -> SearchResult:
    """
    Weighted A*: f = g + w*h. w defaults to the WASTAR_W setting.
    """
    if w is None:
        w = get_settings().wastar_weight
    evaluation = WeightedAStar(h or zero_heuristic, w)
    return best_first_search(start, evaluation, goal=goal, is_goal=is_goal,
                             name=evaluation.name, **kwargs)
