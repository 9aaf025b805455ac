# informed_search/algorithms/greedy.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.evaluation import GreedyBestFirst
from ..core.problem import Heuristic, zero_heuristic

def greedy_best_first_search(start, goal=None, h: Optional[Heuristic] = None, is_goal=None, **kwargs):
    # greedy: f = h, with h = 0 when none given
    return best_first_search(start, GreedyBestFirst(h or zero_heuristic), goal=goal,
                             is_goal=is_goal, name="Greedy", **kwargs)
