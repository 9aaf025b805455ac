# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# informed_search/algorithms/ucs.py
from __future__ import annotations
from .best_first import best_first_search
from ..core.evaluation import UniformCost

def uniform_cost_search(start, goal=None, is_goal=None, **kwargs):
    return best_first_search(start, UniformCost(), goal=goal, is_goal=is_goal, name="UCS", **kwargs)
