from __future__ import annotations
from typing import Optional
from ..core.engine import BestFirstSearch, ProgressObserver
from ..core.evaluation import Evaluation
from ..core.frontiers import FringeFactory, LinearFringe
from ..core.metrics import SearchResult, MeasuredRun
from ..core.problem import GoalTest, State

def best_first_search(
    start: State,
    evaluation: Evaluation,
    goal: Optional[State] = None,
    is_goal: Optional[GoalTest] = None,
    name: Optional[str] = None,
    observer: Optional[ProgressObserver] = None,
    fringe_factory: FringeFactory = LinearFringe,
) -> SearchResult:
    name = name or getattr(evaluation, "name", "BestFirst")
    engine = BestFirstSearch(
        start, goal,
        evaluation=evaluation,
        is_goal=is_goal,
        observer=observer,
        fringe_factory=fringe_factory,
    )

    with MeasuredRun() as meter:
        path = engine.search()

    return SearchResult.from_run(name, engine, path, meter)
