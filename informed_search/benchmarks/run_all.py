# informed_search/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.greedy import greedy_best_first_search
from ..algorithms.ucs import uniform_cost_search
from ..algorithms.weighted_astar import weighted_a_star_search
from ..core.config import get_settings
from ..core.engine import print_progress
from ..core.metrics import SearchResult
from ..core.problem import RouteProblem
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_problem

PROBLEMS: Dict[str, Callable[[], RouteProblem]] = {
    "romania": romania_problem,
    "grid": make_grid_problem,
}

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_algos() -> List[Tuple[str, Callable[..., SearchResult]]]:
    """
    Each algorithm is a callable taking (start, goal, h=..., observer=...) and
    returning a SearchResult.
    """
    w = get_settings().wastar_weight
    return [
        ("UCS", lambda start, goal, h, **kw: uniform_cost_search(start, goal, **kw)),
        ("Greedy", greedy_best_first_search),
        ("A*", a_star_search),
        (f"WeightedA*(w={w})", lambda start, goal, h, **kw: weighted_a_star_search(start, goal, h=h, w=w, **kw)),
    ]

def run(problem: RouteProblem, verbose: bool = False) -> List[SearchResult]:
    observer = print_progress if verbose else None
    results = []
    for name, fn in _load_algos():
        print(f"→ Running {name} ...")
        r = fn(problem.start, problem.goal, h=problem.heuristic, observer=observer)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"visited={r.nodes_visited} expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        results.append(r)
    return results

def main(argv=None):
    parser = argparse.ArgumentParser(description="Run every best-first variant on an example problem.")
    parser.add_argument("--problem", choices=sorted(PROBLEMS), default="romania")
    parser.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"),
                        help="where to write the JSON results")
    parser.add_argument("--verbose", action="store_true", help="print search progress lines")
    args = parser.parse_args(argv)

    problem = PROBLEMS[args.problem]()
    results = run(problem, verbose=args.verbose)

    out = {"problem": args.problem, "results": [r.as_row() for r in results], "ts": time.time()}
    print(json.dumps(out, indent=2))
    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return out

if __name__ == "__main__":
    main()
