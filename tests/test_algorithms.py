from collections import deque

import pytest

from informed_search.algorithms.astar import a_star_search
from informed_search.algorithms.best_first import best_first_search
from informed_search.algorithms.greedy import greedy_best_first_search
from informed_search.algorithms.ucs import uniform_cost_search
from informed_search.algorithms.weighted_astar import weighted_a_star_search
from informed_search.core.evaluation import PureBestFirst
from informed_search.core.frontiers import HeapFringe
from informed_search.problems.grid import grid_problem, make_grid_problem
from informed_search.problems.romania import romania_problem

OPTIMAL_ARAD_BUCHAREST = ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]


def city_names(result):
    return [s.name for s in result.path.states]


def test_ucs_romania():
    p = romania_problem()
    r = uniform_cost_search(p.start, p.goal)
    assert r.success
    assert r.algo == "UCS"
    assert r.cost == 418
    assert city_names(r) == OPTIMAL_ARAD_BUCHAREST


def test_astar_romania():
    p = romania_problem()
    r = a_star_search(p.start, p.goal, h=p.heuristic)
    assert r.success
    assert r.algo == "A*"
    assert r.cost == 418
    assert city_names(r) == OPTIMAL_ARAD_BUCHAREST


def test_astar_expands_fewer_nodes_than_ucs():
    p = romania_problem()
    assert (a_star_search(p.start, p.goal, h=p.heuristic).nodes_expanded
            < uniform_cost_search(p.start, p.goal).nodes_expanded)


def test_greedy_romania_takes_fagaras():
    p = romania_problem()
    r = greedy_best_first_search(p.start, p.goal, h=p.heuristic)
    assert r.success
    assert city_names(r) == ["Arad", "Sibiu", "Fagaras", "Bucharest"]
    assert r.cost == 450


def test_weighted_astar_romania():
    p = romania_problem()
    r = weighted_a_star_search(p.start, p.goal, h=p.heuristic, w=2.0)
    assert r.success
    assert r.algo == "WeightedA*(w=2.0)"
    assert r.cost >= 418


def test_weighted_astar_weight_from_environment(monkeypatch):
    monkeypatch.setenv("WASTAR_W", "1.0")
    p = romania_problem()
    r = weighted_a_star_search(p.start, p.goal, h=p.heuristic)
    assert r.algo == "WeightedA*(w=1.0)"
    assert r.cost == 418


def test_without_heuristic_greedy_and_astar_still_succeed():
    p = romania_problem("Arad", "Neamt")
    assert a_star_search(p.start, p.goal).cost == uniform_cost_search(p.start, p.goal).cost
    assert greedy_best_first_search(p.start, p.goal).success


def test_romania_rejects_unknown_city():
    with pytest.raises(KeyError):
        romania_problem("Atlantis")


def _bfs_distance(problem):
    seen = {problem.start}
    q = deque([(problem.start, 0)])
    while q:
        s, d = q.popleft()
        if s == problem.goal:
            return d
        for _, nxt in s.successor():
            if nxt not in seen:
                seen.add(nxt)
                q.append((nxt, d + 1))
    return None


@pytest.mark.parametrize("search", [uniform_cost_search, a_star_search])
def test_grid_optimal(search):
    p = make_grid_problem()
    kwargs = {"h": p.heuristic} if search is a_star_search else {}
    r = search(p.start, p.goal, **kwargs)
    assert r.success
    assert r.cost == _bfs_distance(p) == 10
    for prev, step in zip(r.path.states, r.path.steps):
        assert step in prev.successor()


def test_grid_walled_off_goal():
    p = grid_problem(3, 3, start=(0, 0), goal=(2, 2), walls={(1, 2), (2, 1)})
    r = a_star_search(p.start, p.goal, h=p.heuristic)
    assert not r.success
    assert r.path is None
    assert r.cost == float("inf")
    assert r.actions == []
    assert r.states_generated == 6
    assert r.as_row()["states_generated"] == 6


def test_grid_rejects_start_on_wall():
    with pytest.raises(ValueError):
        grid_problem(2, 2, start=(0, 0), goal=(1, 1), walls={(0, 0)})


def test_best_first_with_heap_fringe():
    p = romania_problem()
    r = best_first_search(p.start, PureBestFirst(lambda n: n.cost), goal=p.goal, fringe_factory=HeapFringe)
    assert r.algo == "BestFirst"
    assert r.cost == 418


def test_result_row_is_json_friendly():
    p = make_grid_problem()
    row = a_star_search(p.start, p.goal, h=p.heuristic).as_row()
    assert row["algo"] == "A*"
    assert row["success"] is True
    assert row["path"].startswith("(0, 0) -> ")
    assert row["path"].endswith("(4, 6)")
    assert set(row) == {"algo", "success", "path", "cost", "nodes_visited",
                        "nodes_expanded", "time_s", "peak_kb", "error"}
