import pytest

from informed_search.core.frontiers import HeapFringe, LinearFringe
from informed_search.core.node import Node


@pytest.fixture
def scores():
    return {}


def _score_of(scores):
    return lambda n: scores[n.state]


def _push(fringe, scores, state, score):
    scores[state] = score
    node = Node(state)
    fringe.push(node)
    return node


@pytest.mark.parametrize("fringe_cls", [LinearFringe, HeapFringe])
def test_pops_in_ascending_evaluation(fringe_cls, scores):
    fringe = fringe_cls(_score_of(scores))
    for state, score in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
        _push(fringe, scores, state, score)
    assert len(fringe) == 4
    assert fringe.peek().state == "a"
    assert [fringe.pop().state for _ in range(4)] == ["a", "b", "c", "d"]
    assert not fringe


@pytest.mark.parametrize("fringe_cls", [LinearFringe, HeapFringe])
def test_equal_scores_keep_insertion_order(fringe_cls, scores):
    fringe = fringe_cls(_score_of(scores))
    _push(fringe, scores, "first", 1)
    _push(fringe, scores, "second", 1)
    _push(fringe, scores, "cheaper", 0)
    _push(fringe, scores, "third", 1)
    assert [n.state for n in fringe] == ["cheaper", "first", "second", "third"]
    assert [fringe.pop().state for _ in range(4)] == ["cheaper", "first", "second", "third"]


@pytest.mark.parametrize("fringe_cls", [LinearFringe, HeapFringe])
def test_contains_is_by_identity(fringe_cls, scores):
    fringe = fringe_cls(_score_of(scores))
    node = _push(fringe, scores, "a", 1)
    assert node in fringe
    assert Node("a") not in fringe


def test_linear_fringe_does_not_reposition_lowered_incumbent(scores):
    fringe = LinearFringe(_score_of(scores))
    _push(fringe, scores, "x", 4)
    _push(fringe, scores, "n", 10)
    scores["n"] = 2  # e.g. relaxed after it was queued
    assert [n.state for n in fringe] == ["x", "n"]
    # new arrivals are compared against the live score of the incumbent
    _push(fringe, scores, "y", 5)
    assert [n.state for n in fringe] == ["x", "n", "y"]


def test_heap_fringe_keeps_key_from_push_time(scores):
    fringe = HeapFringe(_score_of(scores))
    _push(fringe, scores, "x", 4)
    _push(fringe, scores, "n", 10)
    scores["n"] = 2
    _push(fringe, scores, "y", 5)
    assert [fringe.pop().state for _ in range(3)] == ["x", "y", "n"]


def test_pop_from_empty_fringe_raises(scores):
    with pytest.raises(IndexError):
        LinearFringe(_score_of(scores)).pop()
    with pytest.raises(IndexError):
        HeapFringe(_score_of(scores)).pop()
