import os

os.environ.setdefault("MPLBACKEND", "Agg")

from collections import Counter

import pytest

from informed_search.problems.graph import WeightedGraph


class CountingGraph(WeightedGraph):
    """WeightedGraph that records how often each vertex is expanded."""
    def __init__(self):
        super().__init__()
        self.expansions = Counter()
        self.order = []

    def neighbors(self, name):
        self.expansions[name] += 1
        self.order.append(name)
        return super().neighbors(name)


@pytest.fixture
def make_graph():
    def _make(edges, undirected=False):
        g = CountingGraph()
        for u, v, cost in edges:
            if undirected:
                g.add_undirected_edge(u, v, cost)
            else:
                g.add_edge(u, v, cost)
        return g
    return _make


@pytest.fixture
def line_graph(make_graph):
    # S -> A -> G, unit costs
    return make_graph([("S", "A", 1), ("A", "G", 1)])


@pytest.fixture
def diamond_graph(make_graph):
    # C is queued via A (g=6) before B offers the cheaper way in (g=3)
    return make_graph([
        ("S", "A", 1), ("S", "B", 2),
        ("A", "C", 5), ("B", "C", 1),
        ("C", "G", 1),
    ])


@pytest.fixture
def late_discount_graph(make_graph):
    # Cheapest way to A (via B, g=2) is found only after A was queued at g=10,
    # and Y is reachable through A (g=3) or through Z (g=5).
    return make_graph([
        ("S", "A", 10), ("S", "B", 1), ("S", "Z", 4),
        ("B", "A", 1),
        ("A", "Y", 1), ("Z", "Y", 1),
    ])
