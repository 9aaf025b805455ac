# informed_search/core/errors.py
from __future__ import annotations


class SearchError(Exception):
    """Base class for everything the search engine raises on its own."""


class SearchExhausted(SearchError):
    """The fringe ran dry before a goal state was popped (no path exists)."""

    def __init__(self, nodes_visited: int = 0) -> None:
        super().__init__(f"no solution: fringe exhausted after {nodes_visited} nodes")
        self.nodes_visited = nodes_visited


class MalformedDomain(SearchError):
    """The problem domain broke its State/Action contract."""
