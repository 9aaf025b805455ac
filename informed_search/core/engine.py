# informed_search/core/engine.py
# Generic best-first graph search: expands the lowest-evaluation node, deduplicates states
# through a VisitedTable and relaxes parent pointers when a cheaper way in turns up.
from __future__ import annotations
import numbers
from enum import Enum
from typing import Callable, Iterator, Optional
from .config import get_settings
from .errors import MalformedDomain, SearchExhausted
from .evaluation import Evaluation
from .frontiers import FringeFactory, LinearFringe
from .node import Node
from .path import Path, reconstruct_path
from .problem import GoalTest, State
from .visited import VisitedTable

ProgressObserver = Callable[[int], None]


def print_progress(nodes_visited: int) -> None:
    print(f"No. of nodes explored: {nodes_visited}")


class SearchPhase(Enum):
    INIT = "init"
    EXPANDING = "expanding"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


def _check_state(state: State) -> None:
    try:
        hash(state)
    except TypeError as e:
        raise MalformedDomain(f"state {state!r} is not hashable") from e
    if not state == state:
        raise MalformedDomain(f"state {state!r} is not equal to itself")


def successor_entries(state: State) -> Iterator:
    """Call state.successor() and make sure it handed back something iterable."""
    entries = state.successor()
    if entries is None:
        raise MalformedDomain(f"successor() of {state!r} returned None")
    try:
        return iter(entries)
    except TypeError:
        raise MalformedDomain(f"successor() of {state!r} returned {entries!r}") from None


def _is_real(cost) -> bool:
    # Real, or a Number that is not complex (e.g. decimal.Decimal)
    if isinstance(cost, numbers.Real):
        return True
    return isinstance(cost, numbers.Number) and not isinstance(cost, numbers.Complex)


def unpack_entry(entry, parent: State):
    """Split one successor() entry into (action, state), rejecting anything malformed."""
    if entry is None:
        raise MalformedDomain(f"successor() of {parent!r} yielded None")
    try:
        action, state = entry
    except (TypeError, ValueError):
        raise MalformedDomain(
            f"successor() of {parent!r} yielded {entry!r}, expected an (action, state) pair"
        ) from None
    if action is None or state is None:
        raise MalformedDomain(f"successor() of {parent!r} yielded an incomplete pair {entry!r}")
    cost = getattr(action, "cost", None)
    if not _is_real(cost):
        raise MalformedDomain(f"action {action!r} has no numeric cost (got {cost!r})")
    return action, state


class BestFirstSearch:
    """
    Best-first search from `start` to the first popped state passing the goal test.

    The evaluation decides the variant: UniformCost, GreedyBestFirst, AStar, ...
    Once a node has been expanded it is never reopened, even if relaxation later
    finds a cheaper way to its state. That keeps A* optimal only for consistent
    heuristics (and uniform-cost search always optimal).
    """

    def __init__(
        self,
        start: State,
        goal: Optional[State] = None,
        *,
        evaluation: Evaluation,
        is_goal: Optional[GoalTest] = None,
        observer: Optional[ProgressObserver] = print_progress,
        progress_interval: Optional[int] = None,
        fringe_factory: FringeFactory = LinearFringe,
    ):
        if is_goal is None:
            if goal is None:
                raise ValueError("either a goal state or an is_goal test is required")
            is_goal = lambda s: s == goal
        if progress_interval is None:
            progress_interval = get_settings().progress_interval
        if progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {progress_interval}")
        self.start = start
        self.goal = goal
        self.evaluation = evaluation
        self.is_goal = is_goal
        self.observer = observer
        self.progress_interval = progress_interval
        self.fringe_factory = fringe_factory
        # stats of the most recent search() call
        self.phase = SearchPhase.INIT
        self.nodes_visited = 0
        self.nodes_expanded = 0
        self.states_generated = 0

    def _visit(self) -> None:
        self.nodes_visited += 1
        if self.observer is not None and self.nodes_visited % self.progress_interval == 0:
            self.observer(self.nodes_visited)

    def search(self) -> Optional[Path]:
        """Return the path to the goal, or None if there is no solution."""
        self.phase = SearchPhase.INIT
        self.nodes_visited = 0
        self.nodes_expanded = 0
        self.states_generated = 0

        _check_state(self.start)
        visited = VisitedTable()
        fringe = self.fringe_factory(self.evaluation)
        root = Node(self.start)
        fringe.push(root)
        visited.add(root)
        self.states_generated = 1
        self._visit()

        self.phase = SearchPhase.EXPANDING
        while True:
            if not len(fringe):
                self.phase = SearchPhase.EXHAUSTED
                return None

            node = fringe.pop()
            if self.is_goal(node.state):
                self.phase = SearchPhase.GOAL_FOUND
                return reconstruct_path(node)

            self.nodes_expanded += 1
            for entry in successor_entries(node.state):
                self._visit()
                action, next_state = unpack_entry(entry, node.state)
                seen = self._lookup(visited, next_state)
                if seen is None:
                    child = Node(next_state, node, action)
                    fringe.push(child)
                    visited.add(child)
                    self.states_generated = len(visited)
                else:
                    visited.relax(seen, node, action)

    def solve(self) -> Path:
        """Like search(), but raises SearchExhausted instead of returning None."""
        path = self.search()
        if path is None:
            raise SearchExhausted(self.nodes_visited)
        return path

    @staticmethod
    def _lookup(visited: VisitedTable, state: State) -> Optional[Node]:
        try:
            hash(state)
        except TypeError as e:
            raise MalformedDomain(f"state {state!r} is not hashable") from e
        seen = visited.get(state)
        if seen is None and not state == state:
            raise MalformedDomain(f"state {state!r} is not equal to itself")
        return seen
