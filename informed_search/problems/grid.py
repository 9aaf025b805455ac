# informed_search/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, Set, Tuple
from ..core.problem import ActionStatePair, RouteProblem, StepAction

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int
    walls: FrozenSet[Coord] = frozenset()

    def free(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls


@dataclass(frozen=True)
class GridState:
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) on a given Grid
    - successor(s): moves among {'Up','Down','Left','Right'} that stay in-bounds and off walls
    - step cost: 1.0
    """
    grid: Grid = field(repr=False)
    cell: Coord

    def successor(self) -> List[ActionStatePair]:
        r, c = self.cell
        out = []
        for name, (dr, dc) in _MOVES.items():
            nxt = (r + dr, c + dc)
            if self.grid.free(nxt):
                out.append(ActionStatePair(StepAction(name, 1.0), GridState(self.grid, nxt)))
        return out

    def __str__(self) -> str:
        return str(self.cell)


class Manhattan:
    """Manhattan distance (admissible and consistent on a 4-neighbor unit grid)."""
    def __init__(self, goal: Coord):
        self.goal = goal

    def __call__(self, state: GridState) -> float:
        r, c = state.cell
        gr, gc = self.goal
        return float(abs(r - gr) + abs(c - gc))


def grid_problem(rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None) -> RouteProblem:
    grid = Grid(rows, cols, frozenset(walls or ()))
    for cell in (start, goal):
        if not grid.free(cell):
            raise ValueError(f"cell {cell} is off the grid or a wall")
    return RouteProblem(GridState(grid, start), GridState(grid, goal), Manhattan(goal))


def make_grid_problem() -> RouteProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return grid_problem(rows=5, cols=7, start=(0,0), goal=(4,6), walls=walls)
