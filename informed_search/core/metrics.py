# informed_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import time, tracemalloc
from .path import Path

@dataclass
class SearchResult:
    algo: str
    success: bool
    path: Optional[Path]
    cost: float
    nodes_visited: int
    nodes_expanded: int
    time_s: float
    peak_kb: int
    states_generated: int = 0
    error: Optional[str] = None

    @property
    def actions(self) -> List[Any]:
        return self.path.actions if self.path is not None else []

    def as_row(self) -> Dict[str, Any]:
        return {
            "algo": self.algo,
            "success": self.success,
            "path": str(self.path) if self.path is not None else None,
            "cost": self.cost,
            "nodes_visited": self.nodes_visited,
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "states_generated": self.states_generated,
            "error": self.error,
        }

    @classmethod
    def from_run(cls, algo: str, engine, path: Optional[Path], meter: "MeasuredRun") -> "SearchResult":
        """Collect the counters a finished BestFirstSearch left behind."""
        return cls(
            algo=algo,
            success=path is not None,
            path=path,
            cost=path.cost if path is not None else float("inf"),
            nodes_visited=engine.nodes_visited,
            nodes_expanded=engine.nodes_expanded,
            time_s=meter.time_s,
            peak_kb=meter.peak_kb,
            states_generated=engine.states_generated,
        )

class MeasuredRun:
    """
    Wall time and tracemalloc peak of one with-block, filled in on exit.
    An outer tracemalloc session is left running; only its peak is reset.
    """
    def __init__(self) -> None:
        self.time_s: float = 0.0
        self.peak_kb: int = 0
        self._started_trace = False
        self._t0 = 0.0

    def __enter__(self) -> "MeasuredRun":
        self._started_trace = not tracemalloc.is_tracing()
        if self._started_trace:
            tracemalloc.start()
        else:
            tracemalloc.reset_peak()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.time_s = time.perf_counter() - self._t0
        self.peak_kb = tracemalloc.get_traced_memory()[1] // 1024
        if self._started_trace:
            tracemalloc.stop()
        return False
