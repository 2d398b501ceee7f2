from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from grid import Grid, Pos

# Neighbor priority shared by every scan: up, right, down, left.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class PlanResult:
    """
    Output of one planning call.

      - path: cells in traversal order, starting at the start cell,
              including backtrack revisits
      - unique_count: number of distinct free cells entered
      - backtrack_count: moves onto already-visited cells
    """
    path: List[Pos] = field(default_factory=list)
    unique_count: int = 0
    backtrack_count: int = 0

    @property
    def steps(self) -> int:
        """Number of moves taken (edges traversed)."""
        return max(len(self.path) - 1, 0)


class CoveragePlanner(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float

    def plan(self, grid: Grid, movement_budget: int) -> PlanResult:
        ...

    def reset_stats(self) -> None:
        ...
