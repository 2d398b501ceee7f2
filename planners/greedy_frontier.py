from __future__ import annotations

from time import perf_counter
from typing import Optional, Set

from grid import Grid, Pos
from .base import CoveragePlanner, DIRECTIONS, PlanResult


class GreedyFrontierPlanner(CoveragePlanner):
    """
    Greedy coverage walk on a 4-connected grid.

    Starts at the first free cell (row-major) and spends the movement
    budget one step at a time:

      1. explore: move to the first free, unvisited neighbor
         (priority up, right, down, left)
      2. backtrack-to-frontier: otherwise move to the first free, visited
         neighbor N that itself has a free, unvisited neighbor. This costs
         one step and visits nothing new.
      3. otherwise stop, even if budget remains.

    The lookahead in rule 2 is exactly one hop past N, so the walker can
    strand itself while unvisited cells remain elsewhere.
    """
    name = "GreedyFrontier"

    def __init__(self) -> None:
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def plan(self, grid: Grid, movement_budget: int) -> PlanResult:
        if movement_budget < 0:
            raise ValueError(f"movement_budget must be >= 0, got {movement_budget}")

        t0 = perf_counter()

        start = grid.find_first_free_cell()
        if start is None:
            self._update_stats(perf_counter() - t0)
            return PlanResult()

        visited: Set[Pos] = {start}
        result = PlanResult(path=[start], unique_count=1)
        current = start

        for _ in range(movement_budget):
            nxt = self._unvisited_neighbor(grid, current, visited)
            if nxt is not None:
                visited.add(nxt)
                result.unique_count += 1
            else:
                nxt = self._frontier_neighbor(grid, current, visited)
                if nxt is None:
                    break
                result.backtrack_count += 1

            current = nxt
            result.path.append(current)

        self._update_stats(perf_counter() - t0)
        return result

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _unvisited_neighbor(grid: Grid, p: Pos, visited: Set[Pos]) -> Optional[Pos]:
        r, c = p
        for dr, dc in DIRECTIONS:
            q = (r + dr, c + dc)
            if grid.in_bounds(q) and not grid.is_blocked(*q) and q not in visited:
                return q
        return None

    def _frontier_neighbor(self, grid: Grid, p: Pos, visited: Set[Pos]) -> Optional[Pos]:
        r, c = p
        for dr, dc in DIRECTIONS:
            q = (r + dr, c + dc)
            if not grid.in_bounds(q) or grid.is_blocked(*q) or q not in visited:
                continue
            if self._unvisited_neighbor(grid, q, visited) is not None:
                return q
        return None

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1


ALGORITHM = GreedyFrontierPlanner()
