# sim.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import random

from config import Config
from grid import Grid, Pos
from obstacles import generate_blocked
from planners import get_planner
from planners.base import PlanResult


@dataclass
class Simulator:
    cfg: Config
    grid: Grid
    planner_name: str = "GreedyFrontier"

    # control terminal logging
    log_events: bool = False

    # filled by run()
    result: Optional[PlanResult] = None

    # history[step] = walker position; useful for GIFs
    history: List[Pos] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._log(f"[INIT] Simulator with planner={self.planner_name}, "
                  f"grid={self.grid.rows}x{self.grid.cols}, "
                  f"budget={self.cfg.movement_budget}")

        self.planner = get_planner(self.planner_name)

    @classmethod
    def from_config(cls, cfg: Config) -> "Simulator":
        """
        Build an empty cfg.rows x cfg.cols grid, drop cfg.n_blocked random
        obstacles on it (seeded by cfg.seed), and wrap it in a Simulator.
        """
        grid = Grid.create(cfg.rows, cfg.cols)
        generate_blocked(grid, cfg.n_blocked, random.Random(cfg.seed))
        return cls(
            cfg=cfg,
            grid=grid,
            planner_name=cfg.planner_name,
            log_events=cfg.log_events,
        )

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- planning ---------------- #

    def run(self) -> PlanResult:
        """Plan one walk on the grid and record it as history."""
        self._log(
            f"[GRID] {self.grid.free_count()} free / "
            f"{self.grid.blocked_count()} blocked cells"
        )
        self._log(f"[PLAN] Running {self.planner.name} with budget {self.cfg.movement_budget}")

        result = self.planner.plan(self.grid, self.cfg.movement_budget)
        self.result = result
        self.history = list(result.path)

        if not result.path:
            self._log("[DONE] No free cell to start from")
            return result

        self._log(f"  - start at {result.path[0]}")
        seen = {result.path[0]}
        for step, p in enumerate(result.path[1:], start=1):
            kind = "backtrack" if p in seen else "explore"
            seen.add(p)
            self._log(f"[STEP {step}] {kind} -> {p}")

        if self.stopped_early:
            self._log(f"[DONE] No move possible after {result.steps} steps; stopping early")
        else:
            self._log(f"[DONE] Movement budget of {self.cfg.movement_budget} used up")
        self._log(f"    Unique cells visited: {result.unique_count}")
        return result

    # ---------------- metrics ---------------- #

    @property
    def stopped_early(self) -> bool:
        if self.result is None:
            return False
        return self.result.steps < self.cfg.movement_budget

    def summary(self) -> Dict[str, Any]:
        """Nested metrics dict for summary.json / batch CSV rows."""
        if self.result is None:
            raise RuntimeError("Simulator.run() must be called before summary()")

        res = self.result
        pa = self.planner
        free = self.grid.free_count()

        return {
            "grid": {
                "rows": self.grid.rows,
                "cols": self.grid.cols,
                "free_cells": free,
                "blocked_cells": self.grid.blocked_count(),
            },
            "plan": {
                "unique_count": res.unique_count,
                "path_length": len(res.path),
                "steps": res.steps,
                "backtracks": res.backtrack_count,
                "movement_budget": self.cfg.movement_budget,
                "stopped_early": self.stopped_early,
                "coverage": (res.unique_count / free) if free else 0.0,
            },
            "planner": {
                "algorithm": pa.name,
                "call_count": pa.call_count,
                "total_runtime": pa.total_runtime,
                "avg_runtime": (pa.total_runtime / pa.call_count) if pa.call_count else 0.0,
            },
        }
