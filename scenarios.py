"""
Fixed demo scenarios for the greedy coverage planner.

Each scenario builds a grid (optionally with random obstacles), plans one
walk and prints the path, the unique-cell count and the grid picture:

    python scenarios.py
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import random

from grid import Grid, Pos
from obstacles import generate_blocked
from planners import get_planner
from planners.base import PlanResult
from render import format_grid, format_result


@dataclass
class Scenario:
    title: str
    rows: int
    cols: int
    movement_budget: int
    blocked: List[Pos] = field(default_factory=list)
    # random obstacles added on top of `blocked`
    n_random_blocked: int = 0


SCENARIOS: List[Scenario] = [
    Scenario("1x1, no blocks", 1, 1, movement_budget=1),
    Scenario(
        "2x2, all blocked", 2, 2, movement_budget=10,
        blocked=[(0, 0), (0, 1), (1, 0), (1, 1)],
    ),
    Scenario(
        "3x3, one path", 3, 3, movement_budget=5,
        blocked=[(1, 0), (1, 1), (1, 2)],
    ),
    Scenario("5x5, no blocks", 5, 5, movement_budget=30),
    Scenario("100x10, random blocks", 100, 10, movement_budget=50, n_random_blocked=200),
]


def run_scenario(
    scenario: Scenario,
    rng: Optional[random.Random] = None,
    planner_name: str = "GreedyFrontier",
) -> Tuple[Grid, PlanResult]:
    grid = Grid.create(scenario.rows, scenario.cols, scenario.blocked)
    if scenario.n_random_blocked:
        generate_blocked(grid, scenario.n_random_blocked, rng)
    result = get_planner(planner_name).plan(grid, scenario.movement_budget)
    return grid, result


def main(seed: Optional[int] = None) -> None:
    rng = random.Random(seed)
    for i, sc in enumerate(SCENARIOS, start=1):
        grid, result = run_scenario(sc, rng)
        print(f"Test {i} ({sc.title}):")
        print(format_result(result))
        if grid.rows:
            print(format_grid(grid))
        print()


if __name__ == "__main__":
    main()
