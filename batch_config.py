# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use min(CPU_COUNT, mp.cpu_count()) worker processes.
#
# Example:
#   CPU_COUNT = 32       # use 32 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
#
# Example:
#   "rows": [20, 30]
#   "cols": [20, 30]
# will generate 4 grid shapes:
#   (20x20), (20x30), (30x20), (30x30)
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["obstacle_density_sweep"],  # free-text label for this batch

    # --- grid parameters ---
    "rows": [20],                     # number of grid rows
    "cols": [20],                     # number of grid columns
    "n_blocked": [0, 40, 80, 120],    # random obstacles placed before planning

    # --- walk parameters ---
    "movement_budget": [100, 400],    # maximum number of moves for the walker

    # --- algorithms ---
    "planner_name": ["GreedyFrontier"],  # registered planner name (see planners/)

    # --- randomness ---
    "seed": [i for i in range(10)],  # RNG seeds to generate different random grids for each setting
}
