# obstacles.py
from __future__ import annotations

import random
from typing import List, Optional

from grid import Grid, Pos


def generate_blocked(
    grid: Grid,
    count: int,
    rng: Optional[random.Random] = None,
) -> List[Pos]:
    """
    Block `count` randomly chosen free cells of `grid` in place.

    Cells are sampled uniformly without replacement from the currently
    free cells. If `count` exceeds the number of free cells, every free
    cell gets blocked. Returns the newly blocked cells.

    Pass a seeded random.Random for reproducible grids.
    """
    if count <= 0:
        return []

    free = grid.free_cells()
    if not free:
        return []

    rng = rng if rng is not None else random.Random()
    chosen = rng.sample(free, min(count, len(free)))
    for r, c in chosen:
        grid.block(r, c)
    return chosen
