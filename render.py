# render.py
from __future__ import annotations

from typing import List, Optional, Sequence

from grid import Grid, Pos
from planners.base import PlanResult

FREE_CHAR = "."
BLOCKED_CHAR = "#"
START_CHAR = "S"
VISITED_CHAR = "o"


def format_grid(grid: Grid, path: Optional[Sequence[Pos]] = None) -> str:
    """
    Text picture of the grid, one line per row:
      '.' free cell
      '#' blocked cell

    If `path` is given, visited cells are drawn as 'o' and the first
    cell of the path as 'S'.
    """
    visited = set(path) if path else set()
    start = path[0] if path else None

    lines: List[str] = []
    for r in range(grid.rows):
        chars = []
        for c in range(grid.cols):
            if grid.is_blocked(r, c):
                chars.append(BLOCKED_CHAR)
            elif (r, c) == start:
                chars.append(START_CHAR)
            elif (r, c) in visited:
                chars.append(VISITED_CHAR)
            else:
                chars.append(FREE_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)


def parse_grid(text: str) -> Grid:
    """
    Build a Grid from the '.'/'#' text format produced by format_grid.
    Blank lines are skipped; every row must have the same width.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return Grid.create(0, 0)

    cols = len(lines[0])
    blocked: List[Pos] = []
    for r, line in enumerate(lines):
        if len(line) != cols:
            raise ValueError(
                f"Row {r} has width {len(line)}, expected {cols}"
            )
        for c, ch in enumerate(line):
            if ch == BLOCKED_CHAR:
                blocked.append((r, c))
            elif ch != FREE_CHAR:
                raise ValueError(f"Unexpected character {ch!r} at ({r}, {c})")

    return Grid.create(len(lines), cols, blocked)


def format_path(path: Sequence[Pos]) -> str:
    return "Path:" + "".join(f" ({r},{c})" for r, c in path)


def format_result(result: PlanResult) -> str:
    """Path line (when non-empty) followed by the unique-cell count."""
    lines = []
    if result.path:
        lines.append(format_path(result.path))
    lines.append(f"Unique squares visited: {result.unique_count}")
    return "\n".join(lines)
