# grid.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

Pos = Tuple[int, int]  # (row, col)


class AllocationError(MemoryError):
    """Raised when the occupancy storage for a grid cannot be acquired."""


class Grid:
    """
    Bounded 2D occupancy map.

      - rows x cols cells, addressed as (row, col) with 0 <= row < rows
        and 0 <= col < cols
      - each cell is either free or blocked
      - storage is one flat bytearray indexed row * cols + col

    The grid is read-only once planning starts. Only obstacle generation
    (obstacles.generate_blocked) calls block() beforehand.
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int, cells: bytearray) -> None:
        self.rows = rows
        self.cols = cols
        self._cells = cells

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def create(cls, rows: int, cols: int, blocked: Iterable[Pos] = ()) -> "Grid":
        """
        Build a rows x cols grid with every cell free, then block each
        in-range coordinate of `blocked`. Out-of-range coordinates are ignored.
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be >= 0, got {rows}x{cols}")

        try:
            cells = bytearray(rows * cols)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(
                f"Memory allocation failed for a {rows}x{cols} grid"
            ) from exc

        grid = cls(rows, cols, cells)
        for r, c in blocked:
            if grid.in_bounds((r, c)):
                cells[r * cols + c] = 1
        return grid

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #
    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, p: Pos) -> bool:
        r, c = p
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid"
            )
        return row * self.cols + col

    def is_blocked(self, row: int, col: int) -> bool:
        return self._cells[self._index(row, col)] != 0

    def find_first_free_cell(self) -> Optional[Pos]:
        """First free cell in row-major order, or None if every cell is blocked."""
        idx = self._cells.find(0)
        if idx < 0:
            return None
        return divmod(idx, self.cols)

    def free_cells(self) -> List[Pos]:
        """All free cells in row-major order."""
        cols = self.cols
        return [divmod(i, cols) for i, v in enumerate(self._cells) if not v]

    def blocked_cells(self) -> List[Pos]:
        cols = self.cols
        return [divmod(i, cols) for i, v in enumerate(self._cells) if v]

    def free_count(self) -> int:
        return self._cells.count(0)

    def blocked_count(self) -> int:
        return self.size - self.free_count()

    # ------------------------------------------------------------------ #
    # Mutation (obstacle generation only)                                #
    # ------------------------------------------------------------------ #
    def block(self, row: int, col: int) -> None:
        self._cells[self._index(row, col)] = 1

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, blocked={self.blocked_count()})"
