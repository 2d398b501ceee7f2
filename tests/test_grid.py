"""Unit tests for the Grid occupancy map."""

import pytest

from grid import AllocationError, Grid


class TestCreate:
    def test_all_cells_free_by_default(self):
        g = Grid.create(3, 4)
        assert g.rows == 3
        assert g.cols == 4
        assert g.size == 12
        assert g.free_count() == 12
        assert not any(g.is_blocked(r, c) for r in range(3) for c in range(4))

    def test_blocked_list_marks_cells(self):
        g = Grid.create(2, 3, [(0, 1), (1, 2)])
        assert g.is_blocked(0, 1)
        assert g.is_blocked(1, 2)
        assert not g.is_blocked(0, 0)
        assert g.blocked_cells() == [(0, 1), (1, 2)]
        assert g.blocked_count() == 2

    def test_out_of_range_blocked_entries_are_ignored(self):
        g = Grid.create(2, 2, [(-1, 0), (0, 5), (2, 0), (1, 1)])
        assert g.blocked_cells() == [(1, 1)]

    def test_duplicate_blocked_entries(self):
        g = Grid.create(2, 2, [(0, 0), (0, 0)])
        assert g.blocked_count() == 1

    def test_zero_by_zero_grid_is_legal(self):
        g = Grid.create(0, 0)
        assert g.size == 0
        assert g.free_count() == 0
        assert g.find_first_free_cell() is None

    @pytest.mark.parametrize("rows,cols", [(-1, 3), (3, -1)])
    def test_negative_dimensions_rejected(self, rows, cols):
        with pytest.raises(ValueError):
            Grid.create(rows, cols)

    def test_allocation_failure_surfaces_as_allocation_error(self, monkeypatch):
        import grid as grid_module

        def failing_bytearray(n):
            raise MemoryError

        monkeypatch.setattr(grid_module, "bytearray", failing_bytearray, raising=False)
        with pytest.raises(AllocationError):
            Grid.create(10, 10)

    def test_oversized_grid_raises_allocation_error(self):
        with pytest.raises(AllocationError):
            Grid.create(10**10, 10**10)

    def test_allocation_error_is_a_memory_error(self):
        assert issubclass(AllocationError, MemoryError)


class TestQueries:
    def test_is_blocked_out_of_range_raises(self):
        g = Grid.create(2, 2)
        with pytest.raises(IndexError):
            g.is_blocked(2, 0)
        with pytest.raises(IndexError):
            g.is_blocked(0, -1)

    def test_in_bounds(self):
        g = Grid.create(2, 3)
        assert g.in_bounds((1, 2))
        assert not g.in_bounds((2, 0))
        assert not g.in_bounds((0, 3))
        assert not g.in_bounds((-1, 0))

    def test_find_first_free_cell_is_row_major(self):
        g = Grid.create(3, 3, [(0, 0), (0, 1), (0, 2), (1, 0)])
        assert g.find_first_free_cell() == (1, 1)

    def test_find_first_free_cell_none_when_all_blocked(self, blocked_2x2):
        assert blocked_2x2.find_first_free_cell() is None

    def test_free_cells_row_major(self):
        g = Grid.create(2, 2, [(0, 1)])
        assert g.free_cells() == [(0, 0), (1, 0), (1, 1)]


class TestBlock:
    def test_block_marks_cell(self):
        g = Grid.create(2, 2)
        g.block(1, 0)
        assert g.is_blocked(1, 0)
        assert g.free_count() == 3

    def test_block_out_of_range_raises(self):
        g = Grid.create(2, 2)
        with pytest.raises(IndexError):
            g.block(0, 2)
