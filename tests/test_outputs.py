"""Smoke tests for the matplotlib snapshot and GIF outputs."""

from animate import animate_walk
from grid import Grid
from planners import PLANNERS
from viz import draw_grid, grid_image


def test_grid_image_colors_blocked_cells():
    g = Grid.create(2, 3, [(1, 2)])
    img = grid_image(g)
    assert img.shape == (2, 3, 3)
    assert (img[1, 2] != img[0, 0]).any()


def test_draw_grid_writes_png(tmp_path, t_corridor):
    result = PLANNERS["GreedyFrontier"].plan(t_corridor, 10)
    out = tmp_path / "plots" / "grid.png"
    draw_grid(t_corridor, out_path=out, path=result.path)
    assert out.exists()
    assert out.stat().st_size > 0


def test_animate_walk_writes_gif(tmp_path, t_corridor):
    result = PLANNERS["GreedyFrontier"].plan(t_corridor, 10)
    out = tmp_path / "walk.gif"
    animate_walk(t_corridor, result.path, out_path=out, fps=5)
    assert out.exists()


def test_animate_walk_skips_empty_history(tmp_path, blocked_2x2, capsys):
    out = tmp_path / "walk.gif"
    animate_walk(blocked_2x2, [], out_path=out)
    assert not out.exists()
    assert "skipping GIF" in capsys.readouterr().out
