# viz.py
from __future__ import annotations
from typing import Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from grid import Grid, Pos

# --- Color palette (RGB in 0–1), shared with animate.py ---
BG_COLOR      = np.array([0.96, 0.96, 0.96])  # light gray background
BLOCKED_COLOR = np.array([0.30, 0.30, 0.30])  # dark gray
VISITED_COLOR = np.array([0.68, 0.85, 0.90])  # pale blue
PATH_COLOR    = "#1f77b4"                     # blue
START_COLOR   = "#9467bd"                     # purple


def grid_image(grid: Grid) -> np.ndarray:
    """(rows, cols, 3) RGB array: background for free cells, gray for blocked."""
    img = np.zeros((grid.rows, grid.cols, 3), dtype=float)
    img[:, :, :] = BG_COLOR
    for (r, c) in grid.blocked_cells():
        img[r, c] = BLOCKED_COLOR
    return img


def draw_grid(
    grid: Grid,
    out_path: str | Path,
    path: Optional[Sequence[Pos]] = None,
    title: str = "Greedy coverage walk",
) -> None:
    """
    Draw a snapshot of the grid:
      - free cells: light background
      - blocked cells: dark gray
      - visited cells: pale blue
      - walk: blue line through cell centers
      - start: purple star
    Row 0 is drawn at the top, matching the text rendering.
    """
    rows, cols = grid.rows, grid.cols
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    img = grid_image(grid)
    path = list(path or [])
    for (r, c) in path:
        img[r, c] = VISITED_COLOR

    fig, ax = plt.subplots(figsize=(max(cols, 1) / 2.0 + 1, max(rows, 1) / 2.0 + 1))
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    handles = []
    if path:
        xs = [c for (_, c) in path]
        ys = [r for (r, _) in path]
        (h_path,) = ax.plot(xs, ys, color=PATH_COLOR, linewidth=1.5, label="walk")
        h_start = ax.scatter(
            [xs[0]],
            [ys[0]],
            marker="*",
            s=150,
            c=START_COLOR,
            edgecolors="white",
            linewidths=1.0,
            label="start",
            zorder=3,
        )
        handles.extend([h_start, h_path])

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=14, y=0.98)

    handles.extend(
        [
            Patch(facecolor=BLOCKED_COLOR, edgecolor="black", label="blocked"),
            Patch(facecolor=VISITED_COLOR, edgecolor="black", label="visited"),
        ]
    )

    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.93),
        ncol=len(handles),
        fontsize=8,
        frameon=False,
    )

    # Leave space at top for title + legend
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
