# animate.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from grid import Grid, Pos
from viz import BLOCKED_COLOR, VISITED_COLOR, PATH_COLOR, START_COLOR, grid_image


def _first_visit_steps(history: List[Pos]) -> Dict[Pos, int]:
    """For each cell on the walk, the earliest step index the walker stood on it."""
    first: Dict[Pos, int] = {}
    for step_idx, p in enumerate(history):
        first.setdefault(p, step_idx)
    return first


def animate_walk(
    grid: Grid,
    history: List[Pos],
    out_path: str | Path,
    fps: int = 10,
) -> None:
    """
    Build a GIF of the walker moving along its path, with cells turning
    'visited' as it enters them.

    - grid: the grid that was planned on
    - history: walker positions per step (PlanResult.path)
    - out_path: path to save the GIF
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if not history:
        print("No history to animate; skipping GIF.")
        return

    rows, cols = grid.rows, grid.cols
    base_img = grid_image(grid)
    first_visit = _first_visit_steps(history)

    # ----- Matplotlib setup -----
    fig, ax = plt.subplots(figsize=(cols / 2.0 + 1, rows / 2.0 + 1))
    im = ax.imshow(base_img, origin="upper", animated=True)

    r0, c0 = history[0]
    ax.scatter(
        [c0],
        [r0],
        marker="*",
        s=150,
        c=START_COLOR,
        edgecolors="white",
        linewidths=1.0,
        zorder=3,
    )
    walker_scatter = ax.scatter(
        [c0],
        [r0],
        marker="o",
        s=80,
        c=PATH_COLOR,
        edgecolors="white",
        linewidths=0.7,
        animated=True,
        zorder=4,
    )

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle("Greedy coverage walk (animation)", fontsize=14, y=0.98)

    handles = [
        Line2D([0], [0], marker="*", color="w", markerfacecolor=START_COLOR,
               markersize=10, label="start"),
        Line2D([0], [0], marker="o", color="w", markerfacecolor=PATH_COLOR,
               markeredgecolor="white", markersize=7, label="walker"),
        Patch(facecolor=BLOCKED_COLOR, edgecolor="black", label="blocked"),
        Patch(facecolor=VISITED_COLOR, edgecolor="black", label="visited"),
    ]

    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.93),
        ncol=len(handles),
        fontsize=8,
        frameon=False,
    )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.88])

    n_frames = len(history)

    # ----- init + update functions for FuncAnimation -----
    def init():
        im.set_array(base_img)
        walker_scatter.set_offsets(np.array([[c0, r0]]))
        return (im, walker_scatter)

    def update(frame: int):
        img = base_img.copy()
        for (r, c), s in first_visit.items():
            if frame >= s:
                img[r, c] = VISITED_COLOR
        im.set_array(img)

        r, c = history[frame]
        walker_scatter.set_offsets(np.array([[c, r]]))
        return (im, walker_scatter)

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=n_frames,
        init_func=init,
        interval=1000 / fps,
        blit=True,
    )

    writer = animation.PillowWriter(fps=fps)
    ani.save(out_path, writer=writer)
    plt.close(fig)
    print(f"Saved animation GIF to {out_path}")
