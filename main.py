from config import Config
from viz import draw_grid
from io_utils import make_run_dir, save_config, save_summary
from render import format_grid, format_result
from sim import Simulator
from animate import animate_walk


def main() -> None:
    """
    Single-run entry point for the greedy coverage planner.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (grid size, number of obstacles, movement budget, seed, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (PNG, GIF, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Configuration and output directory
    # ------------------------------------------------------------------
    cfg = Config()

    run_dir = make_run_dir(cfg, base="outputs")
    save_config(cfg, run_dir)

    # ------------------------------------------------------------------
    # 2) Grid with random obstacles, then plan
    # ------------------------------------------------------------------
    sim = Simulator.from_config(cfg)
    sim.planner.reset_stats()
    result = sim.run()

    # ------------------------------------------------------------------
    # 3) Report
    # ------------------------------------------------------------------
    print(f"Run ({cfg.rows}x{cfg.cols}, {cfg.n_blocked} random blocks, "
          f"budget {cfg.movement_budget}):")
    print(format_result(result))
    print(format_grid(sim.grid))

    summary = sim.summary()
    save_summary(summary, run_dir)

    draw_grid(sim.grid, out_path=run_dir / "grid.png", path=result.path)

    gif_path = run_dir / "walk.gif"
    animate_walk(sim.grid, sim.history, out_path=gif_path, fps=5)

    print(f"Run directory: {run_dir}")
    print(
        f"Coverage: {summary['plan']['unique_count']} "
        f"/ {summary['grid']['free_cells']} free cells"
    )


if __name__ == "__main__":
    main()
