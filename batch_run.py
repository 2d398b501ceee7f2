#!/usr/bin/env python3
"""
Batch experiment runner.

This script is meant for *offline experiments* where you want to:

- Sweep over many grid / budget / planner configurations.
- Run one plan per configuration (no PNG / GIF output).
- Collect all metrics into a single CSV file for analysis.

High-level behavior
-------------------

1. Take the parameter grid from batch_config.PARAM_GRID.
2. For each combination in the grid:
   - Build Config + Simulator (random obstacles seeded by `seed`).
   - Plan one walk (same core logic as in main.py, but without I/O).
   - Build the same summary dict as main.py.
3. Use multiprocessing to parallelize runs across CPU cores.
4. Flatten the summary dict + parameters into a single row.
5. Append rows to `outputs_batch/batch_results.csv`.

If `outputs_batch/batch_results.csv` already exists, its header is reused
and new rows are appended with the same column order.

Usage
-----

From the repo root:

    python batch_run.py
"""

import csv
import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional
import traceback

from batch_config import CPU_COUNT, PARAM_GRID
from config import Config
from sim import Simulator


def iter_param_combinations(grid: Dict[str, List[Any]]) -> Iterator[Dict[str, Any]]:
    """Yield dicts for each combination in the parameter grid."""
    keys = list(grid.keys())
    value_lists = [grid[k] for k in keys]
    for combo in itertools.product(*value_lists):
        yield dict(zip(keys, combo))


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def run_single_experiment(
    purpose: str,                # meta label, not used in planning, just for CSV
    rows: int,
    cols: int,
    n_blocked: int,
    movement_budget: int,
    seed: int,
    planner_name: str = "GreedyFrontier",
) -> Dict[str, Any]:
    """Plan ONE walk with the given parameters and return a flat dict of metrics."""
    cfg = Config(
        rows=rows,
        cols=cols,
        n_blocked=n_blocked,
        movement_budget=movement_budget,
        seed=seed,
        planner_name=planner_name,
    )

    sim = Simulator.from_config(cfg)
    # planners are module-level singletons; each experiment reports its own stats
    sim.planner.reset_stats()
    sim.run()

    return flatten_dict(sim.summary())


def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Worker function for each process.

    - Calls run_single_experiment(**params).
    - Returns merged {params..., flat_summary...} dict.
    - If the run fails, returns None and prints an error.
    """
    params = dict(params)

    try:
        metrics = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] run_single_experiment failed for params={params}: {e}")
        traceback.print_exc()
        # returning None tells the caller to skip this run
        return None

    merged: Dict[str, Any] = {**params, **metrics}
    return merged


def _num_procs() -> int:
    if CPU_COUNT is None:
        return mp.cpu_count()
    return max(1, min(CPU_COUNT, mp.cpu_count()))


def main_batch(out_dir: str | Path = "outputs_batch") -> Path:
    combos = list(iter_param_combinations(PARAM_GRID))
    total = len(combos)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "batch_results.csv"

    if total == 0:
        print("No parameter combinations to run. Check PARAM_GRID.")
        return out_path

    print(f"Total experiments to run: {total}")

    fieldnames: Optional[List[str]] = None
    if out_path.exists():
        print(f"Appending to existing CSV: {out_path}")
        with out_path.open("r", newline="") as f:
            reader = csv.reader(f)
            existing_header = next(reader, [])
        fieldnames = existing_header or None

    # No header yet: run the first job synchronously to infer the columns.
    start_index = 0
    if fieldnames is None:
        print("Running first job synchronously to infer CSV columns...")
        first_row = run_one(combos[0])
        if first_row is None:
            raise RuntimeError(f"First experiment failed; cannot infer CSV columns: {combos[0]}")

        fieldnames = sorted(first_row.keys())
        # Ensure 'purpose' is the first column if present
        if "purpose" in fieldnames:
            fieldnames.remove("purpose")
            fieldnames = ["purpose"] + fieldnames

        with out_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first_row)
        print(f"Created new CSV and wrote first row to {out_path}")

        start_index = 1
    else:
        print(f"Using existing header with {len(fieldnames)} columns.")

    remaining = combos[start_index:]
    if not remaining:
        print("No remaining experiments to run; done.")
        return out_path

    num_procs = _num_procs()
    print(f"Running remaining {len(remaining)} experiments in parallel using {num_procs} CPUs ...")

    done = start_index
    with out_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        with mp.Pool(processes=num_procs) as pool:
            for row in pool.imap_unordered(run_one, remaining):
                if row is None:
                    # this run failed; already logged, so just skip it
                    continue

                writer.writerow(row)
                f.flush()
                done += 1
                if done % 10 == 0 or done == total:
                    print(f"Completed {done}/{total} experiments")

    print(f"All done. Results in {out_path}")
    return out_path


if __name__ == "__main__":
    main_batch()
