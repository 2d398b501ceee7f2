# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
from typing import Any
from config import Config
import uuid


def make_run_dir(cfg: Config, base: str = "outputs") -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (grid size, obstacles, budget, seed).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".

    Folder naming
    -------------
    The folder name encodes:
      - grid size (rows x cols)
      - number of random obstacles
      - movement budget
      - random seed
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_R20x20_B60_M100_seed0_20251216-213012-ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = [
        f"R{cfg.rows}x{cfg.cols}",
        f"B{cfg.n_blocked}",
        f"M{cfg.movement_budget}",
        f"seed{cfg.seed}",
    ]
    base_name = "run_" + "_".join(parts)

    # Repeated runs with the same config must not overwrite each other.
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    suffix = f"{ts}-{uid}"

    run_dir = base_path / f"{base_name}_{suffix}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """
    Serialize the Config object for this run into JSON.

    Together with the seed this is enough to regenerate the exact grid
    and walk later.
    """
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the summary metrics for a run as a JSON file.

    The structure is nested ("grid.rows", "plan.unique_count", ...) so
    batch_run.flatten_dict can turn it into CSV columns.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
