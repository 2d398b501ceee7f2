"""
Registry of coverage planners.

Every public module in this package that defines a module-level
``ALGORITHM`` (an object satisfying ``base.CoveragePlanner``) is
registered under ``ALGORITHM.name``. Modules whose name starts with an
underscore, and ``base`` itself, are skipped.
"""
import importlib
import pkgutil
from typing import Dict
from .base import CoveragePlanner

PLANNERS: Dict[str, CoveragePlanner] = {}


def load_algorithms() -> Dict[str, CoveragePlanner]:
    registry: Dict[str, CoveragePlanner] = {}
    for info in pkgutil.iter_modules(__path__):
        if info.name == "base" or info.name.startswith("_"):
            continue
        module = importlib.import_module(f"{__name__}.{info.name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.name in registry:
            raise ValueError(f"Duplicate planner name: {algo.name}")
        registry[algo.name] = algo

    # update in place so `from planners import PLANNERS` stays current
    PLANNERS.clear()
    PLANNERS.update(registry)
    return PLANNERS


def get_planner(name: str) -> CoveragePlanner:
    """Registered planner by name; ValueError lists the known names otherwise."""
    try:
        return PLANNERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown planner: {name!r} (available: {sorted(PLANNERS)})"
        ) from None


load_algorithms()
