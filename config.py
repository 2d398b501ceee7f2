# config.py
from dataclasses import dataclass

@dataclass
class Config:
    rows: int = 20
    cols: int = 20

    # random obstacles placed on free cells before planning
    n_blocked: int = 60

    # maximum number of moves the walker may take
    movement_budget: int = 100

    seed: int = 0

    # registered name in planners.PLANNERS
    planner_name: str = "GreedyFrontier"

    # print [INIT]/[PLAN]/[STEP] events to the terminal
    log_events: bool = False
