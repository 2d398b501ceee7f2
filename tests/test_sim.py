"""Tests for the Simulator wiring, logging and summary metrics."""

import pytest

from config import Config
from grid import Grid
from sim import Simulator


def test_unknown_planner_rejected():
    with pytest.raises(ValueError):
        Simulator(cfg=Config(), grid=Grid.create(2, 2), planner_name="NoSuchPlanner")


def test_from_config_places_random_obstacles():
    cfg = Config(rows=10, cols=12, n_blocked=25, seed=3)
    sim = Simulator.from_config(cfg)
    assert (sim.grid.rows, sim.grid.cols) == (10, 12)
    assert sim.grid.blocked_count() == 25


def test_from_config_is_reproducible():
    cfg = Config(rows=10, cols=10, n_blocked=30, movement_budget=60, seed=5)
    a = Simulator.from_config(cfg)
    b = Simulator.from_config(cfg)
    assert a.grid.blocked_cells() == b.grid.blocked_cells()
    assert a.run() == b.run()


def test_run_records_history(middle_row_blocked):
    sim = Simulator(cfg=Config(movement_budget=5), grid=middle_row_blocked)
    result = sim.run()
    assert sim.history == [(0, 0), (0, 1), (0, 2)]
    assert sim.result is result
    assert sim.stopped_early


def test_summary_metrics(t_corridor):
    sim = Simulator(cfg=Config(movement_budget=10), grid=t_corridor)
    sim.planner.reset_stats()
    sim.run()
    summary = sim.summary()

    assert summary["grid"] == {"rows": 3, "cols": 3, "free_cells": 5, "blocked_cells": 4}
    plan = summary["plan"]
    assert plan["unique_count"] == 5
    assert plan["path_length"] == 6
    assert plan["steps"] == 5
    assert plan["backtracks"] == 1
    assert plan["movement_budget"] == 10
    assert plan["stopped_early"] is True
    assert plan["coverage"] == pytest.approx(1.0)
    assert summary["planner"]["algorithm"] == "GreedyFrontier"
    assert summary["planner"]["call_count"] == 1


def test_budget_exhausted_is_not_early_stop(open_5x5):
    sim = Simulator(cfg=Config(movement_budget=4), grid=open_5x5)
    sim.run()
    assert not sim.stopped_early
    assert sim.summary()["plan"]["coverage"] == pytest.approx(5 / 25)


def test_summary_requires_run(open_5x5):
    sim = Simulator(cfg=Config(), grid=open_5x5)
    with pytest.raises(RuntimeError):
        sim.summary()


def test_summary_on_fully_blocked_grid(blocked_2x2):
    sim = Simulator(cfg=Config(movement_budget=3), grid=blocked_2x2)
    sim.run()
    assert sim.history == []
    assert sim.summary()["plan"]["coverage"] == 0.0


def test_log_events_prints_steps(t_corridor, capsys):
    sim = Simulator(cfg=Config(movement_budget=10), grid=t_corridor, log_events=True)
    sim.run()
    out = capsys.readouterr().out
    assert "[INIT]" in out
    assert "[STEP 1] explore -> (0, 1)" in out
    assert "[STEP 3] backtrack -> (0, 1)" in out
    assert "stopping early" in out


def test_silent_by_default(open_5x5, capsys):
    Simulator(cfg=Config(movement_budget=3), grid=open_5x5).run()
    assert capsys.readouterr().out == ""
