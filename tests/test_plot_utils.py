"""Tests for batch CSV plotting."""

import pandas as pd
import pytest

from plot_utils import plot_boxplots_from_csv, summarize_metric


@pytest.fixture
def batch_csv(tmp_path):
    df = pd.DataFrame({
        "purpose": ["t"] * 6,
        "n_blocked": [0, 0, 0, 40, 40, 40],
        "plan.coverage": [1.0, 0.9, 0.95, 0.5, 0.6, 0.4],
    })
    path = tmp_path / "batch_results.csv"
    df.to_csv(path, index=False)
    return path


def test_summarize_metric(batch_csv):
    df = pd.read_csv(batch_csv)
    stats = summarize_metric(df, "n_blocked", "plan.coverage")
    assert stats.loc[0, "n"] == 3
    assert stats.loc[40, "median"] == pytest.approx(0.5)


def test_plot_writes_pdf(batch_csv, tmp_path):
    out_dir = tmp_path / "plots"
    plot_boxplots_from_csv(
        csv_path=batch_csv,
        group_by=["n_blocked"],
        metrics=["plan.coverage"],
        output_dir=out_dir,
        show=False,
    )
    assert (out_dir / "box_plan_coverage_by_n_blocked.pdf").exists()


def test_missing_csv(tmp_path):
    with pytest.raises(FileNotFoundError):
        plot_boxplots_from_csv(tmp_path / "nope.csv", ["n_blocked"], ["plan.coverage"], show=False)


def test_missing_column(batch_csv):
    with pytest.raises(ValueError):
        plot_boxplots_from_csv(batch_csv, ["planner_name"], ["plan.coverage"], show=False)
