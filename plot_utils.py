#!/usr/bin/env python3
"""
plot_utils.py

Boxplots of coverage metrics from the batch CSV, using seaborn.

Typical workflow:

1) Run batch experiments:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_boxplots_from_csv

        plot_boxplots_from_csv(
            csv_path="outputs_batch/batch_results.csv",
            group_by=["n_blocked"],
            metrics=["plan.coverage", "plan.backtracks"],
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using the DEFAULT_* constants at the bottom):
        python plot_utils.py
"""

from pathlib import Path
from typing import Sequence, Optional, Union, Dict

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

import seaborn as sns


PathLike = Union[str, Path]


def summarize_metric(df: pd.DataFrame, group_col: str, metric: str) -> pd.DataFrame:
    """Count, median and quartiles of `metric` per value of `group_col`."""
    return (
        df[[group_col, metric]]
        .dropna()
        .groupby(group_col)[metric]
        .agg(
            n="count",
            median="median",
            q1=lambda s: s.quantile(0.25),
            q3=lambda s: s.quantile(0.75),
        )
    )


def plot_boxplots_from_csv(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    x_axis_label: Optional[str] = None,
    title_template: Optional[str] = None,
    y_axis_labels: Optional[Dict[str, str]] = None,
    log_scale: bool = False,
    palette_name: str = "colorblind",
) -> None:
    """
    Read a batch CSV and draw one boxplot per metric, grouped by the given columns.

    Parameters
    ----------
    csv_path : str or Path
        Path to the CSV file (e.g. 'outputs_batch/batch_results.csv').
    group_by : list[str]
        Column(s) to group by. Several columns are joined into one
        " | "-separated label per row.
    metrics : list[str]
        Numeric columns to plot, e.g. ['plan.coverage', 'plan.unique_count'].
    output_dir : str or Path or None
        If given, each plot is saved there as a PDF.
    show : bool
        Show plots interactively; otherwise figures are closed after saving.
    log_scale : bool
        Log-scale y-axis (useful for runtimes).
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)

    group_by = list(group_by)
    metrics = list(metrics)

    for col in group_by + metrics:
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found in CSV. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    if len(group_by) == 1:
        group_label_col = group_by[0]
    else:
        group_label_col = "__group_label__"
        df[group_label_col] = df[group_by].astype(str).agg(" | ".join, axis=1)

    # seaborn treats numeric hue columns as continuous
    df[group_label_col] = df[group_label_col].astype(str)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[group_label_col].unique())
    palette = dict(zip(categories, sns.color_palette(palette_name, n_colors=len(categories))))
    x_label_text = x_axis_label if x_axis_label is not None else " | ".join(group_by)

    sns.set_style("whitegrid")
    sns.set_context("paper", font_scale=1.2)

    for metric in metrics:
        sub = df[[group_label_col, metric]].dropna()
        if sub.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        stats = summarize_metric(sub, group_label_col, metric).reindex(categories)
        print(f"\n[STATS] {metric}")
        print(stats.to_string(float_format=lambda x: f"{x:.4g}"))

        fig, ax = plt.subplots(figsize=(max(6.0, 1.5 * len(categories)), 6))
        sns.boxplot(
            data=sub,
            x=group_label_col,
            y=metric,
            hue=group_label_col,
            order=categories,
            palette=palette,
            dodge=False,
            ax=ax,
        )

        if title_template is None:
            title_text = f"{metric} by {', '.join(group_by)}"
        else:
            title_text = title_template.format(metric=metric)
        ax.set_title(title_text, fontsize=16, pad=28)
        ax.set_xlabel(x_label_text, fontsize=14)
        ax.set_ylabel(
            y_axis_labels.get(metric, metric) if y_axis_labels else metric,
            fontsize=14,
        )
        plt.setp(ax.get_xticklabels(), rotation=45, ha="right")

        if log_scale:
            ax.set_yscale("log")

        handles = [mpatches.Patch(color=palette[c], label=c) for c in categories]
        ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, 1.08),
            ncol=min(len(handles), 10),
            frameon=False,
            fontsize=10,
        )

        fig.tight_layout(rect=[0, 0, 1, 0.99])

        if output_dir is not None:
            safe_metric = metric.replace(".", "_").replace(" ", "_")
            fname = output_dir / f"box_{safe_metric}_by_{'_'.join(group_by)}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            print(f"Saved boxplot for '{metric}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_GROUP_BY = ["n_blocked", "movement_budget"]
DEFAULT_METRICS = ["plan.coverage", "plan.unique_count", "plan.backtracks"]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    print(f"Reading CSV: {DEFAULT_CSV}")
    print(f"Grouping by: {DEFAULT_GROUP_BY}")
    print(f"Metrics: {DEFAULT_METRICS}")

    plot_boxplots_from_csv(
        csv_path=DEFAULT_CSV,
        group_by=DEFAULT_GROUP_BY,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
        x_axis_label="Random obstacles | movement budget",
        title_template="{metric}",
        y_axis_labels={
            "plan.coverage": "Fraction of free cells visited",
            "plan.unique_count": "Unique cells visited",
            "plan.backtracks": "Backtrack steps",
        },
    )


if __name__ == "__main__":
    _run_with_defaults()
