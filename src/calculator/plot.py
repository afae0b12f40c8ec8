"""PNG histogram export (matplotlib)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from src.engine.models import Stats  # noqa: E402

# Palette
COLOR_BARS = "#2980b9"
COLOR_CENTER = "#e74c3c"
COLOR_QUARTILE = "#7f8c8d"
COLOR_OUTLIER = "#e67e22"


def save_histogram_plot(
    data: Sequence[float],
    stats: Stats,
    path: str | Path,
    *,
    bins: int,
) -> Path:
    """Plot *data* in *bins* equal-width buckets over ``[min, max]``.

    Mean, median and quartiles are drawn as vertical markers and IQR
    outliers as points on the axis. Returns the written path.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    values = np.asarray(data, dtype=float)
    if stats.min == stats.max:
        edges = np.array([stats.min - 0.5, stats.max + 0.5])
    else:
        edges = np.linspace(stats.min, stats.max, bins + 1)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.hist(values, bins=edges, color=COLOR_BARS, edgecolor="black", linewidth=0.5)

    ax.axvline(stats.mean, color=COLOR_CENTER, linewidth=2, label=f"mean = {stats.mean:,.4g}")
    ax.axvline(
        stats.median,
        color=COLOR_CENTER,
        linewidth=2,
        linestyle="--",
        label=f"median = {stats.median:,.4g}",
    )
    for q, name in ((stats.q1, "Q1"), (stats.q3, "Q3")):
        ax.axvline(q, color=COLOR_QUARTILE, linewidth=1, linestyle=":", label=name)

    if stats.outliers:
        ax.scatter(
            stats.outliers,
            np.zeros(len(stats.outliers)),
            color=COLOR_OUTLIER,
            zorder=3,
            clip_on=False,
            label="outliers (IQR)",
        )

    ax.set_xlabel("Value", fontsize=11)
    ax.set_ylabel("Count", fontsize=11)
    ax.set_title(f"Distribution (n={stats.count:,})", fontsize=13)
    ax.legend(fontsize=9)
    ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    fig.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out
