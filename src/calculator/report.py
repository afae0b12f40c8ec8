"""Text report for a computed :class:`~src.engine.models.Stats`."""

from __future__ import annotations

import math
from collections.abc import Iterable

from src.common.console import C, header, section
from src.engine.models import Stats

_LABEL = 18


def format_float(v: float) -> str:
    """Format without scientific notation, trimming trailing zeros."""
    if not math.isfinite(v):
        return str(v)
    if v == math.trunc(v):
        return f"{v:.0f}"
    return f"{v:.4f}".rstrip("0").rstrip(".")


def format_float_list(values: Iterable[float]) -> str:
    return "[" + " ".join(format_float(v) for v in values) + "]"


def interpret_skewness(s: float) -> str:
    magnitude = abs(s)
    if magnitude < 0.5:
        return "Fairly Symmetrical"
    side = "Right" if s > 0 else "Left"
    if magnitude < 1.0:
        return f"Moderately {side} Skewed"
    return f"Highly {side} Skewed"


def interpret_kurtosis(k: float) -> str:
    if k < -1:
        return "Platykurtic - flat, thin tails"
    if k > 1:
        return "Leptokurtic - peaked, heavy tails"
    return "Mesokurtic - normal-like"


def interpret_cv(cv: float) -> str:
    if cv < 15:
        return "Low Variability"
    if cv < 30:
        return "Moderate Variability"
    return "High Variability"


def _row(label: str, value: str) -> str:
    return f"  {label + ':':<{_LABEL}} {value}"


def render_stats(stats: Stats, *, log_transformed: bool = False) -> str:
    """Render *stats* as a sectioned, aligned plain-text report.

    Optional features (Z-score outliers, trimmed mean, custom percentiles,
    encodings) only get a line when they were requested or produced output.
    """
    title = "DESCRIPTIVE STATISTICS"
    if log_transformed:
        title += " (log-transformed)"

    lines = [header(title)]
    lines.append(_row("Count", str(stats.count)))
    lines.append(_row("Sum", format_float(stats.sum)))
    lines.append(_row("Min", format_float(stats.min)))
    lines.append(_row("Max", format_float(stats.max)))

    lines.append(section("Central Tendency"))
    lines.append(_row("Mean", format_float(stats.mean)))
    lines.append(_row("Median (p50)", format_float(stats.median)))
    if not stats.mode:
        lines.append(_row("Mode", "None"))
    elif len(stats.mode) == 1:
        lines.append(_row("Mode", format_float(stats.mode[0])))
    else:
        lines.append(_row("Mode (multi)", format_float_list(stats.mode)))
    if stats.trimmed_mean_pct > 0:
        label = f"Trimmed Mean ({format_float(stats.trimmed_mean_pct)}%)"
        lines.append(_row(label, format_float(stats.trimmed_mean)))

    lines.append(section("Spread & Distribution"))
    lines.append(_row("Std Deviation", format_float(stats.std_dev)))
    lines.append(_row("Variance", format_float(stats.variance)))
    if stats.cv_valid:
        cv = f"{format_float(stats.cv)}% ({interpret_cv(stats.cv)})"
        lines.append(_row("CV", cv))
        if stats.has_negative_data:
            lines.append(
                f"  {C.YELLOW}note: data contains negative values; "
                f"CV assumes a ratio scale{C.NC}"
            )
    lines.append(_row("Quartile 1 (p25)", format_float(stats.q1)))
    lines.append(_row("Quartile 3 (p75)", format_float(stats.q3)))
    lines.append(_row("Percentile (p95)", format_float(stats.p95)))
    lines.append(_row("Percentile (p99)", format_float(stats.p99)))
    for rank, value in sorted(stats.percentiles.items()):
        lines.append(_row(f"Percentile (p{format_float(rank)})", format_float(value)))
    lines.append(_row("IQR", format_float(stats.iqr)))

    lines.append(section("Shape"))
    lines.append(
        _row("Skewness", f"{format_float(stats.skewness)} ({interpret_skewness(stats.skewness)})")
    )
    lines.append(
        _row("Kurtosis", f"{format_float(stats.kurtosis)} ({interpret_kurtosis(stats.kurtosis)})")
    )

    lines.append(section("Outliers"))
    lines.append(
        _row("IQR method", format_float_list(stats.outliers) if stats.outliers else "None")
    )
    if stats.zscore_threshold > 0:
        label = f"Z-score (>{format_float(stats.zscore_threshold)})"
        found = stats.zscore_outliers
        lines.append(_row(label, format_float_list(found) if found else "None"))

    if stats.histogram or stats.trendline:
        lines.append(section("Shape Encodings"))
        if stats.histogram:
            lines.append(_row("Histogram", stats.histogram))
        if stats.trendline:
            lines.append(_row("Trendline", stats.trendline))

    return "\n".join(lines)
