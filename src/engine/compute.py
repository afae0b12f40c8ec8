"""Orchestration: one sample in, one :class:`Stats` out."""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.common.constants import MEDIAN_RANK, P95_RANK, P99_RANK, Q1_RANK, Q3_RANK
from src.engine.encoders import generate_histogram, generate_trendline
from src.engine.errors import EmptyInputError
from src.engine.mode import find_modes
from src.engine.models import Stats, StatsConfig
from src.engine.moments import (
    calculate_kurtosis,
    calculate_skewness,
    coefficient_of_variation,
    has_negative,
    mean,
    variance,
)
from src.engine.outliers import iqr_outliers, zscore_outliers
from src.engine.percentile import calculate_percentile
from src.engine.trimmed import check_trim, trimmed_mean


def compute_stats(data: Sequence[float], config: StatsConfig | None = None) -> Stats:
    """Compute every statistic for *data*.

    Raises :class:`~src.engine.errors.EmptyInputError` for an empty sample
    and :class:`~src.engine.errors.InsufficientDataError` when the requested
    trim would discard everything. Both checks run before any statistic is
    computed. The caller's sequence is never modified.
    """
    cfg = config or StatsConfig()
    values = list(data)
    count = len(values)
    if count == 0:
        raise EmptyInputError()
    if cfg.trim_percent > 0:
        check_trim(count, cfg.trim_percent)

    sorted_data = sorted(values)

    total = sum(values)
    avg = mean(values)
    # A constant sample has no spread, whatever rounding the mean picked up.
    var = 0.0 if sorted_data[0] == sorted_data[-1] else variance(values, avg)
    std_dev = math.sqrt(var)

    q1 = calculate_percentile(sorted_data, Q1_RANK)
    q3 = calculate_percentile(sorted_data, Q3_RANK)
    cv, cv_valid = coefficient_of_variation(avg, std_dev)

    zscore = None
    if cfg.zscore_threshold > 0:
        zscore = zscore_outliers(values, avg, std_dev, cfg.zscore_threshold)

    trimmed, trimmed_pct = 0.0, 0.0
    if cfg.trim_percent > 0:
        trimmed = trimmed_mean(sorted_data, cfg.trim_percent)
        trimmed_pct = cfg.trim_percent

    return Stats(
        count=count,
        sum=total,
        mean=avg,
        median=calculate_percentile(sorted_data, MEDIAN_RANK),
        mode=find_modes(values),
        min=sorted_data[0],
        max=sorted_data[-1],
        std_dev=std_dev,
        variance=var,
        q1=q1,
        q3=q3,
        p95=calculate_percentile(sorted_data, P95_RANK),
        p99=calculate_percentile(sorted_data, P99_RANK),
        iqr=q3 - q1,
        outliers=iqr_outliers(values, q1, q3, cfg.iqr_multiplier),
        zscore_outliers=zscore,
        zscore_threshold=cfg.zscore_threshold,
        skewness=calculate_skewness(values, avg, std_dev),
        kurtosis=calculate_kurtosis(values, avg, std_dev),
        cv=cv,
        cv_valid=cv_valid,
        has_negative_data=has_negative(values),
        trimmed_mean=trimmed,
        trimmed_mean_pct=trimmed_pct,
        percentiles={
            p: calculate_percentile(sorted_data, p / 100)
            for p in cfg.custom_percentiles
        },
        histogram=generate_histogram(sorted_data, cfg.bins),
        # Trendline reads the input order, never the sorted copy.
        trendline=generate_trendline(values, cfg.bins),
    )
