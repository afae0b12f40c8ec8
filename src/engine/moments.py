"""Central moments and the dispersion measures derived from them."""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.common.constants import CV_MEAN_EPSILON

# Powers are products, not `**`: overflow must saturate to inf, never raise.


def mean(data: Sequence[float]) -> float:
    return sum(data) / len(data) if data else 0.0


def variance(data: Sequence[float], m: float) -> float:
    """Sample variance (divisor ``n - 1``) around a precomputed mean *m*."""
    n = len(data)
    if n < 2:
        return 0.0
    return sum((x - m) * (x - m) for x in data) / (n - 1)


def calculate_skewness(data: Sequence[float], m: float, std_dev: float) -> float:
    """Adjusted Fisher-Pearson standardized moment coefficient.

    Zero for fewer than three points or a zero standard deviation.
    """
    n = len(data)
    if n < 3 or std_dev == 0:
        return 0.0
    cubed = 0.0
    for x in data:
        z = (x - m) / std_dev
        cubed += z * z * z
    return (n / ((n - 1) * (n - 2))) * cubed


def calculate_kurtosis(data: Sequence[float], m: float, std_dev: float) -> float:
    """Sample excess kurtosis (normal data scores about 0).

    Zero for fewer than four points or a zero standard deviation.
    """
    n = len(data)
    if n < 4 or std_dev == 0:
        return 0.0
    fourth = 0.0
    for x in data:
        z = (x - m) / std_dev
        fourth += z * z * z * z
    scale = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return scale * fourth - correction


def coefficient_of_variation(m: float, std_dev: float) -> tuple[float, bool]:
    """Return ``(cv_percent, valid)``; invalid when the mean is near zero."""
    if abs(m) < CV_MEAN_EPSILON:
        return 0.0, False
    return (std_dev / abs(m)) * 100, True


def has_negative(data: Sequence[float]) -> bool:
    return any(x < 0 for x in data)
