"""Linear interpolation between closest ranks (R-7 quantiles)."""

from __future__ import annotations

import math
from collections.abc import Sequence


def calculate_percentile(sorted_data: Sequence[float], p: float) -> float:
    """Value at fractional rank *p* (``0..1``) of ascending *sorted_data*.

    Empty input yields ``0.0``; *p* is not range-checked.
    """
    n = len(sorted_data)
    if n == 0:
        return 0.0
    if n == 1:
        return float(sorted_data[0])

    rank = p * (n - 1)
    lo = math.floor(rank)
    hi = math.ceil(rank)
    if lo == hi:
        return float(sorted_data[lo])

    below, above = sorted_data[lo], sorted_data[hi]
    weight = rank - lo
    value = below * (1 - weight) + above * weight
    # Rounding must not push the result outside its bracketing values.
    return min(max(value, below), above)
