"""Symmetric trimmed mean."""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.engine.errors import InsufficientDataError


def trim_count(n: int, trim_percent: float) -> int:
    """Number of values dropped from *each* end of a sample of size *n*."""
    return math.floor(n * trim_percent / 100)


def check_trim(n: int, trim_percent: float) -> None:
    """Raise :class:`InsufficientDataError` if the trim leaves nothing."""
    if n - 2 * trim_count(n, trim_percent) <= 0:
        raise InsufficientDataError(n, trim_percent)


def trimmed_mean(sorted_data: Sequence[float], trim_percent: float) -> float:
    """Mean of *sorted_data* after dropping ``trim_percent``% from both ends."""
    n = len(sorted_data)
    check_trim(n, trim_percent)
    k = trim_count(n, trim_percent)
    kept = sorted_data[k : n - k]
    return sum(kept) / len(kept)
