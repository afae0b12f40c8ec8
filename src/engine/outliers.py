"""IQR-fence and Z-score outlier detection."""

from __future__ import annotations

from collections.abc import Sequence


def iqr_outliers(
    data: Sequence[float], q1: float, q3: float, multiplier: float
) -> tuple[float, ...]:
    """Values strictly outside ``[q1 - k*iqr, q3 + k*iqr]``, ascending."""
    iqr = q3 - q1
    lower = q1 - multiplier * iqr
    upper = q3 + multiplier * iqr
    return tuple(sorted(x for x in data if x < lower or x > upper))


def zscore_outliers(
    data: Sequence[float], m: float, std_dev: float, threshold: float
) -> tuple[float, ...] | None:
    """Values whose ``|x - mean| / std_dev`` exceeds *threshold*, ascending.

    Returns ``None`` when detection is disabled (``threshold <= 0``) or the
    sample has no spread to measure against.
    """
    if threshold <= 0 or std_dev == 0:
        return None
    return tuple(sorted(x for x in data if abs(x - m) / std_dev > threshold))
