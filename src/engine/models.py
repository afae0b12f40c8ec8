"""Configuration and result values exchanged with the statistics engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from src.common.constants import (
    DEFAULT_BINS,
    DEFAULT_IQR_MULTIPLIER,
    MAX_BINS,
    MIN_BINS,
)
from src.engine.errors import ConfigError


@dataclass(frozen=True)
class StatsConfig:
    """Options recognised by :func:`src.engine.compute.compute_stats`.

    ``zscore_threshold`` and ``trim_percent`` use ``0`` to mean "disabled".
    """

    custom_percentiles: tuple[float, ...] = ()
    iqr_multiplier: float = DEFAULT_IQR_MULTIPLIER
    bins: int = DEFAULT_BINS
    zscore_threshold: float = 0.0
    trim_percent: float = 0.0

    def __post_init__(self) -> None:
        # Accept any iterable of ranks but store an immutable tuple.
        object.__setattr__(
            self, "custom_percentiles", tuple(float(p) for p in self.custom_percentiles)
        )
        for p in self.custom_percentiles:
            if not 0 <= p <= 100:
                raise ConfigError(f"percentile {p:g} is outside [0, 100]")
        if self.iqr_multiplier < 0:
            raise ConfigError(f"IQR multiplier must be >= 0, got {self.iqr_multiplier:g}")
        if not MIN_BINS <= self.bins <= MAX_BINS:
            raise ConfigError(
                f"bins must be between {MIN_BINS} and {MAX_BINS}, got {self.bins}"
            )
        if self.zscore_threshold < 0:
            raise ConfigError(
                f"Z-score threshold must be >= 0, got {self.zscore_threshold:g}"
            )
        if not 0 <= self.trim_percent < 100:
            raise ConfigError(
                f"trim percent must be in [0, 100), got {self.trim_percent:g}"
            )


@dataclass(frozen=True)
class Stats:
    """Every statistic computed for one sample."""

    count: int
    sum: float
    mean: float
    median: float
    mode: tuple[float, ...]
    min: float
    max: float
    std_dev: float
    variance: float
    q1: float
    q3: float
    p95: float
    p99: float
    iqr: float
    outliers: tuple[float, ...]
    zscore_outliers: tuple[float, ...] | None
    zscore_threshold: float
    skewness: float
    kurtosis: float
    cv: float
    cv_valid: bool
    has_negative_data: bool
    trimmed_mean: float
    trimmed_mean_pct: float
    percentiles: Mapping[float, float] = field(default_factory=dict)
    histogram: str = ""
    trendline: str = ""

    def __post_init__(self) -> None:
        # Read-only view over a private copy; the result is never mutated.
        object.__setattr__(self, "percentiles", MappingProxyType(dict(self.percentiles)))

    def to_dict(self) -> dict:
        """Return a JSON-serialisable copy of all fields."""
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["mode"] = list(self.mode)
        out["outliers"] = list(self.outliers)
        if self.zscore_outliers is not None:
            out["zscore_outliers"] = list(self.zscore_outliers)
        out["percentiles"] = {f"{k:g}": v for k, v in sorted(self.percentiles.items())}
        return out
