"""Shared constants for the statistics calculator."""

import os

PROGRAM_NAME = "stats"
PROGRAM_VERSION = "1.0.0"

# ── Engine defaults ──────────────────────────────────────────────────────────
DEFAULT_IQR_MULTIPLIER = 1.5    # Tukey inner fence
DEFAULT_BINS = 16
MIN_BINS = 5
MAX_BINS = 50

# Fixed percentile set, as fractional ranks
Q1_RANK = 0.25
MEDIAN_RANK = 0.50
Q3_RANK = 0.75
P95_RANK = 0.95
P99_RANK = 0.99

# |mean| below this makes the coefficient of variation meaningless
CV_MEAN_EPSILON = 1e-10

# Lowest → highest intensity
BLOCKS = "▁▂▃▄▅▆▇█"

# ── Runtime settings ─────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("STATS_LOG_LEVEL", "INFO").upper()
