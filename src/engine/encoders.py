"""Block-glyph encodings of a sample's shape (histogram and trendline)."""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.common.constants import BLOCKS

_TOP = len(BLOCKS) - 1


def _glyphs(counts: Sequence[int]) -> str:
    """Scale bucket counts so the fullest bucket gets the tallest block."""
    peak = max(counts)
    return "".join(BLOCKS[c * _TOP // peak] if c else BLOCKS[0] for c in counts)


def _range_scale(lo: float, hi: float) -> float:
    """Power-of-two factor keeping ``(hi - lo) * 7`` finite for finite bounds."""
    return 1.0 if math.isfinite((hi - lo) * _TOP) else 0.0625


def _chunk_mean(part: Sequence[float]) -> float:
    total = sum(part)
    if math.isinf(total):
        return sum(v / len(part) for v in part)
    return total / len(part)


def generate_histogram(sorted_data: Sequence[float], bins: int) -> str:
    """Distribution of values across *bins* equal-width buckets.

    Order-independent; expects ascending input. Returns ``""`` for fewer
    than two values, a constant sample, or a range too narrow to divide
    into *bins* representable widths.
    """
    if len(sorted_data) < 2:
        return ""
    lo, hi = sorted_data[0], sorted_data[-1]
    if lo == hi:
        return ""

    scale = _range_scale(lo, hi)
    width = (hi * scale - lo * scale) / bins
    if width == 0:
        return ""
    counts = [0] * bins
    for v in sorted_data:
        idx = min(int((v * scale - lo * scale) / width), bins - 1)
        counts[idx] += 1
    return _glyphs(counts)


def generate_trendline(data: Sequence[float], bins: int) -> str:
    """Level of each consecutive chunk of *data*, in input order.

    The sample is cut into ``min(bins, n)`` contiguous chunks; each chunk's
    mean is placed on the block scale between the lowest and highest chunk
    means. Returns ``""`` for fewer than two values or flat chunk means.
    """
    n = len(data)
    if n < 2:
        return ""

    chunks = min(bins, n)
    means = [_chunk_mean(data[i * n // chunks : (i + 1) * n // chunks]) for i in range(chunks)]

    lo, hi = min(means), max(means)
    if lo == hi:
        return ""
    scale = _range_scale(lo, hi)
    span = hi * scale - lo * scale
    return "".join(
        BLOCKS[min(math.floor((m * scale - lo * scale) * _TOP / span), _TOP)] for m in means
    )
