"""Tests for the histogram and trendline encoders."""

import pytest

from src.common.constants import BLOCKS
from src.engine.encoders import generate_histogram, generate_trendline


class TestGenerateHistogram:
    """Tests for generate_histogram."""

    @pytest.mark.parametrize("bins", [5, 8, 16, 50])
    def test_length_and_palette(self, sorted_test_data, bins):
        result = generate_histogram(sorted_test_data, bins)
        assert len(result) == bins
        assert set(result) <= set(BLOCKS)

    def test_uniform_fills_every_bucket(self):
        data = [float(i) for i in range(1, 17)]
        assert generate_histogram(data, 16) == BLOCKS[-1] * 16

    def test_maximum_lands_in_last_bucket(self):
        assert generate_histogram([0.0, 10.0], 5) == BLOCKS[-1] + BLOCKS[0] * 3 + BLOCKS[-1]

    def test_levels_scale_with_peak(self):
        """Peak bucket gets the top block, half the peak gets level 3."""
        data = [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 5.0, 5.0, 5.0, 10.0, 10.0, 10.0]
        # buckets of width 2: [6, 0, 3, 0, 3]
        assert generate_histogram(data, 5) == BLOCKS[7] + BLOCKS[0] + BLOCKS[3] + BLOCKS[0] + BLOCKS[3]

    def test_single_value(self):
        assert generate_histogram([42.0], 16) == ""

    def test_all_identical(self):
        assert generate_histogram([5.0, 5.0, 5.0, 5.0], 16) == ""


class TestGenerateTrendline:
    """Tests for generate_trendline."""

    @pytest.mark.parametrize("bins", [8, 16])
    def test_length_and_palette(self, test_data, bins):
        result = generate_trendline(test_data, bins)
        assert len(result) == bins
        assert set(result) <= set(BLOCKS)

    def test_ascending_input_is_non_decreasing(self):
        result = generate_trendline([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0], 8)
        assert result == BLOCKS
        levels = [BLOCKS.index(c) for c in result]
        assert levels == sorted(levels)

    def test_preserves_input_order(self):
        """Descending input descends; sorting first would hide this."""
        data = [float(v) for v in range(40, 0, -1)]
        levels = [BLOCKS.index(c) for c in generate_trendline(data, 10)]
        assert levels == sorted(levels, reverse=True)
        assert levels[0] == 7 and levels[-1] == 0

    def test_fewer_values_than_bins(self):
        assert generate_trendline([1.0, 3.0, 2.0], 16) == BLOCKS[0] + BLOCKS[7] + BLOCKS[3]

    def test_single_value(self):
        assert generate_trendline([42.0], 16) == ""

    def test_all_identical(self):
        assert generate_trendline([5.0, 5.0, 5.0, 5.0], 16) == ""

    def test_flat_chunk_means(self):
        """Varying data whose chunks average out the same is flat."""
        assert generate_trendline([1.0, 3.0, 3.0, 1.0, 2.0, 2.0], 3) == ""


class TestEncodersExtremeRanges:
    """Ranges at the edges of float precision neither raise nor misplace values."""

    def test_histogram_span_beyond_float_max(self):
        """max - min overflows to inf, buckets are still equal-width."""
        result = generate_histogram([-1e308, 0.0, 1e308], 5)
        assert result == BLOCKS[7] + BLOCKS[0] + BLOCKS[7] + BLOCKS[0] + BLOCKS[7]

    def test_histogram_near_float_max_default_bins(self):
        data = [-1.7976931348623157e308, 1.7976931348623157e308]
        result = generate_histogram(data, 16)
        assert len(result) == 16
        assert result[0] == BLOCKS[-1] and result[-1] == BLOCKS[-1]

    def test_histogram_subnormal_range(self):
        """Bucket width underflows to zero; nothing to draw."""
        assert generate_histogram([0.0, 5e-324], 16) == ""

    def test_trendline_span_beyond_float_max(self):
        assert generate_trendline([-1e308, 0.0, 1e308], 16) == BLOCKS[0] + BLOCKS[3] + BLOCKS[7]

    def test_trendline_chunk_sum_overflows(self):
        """A chunk whose sum is inf still averages to a finite mean."""
        data = [1.7e308, 1.7e308, -1.7e308, -1.7e308]
        assert generate_trendline(data, 2) == BLOCKS[7] + BLOCKS[0]
