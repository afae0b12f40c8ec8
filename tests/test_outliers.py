"""Tests for IQR-fence and Z-score outlier detection."""

import pytest

from src.engine.outliers import iqr_outliers, zscore_outliers

Q1, Q3 = 27.5, 72.625
MEAN, STD = 51.725806451612904, 33.57506


class TestIqrOutliers:
    """Tests for iqr_outliers on the 31-value fixture."""

    @pytest.mark.parametrize(
        ("k", "expected"),
        [(1.5, (150.0,)), (3.0, ()), (1.0, (150.0,))],
    )
    def test_multipliers(self, test_data, k, expected):
        assert iqr_outliers(test_data, Q1, Q3, k) == expected

    def test_fence_is_exclusive(self):
        """Values exactly on a fence are not flagged."""
        # q1=2, q3=4, k=1 -> fences [0, 6]
        assert iqr_outliers([0.0, 6.0, 6.5, -0.5], 2.0, 4.0, 1.0) == (-0.5, 6.5)

    def test_duplicates_kept_per_occurrence(self):
        assert iqr_outliers([100.0, 1.0, 100.0], 1.0, 2.0, 1.5) == (100.0, 100.0)


class TestZscoreOutliers:
    """Tests for zscore_outliers."""

    def test_threshold_two(self, test_data):
        """150 has z of about 2.93."""
        assert zscore_outliers(test_data, MEAN, STD, 2.0) == (150.0,)

    def test_threshold_three_finds_none(self, test_data):
        """Enabled but empty is an empty tuple, not None."""
        assert zscore_outliers(test_data, MEAN, STD, 3.0) == ()

    def test_disabled(self, test_data):
        assert zscore_outliers(test_data, MEAN, STD, 0) is None

    def test_zero_std_dev(self):
        """A constant sample is never divided by zero."""
        assert zscore_outliers([5.0, 5.0, 5.0], 5.0, 0.0, 2.0) is None

    def test_sorted_ascending(self):
        data = [100.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -100.0]
        assert zscore_outliers(data, 0.0, 47.14, 1.5) == (-100.0, 100.0)
