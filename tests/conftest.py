"""Shared fixtures for the statistics calculator tests."""

import pytest
import structlog

# 31 values: 50 appears four times, mixed integer/float spellings, one
# high outlier (150).
TEST_DATA = [
    5, 10, 15.5, 20, 25.00, 30, 35.0, 40, 45, 50,
    55, 60, 65, 70, 75.25, 80, 85, 90, 95, 100,
    12.5, 37.5, 62.50, 87.5, 50, 50, 50, 3, 150, 7.75, 42.0,
]


@pytest.fixture
def test_data() -> list[float]:
    return [float(v) for v in TEST_DATA]


@pytest.fixture
def sorted_test_data(test_data: list[float]) -> list[float]:
    return sorted(test_data)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any global structlog configuration made by the code under test."""
    yield
    structlog.reset_defaults()
