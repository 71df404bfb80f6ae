"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_1_to_9():
    """R: matrix(1:9, nrow=3, byrow=TRUE)."""
    return np.arange(1, 10, dtype=np.float64).reshape(3, 3)


@pytest.fixture
def matrix_with_missing():
    """Rows: no NaN, one NaN, all NaN, single non-NaN value."""
    return np.array([
        [-2.0, 0.0, 3.0, 4.0],
        [1.5, np.nan, 6.0, -1.0],
        [np.nan, np.nan, np.nan, np.nan],
        [np.nan, 2.0, np.nan, np.nan],
    ])
