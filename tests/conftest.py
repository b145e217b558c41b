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
def normal_sample(rng):
    """Continuous sample with no ties."""
    return rng.standard_normal(101)


@pytest.fixture
def tied_sample(rng):
    """Integer sample with many repeated values."""
    return rng.integers(0, 5, size=60)
