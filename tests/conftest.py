"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mat1():
    """[[1, 2], [3, 4]] with int elements."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def mat2():
    """[[5, 6], [7, 8]] with int elements."""
    return Matrix.from_rows([[5, 6], [7, 8]])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for int matrices with entries in [-50, 50]."""
    def make(rows, cols):
        return Matrix.from_array(rng.integers(-50, 51, size=(rows, cols)))
    return make


@pytest.fixture
def random_float_matrix(rng):
    """Factory for float64 matrices with standard normal entries."""
    def make(rows, cols):
        return Matrix.from_array(rng.standard_normal((rows, cols)))
    return make
