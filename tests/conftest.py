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
def a2():
    """A = [[1, 2], [3, 4]]."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b2():
    """B = [[5, 6], [7, 8]]."""
    return Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def well_conditioned(rng):
    """Random diagonally dominant matrices of orders 1 through 6."""
    out = []
    for n in range(1, 7):
        data = rng.standard_normal((n, n)) + n * np.eye(n)
        out.append(Matrix.from_array(data))
    return out
