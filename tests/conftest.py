"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra.linalg import MatrixNxM, MatrixNxN


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def wide_3x5():
    """3x5 matrix used throughout the row-reduction and product tests."""
    return MatrixNxM.from_rows([
        [-1, -2, -3, -4, -5],
        [-5, -4, -3, -2, -1],
        [0, -3, 8, 3, -2],
    ])


@pytest.fixture
def diag_123():
    """diag(1, 2, 3)."""
    return MatrixNxN.from_rows([[1, 0, 0], [0, 2, 0], [0, 0, 3]])


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 5x5 as (matrix, ndarray)."""
    data = rng.standard_normal((5, 5)) + 5 * np.eye(5)
    return MatrixNxN.from_rows(data), data
