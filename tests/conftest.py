"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.algebra import Matrix, SquareMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_complex_square(rng):
    """Dense 5x5 complex matrix with standard normal parts."""
    a = rng.standard_normal((5, 5)) + 1j * rng.standard_normal((5, 5))
    return SquareMatrix(a)


@pytest.fixture
def random_hpd(rng):
    """Hermitian positive-definite 4x4 matrix, B B* + 4 I."""
    b = rng.standard_normal((4, 4)) + 1j * rng.standard_normal((4, 4))
    return SquareMatrix(b @ b.conj().T + 4 * np.eye(4))


@pytest.fixture
def det_three():
    """[[1,2,3],[4,5,6],[7,8,7]], determinant 6."""
    return SquareMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 7]])


@pytest.fixture
def complex_three():
    """3x3 complex matrix with determinant -118 - 84i."""
    return SquareMatrix([
        [2 + 1j, 3 - 1j, 4 - 3j],
        [4, 6 - 1j, 2 + 5j],
        [3j, 2 - 1j, 1 + 3j],
    ])


@pytest.fixture
def tall():
    """4x2 real matrix with independent columns."""
    return Matrix([[1, 2], [3, 4], [5, 6], [7, 9]])
