"""
Complex scalars, vectors and dense matrices.

Public API:
    Complex         - immutable complex scalar with tolerance equality
    Vector          - fixed-length complex vector
    Matrix          - dense rectangular complex matrix
    SquareMatrix    - Matrix with rows == cols
    determinant(m), inverse(m), eigenvalues(m), eigenvectors(m, targets),
    power(m, k), trace(m), as_square(m)
"""

from pymatrix.algebra.scalar import Complex
from pymatrix.algebra.vector import Vector
from pymatrix.algebra.matrix import Matrix
from pymatrix.algebra.square import (
    SquareMatrix,
    as_square,
    determinant,
    inverse,
    eigenvalues,
    eigenvectors,
    power,
    trace,
)

__all__ = [
    "Complex",
    "Vector",
    "Matrix",
    "SquareMatrix",
    "as_square",
    "determinant",
    "inverse",
    "eigenvalues",
    "eigenvectors",
    "power",
    "trace",
]
