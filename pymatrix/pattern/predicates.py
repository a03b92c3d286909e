"""
Structural predicates on matrices.

Every predicate returns False, never raises, when its shape precondition
(square input) is not met. Entry comparisons use the matrix's tolerance
unless ``tol`` is given.
"""

from __future__ import annotations

import numpy as np

from pymatrix.algebra.matrix import Matrix
from pymatrix.core.compute.tolerances import Tolerance


def _tol(m: Matrix, tol: Tolerance | None) -> Tolerance:
    return tol or m.tol


def _all_zero(values: np.ndarray, tol: Tolerance) -> bool:
    return bool(np.all(np.abs(values) < tol.epsilon))


def is_upper_triangular(m: Matrix, tol: Tolerance | None = None) -> bool:
    """Square with every entry below the diagonal zero."""
    if not m.is_square:
        return False
    a = m._data
    return _all_zero(a[np.tril_indices(m.rows, k=-1)], _tol(m, tol))


def is_lower_triangular(m: Matrix, tol: Tolerance | None = None) -> bool:
    return is_upper_triangular(m.transpose(), tol)


def is_diagonal(m: Matrix, tol: Tolerance | None = None) -> bool:
    return is_upper_triangular(m, tol) and is_lower_triangular(m, tol)


def is_upper_hessenberg(m: Matrix, tol: Tolerance | None = None) -> bool:
    """Square with every entry below the first sub-diagonal zero."""
    if not m.is_square:
        return False
    a = m._data
    return _all_zero(a[np.tril_indices(m.rows, k=-2)], _tol(m, tol))


def is_identity(m: Matrix, tol: Tolerance | None = None) -> bool:
    if not m.is_square:
        return False
    t = _tol(m, tol)
    return t.equal_arrays(m._data, np.eye(m.rows))


def is_symmetric(m: Matrix, tol: Tolerance | None = None) -> bool:
    """A == A^T."""
    if not m.is_square:
        return False
    return _tol(m, tol).equal_arrays(m._data, m._data.T)


def is_anti_symmetric(m: Matrix, tol: Tolerance | None = None) -> bool:
    """A == -A^T (skew-symmetric)."""
    if not m.is_square:
        return False
    return _tol(m, tol).equal_arrays(m._data, -m._data.T)


def is_hermitian(m: Matrix, tol: Tolerance | None = None) -> bool:
    """A == A*, the conjugate transpose (self-adjoint)."""
    if not m.is_square:
        return False
    return _tol(m, tol).equal_arrays(m._data, np.conj(m._data.T))


def is_orthogonal(m: Matrix, tol: Tolerance | None = None) -> bool:
    """A A^T == I."""
    if not m.is_square:
        return False
    return is_identity(m.multiply(m.transpose()), tol)


def is_unitary(m: Matrix, tol: Tolerance | None = None) -> bool:
    """A A* == I."""
    if not m.is_square:
        return False
    return is_identity(m.multiply(m.conjugate_transpose()), tol)
