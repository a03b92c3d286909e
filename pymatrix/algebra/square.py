"""
Square matrices and the operations that only make sense for them.

The operations are module-level functions accepting any Matrix; they check
squareness at the boundary (NotSquareError) and are mirrored as SquareMatrix
methods for convenience.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from pymatrix.algebra.matrix import Matrix
from pymatrix.algebra.scalar import Complex
from pymatrix.algebra.vector import Vector
from pymatrix.algebra import _eigen
from pymatrix.core.compute.tolerances import Tolerance
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import NoSolution, REASON_SINGULAR
from pymatrix.core.validation import check_square


class SquareMatrix(Matrix):
    """
    Matrix with rows == cols, enforced at construction.

    Construction:
        SquareMatrix([[1, 2], [3, 4]])
        SquareMatrix(4)                 # 4 x 4 identity
        SquareMatrix.identity(4)
    """

    __slots__ = ()

    def _validate_shape(self, shape: tuple[int, int]) -> None:
        check_square(shape, 'data')

    def _like(self, arr: NDArray) -> Matrix:
        if arr.ndim == 2 and arr.shape[0] == arr.shape[1]:
            return SquareMatrix._from_array(arr, self._tol)
        return Matrix._from_array(arr, self._tol)

    @classmethod
    def identity(cls, n: int, *, tol: Tolerance | None = None) -> SquareMatrix:
        return cls(n, tol=tol)

    @property
    def n(self) -> int:
        return self.rows

    def determinant(self) -> Complex:
        return determinant(self)

    def inverse(self) -> SquareMatrix | NoSolution:
        return inverse(self)

    def eigenvalues(self) -> tuple[Complex, ...]:
        return eigenvalues(self)

    def eigenvectors(self, targets: Sequence[Complex | complex] | None = None) -> tuple[Vector, ...]:
        return eigenvectors(self, targets)

    def power(self, k: int) -> SquareMatrix:
        return power(self, k)

    def trace(self) -> Complex:
        return trace(self)

    def __pow__(self, k: int) -> SquareMatrix:
        return power(self, k)


def as_square(m: Matrix) -> SquareMatrix:
    """
    View any square Matrix as a SquareMatrix.

    Raises:
        NotSquareError: If m is not square
    """
    if isinstance(m, SquareMatrix):
        return m
    check_square(m.shape, 'm')
    return SquareMatrix._from_array(m._data, m.tol)


def trace(m: Matrix) -> Complex:
    """Sum of the diagonal entries."""
    m = as_square(m)
    z = complex(np.trace(m._data))
    return Complex(z.real, z.imag, tol=m.tol)


def determinant(m: Matrix) -> Complex:
    """
    Determinant by Gaussian elimination with partial pivoting.

    The product of the pivots times the sign of the row permutation. A
    column whose best pivot candidate is below epsilon times the largest
    entry of that column in m makes the determinant exactly zero.

    Raises:
        NotSquareError: If m is not square
    """
    m = as_square(m)
    tol = m.tol
    a = m.to_array()
    n = a.shape[0]

    if n == 1:
        return Complex(a[0, 0].real, a[0, 0].imag, tol=tol)

    column_scale = np.max(np.abs(a), axis=0)
    det = 1.0 + 0j
    for k in range(n):
        p = k + int(np.argmax(np.abs(a[k:, k])))
        if abs(a[p, k]) <= tol.epsilon * column_scale[k]:
            return Complex(0.0, 0.0, tol=tol)
        if p != k:
            a[[k, p], :] = a[[p, k], :]
            det = -det
        det *= a[k, k]
        if k + 1 < n:
            mult = a[k + 1:, k] / a[k, k]
            a[k + 1:, k:] -= np.outer(mult, a[k, k:])
    return Complex(det.real, det.imag, tol=tol)


def inverse(m: Matrix) -> SquareMatrix | NoSolution:
    """
    Inverse by Gauss-Jordan elimination with partial pivoting.

    Returns NoSolution (reason 'singular') when the determinant is zero
    under the tolerance, or when a pivot is below epsilon times the largest
    entry of its column in m.

    Raises:
        NotSquareError: If m is not square
    """
    m = as_square(m)
    tol = m.tol
    det = determinant(m)
    if det.is_zero():
        return NoSolution(
            reason=REASON_SINGULAR,
            message=f"Matrix is singular: |det| = {abs(det):.3g} < {tol.epsilon:g}",
            matrix_name='m',
            info={'determinant': abs(det)},
        )

    n = m.n
    a = m.to_array()
    column_scale = np.max(np.abs(a), axis=0)
    aug = np.hstack([a, np.eye(n, dtype=np.complex128)])
    for k in range(n):
        p = k + int(np.argmax(np.abs(aug[k:, k])))
        if abs(aug[p, k]) <= tol.epsilon * column_scale[k]:
            # |det| above epsilon but the column collapsed during elimination
            return NoSolution(
                reason=REASON_SINGULAR,
                message=f"Matrix is numerically singular: no pivot in column {k}",
                matrix_name='m',
                info={'determinant': abs(det), 'pivot_column': k},
            )
        if p != k:
            aug[[k, p], :] = aug[[p, k], :]
        aug[k, :] /= aug[k, k]
        others = np.arange(n) != k
        aug[others, :] -= np.outer(aug[others, k], aug[k, :])
    return SquareMatrix._from_array(aug[:, n:], tol)


def power(m: Matrix, k: int) -> SquareMatrix:
    """
    Integer power by repeated multiplication.

    ``k == 0`` gives the identity, ``k >= 1`` multiplies k copies.

    Raises:
        NotSquareError: If m is not square
        ValidationError: If k is negative or not an integer
    """
    m = as_square(m)
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise ValidationError(f"k: exponent must be an integer, got {k!r}")
    if k < 0:
        raise ValidationError(
            f"k: negative exponent {k} not supported; compose with inverse() explicitly"
        )
    result = np.eye(m.n, dtype=np.complex128)
    a = m._data
    for _ in range(int(k)):
        result = result @ a
    return SquareMatrix._from_array(result, m.tol)


def eigenvalues(m: Matrix) -> tuple[Complex, ...]:
    """
    All eigenvalues, with multiplicity.

    Hessenberg reduction followed by Wilkinson-shifted QR iteration with
    deflation. Ordered as the diagonal of the converged triangular form.

    Raises:
        NotSquareError: If m is not square
        ConvergenceError: If an eigenvalue fails to deflate
    """
    m = as_square(m)
    values = _eigen.eigenvalues(m.to_array(), m.tol)
    return tuple(Complex(z.real, z.imag, tol=m.tol) for z in values)


def eigenvectors(
    m: Matrix,
    targets: Sequence[Complex | complex] | None = None,
) -> tuple[Vector, ...]:
    """
    Unit eigenvectors for the given eigenvalues (all eigenvalues by default).

    Each vector spans part of the null space of ``A - lambda I``. For a
    repeated eigenvalue the same vector is returned for every occurrence.

    Raises:
        NotSquareError: If m is not square
        NumericalError: If a target is not an eigenvalue within tolerance
    """
    m = as_square(m)
    if targets is None:
        targets = eigenvalues(m)
    a = m.to_array()
    vectors = []
    for lam in targets:
        x = _eigen.eigenvector(a, complex(lam), m.tol)
        vectors.append(Vector._from_array(x, m.tol))
    return tuple(vectors)
