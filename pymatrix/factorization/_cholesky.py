"""
Cholesky factorization A = L L* of a Hermitian positive-definite matrix.

Column j of L is computed from columns 0..j-1:

    L[j, j] = sqrt(A[j, j] - sum_{k<j} |L[j, k]|^2)
    L[i, j] = (A[i, j] - sum_{k<j} L[i, k] conj(L[j, k])) / L[j, j]    i > j

Positive definiteness is verified along the way: every radicand must be
real and strictly positive under the tolerance.
"""

from __future__ import annotations

import numpy as np

from pymatrix.algebra.scalar import Complex
from pymatrix.algebra.square import SquareMatrix
from pymatrix.core.result import NoSolution, REASON_NOT_POSITIVE_DEFINITE
from pymatrix.factorization.solution import CholeskyParams


def cholesky_lower(m: SquareMatrix) -> CholeskyParams | NoSolution:
    """Compute L for a Hermitian matrix, or NoSolution if not positive definite."""
    tol = m.tol
    a = m.to_array()
    n = a.shape[0]
    L = np.zeros((n, n), dtype=np.complex128)

    for j in range(n):
        prev = L[j, :j]
        radicand = a[j, j] - np.sum(np.abs(prev) ** 2)
        if abs(radicand.imag) >= tol.epsilon or radicand.real < tol.epsilon:
            return NoSolution(
                reason=REASON_NOT_POSITIVE_DEFINITE,
                message=(
                    f"Matrix is not positive definite: pivot {j} radicand "
                    f"{complex(radicand):.6g} is not a positive real"
                ),
                matrix_name='m',
                info={'pivot_index': j, 'radicand': complex(radicand)},
            )
        root = Complex(radicand.real, 0.0, tol=tol).sqrt()
        L[j, j] = root.re
        if j + 1 < n:
            L[j + 1:, j] = (a[j + 1:, j] - L[j + 1:, :j] @ np.conj(prev)) / L[j, j]

    return CholeskyParams(L=SquareMatrix._from_array(L, tol))
