"""
LU factorization without pivoting (Crout form).

A = L U with L general lower triangular and U unit upper triangular
(U[n, n] = 1). Column n of L and then row n of U are filled from entries
computed in earlier steps:

    L[i, n] = A[i, n] - sum_{k<n} L[i, k] U[k, n]                 i >= n
    U[n, j] = (A[n, j] - sum_{k<n} L[n, k] U[k, j]) / L[n, n]     j > n

No pivoting is done, so the factorization does not exist when A[0, 0] is
zero or when an intermediate pivot L[n, n] (n < N-1) is zero. A zero final
pivot is allowed: it only makes L singular.
"""

from __future__ import annotations

import numpy as np

from pymatrix.algebra.square import SquareMatrix
from pymatrix.core.result import NoSolution, REASON_NO_LU
from pymatrix.factorization.solution import LUParams


def crout_lu(m: SquareMatrix) -> LUParams | NoSolution:
    """Compute the LU factors of a square matrix, or NoSolution."""
    tol = m.tol
    a = m.to_array()
    n = a.shape[0]

    if tol.is_zero(a[0, 0]):
        return NoSolution(
            reason=REASON_NO_LU,
            message="No LU factorization: leading entry A[0, 0] is zero",
            matrix_name='m',
            info={'pivot_index': 0},
        )

    L = np.zeros((n, n), dtype=np.complex128)
    U = np.eye(n, dtype=np.complex128)
    L[:, 0] = a[:, 0]
    U[0, :] = a[0, :] / a[0, 0]

    for k in range(1, n):
        L[k:, k] = a[k:, k] - L[k:, :k] @ U[:k, k]
        if k == n - 1:
            break
        if tol.is_zero(L[k, k]):
            return NoSolution(
                reason=REASON_NO_LU,
                message=f"No LU factorization: pivot L[{k}, {k}] is zero",
                matrix_name='m',
                info={'pivot_index': k},
            )
        U[k, k + 1:] = (a[k, k + 1:] - L[k, :k] @ U[:k, k + 1:]) / L[k, k]

    return LUParams(
        L=SquareMatrix._from_array(L, tol),
        U=SquareMatrix._from_array(U, tol),
    )
