"""
Schur decomposition by successive eigenvector deflation.

For k = 0 .. n-2, one eigenpair (lambda, x) of the trailing block
curr[k:, k:] is found and the Householder reflector H with H e_0 ~ x is
built. The embedding E = diag(I_k, H) is applied as a similarity,
curr <- E* curr E, which zeroes column k below the diagonal, and is
accumulated into U <- U E. E is never materialized: only the rows and
columns k: of the working buffer are touched.

At the end U is unitary and T = U* A U is upper triangular within
tolerance.
"""

from __future__ import annotations

import numpy as np

from pymatrix.algebra import _eigen
from pymatrix.algebra.square import SquareMatrix
from pymatrix.algebra.vector import Vector
from pymatrix.core.compute.timing import Timer
from pymatrix.factorization.solution import SchurParams


def deflation_schur(m: SquareMatrix, timer: Timer) -> tuple[SchurParams, dict]:
    """
    Compute U and T for a square matrix.

    Each step is timed in two sections of ``timer``: 'eigenpair' and
    'reflect'.

    Returns
    -------
    tuple
        (SchurParams, diagnostics dict with 'deflations' and 'eigenvalues')
    """
    tol = m.tol
    a = m.to_array()
    n = a.shape[0]
    curr = a.copy()
    u = np.eye(n, dtype=np.complex128)

    for k in range(n - 1):
        block = curr[k:, k:]
        with timer.section('eigenpair'):
            lam = _eigen.eigenvalues(block.copy(), tol)[0]
            x = _eigen.eigenvector(block, lam, tol)

        with timer.section('reflect'):
            h = Vector._from_array(x, tol).generate_unitary_matrix().to_array()
            h_star = np.conj(h.T)
            curr[k:, :] = h_star @ curr[k:, :]
            curr[:, k:] = curr[:, k:] @ h
            u[:, k:] = u[:, k:] @ h

    t = np.conj(u.T) @ a @ u
    params = SchurParams(
        U=SquareMatrix._from_array(u, tol),
        T=SquareMatrix._from_array(t, tol),
    )
    diagnostics = {
        'deflations': max(n - 1, 0),
        'eigenvalues': tuple(complex(z) for z in np.diag(t)),
    }
    return params, diagnostics
