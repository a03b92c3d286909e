"""
Eigenvalue and eigenvector kernels on complex128 arrays.

Eigenvalues:
    1. Reduce to upper Hessenberg form (pymatrix.pattern.hessenberg).
    2. Run Wilkinson-shifted QR iteration, built from Givens rotations, on
       the active leading block h[:hi, :hi] of one owned working buffer.
    3. Deflate from the bottom of the active block: when the last
       sub-diagonal entry is negligible, h[hi-1, hi-1] is an eigenvalue and
       hi shrinks by one; when the one above it is negligible, the trailing
       2x2 block is solved by the quadratic formula and hi shrinks by two.
       Active blocks of size 1 or 2 are solved directly.

Eigenvectors:
    Null space of (A - lambda I) by row reduction with partial pivoting.

References:
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations, 4th ed.,
        sections 7.4-7.5 (Hessenberg QR, shifts, deflation).
    Wilkinson, J. H. (1968). Global convergence of tridiagonal QR algorithm
        with origin shifts. Linear Algebra Appl. 1, 409-420.
"""

from __future__ import annotations

import cmath

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import (
    Tolerance,
    MACHINE_EPSILON,
    MAX_QR_ITERATIONS_PER_EIGENVALUE,
    EXCEPTIONAL_SHIFT_INTERVAL,
)
from pymatrix.core.exceptions import ConvergenceError, NumericalError
from pymatrix.pattern.hessenberg import reduce_to_hessenberg


def eigenvalues_2x2(a: complex, b: complex, c: complex, d: complex) -> tuple[complex, complex]:
    """
    Roots of the characteristic polynomial of [[a, b], [c, d]].

    ``lambda^2 - (a + d) lambda + (ad - bc) = 0``, written around the mean
    of the diagonal to avoid cancellation: ``m +- sqrt(((a-d)/2)^2 + bc)``.
    """
    mean = (a + d) / 2
    disc = cmath.sqrt(((a - d) / 2) ** 2 + b * c)
    return mean + disc, mean - disc


def _wilkinson_shift(h: NDArray, hi: int) -> complex:
    """Eigenvalue of the trailing 2x2 of h[:hi, :hi] closest to h[hi-1, hi-1]."""
    a, b = h[hi - 2, hi - 2], h[hi - 2, hi - 1]
    c, d = h[hi - 1, hi - 2], h[hi - 1, hi - 1]
    l1, l2 = eigenvalues_2x2(a, b, c, d)
    return l1 if abs(l1 - d) <= abs(l2 - d) else l2


def _givens(a: complex, b: complex) -> tuple[float, complex]:
    """
    Rotation [[c, s], [-conj(s), c]] with real c mapping (a, b) to (r, 0).
    """
    r = np.hypot(abs(a), abs(b))
    if r == 0:
        return 1.0, 0j
    if a == 0:
        return 0.0, complex(np.conj(b) / abs(b))
    c = abs(a) / r
    s = (a / abs(a)) * np.conj(b) / r
    return float(c), complex(s)


def _qr_step(h: NDArray, hi: int, shift: complex) -> None:
    """
    One shifted QR step on the Hessenberg block h[:hi, :hi], in place.

    ``H - mu I = QR``, ``H <- RQ + mu I``; Q is a product of hi - 1 Givens
    rotations, so the block stays Hessenberg.
    """
    idx = np.arange(hi)
    h[idx, idx] -= shift

    rotations = []
    for k in range(hi - 1):
        c, s = _givens(h[k, k], h[k + 1, k])
        top = h[k, k:hi].copy()
        bottom = h[k + 1, k:hi].copy()
        h[k, k:hi] = c * top + s * bottom
        h[k + 1, k:hi] = -np.conj(s) * top + c * bottom
        h[k + 1, k] = 0.0
        rotations.append((c, s))

    for k, (c, s) in enumerate(rotations):
        rows = min(k + 2, hi)
        left = h[:rows, k].copy()
        right = h[:rows, k + 1].copy()
        h[:rows, k] = c * left + np.conj(s) * right
        h[:rows, k + 1] = -s * left + c * right

    h[idx, idx] += shift


def _deflatable(h: NDArray, i: int, tol: Tolerance) -> bool:
    """Whether the sub-diagonal entry h[i, i-1] can be treated as zero."""
    sub = abs(h[i, i - 1])
    scale = abs(h[i, i]) + abs(h[i - 1, i - 1])
    if scale < tol.epsilon:
        return tol.is_zero(sub)
    return sub <= MACHINE_EPSILON * scale


def eigenvalues(a: NDArray, tol: Tolerance) -> NDArray:
    """
    Eigenvalues of a square complex array.

    Parameters
    ----------
    a : NDArray
        (n, n) complex128 array; overwritten (pass a copy).
    tol : Tolerance

    Returns
    -------
    NDArray
        (n,) complex128 eigenvalues in the diagonal order of the converged
        triangular form.

    Raises
    ------
    ConvergenceError
        If an eigenvalue fails to deflate within the iteration budget.
    """
    h = reduce_to_hessenberg(a, tol)
    n = h.shape[0]
    values = np.zeros(n, dtype=np.complex128)
    max_iter = MAX_QR_ITERATIONS_PER_EIGENVALUE * n

    hi = n
    stalled = 0
    total = 0
    while hi > 0:
        if hi == 1:
            values[0] = h[0, 0]
            hi = 0
            continue
        if hi == 2:
            values[0], values[1] = eigenvalues_2x2(h[0, 0], h[0, 1], h[1, 0], h[1, 1])
            hi = 0
            continue
        if _deflatable(h, hi - 1, tol):
            values[hi - 1] = h[hi - 1, hi - 1]
            h[hi - 1, hi - 2] = 0.0
            hi -= 1
            stalled = 0
            continue
        if _deflatable(h, hi - 2, tol):
            values[hi - 2], values[hi - 1] = eigenvalues_2x2(
                h[hi - 2, hi - 2], h[hi - 2, hi - 1],
                h[hi - 1, hi - 2], h[hi - 1, hi - 1],
            )
            h[hi - 2, hi - 3] = 0.0
            hi -= 2
            stalled = 0
            continue

        if total >= max_iter:
            raise ConvergenceError(
                f"Shifted QR iteration did not converge after {total} iterations "
                f"({hi} eigenvalues left)",
                iterations=total,
                final_change=float(abs(h[hi - 1, hi - 2])),
                reason='max_iterations',
                threshold=MACHINE_EPSILON,
            )

        stalled += 1
        total += 1
        if stalled % EXCEPTIONAL_SHIFT_INTERVAL == 0:
            # Ad hoc shift breaks cycles the Wilkinson shift can fall into
            shift = h[hi - 1, hi - 1] + 0.75 * abs(h[hi - 1, hi - 2]) * (1 + 1j)
        else:
            shift = _wilkinson_shift(h, hi)
        _qr_step(h, hi, shift)

    return values


def null_space(a: NDArray, tol: Tolerance) -> NDArray:
    """
    Basis of the numerical null space of a square complex array.

    Row-reduces a copy to reduced row echelon form with partial pivoting.
    A column whose best remaining pivot is below ``epsilon * max(1, max|a|)``
    is free. Each free column yields one basis vector.

    Returns
    -------
    NDArray
        (n, k) array whose columns span the null space; k may be 0.
    """
    r = np.array(a, dtype=np.complex128)
    rows, cols = r.shape
    scale = float(np.max(np.abs(r))) if r.size else 0.0

    pivot_cols = []
    row = 0
    for col in range(cols):
        if row >= rows:
            break
        p = row + int(np.argmax(np.abs(r[row:, col])))
        if tol.is_negligible(r[p, col], scale):
            r[row:, col] = 0.0
            continue
        if p != row:
            r[[row, p], :] = r[[p, row], :]
        r[row, :] /= r[row, col]
        others = np.arange(rows) != row
        r[others, :] -= np.outer(r[others, col], r[row, :])
        pivot_cols.append(col)
        row += 1

    free_cols = [c for c in range(cols) if c not in pivot_cols]
    basis = np.zeros((cols, len(free_cols)), dtype=np.complex128)
    for k, f in enumerate(free_cols):
        basis[f, k] = 1.0
        for i, pc in enumerate(pivot_cols):
            basis[pc, k] = -r[i, f]
    return basis


def eigenvector(a: NDArray, lam: complex, tol: Tolerance) -> NDArray:
    """
    Unit eigenvector of a for the eigenvalue lam.

    Eigenvalues of defective matrices are only accurate to about
    sqrt(machine epsilon), which can leave ``a - lam I`` with full rank under
    the tolerance. In that case the right singular vector of the smallest
    singular value is used, provided that singular value is below
    ``sqrt(epsilon) * max(1, max|a - lam I|)``.

    Raises
    ------
    NumericalError
        If ``a - lam I`` is not numerically singular.
    """
    from scipy.linalg import svd

    n = a.shape[0]
    shifted = np.array(a, dtype=np.complex128) - lam * np.eye(n, dtype=np.complex128)
    basis = null_space(shifted, tol)
    if basis.shape[1] > 0:
        x = basis[:, 0]
        return x / np.linalg.norm(x)

    scale = max(1.0, float(np.max(np.abs(shifted))))
    # LAPACK gesdd; singular values come back in descending order
    _, s, vh = svd(shifted)
    if s[-1] < np.sqrt(tol.epsilon) * scale:
        x = np.conj(vh[-1])
        return x / np.linalg.norm(x)

    raise NumericalError(
        f"{lam} is not an eigenvalue within tolerance {tol.epsilon:g}: "
        f"smallest singular value of A - lambda I is {s[-1]:.3g}"
    )
