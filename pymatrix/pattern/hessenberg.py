"""
Upper Hessenberg reduction by stabilized elementary similarity transforms.

For each column r, the largest-magnitude entry below the diagonal is swapped
into the sub-diagonal position (row swap plus the matching column swap), then
every entry below the sub-diagonal is eliminated with a row operation whose
inverse column operation is applied immediately, so each step is a similarity
transform and the eigenvalues are preserved. This is Gaussian-elimination
based reduction, not Householder reflection.

References:
    Wilkinson, J. H. (1965). The Algebraic Eigenvalue Problem, ch. 6.
    Press et al. Numerical Recipes, section 11.5 (elmhes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import Tolerance

if TYPE_CHECKING:
    from pymatrix.algebra.matrix import Matrix
    from pymatrix.algebra.square import SquareMatrix


def reduce_to_hessenberg(a: NDArray, tol: Tolerance) -> NDArray:
    """
    Reduce a square complex array to upper Hessenberg form in place.

    Parameters
    ----------
    a : NDArray
        (n, n) complex128 array owned by the caller; overwritten.
    tol : Tolerance
        Columns whose sub-diagonal candidates are all zero under tol are
        already reduced and skipped.

    Returns
    -------
    NDArray
        The same array, now upper Hessenberg.
    """
    n = a.shape[0]
    for r in range(n - 2):
        below = np.abs(a[r + 1:, r])
        p = r + 1 + int(np.argmax(below))
        if tol.is_zero(a[p, r]):
            a[r + 2:, r] = 0.0
            continue

        if p != r + 1:
            a[[r + 1, p], :] = a[[p, r + 1], :]
            a[:, [r + 1, p]] = a[:, [p, r + 1]]

        pivot = a[r + 1, r]
        for i in range(r + 2, n):
            mult = a[i, r] / pivot
            if mult == 0:
                continue
            # row_i -= mult * row_{r+1}
            a[i, :] -= mult * a[r + 1, :]
            # col_{r+1} += mult * col_i keeps the transform a similarity
            a[:, r + 1] += mult * a[:, i]
            a[i, r] = 0.0
    return a


def hessenberg(m: Matrix) -> SquareMatrix:
    """
    Upper Hessenberg matrix similar to m.

    The input is not modified; the reduction runs on a private copy.

    Raises
    ------
    NotSquareError
        If m is not square.
    """
    from pymatrix.algebra.square import SquareMatrix, as_square

    m = as_square(m)
    h = reduce_to_hessenberg(m.to_array(), m.tol)
    return SquareMatrix._from_array(h, m.tol)
