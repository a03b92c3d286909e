"""
Singular values and the diagonal factor of the SVD.

Only Sigma is assembled. The unitary factors U and V are not computed.
"""

from __future__ import annotations

import numpy as np

from pymatrix.algebra.matrix import Matrix
from pymatrix.algebra.square import SquareMatrix
from pymatrix.factorization.solution import SVDParams


def singular_value_diagonal(m: Matrix) -> SVDParams:
    """Singular values of m (largest first) and diag(singular values)."""
    values = m.singular_values()
    sigma = np.diag(np.asarray(values, dtype=np.complex128))
    return SVDParams(
        singular_values=values,
        sigma=SquareMatrix._from_array(sigma, m.tol),
    )
