"""
Matrix factorizations.

Public API:
    qr_decompose(m)                  - A = Q R (Gram-Schmidt)
    lu_decompose(m)                  - A = L U, unit-diagonal U, or NoSolution
    cholesky_decompose(m)            - A = L L*, or NoSolution
    schur_decompose(m)               - A = U T U*
    singular_value_decomposition(m)  - singular values and Sigma
"""

from pymatrix.factorization.solution import (
    QRParams,
    LUParams,
    CholeskyParams,
    SchurParams,
    SVDParams,
    QRSolution,
    LUSolution,
    CholeskySolution,
    SchurSolution,
    SVDSolution,
)
from pymatrix.factorization.solvers import (
    qr_decompose,
    lu_decompose,
    cholesky_decompose,
    schur_decompose,
    singular_value_decomposition,
)

__all__ = [
    "qr_decompose",
    "lu_decompose",
    "cholesky_decompose",
    "schur_decompose",
    "singular_value_decomposition",
    "QRParams",
    "LUParams",
    "CholeskyParams",
    "SchurParams",
    "SVDParams",
    "QRSolution",
    "LUSolution",
    "CholeskySolution",
    "SchurSolution",
    "SVDSolution",
]
