"""
QR factorization by Gram-Schmidt.

Q = A.orthonormalize(), R = Q* A. Using the conjugate transpose (not the
plain transpose) is what makes Q R reconstruct complex input exactly. For
linearly dependent input, orthonormalize() leaves zero columns in Q; the
matching rows of R are zero and Q R still reconstructs A.
"""

from __future__ import annotations

from pymatrix.algebra.matrix import Matrix
from pymatrix.factorization.solution import QRParams


def gram_schmidt_qr(m: Matrix) -> QRParams:
    """Compute the QR factors of m (any shape)."""
    q = m.orthonormalize()
    r = q.conjugate_transpose().multiply(m)
    rank = sum(1 for col in q.columns() if not col.is_zero())
    return QRParams(Q=q, R=r, rank=rank)
