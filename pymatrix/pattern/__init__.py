"""
Pattern analysis: structural predicates and Hessenberg reduction.

Public API:
    is_upper_triangular(m), is_lower_triangular(m), is_diagonal(m)
    is_symmetric(m), is_anti_symmetric(m), is_hermitian(m)
    is_orthogonal(m), is_unitary(m), is_upper_hessenberg(m), is_identity(m)
    hessenberg(m)  - similar upper Hessenberg matrix
"""

from pymatrix.pattern.predicates import (
    is_upper_triangular,
    is_lower_triangular,
    is_diagonal,
    is_upper_hessenberg,
    is_identity,
    is_symmetric,
    is_anti_symmetric,
    is_hermitian,
    is_orthogonal,
    is_unitary,
)
from pymatrix.pattern.hessenberg import hessenberg, reduce_to_hessenberg

__all__ = [
    "is_upper_triangular",
    "is_lower_triangular",
    "is_diagonal",
    "is_upper_hessenberg",
    "is_identity",
    "is_symmetric",
    "is_anti_symmetric",
    "is_hermitian",
    "is_orthogonal",
    "is_unitary",
    "hessenberg",
    "reduce_to_hessenberg",
]
