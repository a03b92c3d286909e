"""
pymatrix: dense linear algebra over complex numbers.

Complex scalars with tolerance-based equality, vectors and dense matrices,
and the algorithms built on them: determinant, inverse, eigenvalues and
eigenvectors, matrix powers, and the QR, LU, Cholesky and Schur
factorizations.

Submodules:
    algebra: Complex, Vector, Matrix, SquareMatrix and square-matrix ops
    pattern: Structural predicates and Hessenberg reduction
    factorization: QR, LU, Cholesky, Schur, singular values
    core: Tolerances, exceptions, result envelopes, validation
"""

__version__ = "0.1.0"

from pymatrix import algebra
from pymatrix import pattern
from pymatrix import factorization
from pymatrix.algebra import Complex, Vector, Matrix, SquareMatrix
from pymatrix.core.compute.tolerances import Tolerance, DEFAULT_TOLERANCE
from pymatrix.core.result import NoSolution, unwrap

__all__ = [
    "__version__",
    "algebra",
    "pattern",
    "factorization",
    "Complex",
    "Vector",
    "Matrix",
    "SquareMatrix",
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "NoSolution",
    "unwrap",
]
