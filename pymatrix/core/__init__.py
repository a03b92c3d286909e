"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the algebra,
pattern and factorization subpackages.

Key components:
    result: Generic Result[P] envelope and the NoSolution outcome
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances and timing
"""

from pymatrix.core.result import Result, NoSolution, unwrap
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    NumericalError,
    DivisionByZeroError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    "NoSolution",
    "unwrap",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "DivisionByZeroError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
]
