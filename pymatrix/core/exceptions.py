"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Two failure channels are used consistently:
    - Structural preconditions (bad data, non-square input, shape mismatch)
      raise one of the exceptions below at the API boundary, before any
      computation runs.
    - Numerical non-existence (singular matrix, no LU/Cholesky factorization,
      projection onto the zero vector) is returned as a NoSolution value
      (see pymatrix.core.result). NoSolution.to_exception() maps those
      outcomes onto the NumericalError branch for callers that prefer raising.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (ragged rows,
    non-numeric or non-finite entries, empty data, negative exponents).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Raised when vector lengths differ, when matrix shapes do not conform for
    addition or multiplication, or when an index-based operation receives
    the wrong shape.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    A square-only operation was given a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, actual=shape)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by a scalar whose modulus is below the comparison tolerance.

    Attributes:
        modulus: Modulus of the divisor
        epsilon: Tolerance the modulus was compared against
    """

    def __init__(
        self,
        message: str,
        modulus: float | None = None,
        epsilon: float | None = None,
    ):
        super().__init__(message)
        self.modulus = modulus
        self.epsilon = epsilon


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant modulus, if computed
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not Hermitian positive definite.

    Raised when an operation requires a positive definite matrix
    (e.g., Cholesky decomposition) but the matrix fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Index of the first non-positive pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class ConvergenceError(PyMatrixError):
    """
    Iterative algorithm failed to converge.

    Raised when the shifted QR iteration of the eigen-solver fails to
    deflate an eigenvalue within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Magnitude of the last sub-diagonal entry that failed
            to become negligible
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The deflation threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
