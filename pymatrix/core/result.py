"""
Result containers for pymatrix computations.

The Result class provides a standardized envelope that every factorization
uses. This enables shared tooling for timing, diagnostics and reproducibility
while each factorization defines its own parameter structure.

NoSolution is the tagged outcome for valid input that admits no answer:
a singular matrix has no inverse, a matrix with a zero leading pivot has no
LU factorization, a non-Hermitian matrix has no Cholesky factor. These are
expected, recoverable outcomes rather than programming errors, so they are
returned instead of raised.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, iterations)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
    - NoSolution is falsy so ``if not outcome:`` reads naturally
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pymatrix.core.exceptions import (
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

P = TypeVar('P')  # Parameter payload type
T = TypeVar('T')

# Reasons carried by NoSolution
REASON_SINGULAR = 'singular'
REASON_NO_LU = 'no_lu'
REASON_NOT_HERMITIAN = 'not_hermitian'
REASON_NOT_POSITIVE_DEFINITE = 'not_positive_definite'
REASON_ZERO_VECTOR = 'zero_vector'

ALL_REASONS = frozenset({
    REASON_SINGULAR,
    REASON_NO_LU,
    REASON_NOT_HERMITIAN,
    REASON_NOT_POSITIVE_DEFINITE,
    REASON_ZERO_VECTOR,
})


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for factorizations.

    Type Parameters:
        P: The factorization-specific parameter payload type

    Attributes:
        params: Factorization-specific payload (factors, rank, ...)
        info: Structured metadata (method, rank, iterations)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=QRParams(Q=q, R=r, rank=3),
        ...     info={'method': 'gram_schmidt', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gram_schmidt'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)


@dataclass(frozen=True)
class NoSolution:
    """
    Tagged "no result exists" outcome.

    Attributes:
        reason: One of the REASON_* constants
        message: Human-readable explanation with the offending values
        matrix_name: Name/description of the input that has no solution
        info: Diagnostics gathered before the computation stopped

    Examples:
        >>> outcome = lu_decompose(m)
        >>> if not outcome:
        ...     print(outcome.reason)
        no_lu
    """
    reason: str
    message: str
    matrix_name: str | None = None
    info: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.reason not in ALL_REASONS:
            raise ValueError(
                f"Unknown NoSolution reason {self.reason!r}, "
                f"expected one of {sorted(ALL_REASONS)}"
            )

    def __bool__(self) -> bool:
        return False

    def to_exception(self) -> NumericalError:
        """Build the exception matching this outcome's reason."""
        if self.reason == REASON_SINGULAR:
            return SingularMatrixError(
                self.message,
                matrix_name=self.matrix_name,
                determinant=self.info.get('determinant'),
            )
        if self.reason in (REASON_NOT_HERMITIAN, REASON_NOT_POSITIVE_DEFINITE):
            return NotPositiveDefiniteError(
                self.message,
                matrix_name=self.matrix_name,
                pivot_index=self.info.get('pivot_index'),
            )
        return NumericalError(self.message)


def unwrap(outcome: T | NoSolution) -> T:
    """
    Return the value of an outcome, raising if it is a NoSolution.

    Args:
        outcome: A value or NoSolution

    Returns:
        The value unchanged

    Raises:
        NumericalError: The exception built by NoSolution.to_exception()
    """
    if isinstance(outcome, NoSolution):
        raise outcome.to_exception()
    return outcome
