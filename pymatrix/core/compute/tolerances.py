"""
Comparison tolerances for complex arithmetic.

Every zero test and equality test in pymatrix goes through a Tolerance:
scalar equality, pivot selection, null-space extraction, pattern predicates.
A Tolerance is an immutable value bound to each Complex, Vector and Matrix
at construction and propagated to every result derived from it, so two
computations with different tolerances can run side by side without any
shared mutable state.

Tiers:
- DEFAULT (1e-9): general use, survives accumulated round-off in O(n^3)
  algorithms on modest matrices
- STRICT (1e-12): well-conditioned inputs where near machine precision
  agreement is expected
- LOOSE (1e-6): ill-conditioned or defective inputs (repeated eigenvalues)
"""

from dataclasses import dataclass, replace

import numpy as np


# Machine epsilon for complex128 components
MACHINE_EPSILON: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Shifted QR iteration budget per deflated eigenvalue
MAX_QR_ITERATIONS_PER_EIGENVALUE = 30

# Apply an exceptional shift after this many iterations without deflation
EXCEPTIONAL_SHIFT_INTERVAL = 10


@dataclass(frozen=True)
class Tolerance:
    """Epsilon and label for complex comparisons."""
    epsilon: float
    name: str = 'custom'
    description: str = ''

    def __post_init__(self):
        if not (self.epsilon > 0 and np.isfinite(self.epsilon)):
            raise ValueError(
                f"epsilon must be a positive finite float, got {self.epsilon!r}"
            )

    def is_zero(self, value: complex) -> bool:
        """True if the modulus of value is below epsilon."""
        return abs(value) < self.epsilon

    def is_negligible(self, value: complex, scale: float) -> bool:
        """True if |value| is below epsilon relative to max(1, scale)."""
        return abs(value) < self.epsilon * max(1.0, scale)

    def equal(self, a: complex, b: complex) -> bool:
        """Component-wise equality: |re1-re2| < eps and |im1-im2| < eps."""
        d = complex(a) - complex(b)
        return abs(d.real) < self.epsilon and abs(d.imag) < self.epsilon

    def equal_arrays(self, a: np.ndarray, b: np.ndarray) -> bool:
        """Component-wise equality of two same-shaped complex arrays."""
        d = np.asarray(a) - np.asarray(b)
        return bool(
            np.all(np.abs(d.real) < self.epsilon)
            and np.all(np.abs(d.imag) < self.epsilon)
        )

    def with_epsilon(self, epsilon: float) -> 'Tolerance':
        """Copy of this tolerance with a different epsilon."""
        return replace(self, epsilon=epsilon, name='custom')


DEFAULT_TOLERANCE = Tolerance(
    epsilon=1e-9,
    name='default',
    description='General-purpose comparison tolerance',
)

STRICT_TOLERANCE = Tolerance(
    epsilon=1e-12,
    name='strict',
    description='Well-conditioned inputs, near machine precision',
)

LOOSE_TOLERANCE = Tolerance(
    epsilon=1e-6,
    name='loose',
    description='Ill-conditioned or defective inputs',
)

_TIERS = {
    t.name: t for t in (DEFAULT_TOLERANCE, STRICT_TOLERANCE, LOOSE_TOLERANCE)
}


def select_tolerance(name: str) -> Tolerance:
    """Look up a named tolerance tier ('default', 'strict', 'loose')."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown tolerance tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
