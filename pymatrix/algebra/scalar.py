"""
Complex scalar with tolerance-based equality.

Complex is the unit every Vector and Matrix element is exposed as. It is
immutable: each arithmetic operation returns a new value carrying the
tolerance of the left operand.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Number

from pymatrix.core.compute.tolerances import Tolerance, DEFAULT_TOLERANCE
from pymatrix.core.exceptions import DivisionByZeroError, ValidationError


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Immutable complex number ``re + im*i``.

    Two values are equal when both components differ by less than the
    tolerance epsilon of the left operand. Equality is therefore not
    transitive and Complex is unhashable.

    Construction:
        Complex(1.0, -2.0)
        Complex.coerce(3)            # from int, float, complex or Complex
        Complex(0, 1, tol=STRICT_TOLERANCE)
    """
    re: float
    im: float = 0.0
    tol: Tolerance = field(default=DEFAULT_TOLERANCE, repr=False)

    __hash__ = None

    def __post_init__(self):
        try:
            object.__setattr__(self, 're', float(self.re))
            object.__setattr__(self, 'im', float(self.im))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Complex: components must be real numbers: {e}") from e

    @classmethod
    def coerce(cls, value, tol: Tolerance | None = None) -> Complex:
        """Convert a number (or Complex) to Complex."""
        if isinstance(value, Complex):
            if tol is None or tol == value.tol:
                return value
            return cls(value.re, value.im, tol=tol)
        if isinstance(value, Number) or hasattr(value, '__complex__'):
            z = complex(value)
            return cls(z.real, z.imag, tol=tol or DEFAULT_TOLERANCE)
        raise ValidationError(f"Cannot convert {type(value).__name__} to Complex")

    def _other(self, value) -> Complex:
        return Complex.coerce(value, self.tol)

    @staticmethod
    def _is_scalar(value) -> bool:
        return isinstance(value, (Complex, Number)) or hasattr(value, '__complex__')

    # --- Arithmetic ---

    def __add__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        o = self._other(other)
        return Complex(self.re + o.re, self.im + o.im, tol=self.tol)

    def __radd__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        return self._other(other) + self

    def __sub__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        o = self._other(other)
        return Complex(self.re - o.re, self.im - o.im, tol=self.tol)

    def __rsub__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        return self._other(other) - self

    def __mul__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        o = self._other(other)
        return Complex(
            self.re * o.re - self.im * o.im,
            self.re * o.im + self.im * o.re,
            tol=self.tol,
        )

    def __rmul__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        return self._other(other) * self

    def __truediv__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        o = self._other(other)
        modulus = abs(o)
        if modulus < self.tol.epsilon:
            raise DivisionByZeroError(
                f"Division by {o} with modulus {modulus:.3g} < epsilon {self.tol.epsilon:g}",
                modulus=modulus,
                epsilon=self.tol.epsilon,
            )
        z = complex(self) / complex(o)
        return Complex(z.real, z.imag, tol=self.tol)

    def __rtruediv__(self, other) -> Complex:
        if not self._is_scalar(other):
            return NotImplemented
        return self._other(other) / self

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im, tol=self.tol)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    # --- Named operations ---

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im, tol=self.tol)

    def modulus(self) -> float:
        """Euclidean modulus, same as abs()."""
        return abs(self)

    def arg(self) -> float:
        """Principal argument in (-pi, pi]."""
        return math.atan2(self.im, self.re)

    def sqrt(self) -> Complex:
        """
        Principal square root.

        The result has a non-negative real part; when the real part is zero
        the imaginary part is non-negative. A -0.0 imaginary part is read as
        +0.0, so the root of a negative real is always ``+i*sqrt(|x|)``.
        """
        r = abs(self)
        re = math.sqrt(max(0.0, (r + self.re) / 2.0))
        im = math.sqrt(max(0.0, (r - self.re) / 2.0))
        if self.im < 0:
            im = -im
        return Complex(re, im, tol=self.tol)

    def is_zero(self) -> bool:
        return abs(self) < self.tol.epsilon

    def equals(self, other) -> bool:
        """Component-wise equality within this value's tolerance."""
        try:
            o = self._other(other)
        except ValidationError:
            return False
        return (
            abs(self.re - o.re) < self.tol.epsilon
            and abs(self.im - o.im) < self.tol.epsilon
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Complex, Number)):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # --- Display ---

    def __str__(self) -> str:
        re = 0.0 if self.re == 0 else self.re
        if self.im == 0:
            return f"{re:g}"
        sign = '-' if self.im < 0 else '+'
        return f"{re:g} {sign} {abs(self.im):g}i"

    def __repr__(self) -> str:
        return f"Complex({self.re!r}, {self.im!r})"
