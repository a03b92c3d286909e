"""
Fixed-length complex vector.

Inner product convention: ``a.dot(b) = sum(a_i * conj(b_i))``, linear in the
first argument and conjugate-linear in the second, so that
``norm = sqrt(v.dot(v))`` is real and non-negative.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra.scalar import Complex
from pymatrix.core.compute.tolerances import Tolerance, DEFAULT_TOLERANCE
from pymatrix.core.exceptions import NumericalError
from pymatrix.core.result import NoSolution, REASON_ZERO_VECTOR
from pymatrix.core.validation import (
    check_array, check_finite, check_ndim, check_nonempty,
    check_same_length, check_index,
)

if TYPE_CHECKING:
    from pymatrix.algebra.square import SquareMatrix


class Vector:
    """
    Immutable ordered sequence of N >= 1 complex entries.

    Entries are stored in a read-only complex128 array; element access and
    iteration yield Complex scalars carrying the vector's tolerance.
    """

    __slots__ = ('_data', '_tol')

    def __init__(self, data: ArrayLike | Vector, *, tol: Tolerance | None = None):
        if isinstance(data, Vector):
            arr = data._data.copy()
            tol = tol or data._tol
        else:
            arr = check_array(data, 'data')
            check_ndim(arr, 1, 'data')
        check_nonempty(arr, 'data')
        check_finite(arr, 'data')
        arr.setflags(write=False)
        self._data = arr
        self._tol = tol or DEFAULT_TOLERANCE

    @classmethod
    def _from_array(cls, arr: NDArray, tol: Tolerance) -> Vector:
        """Wrap an owned complex128 array without re-validating."""
        v = cls.__new__(cls)
        arr = np.array(arr, dtype=np.complex128)
        arr.setflags(write=False)
        v._data = arr
        v._tol = tol
        return v

    @classmethod
    def zeros(cls, n: int, *, tol: Tolerance | None = None) -> Vector:
        return cls(np.zeros(n, dtype=np.complex128), tol=tol)

    @classmethod
    def basis(cls, n: int, k: int, *, tol: Tolerance | None = None) -> Vector:
        """Standard basis vector e_k of length n."""
        check_index(k, n, 'k')
        e = np.zeros(n, dtype=np.complex128)
        e[k] = 1.0
        return cls(e, tol=tol)

    # --- Properties ---

    @property
    def tol(self) -> Tolerance:
        return self._tol

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, i: int) -> Complex:
        i = check_index(i, len(self), 'i')
        z = self._data[i]
        return Complex(z.real, z.imag, tol=self._tol)

    def __iter__(self) -> Iterator[Complex]:
        for z in self._data:
            yield Complex(z.real, z.imag, tol=self._tol)

    def to_array(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Writable copy of the entries."""
        return self._data.copy()

    # --- Arithmetic ---

    def _check_other(self, other: Vector) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        check_same_length(len(self), len(other), ('self', 'other'))

    def dot(self, other: Vector) -> Complex:
        """Inner product ``sum(self_i * conj(other_i))``."""
        self._check_other(other)
        z = complex(np.sum(self._data * np.conj(other._data)))
        return Complex(z.real, z.imag, tol=self._tol)

    def norm(self) -> float:
        """Euclidean norm, ``sqrt(self.dot(self))``."""
        return math.sqrt(float(np.sum(np.abs(self._data) ** 2)))

    def scale(self, c) -> Vector:
        c = complex(Complex.coerce(c))
        return Vector._from_array(self._data * c, self._tol)

    def add(self, other: Vector) -> Vector:
        self._check_other(other)
        return Vector._from_array(self._data + other._data, self._tol)

    def subtract(self, other: Vector) -> Vector:
        self._check_other(other)
        return Vector._from_array(self._data - other._data, self._tol)

    def proj(self, other: Vector) -> Vector | NoSolution:
        """
        Projection of this vector onto ``other``: ``(v.w / w.w) * w``.

        Returns NoSolution when ``other`` is the zero vector, that is when
        ``|w| < epsilon``, the same threshold as normalize() and is_zero().
        """
        self._check_other(other)
        n = other.norm()
        if n < self._tol.epsilon:
            return NoSolution(
                reason=REASON_ZERO_VECTOR,
                message="Cannot project onto the zero vector",
                matrix_name='other',
                info={'norm': n},
            )
        # vdot conjugates its first argument: sum(v_i * conj(w_i))
        coeff = complex(np.vdot(other._data, self._data)) / (n * n)
        return Vector._from_array(other._data * coeff, self._tol)

    def normalize(self) -> Vector | NoSolution:
        """Unit vector in the direction of this vector."""
        n = self.norm()
        if n < self._tol.epsilon:
            return NoSolution(
                reason=REASON_ZERO_VECTOR,
                message="Cannot normalize the zero vector",
                matrix_name='self',
                info={'norm': n},
            )
        return Vector._from_array(self._data / n, self._tol)

    def is_zero(self) -> bool:
        return self.norm() < self._tol.epsilon

    def equals(self, other) -> bool:
        """Element-wise tolerance equality; length mismatch is not equal."""
        if not isinstance(other, Vector) or len(self) != len(other):
            return False
        return self._tol.equal_arrays(self._data, other._data)

    __hash__ = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return Vector._from_array(-self._data, self._tol)

    def __mul__(self, c) -> Vector:
        if isinstance(c, Vector):
            return NotImplemented
        return self.scale(c)

    __rmul__ = __mul__

    # --- Reflectors ---

    def generate_unitary_matrix(self) -> SquareMatrix:
        """
        Householder reflector whose first column is a unit multiple of this vector.

        Builds ``H = I - 2 w w* / (w* w)`` with ``w = u - beta e_0``, where
        ``u`` is this vector normalized and ``beta = -exp(i arg(u_0))``.
        H is Hermitian and unitary, ``H u = beta e_0`` and therefore
        ``H e_0 = u / beta``. Conjugating a matrix with H moves an eigenvector
        held in this vector onto e_0, which deflates the eigenvalue problem.

        Raises:
            NumericalError: If this is the zero vector
        """
        from pymatrix.algebra.square import SquareMatrix

        n = self.norm()
        if n < self._tol.epsilon:
            raise NumericalError("The zero vector does not define a reflector")

        u = self._data / n
        u0 = u[0]
        beta = -u0 / abs(u0) if abs(u0) > 0 else -1.0 + 0j
        w = u.copy()
        w[0] -= beta
        # w*w = 2 + 2|u_0| >= 2, never zero
        ww = float(np.real(np.vdot(w, w)))
        h = np.eye(len(u), dtype=np.complex128) - (2.0 / ww) * np.outer(w, np.conj(w))
        return SquareMatrix._from_array(h, self._tol)

    # --- Display ---

    def __str__(self) -> str:
        return '(' + ', '.join(str(z) for z in self) + ')'

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"
