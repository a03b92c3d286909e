"""
Dense rectangular complex matrix.

Matrix is a value type: its complex128 backing array is private and flagged
read-only, every operation returns a new Matrix, and algorithms that need to
mutate work on copies obtained from to_array().
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.algebra.scalar import Complex
from pymatrix.algebra.vector import Vector
from pymatrix.core.compute.tolerances import Tolerance, DEFAULT_TOLERANCE
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_array, check_finite, check_ndim, check_nonempty,
    check_same_shape, check_conformable, check_index,
)


class Matrix:
    """
    Immutable R x C grid of complex entries, R, C >= 1.

    Construction:
        Matrix([[1, 2], [3, 4]])                  # real data
        Matrix([[1+1j, 2], [0, 1j]])              # Python complex
        Matrix([[Complex(1, 1), Complex(2)]])     # Complex scalars
        Matrix.from_parts(real, imag)             # complex-pair arrays
        Matrix(3)                                 # 3 x 3 identity
    """

    __slots__ = ('_data', '_tol')

    def __init__(self, data: ArrayLike | Matrix | int, *, tol: Tolerance | None = None):
        if isinstance(data, Matrix):
            arr = data._data.copy()
            tol = tol or data._tol
        elif isinstance(data, (int, np.integer)) and not isinstance(data, bool):
            if data < 1:
                raise ValidationError(f"n: identity size must be >= 1, got {data}")
            arr = np.eye(int(data), dtype=np.complex128)
        else:
            arr = check_array(data, 'data')
            check_ndim(arr, 2, 'data')
        check_nonempty(arr, 'data')
        check_finite(arr, 'data')
        self._validate_shape(arr.shape)
        arr.setflags(write=False)
        self._data = arr
        self._tol = tol or DEFAULT_TOLERANCE

    def _validate_shape(self, shape: tuple[int, int]) -> None:
        """Hook for subclasses that restrict the shape."""
        pass

    @classmethod
    def _from_array(cls, arr: NDArray, tol: Tolerance) -> Matrix:
        """Wrap an owned complex128 array without re-validating entries."""
        arr = np.array(arr, dtype=np.complex128)
        m = cls.__new__(cls)
        m._validate_shape(arr.shape)
        arr.setflags(write=False)
        m._data = arr
        m._tol = tol
        return m

    def _like(self, arr: NDArray) -> Matrix:
        """New matrix of this matrix's kind where the shape allows it."""
        return Matrix._from_array(arr, self._tol)

    @classmethod
    def from_parts(
        cls,
        real: ArrayLike,
        imag: ArrayLike,
        *,
        tol: Tolerance | None = None,
    ) -> Matrix:
        """Build from separate real and imaginary part arrays of equal shape."""
        re = check_array(real, 'real')
        im = check_array(imag, 'imag')
        check_same_shape(re.shape, im.shape, ('real', 'imag'))
        if np.any(re.imag != 0) or np.any(im.imag != 0):
            raise ValidationError("real, imag: parts must be real-valued")
        return cls(re.real + 1j * im.real, tol=tol)

    @classmethod
    def from_columns(cls, columns: list[Vector], *, tol: Tolerance | None = None) -> Matrix:
        """Build from a list of equal-length column vectors."""
        if not columns:
            raise ValidationError("columns: need at least one column")
        arr = np.column_stack([c.to_array() for c in columns])
        return cls(arr, tol=tol or columns[0].tol)

    # --- Shape and access ---

    @property
    def tol(self) -> Tolerance:
        return self._tol

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def get_at(self, i: int, j: int) -> Complex:
        """Bounds-checked element access."""
        i = check_index(i, self.rows, 'i')
        j = check_index(j, self.cols, 'j')
        z = self._data[i, j]
        return Complex(z.real, z.imag, tol=self._tol)

    def __getitem__(self, index: tuple[int, int]) -> Complex:
        if not isinstance(index, tuple) or len(index) != 2:
            raise IndexError(f"Matrix index must be a pair (i, j), got {index!r}")
        return self.get_at(*index)

    def row(self, i: int) -> Vector:
        i = check_index(i, self.rows, 'i')
        return Vector._from_array(self._data[i, :], self._tol)

    def column(self, j: int) -> Vector:
        j = check_index(j, self.cols, 'j')
        return Vector._from_array(self._data[:, j], self._tol)

    def columns(self) -> Iterator[Vector]:
        for j in range(self.cols):
            yield self.column(j)

    def to_array(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Writable copy of the entries."""
        return self._data.copy()

    def to_list(self) -> list[list[Complex]]:
        return [[self.get_at(i, j) for j in range(self.cols)] for i in range(self.rows)]

    # --- Structural operations ---

    def transpose(self) -> Matrix:
        return self._like(self._data.T)

    def conjugate_transpose(self) -> Matrix:
        return self._like(np.conj(self._data.T))

    def conjugate(self) -> Matrix:
        return self._like(np.conj(self._data))

    # --- Arithmetic ---

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product; requires self.cols == other.rows."""
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix, got {type(other).__name__}")
        check_conformable(self.shape, other.shape, ('self', 'other'))
        return self._like(self._data @ other._data)

    def apply(self, v: Vector) -> Vector:
        """Matrix-vector product."""
        check_conformable(self.shape, (len(v), 1), ('self', 'v'))
        return Vector._from_array(self._data @ v.to_array(), self._tol)

    def scale(self, c) -> Matrix:
        c = complex(Complex.coerce(c))
        return self._like(self._data * c)

    def add(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        return self._like(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        return self._like(self._data - other._data)

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.apply(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, c):
        if isinstance(c, (Matrix, Vector)):
            return NotImplemented
        return self.scale(c)

    __rmul__ = __mul__

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Matrix:
        return self._like(-self._data)

    # --- Equality ---

    def equals(self, other) -> bool:
        """Element-wise tolerance equality; a shape mismatch is simply unequal."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return self._tol.equal_arrays(self._data, other._data)

    __hash__ = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # --- Orthogonalization ---

    def orthonormalize(self) -> Matrix:
        """
        Column-wise Gram-Schmidt.

        Column k has its projection onto each already orthonormalized column
        0..k-1 subtracted (modified Gram-Schmidt: projections are taken from
        the running residual) and is then divided by the residual norm.

        A column whose residual norm is below epsilon, i.e. one that is
        linearly dependent on the columns before it, is returned as an exact
        zero column. The non-zero columns of the result are orthonormal.
        """
        q = self._data.copy()
        eps = self._tol.epsilon
        for k in range(self.cols):
            v = q[:, k].copy()
            for j in range(k):
                qj = q[:, j]
                # qj is unit or zero, so proj_qj(v) = (qj* v) qj
                v -= np.vdot(qj, v) * qj
            norm = float(np.linalg.norm(v))
            if norm < eps:
                q[:, k] = 0.0
            else:
                q[:, k] = v / norm
        return self._like(q)

    def rank(self) -> int:
        """Number of non-zero columns left by orthonormalize()."""
        q = self.orthonormalize()._data
        return int(np.sum(np.linalg.norm(q, axis=0) >= self._tol.epsilon))

    def singular_values(self) -> tuple[float, ...]:
        """
        Singular values, largest first.

        Square roots of the eigenvalues of the Hermitian matrix ``A* A``.
        Round-off can leave those eigenvalues slightly negative or with a
        tiny imaginary part; both are discarded.
        """
        from pymatrix.algebra.square import SquareMatrix, eigenvalues

        gram = SquareMatrix._from_array(np.conj(self._data.T) @ self._data, self._tol)
        values = []
        for lam in eigenvalues(gram):
            re = lam.re
            if re < 0:
                if -re >= self._tol.epsilon * max(1.0, float(np.max(np.abs(gram._data)))):
                    warnings.warn(
                        f"Eigenvalue {lam} of A*A is negative beyond tolerance; "
                        f"clamping to zero.",
                        RuntimeWarning,
                        stacklevel=2,
                    )
                re = 0.0
            values.append(float(np.sqrt(re)))
        return tuple(sorted(values, reverse=True))

    # --- Display ---

    def __str__(self) -> str:
        cells = [[str(self.get_at(i, j)) for j in range(self.cols)] for i in range(self.rows)]
        width = max(len(c) for row in cells for c in row)
        return '\n'.join('[ ' + '  '.join(c.rjust(width) for c in row) + ' ]' for row in cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"
