"""
Factorization solution types.

Each factorization has a frozen parameter payload and a user-facing solution
wrapper around Result[Params]. Solutions unpack like tuples of their factors:

    Q, R = qr_decompose(m)
    L, U = lu_decompose(m)
    U, T = schur_decompose(m)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from pymatrix.algebra.matrix import Matrix
from pymatrix.algebra.square import SquareMatrix
from pymatrix.core.result import Result

P = TypeVar('P')


@dataclass(frozen=True)
class QRParams:
    """Q has orthonormal (or zero) columns, R = Q* A."""
    Q: Matrix
    R: Matrix
    rank: int


@dataclass(frozen=True)
class LUParams:
    """L lower triangular, U unit upper triangular, A = L U."""
    L: SquareMatrix
    U: SquareMatrix


@dataclass(frozen=True)
class CholeskyParams:
    """L lower triangular with positive real diagonal, A = L L*."""
    L: SquareMatrix


@dataclass(frozen=True)
class SchurParams:
    """U unitary, T = U* A U upper triangular within tolerance."""
    U: SquareMatrix
    T: SquareMatrix


@dataclass(frozen=True)
class SVDParams:
    """Singular values (descending) and the diagonal matrix holding them."""
    singular_values: tuple[float, ...]
    sigma: SquareMatrix


@dataclass
class _FactorizationSolution(Generic[P]):
    """Shared accessors for factorization solutions."""
    _result: Result[P]

    @property
    def params(self) -> P:
        return self._result.params

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def factors(self) -> tuple[Matrix, ...]:
        raise NotImplementedError(f"{type(self).__name__} does not define its factors")

    def __iter__(self) -> Iterator[Matrix]:
        return iter(self.factors())

    def reconstruct(self) -> Matrix:
        """Product of the factors, which should equal the input."""
        raise NotImplementedError(f"{type(self).__name__} cannot be reconstructed")


@dataclass
class QRSolution(_FactorizationSolution[QRParams]):

    @property
    def Q(self) -> Matrix:
        return self.params.Q

    @property
    def R(self) -> Matrix:
        return self.params.R

    @property
    def rank(self) -> int:
        return self.params.rank

    def factors(self) -> tuple[Matrix, Matrix]:
        return self.Q, self.R

    def reconstruct(self) -> Matrix:
        return self.Q @ self.R

    def __repr__(self) -> str:
        return f"QRSolution(shape={self.Q.rows}x{self.R.cols}, rank={self.rank})"


@dataclass
class LUSolution(_FactorizationSolution[LUParams]):

    @property
    def L(self) -> SquareMatrix:
        return self.params.L

    @property
    def U(self) -> SquareMatrix:
        return self.params.U

    def factors(self) -> tuple[SquareMatrix, SquareMatrix]:
        return self.L, self.U

    def reconstruct(self) -> Matrix:
        return self.L @ self.U

    def __repr__(self) -> str:
        return f"LUSolution(n={self.L.n})"


@dataclass
class CholeskySolution(_FactorizationSolution[CholeskyParams]):

    @property
    def L(self) -> SquareMatrix:
        return self.params.L

    def factors(self) -> tuple[SquareMatrix]:
        return (self.L,)

    def reconstruct(self) -> Matrix:
        return self.L @ self.L.conjugate_transpose()

    def __repr__(self) -> str:
        return f"CholeskySolution(n={self.L.n})"


@dataclass
class SchurSolution(_FactorizationSolution[SchurParams]):

    @property
    def U(self) -> SquareMatrix:
        return self.params.U

    @property
    def T(self) -> SquareMatrix:
        return self.params.T

    def factors(self) -> tuple[SquareMatrix, SquareMatrix]:
        return self.U, self.T

    def reconstruct(self) -> Matrix:
        return self.U @ self.T @ self.U.conjugate_transpose()

    def __repr__(self) -> str:
        return f"SchurSolution(n={self.U.n})"


@dataclass
class SVDSolution(_FactorizationSolution[SVDParams]):
    """
    Singular values only.

    The unitary factors U and V are not assembled; reconstruct() is
    therefore unavailable.
    """

    @property
    def singular_values(self) -> tuple[float, ...]:
        return self.params.singular_values

    @property
    def sigma(self) -> SquareMatrix:
        return self.params.sigma

    def factors(self) -> tuple[SquareMatrix]:
        return (self.sigma,)

    def reconstruct(self) -> Matrix:
        raise NotImplementedError(
            "U and V factors are not assembled; only singular values are computed"
        )

    def __repr__(self) -> str:
        values = ', '.join(f"{s:.6g}" for s in self.singular_values)
        return f"SVDSolution(singular_values=({values}))"
