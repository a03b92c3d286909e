"""
Solver dispatch for factorizations.

Public entry points: qr_decompose(), lu_decompose(), cholesky_decompose(),
schur_decompose(), singular_value_decomposition().

Structural preconditions raise (NotSquareError) before any computation.
Factorizations that do not exist for valid input return NoSolution.
"""

from __future__ import annotations

from pymatrix.algebra.matrix import Matrix
from pymatrix.algebra.square import as_square
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import Tolerance
from pymatrix.core.result import Result, NoSolution, REASON_NOT_HERMITIAN
from pymatrix.factorization._cholesky import cholesky_lower
from pymatrix.factorization._lu import crout_lu
from pymatrix.factorization._qr import gram_schmidt_qr
from pymatrix.factorization._schur import deflation_schur
from pymatrix.factorization._svd import singular_value_diagonal
from pymatrix.factorization.solution import (
    QRSolution,
    LUSolution,
    CholeskySolution,
    SchurSolution,
    SVDSolution,
)
from pymatrix.pattern.predicates import is_hermitian


def _with_tol(m: Matrix, tol: Tolerance | None) -> Matrix:
    """Rebind m to an explicit tolerance override."""
    if not isinstance(m, Matrix):
        raise TypeError(f"Expected Matrix, got {type(m).__name__}")
    if tol is None or tol == m.tol:
        return m
    return type(m)(m, tol=tol)


def qr_decompose(m: Matrix, *, tol: Tolerance | None = None) -> QRSolution:
    """
    QR factorization by Gram-Schmidt, A = Q R.

    Parameters
    ----------
    m : Matrix
        Any shape.
    tol : Tolerance, optional
        Override for the matrix's tolerance.

    Returns
    -------
    QRSolution
        Q with orthonormal columns (zero columns where m's columns are
        linearly dependent), R = Q* m. Rank-deficient input adds a warning.
    """
    m = _with_tol(m, tol)
    timer = Timer()
    timer.start()
    with timer.section('gram_schmidt'):
        params = gram_schmidt_qr(m)
    timer.stop()

    warnings_list = []
    if params.rank < m.cols:
        warnings_list.append(
            f"Columns are linearly dependent: rank={params.rank}, expected={m.cols}. "
            f"Q has {m.cols - params.rank} zero column(s)."
        )

    result = Result(
        params=params,
        info={'method': 'gram_schmidt', 'rank': params.rank, 'shape': m.shape},
        timing=timer.result(),
        backend_name='cpu_gram_schmidt',
        warnings=tuple(warnings_list),
    )
    return QRSolution(_result=result)


def lu_decompose(m: Matrix, *, tol: Tolerance | None = None) -> LUSolution | NoSolution:
    """
    LU factorization without pivoting, A = L U with unit-diagonal U.

    Returns
    -------
    LUSolution or NoSolution
        NoSolution (reason 'no_lu') when a leading pivot is zero.

    Raises
    ------
    NotSquareError
        If m is not square.
    """
    m = as_square(_with_tol(m, tol))
    timer = Timer()
    timer.start()
    with timer.section('crout'):
        params = crout_lu(m)
    timer.stop()

    if isinstance(params, NoSolution):
        return params

    result = Result(
        params=params,
        info={'method': 'crout', 'n': m.n},
        timing=timer.result(),
        backend_name='cpu_crout',
    )
    return LUSolution(_result=result)


def cholesky_decompose(
    m: Matrix,
    *,
    tol: Tolerance | None = None,
) -> CholeskySolution | NoSolution:
    """
    Cholesky factorization of a Hermitian positive-definite matrix, A = L L*.

    Returns
    -------
    CholeskySolution or NoSolution
        NoSolution with reason 'not_hermitian' for non-Hermitian (including
        non-square) input, or 'not_positive_definite' when a pivot is not a
        positive real.
    """
    m = _with_tol(m, tol)
    if not is_hermitian(m):
        return NoSolution(
            reason=REASON_NOT_HERMITIAN,
            message=f"Cholesky requires a Hermitian matrix; got shape {m.shape} "
                    f"that is not equal to its conjugate transpose",
            matrix_name='m',
        )
    m = as_square(m)

    timer = Timer()
    timer.start()
    with timer.section('cholesky'):
        params = cholesky_lower(m)
    timer.stop()

    if isinstance(params, NoSolution):
        return params

    result = Result(
        params=params,
        info={'method': 'cholesky', 'n': m.n},
        timing=timer.result(),
        backend_name='cpu_cholesky',
    )
    return CholeskySolution(_result=result)


def schur_decompose(m: Matrix, *, tol: Tolerance | None = None) -> SchurSolution:
    """
    Schur decomposition A = U T U* with U unitary, T upper triangular.

    Raises
    ------
    NotSquareError
        If m is not square.
    ConvergenceError
        If the eigen-solver fails on a trailing block.
    """
    m = as_square(_with_tol(m, tol))
    timer = Timer()
    timer.start()
    params, diagnostics = deflation_schur(m, timer)
    timer.stop()

    result = Result(
        params=params,
        info={
            'method': 'householder_deflation',
            'n': m.n,
            'section_calls': timer.calls(),
            **diagnostics,
        },
        timing=timer.result(),
        backend_name='cpu_schur_deflation',
    )
    return SchurSolution(_result=result)


def singular_value_decomposition(m: Matrix, *, tol: Tolerance | None = None) -> SVDSolution:
    """
    Singular values of m and the diagonal matrix Sigma.

    The unitary factors are not assembled; the result carries a warning
    saying so.
    """
    m = _with_tol(m, tol)
    timer = Timer()
    timer.start()
    with timer.section('gram_eigenvalues'):
        params = singular_value_diagonal(m)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'gram_eigenvalues', 'shape': m.shape},
        timing=timer.result(),
        backend_name='cpu_svd_eigen',
        warnings=("U and V factors are not assembled; only Sigma is available.",),
    )
    return SVDSolution(_result=result)
