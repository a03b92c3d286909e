"""
Demo driver: prints sample results from each part of the library.

Usage:
    python -m pymatrix.demo            # run every demo
    python -m pymatrix.demo qr det     # run selected demos
    python -m pymatrix.demo --list
"""

import argparse

from pymatrix.algebra import Complex, Vector, Matrix, SquareMatrix
from pymatrix.core.result import NoSolution
from pymatrix.factorization import (
    qr_decompose,
    lu_decompose,
    cholesky_decompose,
    schur_decompose,
    singular_value_decomposition,
)
from pymatrix.pattern import hessenberg, is_upper_triangular, is_unitary


def demo_dot() -> None:
    a = Vector([1 + 1j, 2 + 1j])
    b = Vector([3 - 1j, 4 + 1j])
    print(f"{a} . {b} = {a.dot(b)}")


def demo_proj() -> None:
    v1 = Vector([2 + 1j, 3 - 1j])
    v2 = Vector([1 + 1j, 4 - 1j])
    print(f"proj of {v1} onto {v2} = {v1.proj(v2)}")
    print(f"proj of {v2} onto {v1} = {v2.proj(v1)}")


def demo_det() -> None:
    f = SquareMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 7]])
    g = SquareMatrix([[1, 2], [3, 4]])
    print(f"det(f) = {f.determinant()}")
    print(f"det(g) = {g.determinant()}")
    print(f"det(I_4) = {SquareMatrix(4).determinant()}")


def demo_inverse() -> None:
    m = SquareMatrix([[5, 19], [1, 4]])
    print(f"inverse of\n{m}\n=\n{m.inverse()}")
    singular = SquareMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    outcome = singular.inverse()
    if isinstance(outcome, NoSolution):
        print(f"[[1,2,3],[4,5,6],[7,8,9]] has no inverse: {outcome.message}")


def demo_eigen() -> None:
    z = SquareMatrix([[1j, 2], [1, 1 + 1j]])
    print("eigenvalues of\n" + str(z))
    print('  ' + ', '.join(str(ev) for ev in z.eigenvalues()))

    m = SquareMatrix([[3, 0, 0], [1, 3, 1], [2, -1, 1]])
    print("Hessenberg form of\n" + str(m) + "\n=\n" + str(hessenberg(m)))
    for lam, vec in zip(m.eigenvalues(), m.eigenvectors()):
        print(f"  lambda = {lam}, x = {vec}")


def demo_qr() -> None:
    zm = SquareMatrix([[1, 1 + 1j], [2 - 1j, 3]])
    q, r = qr_decompose(zm)
    print(f"Q =\n{q}\nR =\n{r}")
    print(f"Q unitary: {is_unitary(q)}, Q R == A: {(q @ r) == zm}")


def demo_lu() -> None:
    m = SquareMatrix([[4, 3], [6, 3]])
    outcome = lu_decompose(m)
    if outcome:
        print(f"L =\n{outcome.L}\nU =\n{outcome.U}")
    print(f"[[0, 1], [1, 0]]: {lu_decompose(SquareMatrix([[0, 1], [1, 0]]))}")


def demo_cholesky() -> None:
    m = SquareMatrix([[4, 2j], [-2j, 5]])
    outcome = cholesky_decompose(m)
    if outcome:
        print(f"L =\n{outcome.L}")


def demo_schur() -> None:
    m = SquareMatrix([[1, 2, 0], [0, 3, 1], [1, 0, 2]])
    solution = schur_decompose(m)
    print(f"U =\n{solution.U}\nT =\n{solution.T}")
    print(f"T upper triangular: {is_upper_triangular(solution.T)}")


def demo_svd() -> None:
    m = Matrix([[3, 0], [4, 5]])
    solution = singular_value_decomposition(m)
    print(f"singular values: {solution.singular_values}")
    print(f"Sigma =\n{solution.sigma}")


def demo_scalar() -> None:
    z = Complex(-4, 0)
    print(f"sqrt({z}) = {z.sqrt()}, |3 + 4i| = {abs(Complex(3, 4))}")


DEMOS = {
    'scalar': demo_scalar,
    'dot': demo_dot,
    'proj': demo_proj,
    'det': demo_det,
    'inverse': demo_inverse,
    'eigen': demo_eigen,
    'qr': demo_qr,
    'lu': demo_lu,
    'cholesky': demo_cholesky,
    'schur': demo_schur,
    'svd': demo_svd,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Print sample results from pymatrix'
    )
    parser.add_argument(
        'demos',
        nargs='*',
        help='Demos to run (default: all)',
    )
    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List available demos and exit',
    )
    args = parser.parse_args(argv)

    if args.list:
        print('\n'.join(sorted(DEMOS)))
        return 0

    unknown = [d for d in args.demos if d not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    for name in args.demos or DEMOS:
        print(f"=== {name} ===")
        DEMOS[name]()
        print()
    return 0


if __name__ == '__main__':
    exit(main())
