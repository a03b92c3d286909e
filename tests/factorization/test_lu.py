"""
Tests for LU factorization.
"""

import numpy as np
import pytest

from pymatrix.algebra import Matrix, SquareMatrix
from pymatrix.core.exceptions import NotSquareError, NumericalError
from pymatrix.core.result import NoSolution, REASON_NO_LU, unwrap
from pymatrix.factorization import LUSolution, lu_decompose
from pymatrix.pattern import is_lower_triangular, is_upper_triangular


class TestLU:

    def test_two_by_two(self):
        m = SquareMatrix([[4, 3], [6, 3]])
        L, U = lu_decompose(m)
        assert L == SquareMatrix([[4, 0], [6, -1.5]])
        assert U == SquareMatrix([[1, 0.75], [0, 1]])

    def test_reconstructs(self, random_complex_square):
        solution = lu_decompose(random_complex_square)
        assert isinstance(solution, LUSolution)
        assert solution.reconstruct() == random_complex_square

    def test_triangular_factors_with_unit_diagonal_u(self, complex_three):
        solution = lu_decompose(complex_three)
        assert is_lower_triangular(solution.L)
        assert is_upper_triangular(solution.U)
        np.testing.assert_allclose(np.diag(solution.U.to_array()), 1.0)

    def test_determinant_is_product_of_l_diagonal(self, complex_three):
        solution = lu_decompose(complex_three)
        product = np.prod(np.diag(solution.L.to_array()))
        assert product == pytest.approx(-118 - 84j)

    def test_zero_final_pivot_allowed(self):
        # Singular, but only the last pivot vanishes
        m = SquareMatrix([[1, 2], [2, 4]])
        solution = lu_decompose(m)
        assert solution
        assert solution.L.get_at(1, 1).is_zero()
        assert solution.reconstruct() == m

    def test_metadata(self):
        solution = lu_decompose(SquareMatrix([[2, 1], [1, 3]]))
        assert solution.backend_name == 'cpu_crout'
        assert solution.info == {'method': 'crout', 'n': 2}


class TestNoLU:

    def test_zero_leading_entry(self):
        outcome = lu_decompose(SquareMatrix([[0, 1], [1, 0]]))
        assert isinstance(outcome, NoSolution)
        assert outcome.reason == REASON_NO_LU
        assert outcome.info['pivot_index'] == 0

    def test_zero_intermediate_pivot(self):
        m = SquareMatrix([[1, 2, 3], [2, 4, 5], [1, 3, 4]])
        outcome = lu_decompose(m)
        assert not outcome
        assert outcome.info['pivot_index'] == 1

    def test_unwrap_raises(self):
        with pytest.raises(NumericalError, match="No LU factorization"):
            unwrap(lu_decompose(SquareMatrix([[0, 1], [1, 0]])))

    def test_rectangle_raises(self):
        with pytest.raises(NotSquareError):
            lu_decompose(Matrix([[1, 2, 3], [4, 5, 6]]))
