"""
Tests for the singular value decomposition (Sigma only).
"""

import numpy as np
import pytest
from scipy import linalg

from pymatrix.algebra import Matrix, SquareMatrix
from pymatrix.factorization import SVDSolution, singular_value_decomposition
from pymatrix.pattern import is_diagonal


class TestSVD:

    def test_singular_values(self):
        solution = singular_value_decomposition(Matrix([[3, 0], [4, 5]]))
        # A*A = [[25, 20], [20, 25]] has eigenvalues 45 and 5
        assert solution.singular_values == pytest.approx((np.sqrt(45), np.sqrt(5)))

    def test_sigma_is_diagonal(self, tall):
        solution = singular_value_decomposition(tall)
        assert isinstance(solution.sigma, SquareMatrix)
        assert is_diagonal(solution.sigma)
        np.testing.assert_allclose(
            np.diag(solution.sigma.to_array()).real, solution.singular_values,
        )

    def test_matches_scipy(self, random_complex_square):
        solution = singular_value_decomposition(random_complex_square)
        expected = linalg.svdvals(random_complex_square.to_array())
        np.testing.assert_allclose(solution.singular_values, expected, rtol=1e-7)

    def test_warns_that_factors_are_missing(self, tall):
        solution = singular_value_decomposition(tall)
        assert isinstance(solution, SVDSolution)
        assert any("only Sigma" in w for w in solution.warnings)
        assert solution.backend_name == 'cpu_svd_eigen'

    def test_factors_is_sigma_only(self, tall):
        (sigma,) = singular_value_decomposition(tall)
        assert sigma.shape == (2, 2)

    def test_no_reconstruct(self, tall):
        with pytest.raises(NotImplementedError, match="U and V factors are not assembled"):
            singular_value_decomposition(tall).reconstruct()

    def test_repr(self):
        text = repr(singular_value_decomposition(Matrix([[2, 0], [0, 1]])))
        assert text == "SVDSolution(singular_values=(2, 1))"
