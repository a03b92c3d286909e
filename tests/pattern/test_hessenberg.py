"""
Tests for Hessenberg reduction.
"""

import numpy as np
import pytest
from scipy import linalg

from pymatrix.algebra import Matrix, SquareMatrix
from pymatrix.core.compute.tolerances import DEFAULT_TOLERANCE
from pymatrix.core.exceptions import NotSquareError
from pymatrix.pattern import hessenberg, is_upper_hessenberg, reduce_to_hessenberg


def _spectrum(a):
    return np.sort_complex(np.round(linalg.eigvals(a), 8))


class TestHessenberg:

    def test_result_is_upper_hessenberg(self, random_complex_square):
        assert is_upper_hessenberg(hessenberg(random_complex_square))

    def test_similarity_preserves_eigenvalues(self, random_complex_square):
        h = hessenberg(random_complex_square)
        np.testing.assert_allclose(
            _spectrum(h.to_array()),
            _spectrum(random_complex_square.to_array()),
            atol=1e-7,
        )

    def test_similarity_preserves_trace(self, random_complex_square):
        assert hessenberg(random_complex_square).trace() == random_complex_square.trace()

    def test_small_example(self):
        m = SquareMatrix([[3, 0, 0], [1, 3, 1], [2, -1, 1]])
        h = hessenberg(m)
        assert is_upper_hessenberg(h)
        assert h.determinant() == m.determinant()

    def test_already_hessenberg_column_skipped(self):
        m = SquareMatrix([[1, 2, 3], [0, 4, 5], [0, 0, 6]])
        assert hessenberg(m) == m

    def test_two_by_two_unchanged(self):
        m = SquareMatrix([[1, 2], [3, 4]])
        assert hessenberg(m) == m

    def test_input_unchanged(self, det_three):
        before = det_three.to_array()
        hessenberg(det_three)
        np.testing.assert_array_equal(det_three.to_array(), before)

    def test_rectangle_raises(self):
        with pytest.raises(NotSquareError):
            hessenberg(Matrix([[1, 2, 3], [4, 5, 6]]))


class TestReduceInPlace:

    def test_overwrites_buffer(self, rng):
        a = rng.standard_normal((4, 4)).astype(np.complex128)
        out = reduce_to_hessenberg(a, DEFAULT_TOLERANCE)
        assert out is a
        assert np.all(np.tril(a, k=-2) == 0)
