"""
Tests for Matrix: construction, access, arithmetic, orthonormalization
and singular values.
"""

import warnings

import numpy as np
import pytest
from scipy import linalg

from pymatrix.algebra import Complex, Matrix, SquareMatrix, Vector
from pymatrix.core.compute.tolerances import LOOSE_TOLERANCE
from pymatrix.core.exceptions import DimensionError, NotSquareError, ValidationError
from pymatrix.pattern import is_identity


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_nested_lists(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert not m.is_square

    def test_identity_from_int(self):
        assert is_identity(Matrix(4))
        assert Matrix(4).shape == (4, 4)

    def test_identity_size_must_be_positive(self):
        with pytest.raises(ValidationError, match="identity size"):
            Matrix(0)

    def test_from_parts(self):
        m = Matrix.from_parts([[1, 2], [3, 4]], [[0, -1], [1, 0]])
        assert m == Matrix([[1, 2 - 1j], [3 + 1j, 4]])

    def test_from_parts_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix.from_parts([[1, 2]], [[1], [2]])

    def test_from_parts_rejects_complex_parts(self):
        with pytest.raises(ValidationError, match="real-valued"):
            Matrix.from_parts([[1j]], [[0]])

    def test_from_columns(self):
        m = Matrix.from_columns([Vector([1, 2]), Vector([3, 4])])
        assert m == Matrix([[1, 3], [2, 4]])

    def test_copy_constructor_keeps_tolerance(self):
        m = Matrix([[1]], tol=LOOSE_TOLERANCE)
        assert Matrix(m).tol is LOOSE_TOLERANCE

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([[1, 2], [3]])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([[]])

    def test_1d_rejected(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            Matrix([1, 2, 3])

    def test_square_matrix_rejects_rectangle(self):
        with pytest.raises(NotSquareError):
            SquareMatrix([[1, 2, 3], [4, 5, 6]])

    def test_storage_is_read_only(self):
        m = Matrix([[1, 2], [3, 4]])
        with pytest.raises(ValueError):
            m._data[0, 0] = 7


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get_at(self):
        m = Matrix([[1, 2j], [3, 4]])
        assert m.get_at(0, 1) == Complex(0, 2)
        assert m[1, 0] == Complex(3)

    @pytest.mark.parametrize("i,j", [(2, 0), (0, 2), (-1, 0)])
    def test_get_at_out_of_range(self, i, j):
        with pytest.raises(IndexError):
            Matrix([[1, 2], [3, 4]]).get_at(i, j)

    def test_single_index_rejected(self):
        with pytest.raises(IndexError, match="pair"):
            Matrix([[1, 2], [3, 4]])[0]

    def test_row_and_column(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert m.row(1) == Vector([4, 5, 6])
        assert m.column(2) == Vector([3, 6])
        assert list(m.columns())[0] == Vector([1, 4])

    def test_to_list(self):
        rows = Matrix([[1, 2j]]).to_list()
        assert rows[0][1] == Complex(0, 2)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_subtract(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[1j, 0], [0, -1j]])
        assert a + b == Matrix([[1 + 1j, 2], [3, 4 - 1j]])
        assert a - b == Matrix([[1 - 1j, 2], [3, 4 + 1j]])

    def test_add_shape_mismatch(self):
        with pytest.raises(DimensionError, match="Shape mismatch"):
            Matrix([[1, 2]]) + Matrix([[1], [2]])

    def test_multiply(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        b = Matrix([[1, 0], [0, 1j], [1, 1]])
        assert a @ b == Matrix([[4, 3 + 2j], [10, 6 + 5j]])

    def test_multiply_non_conformable(self):
        with pytest.raises(DimensionError, match="inner dimensions"):
            Matrix([[1, 2]]) @ Matrix([[1, 2]])

    def test_multiply_matches_numpy(self, rng):
        a = rng.standard_normal((3, 4)) + 1j * rng.standard_normal((3, 4))
        b = rng.standard_normal((4, 2)) + 1j * rng.standard_normal((4, 2))
        np.testing.assert_allclose((Matrix(a) @ Matrix(b)).to_array(), a @ b)

    def test_apply_vector(self):
        m = Matrix([[1, 2], [3, 4]])
        assert m @ Vector([1, 1j]) == Vector([1 + 2j, 3 + 4j])

    def test_scale(self):
        assert 1j * Matrix([[1, 2]]) == Matrix([[1j, 2j]])
        assert -Matrix([[1, -2]]) == Matrix([[-1, 2]])

    def test_complex_scalar_on_the_left(self):
        assert Complex(0, 1) * Matrix([[1, 2]]) == Matrix([[1j, 2j]])
        assert isinstance(Complex(2) * SquareMatrix([[1, 2], [3, 4]]), SquareMatrix)

    def test_adding_complex_to_matrix_is_type_error(self):
        with pytest.raises(TypeError):
            Complex(1) + Matrix([[1, 2]])

    def test_square_results_stay_square(self):
        a = SquareMatrix([[1, 2], [3, 4]])
        assert isinstance(a + a, SquareMatrix)
        assert isinstance(a @ a, SquareMatrix)
        assert isinstance(a.conjugate_transpose(), SquareMatrix)

    def test_square_subclass_falls_back_for_rectangles(self):
        a = SquareMatrix([[1, 2], [3, 4]])
        wide = Matrix([[1, 2, 3], [4, 5, 6]])
        assert type(a @ wide) is Matrix

    def test_plain_matrix_is_not_promoted(self):
        assert type(Matrix([[1, 2], [3, 4]]).transpose()) is Matrix


class TestTranspose:

    def test_transpose(self):
        m = Matrix([[1, 2j, 3]])
        assert m.transpose() == Matrix([[1], [2j], [3]])

    def test_conjugate_transpose(self):
        m = Matrix([[1 + 1j, 2], [3j, 4]])
        assert m.conjugate_transpose() == Matrix([[1 - 1j, -3j], [2, 4]])

    def test_conjugate(self):
        assert Matrix([[1j]]).conjugate() == Matrix([[-1j]])


class TestEquality:

    def test_within_tolerance(self):
        assert Matrix([[1, 2]]) == Matrix([[1 + 1e-11, 2 - 1e-11j]])

    def test_outside_tolerance(self):
        assert Matrix([[1, 2]]) != Matrix([[1 + 1e-6, 2]])

    def test_shape_mismatch_is_unequal_not_error(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])
        assert not Matrix([[1]]).equals('x')


# ═══════════════════════════════════════════════════════════════════════
# Orthonormalization
# ═══════════════════════════════════════════════════════════════════════


class TestOrthonormalize:

    def test_columns_are_orthonormal(self, tall):
        q = tall.orthonormalize()
        assert is_identity(q.conjugate_transpose() @ q)

    def test_complex_square(self, random_complex_square):
        q = random_complex_square.orthonormalize()
        assert is_identity(q.conjugate_transpose() @ q)

    def test_spans_input_columns(self, tall):
        q = tall.orthonormalize()
        # Projecting the input onto span(Q) leaves it unchanged
        assert q @ (q.conjugate_transpose() @ tall) == tall

    def test_dependent_column_becomes_zero(self):
        m = Matrix([[1, 2, 0], [1, 2, 1], [0, 0, 1]])
        q = m.orthonormalize()
        assert q.column(1).is_zero()
        assert q.column(0).norm() == pytest.approx(1.0)
        assert q.column(2).norm() == pytest.approx(1.0)
        assert q.column(0).dot(q.column(2)).is_zero()

    def test_rank(self, tall):
        assert tall.rank() == 2
        assert Matrix([[1, 2], [2, 4], [3, 6]]).rank() == 1


# ═══════════════════════════════════════════════════════════════════════
# Singular values
# ═══════════════════════════════════════════════════════════════════════


class TestSingularValues:

    def test_diagonal(self):
        assert Matrix([[3, 0], [0, -5]]).singular_values() == pytest.approx((5.0, 3.0))

    def test_matches_scipy(self, tall):
        expected = linalg.svdvals(tall.to_array())
        np.testing.assert_allclose(tall.singular_values(), expected, rtol=1e-8)

    def test_complex_square_matches_scipy(self, random_complex_square):
        expected = linalg.svdvals(random_complex_square.to_array())
        np.testing.assert_allclose(
            random_complex_square.singular_values(), expected, rtol=1e-7,
        )

    def test_wide_matrix_has_zero_values(self):
        # 2x3: A*A is 3x3 of rank 2
        values = Matrix([[1, 0, 0], [0, 2, 0]]).singular_values()
        assert len(values) == 3
        assert values[:2] == pytest.approx((2.0, 1.0))
        assert values[2] == pytest.approx(0.0, abs=1e-7)

    def test_descending(self, random_complex_square):
        values = random_complex_square.singular_values()
        assert list(values) == sorted(values, reverse=True)

    def test_no_warning_for_round_off(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            Matrix([[1, 1], [1, 1]]).singular_values()


class TestDisplay:

    def test_str_aligns_cells(self):
        text = str(Matrix([[1, 2j], [30, 4]]))
        lines = text.splitlines()
        assert len(lines) == 2
        assert len(lines[0]) == len(lines[1])

    def test_repr_names_class(self):
        assert repr(SquareMatrix([[1]])).startswith("SquareMatrix(")
