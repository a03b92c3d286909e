"""
Tests for input validators.

Validates:
    - check_array: conversion to complex128, ragged and non-numeric rejection
    - check_finite, check_ndim, check_nonempty
    - check_square, check_same_length, check_same_shape, check_conformable
    - check_index
"""

import numpy as np
import pytest

from pymatrix.algebra import Complex
from pymatrix.core.exceptions import DimensionError, NotSquareError, ValidationError
from pymatrix.core.validation import (
    check_array,
    check_conformable,
    check_finite,
    check_index,
    check_ndim,
    check_nonempty,
    check_same_length,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_list_becomes_complex128(self):
        arr = check_array([[1, 2], [3, 4]], 'X')
        assert arr.dtype == np.complex128
        assert arr.shape == (2, 2)
        assert arr[1, 0] == 3 + 0j

    def test_python_complex_entries(self):
        arr = check_array([1 + 2j, -1j], 'v')
        np.testing.assert_array_equal(arr, np.array([1 + 2j, -1j]))

    def test_complex_scalar_entries(self):
        arr = check_array([[Complex(1, 1), Complex(0, -2)]], 'X')
        np.testing.assert_array_equal(arr, np.array([[1 + 1j, -2j]]))

    def test_returns_copy_of_ndarray(self):
        src = np.array([[1.0, 2.0]])
        arr = check_array(src, 'X')
        arr[0, 0] = 99
        assert src[0, 0] == 1.0

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="ragged"):
            check_array([[1, 2], [3]], 'X')

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([['a', 'b']], 'X')

    def test_non_numeric_dtype_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(np.array(['x', 'y']), 'X')

    def test_object_rejected(self):
        with pytest.raises(ValidationError):
            check_array([object()], 'v')

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_matrix"):
            check_array([[1, 2], [3]], 'my_matrix')


# ═══════════════════════════════════════════════════════════════════════
# Content checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1 + 1j, 2]), 'v')

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1, complex(np.nan, 0)]), 'v')

    def test_inf_in_imaginary_part_rejected(self):
        with pytest.raises(ValidationError, match="Inf"):
            check_finite(np.array([complex(0, np.inf)]), 'v')


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 2), dtype=complex), 2, 'X')

    def test_wrong_ndim_rejected(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            check_ndim(np.zeros(3, dtype=complex), 2, 'X')


class TestCheckNonempty:

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least one entry"):
            check_nonempty(np.zeros((0, 3), dtype=complex), 'X')

    def test_nonempty_passes(self):
        check_nonempty(np.zeros((1, 1), dtype=complex), 'X')


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSquare:

    def test_square_passes(self):
        check_square((3, 3), 'A')

    def test_rectangular_raises_not_square(self):
        with pytest.raises(NotSquareError) as exc_info:
            check_square((2, 3), 'A')
        assert exc_info.value.shape == (2, 3)


class TestCheckSameLength:

    def test_equal_passes(self):
        check_same_length(3, 3, ('a', 'b'))

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="a=3, b=2") as exc_info:
            check_same_length(3, 2, ('a', 'b'))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2


class TestCheckSameShape:

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="Shape mismatch"):
            check_same_shape((2, 2), (2, 3), ('A', 'B'))


class TestCheckConformable:

    def test_conformable_passes(self):
        check_conformable((2, 3), (3, 4), ('A', 'B'))

    def test_inner_mismatch_raises(self):
        with pytest.raises(DimensionError, match="inner dimensions 3 != 2"):
            check_conformable((2, 3), (2, 3), ('A', 'B'))


class TestCheckIndex:

    def test_valid_index_returns_int(self):
        assert check_index(np.int64(1), 3, 'i') == 1

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range(self, index):
        with pytest.raises(IndexError, match="out of range"):
            check_index(index, 3, 'i')

    @pytest.mark.parametrize("index", [1.0, True, '0'])
    def test_non_integer(self, index):
        with pytest.raises(IndexError, match="must be an integer"):
            check_index(index, 3, 'i')
