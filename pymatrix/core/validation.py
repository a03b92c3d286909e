"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond conversion to complex128
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError, NotSquareError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Validate and convert input to a complex128 numpy array.

    Accepts nested sequences of ints, floats, Python complex numbers or any
    object implementing __complex__ (such as pymatrix Complex scalars).
    Ragged nesting is rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New numpy.ndarray with dtype complex128 (never a view of the input)

    Raises:
        ValidationError: If input is ragged or not numeric
    """
    if isinstance(array, np.ndarray) and array.dtype != object:
        if not np.issubdtype(array.dtype, np.number):
            raise ValidationError(
                f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
            )
        return np.array(array, dtype=np.complex128)

    try:
        result = np.array(array, dtype=object)
    except ValueError as e:
        raise ValidationError(f"{name}: ragged or malformed data: {e}") from e

    flat = result.ravel()
    if any(isinstance(x, (list, tuple, np.ndarray)) for x in flat):
        raise ValidationError(
            f"{name}: ragged data, every row must have the same number of entries"
        )
    if any(isinstance(x, (str, bytes)) for x in flat):
        raise ValidationError(f"{name}: non-numeric entry, expected numbers")

    try:
        values = [complex(x) for x in flat]
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name}: non-numeric entry, expected numbers: {e}"
        ) from e
    return np.array(values, dtype=np.complex128).reshape(result.shape)


def check_finite(array: NDArray[np.complexfloating[Any, Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values in either component.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.complexfloating[Any, Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        ValidationError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D data, got {array.ndim}D with shape {array.shape}"
        )


def check_nonempty(array: NDArray[np.complexfloating[Any, Any]], name: str) -> None:
    """
    Verify every axis has at least one entry.

    Raises:
        ValidationError: If any dimension has length zero
    """
    if array.size == 0 or 0 in array.shape:
        raise ValidationError(
            f"{name}: requires at least one entry per dimension, got shape {array.shape}"
        )


def check_square(shape: tuple[int, ...], name: str) -> None:
    """
    Verify a 2D shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if len(shape) != 2 or shape[0] != shape[1]:
        raise NotSquareError(
            f"{name}: must be square, got shape {shape}",
            shape=tuple(shape),
        )


def check_same_length(a: int, b: int, names: tuple[str, str]) -> None:
    """
    Verify two vectors have the same length.

    Raises:
        DimensionError: If lengths differ
    """
    if a != b:
        raise DimensionError(
            f"Length mismatch: {names[0]}={a}, {names[1]}={b}",
            expected=a,
            actual=b,
        )


def check_same_shape(
    a: tuple[int, ...],
    b: tuple[int, ...],
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have identical shapes (for addition).

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(a) != tuple(b):
        raise DimensionError(
            f"Shape mismatch: {names[0]}={tuple(a)}, {names[1]}={tuple(b)}",
            expected=tuple(a),
            actual=tuple(b),
        )


def check_conformable(
    left: tuple[int, int],
    right: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        DimensionError: If inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"Cannot multiply {names[0]} {tuple(left)} by {names[1]} {tuple(right)}: "
            f"inner dimensions {left[1]} != {right[0]}",
            expected=left[1],
            actual=right[0],
        )


def check_index(index: int, size: int, name: str) -> int:
    """
    Verify a non-negative index is within [0, size).

    Returns:
        The index as a Python int

    Raises:
        IndexError: If index is out of range or not an integer
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexError(f"{name}: index must be an integer, got {index!r}")
    if not 0 <= index < size:
        raise IndexError(f"{name}: index {index} out of range [0, {size})")
    return int(index)
