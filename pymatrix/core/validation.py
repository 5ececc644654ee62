"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - No truncation, padding or broadcasting of shapes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    ElementTypeError,
    IndexOutOfBoundsError,
    NotSquareError,
    ValidationError,
)

Shape = tuple[int, int]


def _as_int(value: Any) -> int | None:
    """Return value as a plain int, or None if it is not an integer."""
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Proposed dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        DimensionError: If value is not a non-negative integer
    """
    n = _as_int(value)
    if n is None:
        raise DimensionError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if n < 0:
        raise DimensionError(f"{name}: must be non-negative, got {n}")
    return n


def check_index(row: Any, col: Any, shape: Shape) -> Shape:
    """
    Validate an element index against a matrix shape.

    Negative indices are out of bounds; there is no wrap-around.

    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the matrix being indexed

    Returns:
        (row, col) as plain ints

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfBoundsError: If the index lies outside the matrix
    """
    r = _as_int(row)
    c = _as_int(col)
    if r is None or c is None:
        raise ValidationError(
            f"index: expected integer (row, col), got ({row!r}, {col!r})"
        )
    n_rows, n_cols = shape
    if not (0 <= r < n_rows and 0 <= c < n_cols):
        raise IndexOutOfBoundsError(
            f"index ({r}, {c}) out of bounds for matrix of shape {n_rows}x{n_cols}",
            row=r,
            col=c,
            shape=shape,
        )
    return r, c


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: matrix dimensions must agree, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions must agree, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]} "
            f"({left[1]} columns vs {right[0]} rows)",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: Shape, operation: str) -> None:
    """
    Verify a matrix is square.

    Args:
        shape: (rows, cols) of the matrix
        operation: Operation name for error messages

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: matrix must be square, got {shape[0]}x{shape[1]}",
            operation=operation,
            shape=shape,
        )


def check_rectangular(rows: Any, name: str) -> Shape:
    """
    Verify nested row data forms a rectangle.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols). An empty outer sequence is (0, 0).

    Raises:
        DimensionError: If rows is not a sequence of sequences or is ragged
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise DimensionError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )
    if len(rows) == 0:
        return 0, 0

    lengths = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise DimensionError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence"
            )
        lengths.append(len(row))

    if len(set(lengths)) > 1:
        raise DimensionError(f"{name}: ragged rows with lengths {lengths}")
    return len(rows), lengths[0]


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_numeric_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify array has a numeric (non-bool, non-object) dtype.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ElementTypeError: If the dtype is not numeric
    """
    if array.dtype == object or array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        raise ElementTypeError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data",
            value=array.dtype,
        )
