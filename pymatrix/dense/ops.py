"""
Free-function API for dense matrices.

Provides transpose() and trace() as functions, named forms of the
arithmetic operators (add, subtract, multiply), and constructors. Each
function has exactly the contract of the corresponding Matrix method or
operator; nothing here broadcasts, pads or coerces.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.exceptions import ValidationError
from pymatrix.dense.elements import DEFAULT_ELEMENT_TYPE
from pymatrix.dense.matrix import Matrix


def _ensure_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(value).__name__}")
    return value


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum a + b.

    Raises
    ------
    DimensionMismatchError
        If a.shape != b.shape.
    ElementTypeError
        If the element types differ.
    """
    return _ensure_matrix(a, 'a') + _ensure_matrix(b, 'b')


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b.

    Raises
    ------
    DimensionMismatchError
        If a.shape != b.shape.
    ElementTypeError
        If the element types differ.
    """
    return _ensure_matrix(a, 'a') - _ensure_matrix(b, 'b')


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a * b.

    Element (i, j) is sum_k a(i, k) * b(k, j), accumulated from the
    element type's zero in ascending k.

    Raises
    ------
    DimensionMismatchError
        If a.cols != b.rows.
    ElementTypeError
        If the element types differ.
    """
    return _ensure_matrix(a, 'a') * _ensure_matrix(b, 'b')


def transpose(m: Matrix) -> Matrix:
    """Transpose of m as a new matrix. Never fails, including for empty shapes."""
    return _ensure_matrix(m, 'm').transpose()


def trace(m: Matrix) -> Any:
    """
    Sum of the diagonal of m, accumulated from zero in ascending order.

    Raises
    ------
    NotSquareError
        If m.rows != m.cols.
    """
    return _ensure_matrix(m, 'm').trace()


def identity(n: int, element_type: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n, element_type)


def zeros(rows: int, cols: int, element_type: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
    """rows x cols matrix of zeros."""
    return Matrix.zeros(rows, cols, element_type)


def from_rows(rows: Any, element_type: Any = None) -> Matrix:
    """Matrix from nested row sequences; see Matrix.from_rows."""
    return Matrix.from_rows(rows, element_type)
