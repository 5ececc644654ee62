"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index errors also inherit from the
matching builtin (IndexError, TypeError) so generic handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are invalid or inconsistent.

    Raised for negative or non-integer dimensions, ragged row data,
    and inputs that are not two-dimensional.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a binary operation.

    Raised by addition and subtraction when the shapes differ, and by
    multiplication when the inner dimensions disagree.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Matrix is not square.

    Raised when an operation such as trace requires rows == cols.

    Attributes:
        operation: Name of the operation that was attempted
        shape: (rows, cols) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element index lies outside the matrix.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix at the time of access
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class ElementTypeError(ValidationError, TypeError):
    """
    Value or operand does not match the required element type.

    Raised when writing a value the element type cannot represent exactly,
    when mixing matrices of different element types, and when an element
    type cannot be resolved or inferred.

    Attributes:
        element_type: Name of the expected element type, if known
        value: The offending value or element type
    """

    def __init__(
        self,
        message: str,
        element_type: str | None = None,
        value: Any = None
    ):
        super().__init__(message)
        self.element_type = element_type
        self.value = value


class CopyNotAllowedError(PyMatrixError, TypeError):
    """
    Implicit copy of a Matrix was attempted.

    Matrices own their buffers exclusively. Use Matrix.clone() for an
    explicit duplicate or Matrix.take() to transfer ownership.
    """
    pass
