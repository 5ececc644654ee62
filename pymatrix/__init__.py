"""
pymatrix: a dense, move-only matrix value type for Python.

Rank-2, row-major matrices over int, float, complex, Fraction, Decimal
or user-registered element types, with shape-checked arithmetic and
reproducible accumulation order.

Submodules:
    core: exceptions, validation, protocols, tolerances
    dense: the Matrix type and free functions
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    DimensionMismatchError,
    NotSquareError,
    IndexOutOfBoundsError,
    ElementTypeError,
    CopyNotAllowedError,
)
from pymatrix.dense import (
    Matrix,
    ElementType,
    add,
    subtract,
    multiply,
    transpose,
    trace,
    identity,
    zeros,
    from_rows,
)

__all__ = [
    "__version__",
    "Matrix",
    "ElementType",
    "add",
    "subtract",
    "multiply",
    "transpose",
    "trace",
    "identity",
    "zeros",
    "from_rows",
    "PyMatrixError",
    "DimensionMismatchError",
    "NotSquareError",
    "IndexOutOfBoundsError",
    "ElementTypeError",
    "CopyNotAllowedError",
]
