"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
dense matrix module.

Key components:
    protocols: Numeric capability protocol for elements
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.protocols import Numeric
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    IndexOutOfBoundsError,
    ElementTypeError,
    CopyNotAllowedError,
)
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Protocols
    "Numeric",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "IndexOutOfBoundsError",
    "ElementTypeError",
    "CopyNotAllowedError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
