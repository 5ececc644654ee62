"""
Dense matrix module.

Provides a move-only, row-major dense matrix over a pluggable element
type, with shape-checked arithmetic.

Public API:
    Matrix              - the matrix value type
    add, subtract       - elementwise (shapes must match)
    multiply            - matrix product (inner dimensions must match)
    transpose, trace    - free functions
    identity, zeros     - constructors
    from_rows           - build from nested sequences
    ElementType         - element type descriptor
"""

from pymatrix.dense.elements import (
    DEFAULT_ELEMENT_TYPE,
    ElementType,
    get_element_type,
    infer_element_type,
    register_element_type,
    registered_element_types,
    unregister_element_type,
)
from pymatrix.dense.matrix import Matrix
from pymatrix.dense.ops import (
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
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "transpose",
    "trace",
    "identity",
    "zeros",
    "from_rows",
    "DEFAULT_ELEMENT_TYPE",
    "ElementType",
    "get_element_type",
    "infer_element_type",
    "register_element_type",
    "registered_element_types",
    "unregister_element_type",
]
