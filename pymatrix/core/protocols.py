"""
Core protocols for pymatrix.

These define structural interfaces that element values must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
third-party number types (Fraction, Decimal, user classes) qualify without
registering against anything.
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    Minimal arithmetic capability required of matrix elements.

    Matrix operations only ever combine elements with +, - and *.
    The additive identity is not part of this protocol; it is supplied
    explicitly by the element type descriptor (ElementType.zero) rather
    than conjured from the literal 0.

    Note:
        runtime_checkable only verifies the methods exist, not their
        signatures or return types.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...
