"""
Element type descriptors for dense matrices.

An ElementType states everything the matrix needs to know about T:
how values are stored (numpy dtype, or object for Python numbers), which
inputs are accepted on write, and the additive and multiplicative
identities. Sums are always seeded from ElementType.zero, never from a
literal 0.

Built-in types:
    int         Python int (arbitrary precision), object storage
    float64     IEEE double, native storage
    float32     IEEE single, native storage
    complex128  complex double, native storage
    fraction    fractions.Fraction, object storage
    decimal     decimal.Decimal, object storage
"""

from __future__ import annotations

import numbers
import warnings
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ElementTypeError, ValidationError
from pymatrix.core.protocols import Numeric

DEFAULT_ELEMENT_TYPE = 'float64'

_OBJECT = np.dtype(object)


@dataclass(frozen=True)
class ElementType:
    """
    Descriptor for a matrix element type.

    Attributes:
        name: Registry key, e.g. 'float64'
        zero: Additive identity, seeds every accumulation
        one: Multiplicative identity, used for identity matrices
        dtype: numpy storage dtype; object for Python-number elements
        accepts: Types accepted on write (bool is always rejected)
        exact: Whether values should be compared exactly (no tolerance)
        converter: Maps an accepted value to the stored representation.
            Defaults to dtype.type for native dtypes and identity otherwise.
    """
    name: str
    zero: Any
    one: Any
    dtype: np.dtype = field(default=_OBJECT)
    accepts: tuple[type, ...] = ()
    exact: bool = True
    converter: Callable[[Any], Any] | None = None

    @property
    def is_native(self) -> bool:
        """True if elements are stored in a numeric numpy dtype."""
        return self.dtype != _OBJECT

    def accepts_value(self, value: Any) -> bool:
        """Check whether value can be written without narrowing."""
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, self.accepts)

    def convert(self, value: Any) -> Any:
        """
        Convert a value to its stored representation.

        Raises:
            ElementTypeError: If the value is not accepted by this type
        """
        if not self.accepts_value(value):
            raise ElementTypeError(
                f"{type(value).__name__} value {value!r} is not a valid "
                f"'{self.name}' element",
                element_type=self.name,
                value=value,
            )
        if self.converter is not None:
            return self.converter(value)
        if self.is_native:
            return self.dtype.type(value)
        return value

    def allocate(self, size: int) -> NDArray[Any]:
        """Allocate a flat buffer of size elements, each set to zero."""
        return np.full(size, self.zero, dtype=self.dtype)

    def __repr__(self) -> str:
        return f"ElementType({self.name!r})"


def _to_int(value: Any) -> int:
    return int(value)


def _to_fraction(value: Any) -> Fraction:
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    return Fraction(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    return value


def _to_float64(value: Any) -> np.float64:
    return np.float64(float(value))


def _to_float32(value: Any) -> np.float32:
    return np.float32(float(value))


def _to_complex128(value: Any) -> np.complex128:
    return np.complex128(complex(value))


INT = ElementType(
    name='int',
    zero=0,
    one=1,
    accepts=(numbers.Integral,),
    converter=_to_int,
)

FLOAT64 = ElementType(
    name='float64',
    zero=np.float64(0.0),
    one=np.float64(1.0),
    dtype=np.dtype(np.float64),
    accepts=(numbers.Real,),
    exact=False,
    converter=_to_float64,
)

FLOAT32 = ElementType(
    name='float32',
    zero=np.float32(0.0),
    one=np.float32(1.0),
    dtype=np.dtype(np.float32),
    accepts=(numbers.Real,),
    exact=False,
    converter=_to_float32,
)

COMPLEX128 = ElementType(
    name='complex128',
    zero=np.complex128(0.0),
    one=np.complex128(1.0),
    dtype=np.dtype(np.complex128),
    accepts=(numbers.Complex,),
    exact=False,
    converter=_to_complex128,
)

FRACTION = ElementType(
    name='fraction',
    zero=Fraction(0),
    one=Fraction(1),
    accepts=(numbers.Rational,),
    converter=_to_fraction,
)

DECIMAL = ElementType(
    name='decimal',
    zero=Decimal(0),
    one=Decimal(1),
    accepts=(Decimal, numbers.Integral),
    converter=_to_decimal,
)

BUILTIN_ELEMENT_TYPES = (INT, FLOAT64, FLOAT32, COMPLEX128, FRACTION, DECIMAL)

# Narrowest first; float32 is never inferred from Python values
_INFERENCE_ORDER = (INT, FRACTION, DECIMAL, FLOAT64, COMPLEX128)

_PYTHON_TYPES: dict[type, ElementType] = {
    int: INT,
    float: FLOAT64,
    complex: COMPLEX128,
    Fraction: FRACTION,
    Decimal: DECIMAL,
}

_REGISTRY: dict[str, ElementType] = {et.name: et for et in BUILTIN_ELEMENT_TYPES}


def check_element_type(element_type: ElementType) -> ElementType:
    """
    Verify a descriptor can back a matrix.

    Its zero and one must support +, - and *, and it must accept at least
    one input type.

    Raises:
        ValidationError: If the descriptor fails either check
    """
    if not isinstance(element_type, ElementType):
        raise ValidationError(
            f"expected ElementType, got {type(element_type).__name__}"
        )
    for label, identity in (('zero', element_type.zero), ('one', element_type.one)):
        if not isinstance(identity, Numeric):
            raise ValidationError(
                f"element type {element_type.name!r}: {label}={identity!r} "
                f"does not support +, - and *"
            )
    if not element_type.accepts:
        raise ValidationError(
            f"element type {element_type.name!r}: accepts must name at least one type"
        )
    return element_type


def register_element_type(element_type: ElementType) -> ElementType:
    """
    Register a user-defined element type.

    Parameters
    ----------
    element_type : ElementType
        Descriptor to register. Its zero and one must support +, - and *.

    Returns
    -------
    The registered descriptor, so this can be used at module level::

        GAUSSIAN = register_element_type(ElementType('gaussian', G(0), G(1),
                                                     accepts=(G,)))

    Raises
    ------
    ValidationError
        If the name is taken or the descriptor fails check_element_type.

    Elements must be immutable values. Every cell of a new matrix holds
    the same zero object, so mutating one in place would change them all.
    """
    check_element_type(element_type)
    if element_type.name in _REGISTRY:
        raise ValidationError(
            f"element type {element_type.name!r} is already registered"
        )
    _REGISTRY[element_type.name] = element_type
    return element_type


def unregister_element_type(name: str) -> None:
    """Remove a user-defined element type. Built-in types cannot be removed."""
    if name in {et.name for et in BUILTIN_ELEMENT_TYPES}:
        raise ValidationError(f"cannot unregister built-in element type {name!r}")
    if name not in _REGISTRY:
        raise ElementTypeError(f"unknown element type {name!r}", value=name)
    del _REGISTRY[name]


def registered_element_types() -> tuple[str, ...]:
    """Names of all registered element types, built-ins first."""
    return tuple(_REGISTRY)


def element_type_for_dtype(dtype: Any, stacklevel: int = 2) -> ElementType:
    """
    Map a numpy dtype to an element type.

    Integer dtypes map to 'int' (values become Python ints). float16 and
    complex64 are widened with a warning; wider-than-double types are
    rejected rather than silently truncated.

    Raises:
        ElementTypeError: If the dtype has no matching element type
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(f"cannot interpret {dtype!r} as a dtype: {e}", value=dtype) from e

    if dt.kind in 'iu':
        return INT
    if dt == np.float64:
        return FLOAT64
    if dt == np.float32:
        return FLOAT32
    if dt == np.complex128:
        return COMPLEX128
    if dt == np.float16:
        warnings.warn(
            "float16 data promoted to float32 element type",
            UserWarning,
            stacklevel=stacklevel + 1,
        )
        return FLOAT32
    if dt == np.complex64:
        warnings.warn(
            "complex64 data promoted to complex128 element type",
            UserWarning,
            stacklevel=stacklevel + 1,
        )
        return COMPLEX128
    raise ElementTypeError(f"unsupported dtype {dt}", value=dt)


def get_element_type(spec: Any) -> ElementType:
    """
    Resolve an element type specification.

    Parameters
    ----------
    spec : ElementType, str, type, or numpy dtype
        An ElementType is checked and returned as-is. Strings are registry names.
        Python types int, float, complex, Fraction and Decimal map to the
        matching built-in. Anything else is interpreted as a numpy dtype.

    Raises
    ------
    ElementTypeError
        If spec cannot be resolved.
    ValidationError
        If an ElementType instance fails check_element_type.
    """
    if isinstance(spec, ElementType):
        return check_element_type(spec)
    if isinstance(spec, str):
        try:
            return _REGISTRY[spec]
        except KeyError:
            raise ElementTypeError(
                f"unknown element type {spec!r}; registered: {list(_REGISTRY)}",
                value=spec,
            ) from None
    if isinstance(spec, type) and spec in _PYTHON_TYPES:
        return _PYTHON_TYPES[spec]
    return element_type_for_dtype(spec, stacklevel=3)


def infer_element_type(values: Iterable[Any]) -> ElementType:
    """
    Infer the narrowest element type accepting every value.

    Built-in types are tried narrowest first (int, fraction, decimal,
    float64, complex128), then user-registered types in registration order.
    An empty iterable yields the default element type.

    Raises
    ------
    ElementTypeError
        If no registered element type accepts all values.
    """
    values = list(values)
    if not values:
        return _REGISTRY[DEFAULT_ELEMENT_TYPE]

    builtin_names = {et.name for et in BUILTIN_ELEMENT_TYPES}
    user_types = tuple(et for name, et in _REGISTRY.items() if name not in builtin_names)
    for candidate in _INFERENCE_ORDER + user_types:
        if all(candidate.accepts_value(v) for v in values):
            return candidate

    for v in values:
        if not any(et.accepts_value(v) for et in _REGISTRY.values()):
            raise ElementTypeError(
                f"unsupported element value {type(v).__name__} {v!r}",
                value=v,
            )
    kinds = sorted({type(v).__name__ for v in values})
    raise ElementTypeError(
        f"cannot infer a common element type for values of types {kinds}",
        value=kinds,
    )
