"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations per element type:
- Exact types (int, fraction, decimal, most user types): no tolerance
- FP64 (float64, complex128): close to machine precision
- FP32 (float32): relaxed for single-precision arithmetic

Used by Matrix.allclose() and by the test suite.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pymatrix.dense.elements import ElementType


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic: values must compare equal
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, elements must be equal',
)

# Double precision (float64, complex128)
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, agrees to ~10 significant digits',
)

# Single precision (float32)
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, agrees to ~4 significant digits',
)


def select_tolerance(element_type: 'ElementType') -> ToleranceTier:
    """Select appropriate tolerance tier for a given element type."""
    if element_type.exact:
        return EXACT
    if element_type.dtype == np.dtype(np.float32):
        return FP32
    return FP64
