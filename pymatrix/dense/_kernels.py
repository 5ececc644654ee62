"""
Reference kernels over flat row-major buffers.

Element (i, j) of an (m x n) buffer lives at offset i*n + j. Every kernel
allocates fresh output storage; operands are never written to.

Accumulations (matmul, trace) run in ascending index order starting from
the element type's zero. No BLAS and no pairwise summation, so floating
point results are bit-reproducible across platforms.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def elementwise_add(a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
    """Elementwise a + b for equal-length buffers."""
    return np.add(a, b, dtype=a.dtype)


def elementwise_subtract(a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
    """Elementwise a - b for equal-length buffers."""
    return np.subtract(a, b, dtype=a.dtype)


def matmul(
    a: NDArray[Any],
    b: NDArray[Any],
    m: int,
    n: int,
    p: int,
    zero: Any,
) -> NDArray[Any]:
    """
    Naive product of an (m x n) buffer and an (n x p) buffer.

    out[i, j] = zero + a[i, 0]*b[0, j] + a[i, 1]*b[1, j] + ... (left to right)
    """
    out = np.empty(m * p, dtype=a.dtype)
    for i in range(m):
        row = i * n
        for j in range(p):
            acc = zero
            for k in range(n):
                acc = acc + a[row + k] * b[k * p + j]
            out[i * p + j] = acc
    return out


def transpose(a: NDArray[Any], m: int, n: int) -> NDArray[Any]:
    """Transpose an (m x n) buffer into a new (n x m) buffer."""
    # copy(), not ascontiguousarray: the result must never alias a
    return a.reshape(m, n).T.copy().reshape(-1)


def trace(a: NDArray[Any], n: int, zero: Any) -> Any:
    """Sum of the diagonal of an (n x n) buffer, ascending from zero."""
    acc = zero
    for i in range(n):
        acc = acc + a[i * n + i]
    return acc


def allclose(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float,
    atol: float,
) -> bool:
    """
    |a - b| <= atol + rtol * |b| elementwise.

    Native dtypes go through numpy. Object buffers fall back to a loop so
    user element types only need -, abs() and float().
    """
    if a.dtype != np.dtype(object):
        return bool(np.allclose(a, b, rtol=rtol, atol=atol, equal_nan=False))
    for x, y in zip(a, b):
        if not float(abs(x - y)) <= atol + rtol * float(abs(y)):
            return False
    return True


def array_equal(a: NDArray[Any], b: NDArray[Any]) -> bool:
    """Exact elementwise equality of equal-length buffers."""
    if a.dtype != np.dtype(object):
        return bool(np.array_equal(a, b))
    return all(x == y for x, y in zip(a, b))
