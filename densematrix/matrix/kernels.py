"""
Row-major kernels on flat matrix buffers.

All kernels take 1-D numpy buffers laid out row-major (element (r, c) at
offset r*cols + c) and never validate shapes; callers check dimensions
first. Element arithmetic always goes through the element type's own
+ and * so object-dtype elements (Fraction, Decimal, ...) behave exactly
as they do outside a matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from densematrix.core.element_types import ElementType


def elementwise_sum(
    left: NDArray[Any],
    right: NDArray[Any],
    element_type: ElementType,
) -> NDArray[Any]:
    """
    Element-wise sum of two equally sized buffers into a new buffer.

    Args:
        left: Left operand buffer
        right: Right operand buffer, same length as left
        element_type: Element type of the result

    Returns:
        New buffer of dtype element_type.dtype
    """
    if left.size == 0:
        return np.empty(0, dtype=element_type.dtype)
    return np.add(left, right).astype(element_type.dtype, copy=False)


def naive_product(
    left: NDArray[Any],
    right: NDArray[Any],
    m: int,
    k: int,
    n: int,
    element_type: ElementType,
) -> NDArray[Any]:
    """
    Matrix product (m x k) * (k x n) => (m x n) by the triple loop.

    Each output element starts from element_type.zero and accumulates
    left(i, p) * right(p, j) for p in [0, k). No blocking or reordering
    is attempted, so the summation order is fixed: p ascending.

    Args:
        left: Left operand buffer of length m*k
        right: Right operand buffer of length k*n
        m: Rows of the left operand
        k: Columns of the left operand == rows of the right operand
        n: Columns of the right operand
        element_type: Element type of the result (supplies zero)

    Returns:
        New buffer of length m*n
    """
    product = np.empty(m * n, dtype=element_type.dtype)
    for i in range(m):
        for j in range(n):
            current = element_type.zero
            for p in range(k):
                current = current + left[i * k + p] * right[p * n + j]
            product[i * n + j] = current
    return product


def buffers_equal(left: NDArray[Any], right: NDArray[Any]) -> bool:
    """
    Compare two equally sized buffers in row-major order.

    Returns False at the first unequal pair without inspecting the rest.
    """
    for a, b in zip(left, right):
        if not a == b:
            return False
    return True
