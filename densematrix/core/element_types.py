"""
Element type presets for Matrix storage.

An ElementType pairs the numpy dtype of a matrix buffer with the additive
identity used as the starting accumulator of every summed product:
- Boolean, integer, floating and complex dtypes: zero is dtype.type(0)
- Object dtype (Fraction, Decimal, user types): zero must be supplied

Used by the Matrix constructors and by the multiplication kernel.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from densematrix.core.exceptions import MissingIdentityError, ValidationError


@dataclass(frozen=True)
class ElementType:
    """Storage dtype plus additive identity of a matrix element type."""
    dtype: np.dtype
    zero: Any
    name: str


BOOL = ElementType(
    dtype=np.dtype(np.bool_),
    zero=np.bool_(False),
    name='bool',
)

INT32 = ElementType(
    dtype=np.dtype(np.int32),
    zero=np.int32(0),
    name='int32',
)

INT64 = ElementType(
    dtype=np.dtype(np.int64),
    zero=np.int64(0),
    name='int64',
)

FLOAT32 = ElementType(
    dtype=np.dtype(np.float32),
    zero=np.float32(0),
    name='float32',
)

FLOAT64 = ElementType(
    dtype=np.dtype(np.float64),
    zero=np.float64(0),
    name='float64',
)

COMPLEX128 = ElementType(
    dtype=np.dtype(np.complex128),
    zero=np.complex128(0),
    name='complex128',
)

# Dtype used when no dtype is given and nothing can be inferred
DEFAULT_DTYPE = FLOAT64.dtype

_PRESETS = {
    preset.dtype: preset
    for preset in (BOOL, INT32, INT64, FLOAT32, FLOAT64, COMPLEX128)
}


def _has_numeric_zero(dtype: np.dtype) -> bool:
    return dtype == np.bool_ or np.issubdtype(dtype, np.number)


def select_element_type(
    dtype: DTypeLike = None,
    zero: Any = None,
) -> ElementType:
    """
    Select the element type for a given dtype.

    Args:
        dtype: Storage dtype; None selects DEFAULT_DTYPE
        zero: Explicit additive identity; overrides the dtype's own zero

    Returns:
        ElementType for the dtype

    Raises:
        ValidationError: If dtype is not understood by numpy
        MissingIdentityError: If no zero is given and the dtype has none
    """
    try:
        resolved = np.dtype(DEFAULT_DTYPE if dtype is None else dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not understood: {dtype!r}") from e

    if zero is not None:
        if _has_numeric_zero(resolved):
            zero = resolved.type(zero)
        return ElementType(dtype=resolved, zero=zero, name=resolved.name)

    if resolved in _PRESETS:
        return _PRESETS[resolved]

    if _has_numeric_zero(resolved):
        return ElementType(dtype=resolved, zero=resolved.type(0), name=resolved.name)

    raise MissingIdentityError(
        f"dtype {resolved}: no additive identity known, pass zero= explicitly "
        f"(e.g. zero=Fraction(0))",
        dtype=resolved,
    )


def promote(left: ElementType, right: ElementType) -> ElementType:
    """
    Element type of a result combining two operands.

    Equal dtypes keep the left operand's element type, including its
    explicit zero. Otherwise numpy's promotion rules pick the dtype and the
    left zero is carried over when the result is an object dtype.
    """
    if left.dtype == right.dtype:
        return left
    result_dtype = np.result_type(left.dtype, right.dtype)
    if _has_numeric_zero(result_dtype):
        return select_element_type(result_dtype)
    zero = left.zero if left.dtype == result_dtype else right.zero
    return select_element_type(result_dtype, zero=zero)
