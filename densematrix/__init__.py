"""
densematrix: a generic dense matrix value type for Python.

Row-major storage on a flat numpy buffer, value semantics (copy, move,
copy-and-swap assignment), bounds-checked and unchecked element access,
element-wise addition and naive matrix multiplication over any element
type that supplies +, * and == plus an additive identity.

Submodules:
    core: exceptions, validation, element type presets, protocols
    matrix: the Matrix type, its kernels and renderer
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix
from densematrix.core.element_types import ElementType, select_element_type
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    RaggedInputError,
    MissingIdentityError,
)

__all__ = [
    "__version__",
    "Matrix",
    "ElementType",
    "select_element_type",
    "DenseMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "RaggedInputError",
    "MissingIdentityError",
]
