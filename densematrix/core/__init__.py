"""
Core infrastructure for densematrix.

This module provides the shared abstractions and utilities the Matrix type
is built on.

Key components:
    protocols: Element protocol for generic matrix elements
    element_types: dtype plus additive identity presets
    exceptions: Exception hierarchy
    validation: Input validators
"""

from densematrix.core.protocols import Element
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
    # Protocols
    "Element",
    # Element types
    "ElementType",
    "select_element_type",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "RaggedInputError",
    "MissingIdentityError",
]
