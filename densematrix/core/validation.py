"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of dimensions or indices (bool is not an int here)
    - No wrap-around of negative indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Integral
from typing import Any

import numpy as np

from densematrix.core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    RaggedInputError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (row or column count).

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: expected non-negative integer, got {value}")
    return int(value)


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses an element of a matrix with the given shape.

    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the matrix

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfRangeError: If either index lies outside
            [0, rows) x [0, cols)
    """
    rows, cols = shape
    for index, bound, name in ((row, rows, 'row'), (col, cols, 'col')):
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, Integral):
            raise ValidationError(
                f"{name}: expected integer index, got {type(index).__name__} {index!r}"
            )
        if not 0 <= index < bound:
            raise IndexOutOfRangeError(
                f"{name}: index {index} out of range for matrix with shape {shape}",
                row=row, col=col, shape=shape,
            )


def check_rectangular(nested: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a nested row literal is rectangular.

    The column count is defined by the first row; every later row must
    match it.

    Args:
        nested: Outer sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (rows, cols) of the literal; (0, 0) for an empty outer sequence

    Raises:
        ValidationError: If a row is not a sized sequence
        RaggedInputError: If a row length differs from the first row's
    """
    n_rows = len(nested)
    if n_rows == 0:
        return 0, 0

    lengths = []
    for i, row in enumerate(nested):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of elements"
            )
        lengths.append(len(row))

    n_cols = lengths[0]
    for i, length in enumerate(lengths):
        if length != n_cols:
            raise RaggedInputError(
                f"{name}: row {i} has {length} elements, expected {n_cols} "
                f"(length of row 0)",
                row=i, expected_cols=n_cols, actual_cols=length,
            )
    return n_rows, n_cols


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]}",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows, as a matrix product requires.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]} ({left[1]} != {right[0]})",
            operation=operation, left_shape=left, right_shape=right,
        )
