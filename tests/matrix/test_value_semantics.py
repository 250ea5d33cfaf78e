"""
Tests for Matrix copy, move, assign, swap and fill.

Each Matrix owns its buffer: copies are independent, moves empty the
source, and assignment replaces contents only once the replacement is
fully built.
"""

import copy
from fractions import Fraction

import numpy as np
import pytest

from densematrix import Matrix
from densematrix.core.exceptions import ValidationError


class Counter:
    """Mutable element used to detect aliasing between cells."""

    def __init__(self, value):
        self.value = value

    def __add__(self, other):
        return Counter(self.value + other.value)

    def __mul__(self, other):
        return Counter(self.value * other.value)

    def __eq__(self, other):
        return isinstance(other, Counter) and self.value == other.value


# ═══════════════════════════════════════════════════════════════════════
# Copy
# ═══════════════════════════════════════════════════════════════════════


class TestCopy:

    def test_copy_equal(self, a_2x2):
        assert a_2x2.copy() == a_2x2

    def test_copy_is_independent(self, a_2x2):
        b = a_2x2.copy()
        b[0, 0] = 100
        assert a_2x2[0, 0] == 1
        assert b[0, 0] == 100

    def test_copy_constructor(self, a_2x2):
        b = Matrix(a_2x2)
        b[1, 1] = -4
        assert a_2x2[1, 1] == 4
        assert b.shape == a_2x2.shape

    def test_copy_module(self, a_2x2):
        b = copy.copy(a_2x2)
        b[0, 1] = 0
        assert a_2x2[0, 1] == 2

    def test_deepcopy_copies_object_elements(self):
        m = Matrix([[Counter(1)]], zero=Counter(0))
        clone = copy.deepcopy(m)
        clone[0, 0].value = 5
        assert m[0, 0].value == 1

    def test_copy_keeps_element_type(self, fraction_2x2):
        assert fraction_2x2.copy().element_type is fraction_2x2.element_type


# ═══════════════════════════════════════════════════════════════════════
# Move
# ═══════════════════════════════════════════════════════════════════════


class TestMove:

    def test_source_left_empty(self, a_2x2):
        b = a_2x2.move()
        assert a_2x2.rows == 0
        assert a_2x2.cols == 0
        assert a_2x2.size == 0

    def test_target_has_values(self):
        a = Matrix([[1, 2], [3, 4]])
        b = a.move()
        assert b == Matrix([[1, 2], [3, 4]])

    def test_buffer_transferred_not_copied(self, a_2x2):
        buffer = a_2x2._data
        b = a_2x2.move()
        assert b._data is buffer

    def test_moved_from_is_reusable(self, a_2x2, b_2x2):
        a_2x2.move()
        a_2x2.assign(b_2x2)
        assert a_2x2 == b_2x2


# ═══════════════════════════════════════════════════════════════════════
# Assign / swap
# ═══════════════════════════════════════════════════════════════════════


class TestAssign:

    def test_copy_assign(self, a_2x2):
        target = Matrix(3, 1)
        target.assign(a_2x2)
        assert target == a_2x2
        assert target.shape == (2, 2)

    def test_copy_assign_is_independent(self, a_2x2):
        target = Matrix()
        target.assign(a_2x2)
        target[0, 0] = 42
        assert a_2x2[0, 0] == 1

    def test_move_assign(self, a_2x2):
        target = Matrix(5, 5)
        target.assign(a_2x2.move())
        assert a_2x2.shape == (0, 0)
        assert target == Matrix([[1, 2], [3, 4]])

    def test_take_transfers_buffer(self, a_2x2):
        buffer = a_2x2._data
        target = Matrix(5, 5)
        target.assign(a_2x2, take=True)
        assert target._data is buffer
        assert a_2x2.shape == (0, 0)
        assert a_2x2.size == 0
        assert target == Matrix([[1, 2], [3, 4]])

    def test_take_from_moved_temporary(self, a_2x2):
        buffer = a_2x2._data
        target = Matrix(5, 5)
        target.assign(a_2x2.move(), take=True)
        assert target._data is buffer
        assert a_2x2.shape == (0, 0)

    def test_take_self_is_noop(self, a_2x2):
        a_2x2.assign(a_2x2, take=True)
        assert a_2x2 == Matrix([[1, 2], [3, 4]])

    def test_self_assign_is_noop(self, a_2x2):
        buffer = a_2x2._data
        result = a_2x2.assign(a_2x2)
        assert result is a_2x2
        assert a_2x2._data is buffer
        assert a_2x2 == Matrix([[1, 2], [3, 4]])

    def test_returns_self_for_chaining(self, a_2x2, b_2x2):
        assert a_2x2.assign(b_2x2) is a_2x2


class TestSwap:

    def test_exchanges_everything(self, a_2x2):
        other = Matrix([[1.5, 2.5, 3.5]])
        a_2x2.swap(other)
        assert a_2x2.shape == (1, 3)
        assert a_2x2.dtype == np.float64
        assert other.shape == (2, 2)
        assert other[1, 0] == 3


# ═══════════════════════════════════════════════════════════════════════
# Fill
# ═══════════════════════════════════════════════════════════════════════


class TestFill:

    def test_fill_zero_on_populated(self, a_2x2):
        a_2x2.fill(0)
        assert a_2x2 == Matrix([[0, 0], [0, 0]])

    def test_dimensions_unchanged(self):
        m = Matrix(2, 3)
        m.fill(1.5)
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.to_numpy(), np.full((2, 3), 1.5))

    def test_returns_self(self, a_2x2):
        assert a_2x2.fill(1) is a_2x2

    def test_fill_empty_warns_and_does_nothing(self):
        m = Matrix()
        with pytest.warns(UserWarning, match="has no effect"):
            result = m.fill(3.0)
        assert result is m
        assert m.shape == (0, 0)

    def test_fill_object_cells_not_aliased(self):
        m = Matrix(1, 2, dtype=object, zero=Counter(0))
        m.fill(Counter(1))
        m[0, 0].value = 9
        assert m[0, 1].value == 1

    def test_fill_unstorable_value(self):
        m = Matrix(2, 2)
        m.fill(1.0)
        with pytest.raises(ValidationError, match="cannot be stored as float64"):
            m.fill("x")
        assert m.to_list() == [[1.0, 1.0], [1.0, 1.0]]

    def test_fill_fraction(self, fraction_2x2):
        fraction_2x2.fill(Fraction(2, 3))
        assert fraction_2x2.to_list() == [[Fraction(2, 3)] * 2] * 2
