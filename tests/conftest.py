"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x2():
    """[[1, 2], [3, 4]] with int64 storage."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def b_2x2():
    """[[5, 6], [7, 8]] with int64 storage."""
    return Matrix([[5, 6], [7, 8]])


@pytest.fixture
def random_int_triple(rng):
    """Shape-compatible integer matrices (3x4, 4x2, 2x5) for exact products."""
    a = Matrix.from_numpy(rng.integers(-9, 10, size=(3, 4)))
    b = Matrix.from_numpy(rng.integers(-9, 10, size=(4, 2)))
    c = Matrix.from_numpy(rng.integers(-9, 10, size=(2, 5)))
    return a, b, c


@pytest.fixture
def fraction_2x2():
    """Object-dtype matrix of Fractions with an explicit zero."""
    return Matrix(
        [[Fraction(1, 2), Fraction(1, 3)], [Fraction(1, 4), Fraction(1, 5)]],
        zero=Fraction(0),
    )
