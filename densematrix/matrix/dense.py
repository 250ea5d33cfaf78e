"""
Matrix: generic dense matrix value type.

A Matrix owns a flat 1-D numpy buffer of rows*cols elements in row-major
order (element (r, c) at offset r*cols + c), plus the ElementType that
names the buffer dtype and the additive identity used by multiplication.

Value semantics:
    - copy() / copy.copy / copy.deepcopy / Matrix(other) deep-copy the buffer
    - move() hands the buffer to a new Matrix and empties the source
    - assign() builds the replacement completely, then swaps it in;
      assign(other, take=True) takes over the buffer of other instead

Thread safety: an instance is not safe for unsynchronized concurrent
mutation; concurrent reads are safe. Distinct instances never share a
buffer.
"""

from __future__ import annotations

import copy as _copy
import warnings
from collections.abc import Sequence
from numbers import Integral, Number
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from densematrix.core.element_types import ElementType, promote, select_element_type
from densematrix.core.exceptions import ValidationError
from densematrix.core.protocols import T
from densematrix.core.validation import (
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
)
from densematrix.matrix.kernels import buffers_equal, elementwise_sum, naive_product
from densematrix.matrix.render import format_matrix


class Matrix(Generic[T]):
    """
    Dense row-major matrix generic over its element type.

    Construction:
        Matrix()                          - empty 0x0 matrix
        Matrix(rows, cols)                - allocated, element values unspecified
        Matrix([[1, 2], [3, 4]])          - from nested rows (see from_rows)
        Matrix(other)                     - deep copy of another Matrix
        Matrix.from_numpy(array)          - from a 2-D array (copied)
        Matrix.full(rows, cols, value)    - allocated and filled

    Element access:
        m[r, c] / m[r, c] = v             - bounds-checked
        m.get_unchecked(r, c)             - no validation; out-of-range use
        m.set_unchecked(r, c, v)            is undefined

    Operators:
        a + b, a += b                     - element-wise, shapes must match
        a * b, a *= b, a @ b, a @= b      - matrix product, a.cols == b.rows
        a == b, a != b                    - identity, then shape, then elements

    Object dtypes take their zero from the literal when every element is a
    number (int beyond int64, Fraction, Decimal); other types need it given:
        Matrix([[Fraction(1, 2)]])                  - zero is Fraction(0)
        Matrix([[Poly(1)]], zero=Poly(0))
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        rows: Any = None,
        cols: Any = None,
        *,
        dtype: DTypeLike = None,
        zero: Any = None,
    ):
        if rows is None and cols is None:
            element_type = select_element_type(dtype, zero)
            self._set(0, 0, np.empty(0, dtype=element_type.dtype), element_type)
            return

        if cols is None and isinstance(rows, Matrix):
            if dtype is not None or zero is not None:
                raise ValidationError(
                    "dtype, zero: not accepted when copying a Matrix; "
                    "use Matrix.from_numpy(other.to_numpy(), ...) to convert"
                )
            self._set(*rows._clone_state())
            return

        if cols is None and not isinstance(rows, Integral):
            built = Matrix.from_rows(rows, dtype=dtype, zero=zero)
            self._set(*built._release_state())
            return

        n_rows = check_dimension(rows, 'rows')
        n_cols = check_dimension(cols, 'cols')
        element_type = select_element_type(dtype, zero)
        self._set(n_rows, n_cols, np.empty(n_rows * n_cols, dtype=element_type.dtype),
                  element_type)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        nested: Sequence[Sequence[Any]],
        *,
        dtype: DTypeLike = None,
        zero: Any = None,
    ) -> Matrix:
        """
        Build a Matrix from a nested sequence of rows.

        The number of rows is the outer length and the number of columns
        is the length of the first row. Every row must have that length.

        Parameters
        ----------
        nested : sequence of sequences
            Row literals, e.g. [[1, 2], [3, 4]].
        dtype : dtype-like, optional
            Storage dtype. Inferred from the elements when omitted;
            non-numeric elements are stored with object dtype.
        zero : optional
            Additive identity. Derived from the first element when every
            element is a number stored with object dtype; otherwise
            required for object dtype.

        Raises
        ------
        RaggedInputError
            If any row's length differs from the first row's.
        ValidationError
            If an element cannot be stored with the requested dtype.
        """
        if isinstance(nested, (str, bytes)) or not hasattr(nested, '__len__'):
            raise ValidationError(
                f"nested: expected a sequence of rows, got {type(nested).__name__}"
            )
        n_rows, n_cols = check_rectangular(nested, 'nested')
        flat = [value for row in nested for value in row]

        if dtype is None:
            dtype = _infer_dtype(flat)
            if zero is None and dtype == object:
                zero = _infer_zero(flat)
        element_type = select_element_type(dtype, zero)

        data = np.empty(n_rows * n_cols, dtype=element_type.dtype)
        for offset, value in enumerate(flat):
            try:
                data[offset] = value
            except (ValueError, TypeError, OverflowError) as e:
                raise ValidationError(
                    f"nested: element {value!r} at row {offset // n_cols}, "
                    f"col {offset % n_cols} cannot be stored as {element_type.dtype}: {e}"
                ) from e
        return cls._from_buffer(n_rows, n_cols, data, element_type)

    @classmethod
    def from_numpy(cls, array: ArrayLike, *, zero: Any = None) -> Matrix:
        """
        Build a Matrix from a 2-D array. The data is copied.

        Raises:
            ValidationError: If the array is not 2-dimensional
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValidationError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        element_type = select_element_type(arr.dtype, zero)
        data = np.array(arr, dtype=element_type.dtype, order='C').reshape(-1)
        return cls._from_buffer(arr.shape[0], arr.shape[1], data, element_type)

    @classmethod
    def full(
        cls,
        rows: int,
        cols: int,
        value: Any,
        *,
        dtype: DTypeLike = None,
        zero: Any = None,
    ) -> Matrix:
        """Allocate a rows x cols matrix with every element set to value."""
        result = cls(rows, cols, dtype=dtype, zero=zero)
        if result.size:
            result.fill(value)
        return result

    @classmethod
    def _from_buffer(
        cls,
        rows: int,
        cols: int,
        data: NDArray[Any],
        element_type: ElementType,
    ) -> Matrix:
        """Wrap an already built buffer. The buffer is taken, not copied."""
        result = cls.__new__(cls)
        result._set(rows, cols, data, element_type)
        return result

    # ------------------------------------------------------------------
    # State handling
    # ------------------------------------------------------------------

    def _set(self, rows: int, cols: int, data: NDArray[Any], element_type: ElementType) -> None:
        self._rows = rows
        self._cols = cols
        self._data = data
        self._element_type = element_type

    def _clone_state(self) -> tuple[int, int, NDArray[Any], ElementType]:
        return self._rows, self._cols, self._data.copy(), self._element_type

    def _release_state(self) -> tuple[int, int, NDArray[Any], ElementType]:
        state = (self._rows, self._cols, self._data, self._element_type)
        self._set(0, 0, np.empty(0, dtype=self._element_type.dtype), self._element_type)
        return state

    def copy(self) -> Matrix:
        """Return an independent copy with its own buffer."""
        return type(self)._from_buffer(*self._clone_state())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        data = _copy.deepcopy(self._data, memo)
        return type(self)._from_buffer(self._rows, self._cols, data, self._element_type)

    def move(self) -> Matrix:
        """
        Transfer the buffer to a new Matrix in constant time.

        The source becomes the empty 0x0 matrix and keeps its element type.
        """
        return type(self)._from_buffer(*self._release_state())

    def swap(self, other: Matrix) -> None:
        """Exchange contents (shape, buffer, element type) with other."""
        mine = (self._rows, self._cols, self._data, self._element_type)
        self._set(other._rows, other._cols, other._data, other._element_type)
        other._set(*mine)

    def assign(self, other: Matrix, *, take: bool = False) -> Matrix:
        """
        Replace this matrix's contents with those of other.

        By default a copy of other is built completely before anything in
        self changes, so a failure leaves self untouched. With take=True
        the buffer of other is taken over in constant time and other is
        left empty (move-assignment): `a.assign(b, take=True)` or
        `a.assign(b.move(), take=True)`. Self-assignment is a no-op.
        """
        if other is self:
            return self
        replacement = other.move() if take else other.copy()
        self.swap(replacement)
        return self

    def fill(self, value: Any) -> Matrix:
        """
        Overwrite every element with value, keeping the dimensions.

        On a zero-size matrix there is nothing to overwrite; a warning is
        emitted and the matrix is returned unchanged.
        """
        if self.size == 0:
            warnings.warn(
                f"fill() on a {self._rows}x{self._cols} matrix has no effect"
            )
            return self
        if self._data.dtype == object:
            for n in range(self.size):
                self._data[n] = _copy.copy(value)
            return self
        try:
            self._data.fill(value)
        except (ValueError, TypeError, OverflowError) as e:
            raise ValidationError(
                f"value: {value!r} cannot be stored as {self.dtype}: {e}"
            ) from e
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def size(self) -> int:
        """Number of stored elements (rows * cols)."""
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._element_type.dtype

    @property
    def element_type(self) -> ElementType:
        return self._element_type

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the contents as a (rows, cols) array."""
        return self._data.reshape(self._rows, self._cols).copy()

    def to_list(self) -> list[list[Any]]:
        """Contents as nested Python lists, one list per row."""
        return self.to_numpy().tolist()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = _split_key(key)
        check_index(row, col, self.shape)
        return self._data[row * self._cols + col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = _split_key(key)
        check_index(row, col, self.shape)
        try:
            self._data[row * self._cols + col] = value
        except (ValueError, TypeError, OverflowError) as e:
            raise ValidationError(
                f"value: {value!r} at row {row}, col {col} cannot be stored "
                f"as {self.dtype}: {e}"
            ) from e

    def get_unchecked(self, row: int, col: int) -> Any:
        """Read (row, col) without bounds checking."""
        return self._data[row * self._cols + col]

    def set_unchecked(self, row: int, col: int, value: Any) -> None:
        """Write (row, col) without bounds checking."""
        self._data[row * self._cols + col] = value

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self is other:
            return True
        if self.shape != other.shape:
            return False
        return buffers_equal(self._data, other._data)

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        element_type = promote(self._element_type, other._element_type)
        summed = elementwise_sum(self._data, other._data, element_type)
        self._set(self._rows, self._cols, summed, element_type)
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_inner_dimensions(self.shape, other.shape, 'multiply')
        element_type = promote(self._element_type, other._element_type)
        data = naive_product(
            self._data, other._data,
            self._rows, self._cols, other._cols,
            element_type,
        )
        return type(self)._from_buffer(self._rows, other._cols, data, element_type)

    def __imul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        product = self * other
        self.swap(product)
        return self

    __matmul__ = __mul__
    __imatmul__ = __imul__

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Rows of space-separated values, then a 'Rows: r, cols: c' line."""
        return format_matrix(self._data, self._rows, self._cols)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self.dtype})"


def _split_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be (row, col) pairs, got {key!r}")
    return key


def _infer_dtype(flat: list[Any]) -> np.dtype:
    """Dtype for a flat element list; object unless numpy sees plain scalars."""
    if not flat:
        return select_element_type().dtype
    try:
        inferred = np.asarray(flat)
    except (ValueError, TypeError, OverflowError):
        return np.dtype(object)
    if inferred.ndim != 1:
        return np.dtype(object)
    if inferred.dtype == np.bool_ or np.issubdtype(inferred.dtype, np.number):
        return inferred.dtype
    return np.dtype(object)


def _infer_zero(flat: list[Any]) -> Any:
    """Zero of the first element's type when every element is a number."""
    if flat and all(isinstance(value, Number) for value in flat):
        return type(flat[0])(0)
    return None
