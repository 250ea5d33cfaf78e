"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Every error the Matrix type reports is a
validation failure detected before any state is mutated.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, element types,
    literals) fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by addition when shapes differ and by multiplication when the
    left operand's column count differs from the right operand's row count.

    Attributes:
        operation: Name of the failing operation (e.g., 'add', 'multiply')
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index lies outside the matrix.

    Raised only by the checked accessors. Also an IndexError so that
    generic Python code handling indexing failures catches it.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class RaggedInputError(ValidationError):
    """
    Nested row literal has rows of differing lengths.

    The column count is taken from the first row; any later row that
    disagrees is rejected instead of spilling into its neighbour.

    Attributes:
        row: Index of the first offending row
        expected_cols: Length of the first row
        actual_cols: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected_cols: int | None = None,
        actual_cols: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected_cols = expected_cols
        self.actual_cols = actual_cols


class MissingIdentityError(ValidationError):
    """
    No additive identity is known for the element type.

    Raised when a matrix is built over a dtype (typically object) whose
    zero cannot be derived and none was supplied explicitly.

    Attributes:
        dtype: The numpy dtype lacking an identity
    """

    def __init__(self, message: str, dtype=None):
        super().__init__(message)
        self.dtype = dtype
