"""
Dense matrix module.

Public API:
    Matrix          - generic dense row-major matrix value type
    format_matrix   - debug renderer for a row-major buffer
"""

from densematrix.matrix.dense import Matrix
from densematrix.matrix.render import format_matrix

__all__ = [
    "Matrix",
    "format_matrix",
]
