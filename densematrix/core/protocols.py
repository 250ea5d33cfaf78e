"""
Core protocols for densematrix.

These define the structural interface a generic matrix element must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
numpy scalars, Python numbers, Fraction, Decimal and user-defined types all
qualify without registering anything.

Design Principles:
    - Minimal contracts: only the operations the matrix kernels call
    - The additive identity is NOT part of the element protocol; it is
      supplied by ElementType, since a value cannot name its own zero
"""

from typing import Protocol, TypeVar, Any, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """
    Minimal protocol for a matrix element type T.

    Addition and multiplication must be closed over T (or at least produce
    something that can be stored back in the matrix buffer). Equality is
    used by Matrix.__eq__ with row-major short-circuiting.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


T = TypeVar('T', bound=Element)  # Matrix element type
