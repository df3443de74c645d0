"""
Exception hierarchy for the sequence algorithm suite.

Two classes of failure exist:

- Contract violations (``OutOfBoundsError``): a primitive was asked for a
  position outside ``[0, n)``. These are programming errors and are never
  caught by the suite.
- Misbehaving callables (``ComparatorError``): a comparator returned something
  that cannot be read as an ordering where a total order is required.

Expected absence (``get`` past the end, ``first`` on an empty sequence, a
binary search miss) is reported through return values, not exceptions.
"""

from typing import Any, Optional


class ArrayOpsError(Exception):
    """Base class for all errors raised by array_ops."""
    pass


class OutOfBoundsError(ArrayOpsError, IndexError):
    """A position fell outside the valid range of a sequence."""

    def __init__(self, index: Any, length: int, message: Optional[str] = None):
        self.index = index
        self.length = length
        if message is None:
            message = f"index {index!r} out of bounds for length {length}"
        super().__init__(message)


class ComparatorError(ArrayOpsError, TypeError):
    """A comparator produced a value that is not a usable ordering."""

    def __init__(self, result: Any, message: Optional[str] = None):
        self.result = result
        if message is None:
            message = (f"comparator returned {result!r}; expected an Ordering "
                       f"or a number whose sign gives the order")
        super().__init__(message)
