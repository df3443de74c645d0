"""Position validation shared by the read-only and mutating suites."""

import operator
from typing import Any, Optional

from ..exceptions import OutOfBoundsError


def as_position(index: Any) -> Optional[int]:
    """Coerce ``index`` to a plain int (accepts NumPy integers), or None if it is not integral."""
    try:
        return operator.index(index)
    except TypeError:
        return None


def in_bounds(index: Any, length: int) -> bool:
    """Whether ``index`` is a valid position for a sequence of ``length``."""
    position = as_position(index)
    return position is not None and 0 <= position < length


def check_position(index: Any, length: int) -> int:
    """
    Validate a position, raising ``OutOfBoundsError`` when it is outside ``[0, length)``.

    Returns:
        The validated index as a plain int, so callers can write
        ``i = check_position(i, n)``.
    """
    position = as_position(index)
    if position is None or not 0 <= position < length:
        raise OutOfBoundsError(index, length)
    return position


def check_split(mid: Any, length: int) -> int:
    """Validate a split point; ``mid == length`` is allowed."""
    position = as_position(mid)
    if position is None or not 0 <= position <= length:
        raise OutOfBoundsError(
            mid, length, f"split point {mid!r} out of bounds for length {length}"
        )
    return position
