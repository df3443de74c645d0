"""
Comparators, orderings and equality predicates.

A comparator is a two-argument callable ``compare(a, b)`` returning either an
``Ordering`` or any number whose sign gives the order (the classic ``cmp``
convention). Comparators describing a partial order may return ``None`` for
incomparable pairs; only ``is_sorted_by`` accepts that; sorting and searching
need a total order and reject it with ``ComparatorError``.
"""

from enum import IntEnum
from typing import Any, Callable, Optional

import numpy as np

from ..exceptions import ComparatorError

Comparator = Callable[[Any, Any], Any]
Probe = Callable[[Any], Any]
Equality = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]
KeyFunc = Callable[[Any], Any]


class Ordering(IntEnum):
    """Result of comparing two elements."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def as_ordering(result: Any) -> Optional[Ordering]:
    """
    Read a comparator result as an ``Ordering``.

    Args:
        result: ``Ordering``, a signed number, or ``None`` for incomparable

    Returns:
        The ordering, or ``None`` when the comparator reported incomparable
        elements.

    Raises:
        ComparatorError: if ``result`` is neither ``None`` nor orderable against 0.
    """
    if result is None:
        return None
    if isinstance(result, Ordering):
        return result
    try:
        if result < 0:
            return Ordering.LESS
        if result > 0:
            return Ordering.GREATER
        if result == 0:
            return Ordering.EQUAL
    except TypeError as e:
        raise ComparatorError(result) from e
    # NaN and friends compare false against everything
    raise ComparatorError(result)


def total(compare: Comparator) -> Callable[[Any, Any], Ordering]:
    """Wrap ``compare`` so every call yields an ``Ordering`` and incomparable pairs raise."""
    def compare_total(a: Any, b: Any) -> Ordering:
        result = as_ordering(compare(a, b))
        if result is None:
            raise ComparatorError(None, "comparator reported incomparable elements; "
                                        "a total order is required")
        return result
    return compare_total


def total_probe(probe: Probe) -> Callable[[Any], Ordering]:
    """Single-argument variant of ``total`` used by binary search."""
    def probe_total(element: Any) -> Ordering:
        result = as_ordering(probe(element))
        if result is None:
            raise ComparatorError(None, "search probe reported an incomparable element")
        return result
    return probe_total


def natural_order(a: Any, b: Any) -> Ordering:
    """Compare with ``<`` only, so any type defining ``__lt__`` works."""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def partial_order(a: Any, b: Any) -> Optional[Ordering]:
    """Compare allowing incomparable pairs (e.g. NaN), which yield ``None``."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return None


def key_order(extract: KeyFunc, compare: Comparator = natural_order) -> Comparator:
    """Build a comparator that orders elements by ``extract(element)``."""
    def compare_keys(a: Any, b: Any) -> Any:
        return compare(extract(a), extract(b))
    return compare_keys


def reverse_order(compare: Comparator = natural_order) -> Comparator:
    """Flip a comparator so sorts run descending. ``None`` passes through."""
    def compare_reversed(a: Any, b: Any) -> Any:
        return compare(b, a)
    return compare_reversed


def key_equality(extract: KeyFunc) -> Equality:
    """Equality on ``extract(element)``."""
    def equal_keys(a: Any, b: Any) -> bool:
        return extract(a) == extract(b)
    return equal_keys


def natural_equality(a: Any, b: Any) -> bool:
    """
    ``a == b`` reduced to a single bool.

    NumPy broadcasts ``==`` into an element-wise array when one side is
    array-like; such a result counts as equal only when shapes match and every
    element agrees.
    """
    result = a == b
    if isinstance(result, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(result)
