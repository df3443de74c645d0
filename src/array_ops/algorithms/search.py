"""
Read-only sequence algorithms.

Every function here needs nothing but ``len(seq)`` and ``seq[i]`` for
``0 <= i < len(seq)``; none of them mutate the sequence and all are total on
the empty sequence. Positions outside the valid range are never requested
from the underlying container.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from ..core.bounds import as_position, check_split
from ..core.interfaces import Readable
from ..core.ordering import (
    Comparator, Equality, KeyFunc, Ordering, Probe,
    as_ordering, key_order, natural_equality, natural_order, partial_order,
    total, total_probe,
)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a binary search.

    ``found`` tells whether ``index`` holds a matching element; otherwise
    ``index`` is the insertion point that keeps the sequence sorted.
    """
    found: bool
    index: int


def is_empty(seq: Readable) -> bool:
    return len(seq) == 0


def get(seq: Readable, index: Any) -> Optional[Any]:
    """Element at ``index``, or None when ``index`` is not a valid position."""
    position = as_position(index)
    if position is None or not 0 <= position < len(seq):
        return None
    return seq[position]


def first(seq: Readable) -> Optional[Any]:
    return get(seq, 0)


def last(seq: Readable) -> Optional[Any]:
    n = len(seq)
    if n == 0:
        return None
    return seq[n - 1]


def iterate(seq: Readable) -> Iterator[Any]:
    """Yield elements in position order."""
    for index in range(len(seq)):
        yield seq[index]


def contains(seq: Readable, target: Any, eq: Equality = natural_equality) -> bool:
    """Linear scan for an element equal to ``target``; stops at the first match."""
    for index in range(len(seq)):
        if eq(seq[index], target):
            return True
    return False


def starts_with(seq: Readable, prefix: Readable, eq: Equality = natural_equality) -> bool:
    """Whether the first ``len(prefix)`` elements equal ``prefix``. A longer prefix is simply False."""
    m = len(prefix)
    if m > len(seq):
        return False
    for index in range(m):
        if not eq(seq[index], prefix[index]):
            return False
    return True


def ends_with(seq: Readable, suffix: Readable, eq: Equality = natural_equality) -> bool:
    """Whether the last ``len(suffix)`` elements equal ``suffix``."""
    m = len(suffix)
    n = len(seq)
    if m > n:
        return False
    offset = n - m
    for index in range(m):
        if not eq(seq[offset + index], suffix[index]):
            return False
    return True


def equals(seq: Readable, other: Readable, eq: Equality = natural_equality) -> bool:
    """Element-wise equality with another sequence of the same length."""
    n = len(seq)
    if n != len(other):
        return False
    for index in range(n):
        if not eq(seq[index], other[index]):
            return False
    return True


def is_sorted_by(seq: Readable, compare: Comparator) -> bool:
    """
    Test whether every adjacent pair is in non-descending order.

    Only a GREATER result breaks sortedness; a comparator may return None
    for incomparable pairs without failing the check.
    """
    n = len(seq)
    if n < 2:
        return True
    for index in range(1, n):
        if as_ordering(compare(seq[index - 1], seq[index])) is Ordering.GREATER:
            return False
    return True


def is_sorted(seq: Readable) -> bool:
    return is_sorted_by(seq, partial_order)


def is_sorted_by_key(seq: Readable, extract: KeyFunc) -> bool:
    return is_sorted_by(seq, key_order(extract, partial_order))


def binary_search_by(seq: Readable, probe: Probe) -> SearchResult:
    """
    Binary search using a probe that orders each element against the target.

    ``probe(element)`` must return LESS when the element sorts before the
    target, GREATER when after, EQUAL on a match. The sequence must already be
    sorted consistently with the probe; this is not checked.

    Args:
        seq: Sorted sequence
        probe: Unary comparator against the sought target

    Returns:
        ``SearchResult(True, i)`` for some matching position ``i`` (not
        necessarily the first among equal elements), or
        ``SearchResult(False, i)`` with the insertion point ``i``.
    """
    probe = total_probe(probe)
    size = len(seq)
    if size == 0:
        return SearchResult(False, 0)
    base = 0
    while size > 1:
        half = size // 2
        mid = base + half
        if probe(seq[mid]) is not Ordering.GREATER:
            base = mid
        size -= half
    result = probe(seq[base])
    if result is Ordering.EQUAL:
        return SearchResult(True, base)
    return SearchResult(False, base + (1 if result is Ordering.LESS else 0))


def binary_search(seq: Readable, target: Any, compare: Comparator = natural_order) -> SearchResult:
    compare = total(compare)
    return binary_search_by(seq, lambda element: compare(element, target))


def binary_search_by_key(seq: Readable, key: Any, extract: KeyFunc,
                         compare: Comparator = natural_order) -> SearchResult:
    compare = total(compare)
    return binary_search_by(seq, lambda element: compare(extract(element), key))


def _extreme_by(seq: Readable, compare: Comparator, wanted: Ordering) -> Optional[int]:
    compare = total(compare)
    n = len(seq)
    if n == 0:
        return None
    best = 0
    best_value = seq[0]
    for index in range(1, n):
        value = seq[index]
        # strict comparison keeps the first occurrence on ties
        if compare(value, best_value) is wanted:
            best = index
            best_value = value
    return best


def min_by(seq: Readable, compare: Comparator = natural_order) -> Optional[int]:
    """Position of the smallest element (first occurrence on ties), or None if empty."""
    return _extreme_by(seq, compare, Ordering.LESS)


def max_by(seq: Readable, compare: Comparator = natural_order) -> Optional[int]:
    """Position of the largest element (first occurrence on ties), or None if empty."""
    return _extreme_by(seq, compare, Ordering.GREATER)


def min_by_key(seq: Readable, extract: KeyFunc) -> Optional[int]:
    return min_by(seq, key_order(extract))


def max_by_key(seq: Readable, extract: KeyFunc) -> Optional[int]:
    return max_by(seq, key_order(extract))


def split_at(seq: Readable, mid: Any) -> Tuple["ArrayView", "ArrayView"]:
    """
    Split into two non-overlapping views ``[0, mid)`` and ``[mid, n)``.

    Raises:
        OutOfBoundsError: if ``mid`` is not in ``[0, n]``; checked before any
            element is touched.
    """
    from ..array import ArrayView

    n = len(seq)
    mid = check_split(mid, n)
    return ArrayView(seq, 0, mid), ArrayView(seq, mid, n)
