"""
In-place mutating sequence algorithms.

These additionally require ``seq[i] = value``. They reorder or overwrite
elements but never change ``len(seq)``: compaction operations (``dedup_by``,
``retain``) return the new logical length and leave the removed elements in
the tail for the caller to ignore or truncate.
"""

import logging
from typing import Any, Callable, Optional

import numpy as np

from ..config import ArrayOpsConfig, resolve_config
from ..core.bounds import as_position, check_position
from ..core.interfaces import Writable
from ..core.ordering import Equality, KeyFunc, Predicate, key_equality, natural_equality

logger = logging.getLogger(__name__)


def set_item(seq: Writable, index: Any, value: Any) -> Optional[Any]:
    """
    Overwrite the element at ``index``.

    Returns:
        The previous element, or None (and no write) when ``index`` is out of range.
    """
    position = as_position(index)
    if position is None or not 0 <= position < len(seq):
        return None
    previous = seq[position]
    seq[position] = value
    return previous


def swap(seq: Writable, i: Any, j: Any) -> None:
    """Exchange two elements. Raises OutOfBoundsError if either position is invalid."""
    n = len(seq)
    i = check_position(i, n)
    j = check_position(j, n)
    if i != j:
        seq[i], seq[j] = seq[j], seq[i]


def _swap_unchecked(seq: Writable, i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


def reverse_range(seq: Writable, lo: int, hi: int) -> None:
    """Reverse positions ``[lo, hi)`` in place."""
    hi -= 1
    while lo < hi:
        _swap_unchecked(seq, lo, hi)
        lo += 1
        hi -= 1


def reverse(seq: Writable) -> None:
    reverse_range(seq, 0, len(seq))


def rotate_left(seq: Writable, k: int) -> None:
    """
    Cyclically shift elements ``k`` positions towards the front.

    The element at position ``k mod n`` ends up at position 0. Implemented
    with three reversals, so it uses O(n) swaps and no buffer. Negative ``k``
    rotates right. An empty sequence is left untouched for any ``k``.
    """
    n = len(seq)
    if n == 0:
        return
    k %= n
    if k == 0:
        return
    reverse_range(seq, 0, k)
    reverse_range(seq, k, n)
    reverse_range(seq, 0, n)


def rotate_right(seq: Writable, k: int) -> None:
    """Cyclically shift elements ``k`` positions towards the back."""
    n = len(seq)
    if n == 0:
        return
    rotate_left(seq, n - k % n)


def fill(seq: Writable, value: Any) -> None:
    """Store ``value`` at every position. The same object is stored each time."""
    for index in range(len(seq)):
        seq[index] = value


def fill_with(seq: Writable, generator: Callable[[], Any]) -> None:
    """Store ``generator()`` at every position, calling it once per position in order."""
    for index in range(len(seq)):
        seq[index] = generator()


def dedup_by(seq: Writable, same_bucket: Equality) -> int:
    """
    Collapse runs of adjacent equal elements to their first member.

    ``same_bucket(kept, candidate)`` is called with the last kept element and
    the element under inspection. Kept elements are moved to the front with
    swaps, so the sequence stays a permutation of its input.

    Returns:
        The new logical length ``m``. Positions ``m..n`` hold the removed
        duplicates.

    Example:
        >>> data = [5, 5, 2, 2, 2, 9]
        >>> dedup_by(data, lambda a, b: a == b)
        3
        >>> data[:3]
        [5, 2, 9]
    """
    n = len(seq)
    if n < 2:
        return n
    write = 1
    for read in range(1, n):
        if not same_bucket(seq[write - 1], seq[read]):
            if read != write:
                _swap_unchecked(seq, read, write)
            write += 1
    return write


def dedup(seq: Writable) -> int:
    return dedup_by(seq, natural_equality)


def dedup_by_key(seq: Writable, extract: KeyFunc) -> int:
    return dedup_by(seq, key_equality(extract))


def retain(seq: Writable, predicate: Predicate) -> int:
    """
    Move the elements satisfying ``predicate`` to the front, preserving their order.

    ``predicate`` is evaluated exactly once per element, in position order.

    Returns:
        The number of retained elements ``m``; positions ``m..n`` hold the
        rejected ones.
    """
    write = 0
    for read in range(len(seq)):
        if predicate(seq[read]):
            if read != write:
                _swap_unchecked(seq, read, write)
            write += 1
    return write


def shuffle(seq: Writable, rng: Optional[np.random.Generator] = None,
            config: Optional[ArrayOpsConfig] = None) -> None:
    """
    Uniformly permute the sequence in place (Fisher-Yates).

    Args:
        seq: Sequence to shuffle
        rng: NumPy generator to draw from; when omitted one is created from
            ``config.shuffle_seed`` (unseeded if that is None)
        config: Optional configuration, defaults to ``DEFAULT_CONFIG``
    """
    if rng is None:
        rng = np.random.default_rng(resolve_config(config).shuffle_seed)
    n = len(seq)
    logger.debug(f"Shuffling {n} elements")
    for i in range(n - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        if i != j:
            _swap_unchecked(seq, i, j)
