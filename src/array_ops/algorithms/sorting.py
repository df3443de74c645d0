"""
Comparison sorts built on indexed reads and writes.

Implements multiple algorithms for sorting any writable sequence in place:
- Insertion sort (stable, for short runs)
- Merge sort (stable, O(n log n) comparisons, O(n) buffer)
- Quicksort with randomised pivots and three-way partitioning (unstable)
- Heapsort (unstable, O(n log n) worst case, no buffer)

References:
- Knuth, D. E. (1998). The Art of Computer Programming, Vol. 3: Sorting and
  Searching (2nd ed.). Addison-Wesley.
- Sedgewick, R., & Bentley, J. (2002). Quicksort is optimal. Knuthfest,
  Stanford University.
- Williams, J. W. J. (1964). Algorithm 232: Heapsort. Communications of the
  ACM, 7(6), 347-348.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

import numpy as np

from ..config import ArrayOpsConfig, resolve_config
from ..core.interfaces import Writable
from ..core.ordering import Comparator, KeyFunc, Ordering, key_order, natural_order, total
from ..exceptions import ArrayOpsError

logger = logging.getLogger(__name__)

TotalComparator = Callable[[Any, Any], Ordering]


class Sorter(Protocol):
    """Interface shared by all sorting algorithms."""

    def sort(self, seq: Writable, compare: Comparator) -> None:
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def stable(self) -> bool:
        ...


def _insertion_sort(seq: Writable, lo: int, hi: int, compare: TotalComparator) -> None:
    """Stable insertion sort of ``[lo, hi)`` by shifting larger elements right."""
    for i in range(lo + 1, hi):
        value = seq[i]
        j = i
        while j > lo:
            previous = seq[j - 1]
            if compare(previous, value) is not Ordering.GREATER:
                break
            seq[j] = previous
            j -= 1
        if j != i:
            seq[j] = value


def _merge(seq: Writable, lo: int, mid: int, hi: int,
           compare: TotalComparator, buffer: List[Any]) -> None:
    """Merge sorted runs ``[lo, mid)`` and ``[mid, hi)``; ties take the left run."""
    # Already in order: nothing to move
    if compare(seq[mid - 1], seq[mid]) is not Ordering.GREATER:
        return
    buffer.clear()
    for index in range(lo, mid):
        buffer.append(seq[index])
    left = 0
    right = mid
    out = lo
    n_left = len(buffer)
    while left < n_left and right < hi:
        candidate = seq[right]
        if compare(candidate, buffer[left]) is Ordering.LESS:
            seq[out] = candidate
            right += 1
        else:
            seq[out] = buffer[left]
            left += 1
        out += 1
    while left < n_left:
        seq[out] = buffer[left]
        left += 1
        out += 1


@dataclass
class InsertionSorter:
    """
    Insertion sort: stable, O(n²) comparisons worst case, O(1) extra space.

    Best for short or nearly sorted sequences.
    """

    def sort(self, seq: Writable, compare: Comparator) -> None:
        _insertion_sort(seq, 0, len(seq), total(compare))

    @property
    def name(self) -> str:
        return 'insertion'

    @property
    def stable(self) -> bool:
        return True


@dataclass
class MergeSorter:
    """
    Bottom-up merge sort (Knuth, Vol. 3, §5.2.4).

    Runs of ``insertion_threshold`` elements are first sorted by insertion,
    then merged pairwise with doubling width. Only the left run of each merge
    is copied out, so the buffer never exceeds ``n / 2`` elements. Ties always
    resolve to the earlier element, which makes the sort stable.
    """
    insertion_threshold: int = 16

    def sort(self, seq: Writable, compare: Comparator) -> None:
        compare = total(compare)
        n = len(seq)
        if n < 2:
            return
        run = max(1, self.insertion_threshold)
        for lo in range(0, n, run):
            _insertion_sort(seq, lo, min(lo + run, n), compare)
        buffer: List[Any] = []
        width = run
        while width < n:
            for lo in range(0, n - width, 2 * width):
                mid = lo + width
                hi = min(lo + 2 * width, n)
                _merge(seq, lo, mid, hi, compare, buffer)
            width *= 2

    @property
    def name(self) -> str:
        return 'merge'

    @property
    def stable(self) -> bool:
        return True


@dataclass
class QuickSorter:
    """
    Quicksort with random pivots and three-way partitioning.

    Partitions ``[lo, hi)`` into ``< pivot``, ``== pivot`` and ``> pivot``
    (Dijkstra's Dutch national flag scheme, as advocated by Sedgewick &
    Bentley), so long runs of equal keys cost linear time. Pivots come from a
    NumPy generator seeded with ``seed``, which keeps results reproducible.
    Partitions shorter than ``insertion_threshold`` finish with insertion sort.
    The smaller side is recursed into and the larger one iterated, bounding
    the stack depth at O(log n).
    """
    insertion_threshold: int = 16
    seed: Optional[int] = 0

    def sort(self, seq: Writable, compare: Comparator) -> None:
        n = len(seq)
        if n < 2:
            return
        rng = np.random.default_rng(self.seed)
        self._quicksort(seq, 0, n, total(compare), rng)

    def _quicksort(self, seq: Writable, lo: int, hi: int,
                   compare: TotalComparator, rng: np.random.Generator) -> None:
        threshold = max(2, self.insertion_threshold)
        while hi - lo > threshold:
            p = lo + int(rng.integers(0, hi - lo))
            seq[lo], seq[p] = seq[p], seq[lo]
            pivot = seq[lo]
            lt = lo
            i = lo + 1
            gt = hi
            while i < gt:
                result = compare(seq[i], pivot)
                if result is Ordering.LESS:
                    seq[lt], seq[i] = seq[i], seq[lt]
                    lt += 1
                    i += 1
                elif result is Ordering.GREATER:
                    gt -= 1
                    seq[i], seq[gt] = seq[gt], seq[i]
                else:
                    i += 1
            # [lo, lt) < pivot, [lt, gt) == pivot, [gt, hi) > pivot
            if lt - lo < hi - gt:
                self._quicksort(seq, lo, lt, compare, rng)
                lo = gt
            else:
                self._quicksort(seq, gt, hi, compare, rng)
                hi = lt
        _insertion_sort(seq, lo, hi, compare)

    @property
    def name(self) -> str:
        return 'quick'

    @property
    def stable(self) -> bool:
        return False


@dataclass
class HeapSorter:
    """
    Heapsort (Williams, 1964): O(n log n) comparisons in every case, no buffer.
    """

    def sort(self, seq: Writable, compare: Comparator) -> None:
        compare = total(compare)
        n = len(seq)
        for root in range(n // 2 - 1, -1, -1):
            self._sift_down(seq, root, n, compare)
        for end in range(n - 1, 0, -1):
            seq[0], seq[end] = seq[end], seq[0]
            self._sift_down(seq, 0, end, compare)

    @staticmethod
    def _sift_down(seq: Writable, root: int, end: int, compare: TotalComparator) -> None:
        while True:
            child = 2 * root + 1
            if child >= end:
                return
            if child + 1 < end and compare(seq[child], seq[child + 1]) is Ordering.LESS:
                child += 1
            if compare(seq[root], seq[child]) is not Ordering.LESS:
                return
            seq[root], seq[child] = seq[child], seq[root]
            root = child

    @property
    def name(self) -> str:
        return 'heap'

    @property
    def stable(self) -> bool:
        return False


class SorterFactory:
    """Factory for creating sorter instances by name."""

    _sorters: Dict[str, type] = {
        'insertion': InsertionSorter,
        'merge': MergeSorter,
        'quick': QuickSorter,
        'heap': HeapSorter,
    }

    @staticmethod
    def create_sorter(algorithm: str, **kwargs) -> Sorter:
        """Create sorter instance by name."""
        if algorithm not in SorterFactory._sorters:
            available = list(SorterFactory._sorters.keys())
            raise ValueError(f"Unknown sorter '{algorithm}'. Available: {available}")
        sorter_cls = SorterFactory._sorters[algorithm]
        return sorter_cls(**kwargs)

    @staticmethod
    def list_available() -> list:
        """List available sorting algorithms."""
        return list(SorterFactory._sorters.keys())

    @staticmethod
    def register_sorter(name: str, sorter_cls: type):
        """Register new sorter type."""
        SorterFactory._sorters[name] = sorter_cls


def create_sorter(config: Optional[ArrayOpsConfig] = None, stable: bool = True) -> Sorter:
    """
    Create the sorter selected by ``config`` for a stable or unstable sort.

    Algorithm-specific parameters are taken from the config where the sorter
    accepts them.
    """
    config = resolve_config(config)
    algorithm = config.stable_algorithm if stable else config.unstable_algorithm
    sorter_kwargs: Dict[str, Any] = {}
    if algorithm in ('merge', 'quick'):
        sorter_kwargs['insertion_threshold'] = config.insertion_threshold
    if algorithm == 'quick':
        sorter_kwargs['seed'] = config.pivot_seed
    return SorterFactory.create_sorter(algorithm, **sorter_kwargs)


def sort_by(seq: Writable, compare: Comparator, config: Optional[ArrayOpsConfig] = None,
            sorter: Optional[Sorter] = None) -> None:
    """
    Stable in-place sort.

    Elements that compare EQUAL keep their original relative order.

    Args:
        seq: Sequence to sort
        compare: Total comparator
        config: Selects ``stable_algorithm``; defaults to ``DEFAULT_CONFIG``
        sorter: Explicit sorter overriding the config; must be stable

    Raises:
        ArrayOpsError: if ``sorter`` is not stable
        ComparatorError: if ``compare`` reports incomparable elements
    """
    if sorter is None:
        sorter = create_sorter(config, stable=True)
    elif not sorter.stable:
        raise ArrayOpsError(f"sort_by requires a stable sorter, got '{sorter.name}'")
    logger.debug(f"Stable sort of {len(seq)} elements with '{sorter.name}' sorter")
    sorter.sort(seq, compare)


def sort_unstable_by(seq: Writable, compare: Comparator,
                     config: Optional[ArrayOpsConfig] = None,
                     sorter: Optional[Sorter] = None) -> None:
    """
    In-place sort without a stability guarantee.

    Same ordering postcondition as ``sort_by``, but equal elements may be
    reordered. Uses no buffer with the default quicksort.
    """
    if sorter is None:
        sorter = create_sorter(config, stable=False)
    logger.debug(f"Unstable sort of {len(seq)} elements with '{sorter.name}' sorter")
    sorter.sort(seq, compare)


def sort(seq: Writable, config: Optional[ArrayOpsConfig] = None) -> None:
    sort_by(seq, natural_order, config=config)


def sort_by_key(seq: Writable, extract: KeyFunc, config: Optional[ArrayOpsConfig] = None) -> None:
    sort_by(seq, key_order(extract), config=config)


def sort_unstable(seq: Writable, config: Optional[ArrayOpsConfig] = None) -> None:
    sort_unstable_by(seq, natural_order, config=config)


def sort_unstable_by_key(seq: Writable, extract: KeyFunc,
                         config: Optional[ArrayOpsConfig] = None) -> None:
    sort_unstable_by(seq, key_order(extract), config=config)
