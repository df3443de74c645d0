"""
Free-function form of the algorithm suite.

Works on any object with ``__len__`` and ``__getitem__`` (plus ``__setitem__``
for the mutating functions), e.g. a plain ``list`` or ``collections.deque``.
"""

from .search import (
    SearchResult, is_empty, get, first, last, iterate, contains,
    starts_with, ends_with, equals, is_sorted, is_sorted_by, is_sorted_by_key,
    binary_search, binary_search_by, binary_search_by_key,
    min_by, max_by, min_by_key, max_by_key, split_at
)
from .mutate import (
    set_item, swap, reverse, rotate_left, rotate_right, fill, fill_with,
    dedup, dedup_by, dedup_by_key, retain, shuffle
)
from .sorting import (
    InsertionSorter, MergeSorter, QuickSorter, HeapSorter, SorterFactory,
    create_sorter, sort, sort_by, sort_by_key, sort_unstable, sort_unstable_by,
    sort_unstable_by_key
)

__all__ = [
    'SearchResult', 'is_empty', 'get', 'first', 'last', 'iterate', 'contains',
    'starts_with', 'ends_with', 'equals', 'is_sorted', 'is_sorted_by', 'is_sorted_by_key',
    'binary_search', 'binary_search_by', 'binary_search_by_key',
    'min_by', 'max_by', 'min_by_key', 'max_by_key', 'split_at',
    'set_item', 'swap', 'reverse', 'rotate_left', 'rotate_right', 'fill', 'fill_with',
    'dedup', 'dedup_by', 'dedup_by_key', 'retain', 'shuffle',
    'InsertionSorter', 'MergeSorter', 'QuickSorter', 'HeapSorter', 'SorterFactory',
    'create_sorter', 'sort', 'sort_by', 'sort_by_key', 'sort_unstable', 'sort_unstable_by',
    'sort_unstable_by_key'
]
