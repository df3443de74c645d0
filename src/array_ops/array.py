"""
Opt-in base classes that give a container the whole algorithm suite.

Implement ``__len__`` and ``__getitem__`` and inherit from ``Array`` to get
the read-only operations; implement ``__setitem__`` as well and inherit from
``ArrayMut`` to get the mutating ones. Every method delegates to the free
functions in ``array_ops.algorithms``, so a subclass can override any of them
with a faster native version (see ``array_ops.adapters``).

Example:
    >>> class MyVec(ArrayMut):
    ...     def __init__(self, items):
    ...         self.items = list(items)
    ...     def __len__(self):
    ...         return len(self.items)
    ...     def __getitem__(self, index):
    ...         return self.items[index]
    ...     def __setitem__(self, index, value):
    ...         self.items[index] = value
    >>> v = MyVec([3, 1, 3, 3, 7])
    >>> v.starts_with([3, 1, 3])
    True
    >>> v.sort_unstable()
    >>> list(v)
    [1, 3, 3, 3, 7]
"""

from typing import Any, Callable, Iterator, Optional, Tuple

import numpy as np

from .algorithms import mutate, search, sorting
from .algorithms.search import SearchResult
from .config import ArrayOpsConfig
from .core.bounds import check_position
from .core.interfaces import Readable
from .core.ordering import (
    Comparator, Equality, KeyFunc, Predicate, Probe, natural_equality, natural_order,
)


class Array:
    """
    Read-only algorithm suite for any container with ``__len__`` and ``__getitem__``.

    ``self[i]`` only needs to accept ``0 <= i < len(self)`` and should raise
    ``IndexError`` (e.g. ``OutOfBoundsError``) for anything else.
    """

    __slots__ = ()

    def __len__(self) -> int:
        raise NotImplementedError(f"{self.__class__.__name__} must implement __len__()")

    def __getitem__(self, index: int) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} must implement __getitem__()")

    def __iter__(self) -> Iterator[Any]:
        return search.iterate(self)

    def __contains__(self, target: Any) -> bool:
        return self.contains(target)

    def is_empty(self) -> bool:
        return search.is_empty(self)

    def get(self, index: int) -> Optional[Any]:
        """Element at ``index``, or None if out of range."""
        return search.get(self, index)

    def first(self) -> Optional[Any]:
        return search.first(self)

    def last(self) -> Optional[Any]:
        return search.last(self)

    def contains(self, target: Any, eq: Equality = natural_equality) -> bool:
        return search.contains(self, target, eq)

    def starts_with(self, prefix: Readable, eq: Equality = natural_equality) -> bool:
        return search.starts_with(self, prefix, eq)

    def ends_with(self, suffix: Readable, eq: Equality = natural_equality) -> bool:
        return search.ends_with(self, suffix, eq)

    def equals(self, other: Readable, eq: Equality = natural_equality) -> bool:
        return search.equals(self, other, eq)

    def is_sorted(self) -> bool:
        return search.is_sorted(self)

    def is_sorted_by(self, compare: Comparator) -> bool:
        return search.is_sorted_by(self, compare)

    def is_sorted_by_key(self, extract: KeyFunc) -> bool:
        return search.is_sorted_by_key(self, extract)

    def binary_search(self, target: Any, compare: Comparator = natural_order) -> SearchResult:
        return search.binary_search(self, target, compare)

    def binary_search_by(self, probe: Probe) -> SearchResult:
        return search.binary_search_by(self, probe)

    def binary_search_by_key(self, key: Any, extract: KeyFunc) -> SearchResult:
        return search.binary_search_by_key(self, key, extract)

    def min_by(self, compare: Comparator = natural_order) -> Optional[int]:
        return search.min_by(self, compare)

    def max_by(self, compare: Comparator = natural_order) -> Optional[int]:
        return search.max_by(self, compare)

    def min_by_key(self, extract: KeyFunc) -> Optional[int]:
        return search.min_by_key(self, extract)

    def max_by_key(self, extract: KeyFunc) -> Optional[int]:
        return search.max_by_key(self, extract)

    def split_at(self, mid: int) -> Tuple["ArrayView", "ArrayView"]:
        return search.split_at(self, mid)


class ArrayMut(Array):
    """Mutating algorithm suite; additionally requires ``__setitem__``."""

    __slots__ = ()

    def __setitem__(self, index: int, value: Any) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} must implement __setitem__()")

    def set(self, index: int, value: Any) -> Optional[Any]:
        """Overwrite ``self[index]``, returning the previous value or None if out of range."""
        return mutate.set_item(self, index, value)

    def swap(self, i: int, j: int) -> None:
        mutate.swap(self, i, j)

    def reverse(self) -> None:
        mutate.reverse(self)

    def rotate_left(self, k: int) -> None:
        mutate.rotate_left(self, k)

    def rotate_right(self, k: int) -> None:
        mutate.rotate_right(self, k)

    def fill(self, value: Any) -> None:
        mutate.fill(self, value)

    def fill_with(self, generator: Callable[[], Any]) -> None:
        mutate.fill_with(self, generator)

    def sort(self, config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort(self, config=config)

    def sort_by(self, compare: Comparator, config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort_by(self, compare, config=config)

    def sort_by_key(self, extract: KeyFunc, config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort_by_key(self, extract, config=config)

    def sort_unstable(self, config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort_unstable(self, config=config)

    def sort_unstable_by(self, compare: Comparator,
                         config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort_unstable_by(self, compare, config=config)

    def sort_unstable_by_key(self, extract: KeyFunc,
                             config: Optional[ArrayOpsConfig] = None) -> None:
        sorting.sort_unstable_by_key(self, extract, config=config)

    def dedup(self) -> int:
        return mutate.dedup(self)

    def dedup_by(self, same_bucket: Equality) -> int:
        return mutate.dedup_by(self, same_bucket)

    def dedup_by_key(self, extract: KeyFunc) -> int:
        return mutate.dedup_by_key(self, extract)

    def retain(self, predicate: Predicate) -> int:
        return mutate.retain(self, predicate)

    def shuffle(self, rng: Optional[np.random.Generator] = None,
                config: Optional[ArrayOpsConfig] = None) -> None:
        mutate.shuffle(self, rng=rng, config=config)


class ArrayView(ArrayMut):
    """
    Non-owning window onto positions ``[lo, hi)`` of another sequence.

    Positions are relative to the window and bounds-checked against it. Writes
    go straight to the base, so a view over a read-only base fails on write
    with whatever error the base raises.
    """

    __slots__ = ('base', 'lo', 'hi')

    def __init__(self, base: Readable, lo: int, hi: int):
        if not 0 <= lo <= hi <= len(base):
            raise ValueError(f"invalid view range [{lo}, {hi}) for length {len(base)}")
        self.base = base
        self.lo = lo
        self.hi = hi

    def __len__(self) -> int:
        return self.hi - self.lo

    def __getitem__(self, index: int) -> Any:
        return self.base[self.lo + check_position(index, self.hi - self.lo)]

    def __setitem__(self, index: int, value: Any) -> None:
        self.base[self.lo + check_position(index, self.hi - self.lo)] = value

    def __repr__(self) -> str:
        return f"ArrayView({list(self)!r}, lo={self.lo}, hi={self.hi})"
