"""
Random-access sequence algorithms derived from two primitives.

Give a container ``__len__`` and ``__getitem__`` (and ``__setitem__`` for the
mutating half) and it gains searching, ordering checks, sorting, rotation,
deduplication and the rest, either by inheriting ``Array`` / ``ArrayMut`` or by
passing it to the functions in ``array_ops.algorithms``.
"""

from .__about__ import __version__

from .exceptions import ArrayOpsError, OutOfBoundsError, ComparatorError
from .config import ArrayOpsConfig, DEFAULT_CONFIG, load_config

from .core import (
    HasLength, Readable, Writable,
    Ordering, natural_order, partial_order, key_order, reverse_order
)

from .algorithms import SearchResult, SorterFactory, create_sorter
from .array import Array, ArrayMut, ArrayView
from .adapters import SequenceAdapter, ReadOnlyAdapter, adapt

__all__ = [
    '__version__',
    'ArrayOpsError', 'OutOfBoundsError', 'ComparatorError',
    'ArrayOpsConfig', 'DEFAULT_CONFIG', 'load_config',
    'HasLength', 'Readable', 'Writable',
    'Ordering', 'natural_order', 'partial_order', 'key_order', 'reverse_order',
    'SearchResult', 'SorterFactory', 'create_sorter',
    'Array', 'ArrayMut', 'ArrayView',
    'SequenceAdapter', 'ReadOnlyAdapter', 'adapt'
]
