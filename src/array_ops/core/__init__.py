"""
Capability protocols, bounds checking and comparison plumbing.

Everything the algorithm suite relies on besides the algorithms themselves.
"""

from .interfaces import HasLength, Readable, Writable
from .bounds import as_position, in_bounds, check_position, check_split
from .ordering import (
    Ordering, as_ordering, total, natural_order, partial_order,
    key_order, reverse_order, key_equality, natural_equality
)

__all__ = [
    'HasLength', 'Readable', 'Writable',
    'as_position', 'in_bounds', 'check_position', 'check_split',
    'Ordering', 'as_ordering', 'total', 'natural_order', 'partial_order',
    'key_order', 'reverse_order', 'key_equality', 'natural_equality'
]
