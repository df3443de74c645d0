"""
Adapters giving standard containers the algorithm suite.

``list``, ``collections.deque``, ``bytearray`` and
one-dimensional NumPy arrays already provide the three primitives; wrapping
them in ``SequenceAdapter`` exposes the suite as methods and swaps in the
container's native operations where they beat the generic defaults.
Immutable sequences (``tuple``, ``str``, ``range``, ...) get the read-only
suite through ``ReadOnlyAdapter``.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any, Union

import numpy as np

from ..array import Array, ArrayMut
from ..core.bounds import check_position
from ..core.ordering import Equality, natural_equality
from ..exceptions import ArrayOpsError

# ``in`` on these tests for a substring, not for a single element
_SUBSEQUENCE_MEMBERSHIP = (str, bytes, bytearray, memoryview)


def _native_membership(data: Any, target: Any) -> bool:
    """Whether ``target in data`` agrees with an element-by-element scan."""
    if isinstance(data, _SUBSEQUENCE_MEMBERSHIP):
        return False
    if isinstance(data, np.ndarray):
        # ndarray.__contains__ broadcasts array-like targets
        return np.ndim(target) == 0
    return not isinstance(target, np.ndarray)


class ReadOnlyAdapter(Array):
    """Read-only suite over any ``collections.abc.Sequence``."""

    __slots__ = ('data',)

    def __init__(self, data: Any):
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> Any:
        # reject negative positions instead of letting Python wrap them
        return self.data[check_position(index, len(self.data))]

    def contains(self, target: Any, eq: Equality = natural_equality) -> bool:
        if eq is natural_equality and _native_membership(self.data, target):
            return bool(target in self.data)
        return super().contains(target, eq)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data!r})"


class SequenceAdapter(ArrayMut):
    """
    Full suite over a mutable sequence or a one-dimensional NumPy array.

    The wrapped container is mutated in place and stays accessible as ``data``.
    """

    __slots__ = ('data',)

    def __init__(self, data: Any):
        if isinstance(data, np.ndarray) and data.ndim != 1:
            raise ArrayOpsError(f"only one-dimensional arrays can be adapted, got ndim={data.ndim}")
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> Any:
        return self.data[check_position(index, len(self.data))]

    def __setitem__(self, index: int, value: Any) -> None:
        self.data[check_position(index, len(self.data))] = value

    def contains(self, target: Any, eq: Equality = natural_equality) -> bool:
        if eq is natural_equality and _native_membership(self.data, target):
            return bool(target in self.data)
        return super().contains(target, eq)

    def swap(self, i: int, j: int) -> None:
        n = len(self.data)
        i = check_position(i, n)
        j = check_position(j, n)
        if isinstance(self.data, np.ndarray):
            self.data[[i, j]] = self.data[[j, i]]
        else:
            self.data[i], self.data[j] = self.data[j], self.data[i]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data!r})"


def adapt(data: Any) -> Union[SequenceAdapter, ReadOnlyAdapter]:
    """
    Wrap a standard container in the adapter matching its capabilities.

    Args:
        data: A mutable sequence, a 1-D NumPy array, or any read-only sequence

    Returns:
        ``SequenceAdapter`` for writable containers, ``ReadOnlyAdapter`` otherwise

    Raises:
        TypeError: if ``data`` is not an indexable sequence
    """
    if isinstance(data, (SequenceAdapter, ReadOnlyAdapter)):
        return data
    if isinstance(data, (np.ndarray, MutableSequence)):
        return SequenceAdapter(data)
    if isinstance(data, Sequence):
        return ReadOnlyAdapter(data)
    raise TypeError(f"cannot adapt {type(data).__name__}; expected a sequence")
