"""
Test configuration and fixtures for array_ops tests.

Provides reference collaborators (containers that only implement the
primitives), fixtures and assertion helpers shared by all test modules.
"""

from collections import Counter

import pytest

from array_ops import Array, ArrayMut, ArrayOpsConfig, OutOfBoundsError


class StrictVec(ArrayMut):
    """
    Minimal mutable collaborator backed by a list.

    Rejects every position outside ``[0, n)`` (including negatives) so tests
    catch any out-of-bounds request made by the suite, and counts primitive
    calls.
    """

    def __init__(self, items=()):
        self.items = list(items)
        self.reads = 0
        self.writes = 0

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        if not isinstance(index, int) or not 0 <= index < len(self.items):
            raise OutOfBoundsError(index, len(self.items))
        self.reads += 1
        return self.items[index]

    def __setitem__(self, index, value):
        if not isinstance(index, int) or not 0 <= index < len(self.items):
            raise OutOfBoundsError(index, len(self.items))
        self.writes += 1
        self.items[index] = value

    def __eq__(self, other):
        return isinstance(other, StrictVec) and self.items == other.items

    def __repr__(self):
        return f"StrictVec({self.items!r})"


class FrozenVec(Array):
    """Read-only collaborator: no ``__setitem__``."""

    def __init__(self, items=()):
        self._items = tuple(items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if not isinstance(index, int) or not 0 <= index < len(self._items):
            raise OutOfBoundsError(index, len(self._items))
        return self._items[index]


@pytest.fixture
def random_seed():
    """Fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def example_vec():
    """The canonical example sequence."""
    return StrictVec([3, 1, 3, 3, 7])


@pytest.fixture
def empty_vec():
    return StrictVec()


@pytest.fixture
def small_threshold_config():
    """Config forcing partitioning and merging on short inputs."""
    return ArrayOpsConfig(insertion_threshold=1)


@pytest.fixture(params=[1, 2, 16])
def stable_config(request):
    """Merge sort with insertion runs from trivial to the default length."""
    return ArrayOpsConfig(stable_algorithm='merge', insertion_threshold=request.param)


@pytest.fixture(params=['quick', 'heap', 'merge'])
def unstable_config(request):
    """Every algorithm usable for an unstable sort."""
    return ArrayOpsConfig(unstable_algorithm=request.param, insertion_threshold=2)


def assert_permutation(before, after):
    """Assert that ``after`` holds exactly the multiset of ``before``."""
    assert Counter(before) == Counter(after), f"{after!r} is not a permutation of {before!r}"


def assert_nondecreasing(items):
    """Assert that adjacent items never descend, naming the first violation."""
    for i in range(len(items) - 1):
        assert not items[i + 1] < items[i], f"not sorted at i={i}: {items[i]!r} > {items[i + 1]!r}"


def tag_positions(keys):
    """Pair each key with its original position to make stability observable."""
    return [(key, position) for position, key in enumerate(keys)]


def by_key_only(a, b):
    """Comparator on the first tuple field; equal keys compare EQUAL."""
    return (a[0] > b[0]) - (a[0] < b[0])
