"""
Unit tests for the mutating algorithm suite (everything except sorting).
"""

import itertools
from collections import deque

import numpy as np
import pytest

from array_ops import ArrayOpsConfig, OutOfBoundsError
from array_ops.algorithms import mutate
from tests.conftest import StrictVec, assert_permutation


class TestSetAndSwap:
    """set and swap."""

    def test_set_returns_previous(self, example_vec):
        assert example_vec.set(1, 10) == 1
        assert example_vec.items == [3, 10, 3, 3, 7]

    def test_set_out_of_range_is_absent_and_writes_nothing(self, example_vec):
        assert example_vec.set(5, 10) is None
        assert example_vec.set(-1, 10) is None
        assert example_vec.writes == 0

    def test_swap(self, example_vec):
        example_vec.swap(0, 4)
        assert example_vec.items == [7, 1, 3, 3, 3]

    def test_swap_same_index_is_noop(self, example_vec):
        example_vec.swap(2, 2)
        assert example_vec.items == [3, 1, 3, 3, 7]
        assert example_vec.writes == 0

    @pytest.mark.parametrize("i, j", [(0, 5), (5, 0), (-1, 0), (0, 99)])
    def test_swap_out_of_bounds(self, example_vec, i, j):
        with pytest.raises(OutOfBoundsError):
            example_vec.swap(i, j)
        assert example_vec.items == [3, 1, 3, 3, 7]

    def test_out_of_bounds_error_is_an_index_error(self, example_vec):
        with pytest.raises(IndexError):
            example_vec.swap(0, 5)


class TestReverse:
    """reverse."""

    @pytest.mark.parametrize("items, expected", [
        ([], []),
        ([1], [1]),
        ([1, 2], [2, 1]),
        ([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]),
    ])
    def test_reverse(self, items, expected):
        vec = StrictVec(items)
        vec.reverse()
        assert vec.items == expected

    def test_reverse_uses_half_as_many_swaps(self):
        vec = StrictVec(range(10))
        vec.reverse()
        assert vec.writes == 10

    def test_reverse_twice_restores(self, example_vec):
        example_vec.reverse()
        example_vec.reverse()
        assert example_vec.items == [3, 1, 3, 3, 7]


class TestRotate:
    """rotate_left and rotate_right."""

    def test_rotate_left(self):
        vec = StrictVec([1, 2, 3, 4, 5])
        vec.rotate_left(2)
        assert vec.items == [3, 4, 5, 1, 2]

    def test_rotate_right(self):
        vec = StrictVec([1, 2, 3, 4, 5])
        vec.rotate_right(2)
        assert vec.items == [4, 5, 1, 2, 3]

    def test_rotation_is_modulo_length(self):
        vec = StrictVec([1, 2, 3])
        vec.rotate_left(7)
        assert vec.items == [2, 3, 1]

    def test_negative_rotation_goes_the_other_way(self):
        vec = StrictVec([1, 2, 3, 4])
        vec.rotate_left(-1)
        assert vec.items == [4, 1, 2, 3]

    def test_empty_rotation_is_noop(self, empty_vec):
        empty_vec.rotate_left(5)
        empty_vec.rotate_right(5)
        assert empty_vec.items == []

    def test_full_rotation_writes_nothing(self, example_vec):
        example_vec.rotate_left(5)
        assert example_vec.writes == 0

    def test_rotations_are_inverse(self):
        original = list(range(7))
        for k in range(-8, 16):
            vec = StrictVec(original)
            vec.rotate_left(k)
            vec.rotate_right(k)
            assert vec.items == original


class TestFill:
    """fill and fill_with."""

    def test_fill(self, example_vec):
        example_vec.fill(0)
        assert example_vec.items == [0] * 5

    def test_fill_with_calls_generator_in_position_order(self):
        counter = itertools.count()
        vec = StrictVec([None] * 4)
        vec.fill_with(lambda: next(counter))
        assert vec.items == [0, 1, 2, 3]

    def test_fill_empty_never_calls_generator(self, empty_vec):
        empty_vec.fill_with(lambda: pytest.fail("generator must not be called"))


class TestDedup:
    """dedup, dedup_by, dedup_by_key."""

    def test_only_adjacent_runs_collapse(self):
        vec = StrictVec([5, 5, 2, 2, 2, 9])
        m = vec.dedup_by(lambda a, b: a == b)
        assert m == 3
        assert vec.items[:m] == [5, 2, 9]

    def test_tail_holds_removed_duplicates(self):
        vec = StrictVec([5, 5, 2, 2, 2, 9])
        m = vec.dedup()
        assert sorted(vec.items[m:]) == [2, 2, 5]
        assert_permutation([5, 5, 2, 2, 2, 9], vec.items)

    def test_non_adjacent_equal_elements_survive(self):
        vec = StrictVec([1, 2, 1, 1, 2])
        m = vec.dedup()
        assert vec.items[:m] == [1, 2, 1, 2]

    @pytest.mark.parametrize("items", [[], [4]])
    def test_short_sequences(self, items):
        vec = StrictVec(items)
        assert vec.dedup() == len(items)
        assert vec.items == items

    def test_run_representative_is_first_of_run(self):
        vec = StrictVec([(1, "a"), (1, "b"), (2, "c"), (2, "d")])
        m = vec.dedup_by_key(lambda pair: pair[0])
        assert vec.items[:m] == [(1, "a"), (2, "c")]

    def test_plain_list(self):
        data = [1, 1, 1]
        assert mutate.dedup(data) == 1
        assert data == [1, 1, 1]


class TestRetain:
    """retain."""

    def test_retain_keeps_order(self):
        vec = StrictVec([1, 2, 3, 4, 5, 6])
        m = vec.retain(lambda x: x % 2 == 0)
        assert m == 3
        assert vec.items[:m] == [2, 4, 6]
        assert sorted(vec.items[m:]) == [1, 3, 5]

    def test_predicate_called_once_per_element_in_order(self):
        seen = []
        vec = StrictVec([4, 8, 15, 16])

        def keep(x):
            seen.append(x)
            return x > 10

        assert vec.retain(keep) == 2
        assert seen == [4, 8, 15, 16]

    def test_retain_none_and_all(self):
        vec = StrictVec([1, 2, 3])
        assert vec.retain(lambda x: False) == 0
        assert vec.retain(lambda x: True) == 3


class TestShuffle:
    """shuffle."""

    def test_shuffle_is_permutation(self, random_seed):
        vec = StrictVec(range(50))
        vec.shuffle(rng=np.random.default_rng(random_seed))
        assert_permutation(range(50), vec.items)
        assert vec.items != list(range(50))

    def test_seeded_config_is_reproducible(self):
        config = ArrayOpsConfig(shuffle_seed=7)
        first = StrictVec(range(20))
        second = StrictVec(range(20))
        first.shuffle(config=config)
        second.shuffle(config=config)
        assert first.items == second.items

    def test_shuffle_deque(self, random_seed):
        data = deque("abcdef")
        mutate.shuffle(data, rng=np.random.default_rng(random_seed))
        assert sorted(data) == list("abcdef")
