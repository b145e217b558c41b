"""
Tests for partition(): Lomuto partition around a chosen pivot.
"""

import numpy as np
import pytest

from robstats.selection import partition


def assert_partitioned(xs, l, r, j):
    """Elements left of the pivot are smaller, right are greater or equal."""
    pivot = xs[l + j]
    assert all(x < pivot for x in xs[l:l + j])
    assert all(x >= pivot for x in xs[l + j + 1:r])


class TestPartitionPostcondition:
    """Pivot lands at its rank with smaller elements to its left."""

    def test_whole_list(self):
        xs = [6, 1, 2, 5, 9]
        j = partition(xs, 3, 0, 5)  # pivot 5
        assert j == 2
        assert xs[2] == 5
        assert_partitioned(xs, 0, 5, j)

    def test_rank_is_count_of_smaller(self):
        xs = [6, 1, 2, 5, 9]
        j = partition(xs, 0, 0, 5)  # pivot 6
        assert j == 3
        assert xs[3] == 6

    def test_minimum_pivot(self):
        xs = [4, 3, 1, 2]
        j = partition(xs, 2, 0, 4)
        assert j == 0
        assert xs[0] == 1

    def test_maximum_pivot(self):
        xs = [4, 3, 9, 2]
        j = partition(xs, 2, 0, 4)
        assert j == 3
        assert xs[3] == 9

    def test_every_pivot_index(self, rng):
        base = list(rng.permutation(20))
        for k in range(20):
            xs = list(base)
            j = partition(xs, k, 0, 20)
            assert xs[j] == base[k]
            assert j == base[k]  # values are 0..19, so rank equals value
            assert_partitioned(xs, 0, 20, j)

    def test_numpy_array(self, rng):
        xs = rng.standard_normal(50)
        pivot = xs[10]
        j = partition(xs, 10, 0, 50)
        assert xs[j] == pivot
        assert j == int(np.sum(xs < pivot))
        assert_partitioned(xs, 0, 50, j)


class TestPartitionSubRange:
    """Only [l, r) is rearranged and the rank is relative to l."""

    def test_only_sub_range_touched(self):
        xs = [100, 7, 3, 5, 1, -100]
        j = partition(xs, 0, 1, 5)  # pivot 7 within [1, 5)
        assert xs[0] == 100
        assert xs[5] == -100
        assert j == 3
        assert xs[1 + j] == 7
        assert_partitioned(xs, 1, 5, j)

    def test_single_element(self):
        xs = [3, 2, 1]
        assert partition(xs, 0, 1, 2) == 0
        assert xs == [3, 2, 1]

    def test_multiset_preserved(self, rng):
        xs = list(rng.integers(0, 10, size=30))
        before = sorted(xs)
        partition(xs, 5, 3, 27)
        assert sorted(xs) == before


class TestPartitionTies:
    """Elements equal to the pivot end up on its right."""

    def test_ties_go_right(self):
        xs = [2, 2, 1, 2, 3]
        j = partition(xs, 0, 0, 5)  # pivot 2
        assert j == 1  # only one element is strictly smaller
        assert xs[0] == 1
        assert xs[1] == 2
        assert sorted(xs[2:]) == [2, 2, 3]

    def test_all_equal(self):
        xs = [5, 5, 5, 5]
        assert partition(xs, 2, 0, 4) == 0
        assert xs == [5, 5, 5, 5]

    @pytest.mark.parametrize("k", range(6))
    def test_tied_pivot_rank_independent_of_position(self, k):
        base = [3, 1, 3, 0, 3, 2]
        xs = list(base)
        pivot = xs[k]
        j = partition(xs, k, 0, 6)
        assert j == sum(1 for x in base if x < pivot)
