import statistics

import pytest

from algosuite.searching import (
    find_median_sorted_arrays,
    find_min_rotated,
    search_range,
    search_rotated,
)

BASE = [0, 1, 2, 4, 5, 6, 7]
ROTATIONS = [BASE[i:] + BASE[:i] for i in range(len(BASE))]


@pytest.mark.parametrize(
    "a, b",
    [([1, 3], [2]), ([1, 2], [3, 4]), ([], [5]), ([1, 1, 9], []), ([-5, 0, 7], [2, 3, 8, 10])],
)
def test_median_matches_statistics(a, b):
    assert find_median_sorted_arrays(a, b) == statistics.median(a + b)


def test_median_returns_float():
    assert isinstance(find_median_sorted_arrays([1], [3]), float)
    assert find_median_sorted_arrays([1], [3]) == 2.0


def test_median_of_nothing():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


@pytest.mark.parametrize("nums", ROTATIONS)
def test_search_rotated_finds_every_value(nums):
    for value in nums:
        assert search_rotated(nums, value) == nums.index(value)


@pytest.mark.parametrize("nums", ROTATIONS)
def test_search_rotated_missing(nums):
    assert search_rotated(nums, 3) == -1


def test_search_rotated_empty():
    assert search_rotated([], 1) == -1


@pytest.mark.parametrize("target", [5, 7, 8, 10, 6, 11])
def test_search_range(target):
    nums = [5, 7, 7, 8, 8, 8, 10]
    if target in nums:
        expected = (nums.index(target), len(nums) - 1 - nums[::-1].index(target))
    else:
        expected = (-1, -1)
    assert search_range(nums, target) == expected


def test_search_range_empty():
    assert search_range([], 0) == (-1, -1)


@pytest.mark.parametrize("nums", ROTATIONS + [[3, 1, 2], [2, 1], [11]])
def test_find_min_rotated(nums):
    assert find_min_rotated(nums) == min(nums)


def test_find_min_rotated_empty():
    with pytest.raises(ValueError):
        find_min_rotated([])