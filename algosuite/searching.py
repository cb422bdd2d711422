"""Searching in sorted and rotated sorted sequences."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import islice


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    total = len(nums1) + len(nums2)
    if total == 0:
        raise ValueError("at least one value is required")
    merged = list(islice(heapq.merge(nums1, nums2), total // 2 + 1))
    if total % 2 == 0:
        return (merged[-1] + merged[-2]) / 2.0
    return float(merged[-1])


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _bound(nums: Sequence[int], target: int, leftmost: bool) -> int:
    left, right = 0, len(nums) - 1
    found = -1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] > target:
            right = mid - 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            found = mid
            if leftmost:
                right = mid - 1
            else:
                left = mid + 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of target in a sorted sequence, or (-1, -1)."""
    return _bound(nums, target, True), _bound(nums, target, False)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("sequence must not be empty")
    left, right = 0, len(nums) - 1
    while left < right:
        if nums[left] < nums[right]:
            return nums[left]
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    return nums[right]