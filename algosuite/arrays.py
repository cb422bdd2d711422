"""Array problems: pair and quadruple sums, in-place compaction, rotation and counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations, groupby, islice
from typing import Optional


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return the first index pair (i, j), i < j, whose values add up to target, or None."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area held between two of the given wall heights."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of values that adds up to target, in order."""
    values = sorted(nums)
    size = len(values)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            low, high = j + 1, size - 1
            while low < high:
                total = values[i] + values[j] + values[low] + values[high]
                if total < target:
                    low += 1
                elif total > target:
                    high -= 1
                else:
                    found.add((values[i], values[j], values[low], values[high]))
                    low += 1
                    high -= 1
    return [list(quad) for quad in sorted(found)]


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    if not nums:
        raise ValueError("list must not be empty")
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Move the values other than val to the front, in order, and return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number stored as decimal digits, most significant first, in place."""
    if not digits:
        raise ValueError("digits must not be empty")
    for position in reversed(range(len(digits))):
        if digits[position] != 9:
            digits[position] += 1
            return digits
        digits[position] = 0
    digits.insert(0, 1)
    return digits


def remove_duplicates_at_most_twice(nums: list[int]) -> int:
    """Keep at most two of each run of equal values at the front and return how many are kept."""
    kept = [value for _, run in groupby(nums) for value in islice(run, 2)]
    nums[: len(kept)] = kept
    return len(kept)


def merge_sorted_into(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Replace nums1 with the sorted union of its first m values and the first n of nums2."""
    nums1[:] = sorted([*nums1[:m], *nums2[:n]])


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    present = set(nums)
    longest = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that each child has one and beats lower-rated neighbours."""
    size = len(ratings)
    counts = [1] * size
    for i in range(1, size):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in range(size - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def single_number(nums: Sequence[int]) -> int:
    """Return the value left over after pairing equal values of the sorted input."""
    stack: list[int] = []
    for num in sorted(nums):
        if stack and stack[-1] == num:
            stack.pop()
        else:
            stack.append(num)
    if not stack:
        raise ValueError("every value is paired")
    return stack[-1]


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or 0 if there is none."""
    common = Counter(nums).most_common(1)
    if common and common[0][1] > len(nums) // 2:
        return common[0][0]
    return 0


def rotate_in_place(nums: list[int], k: int) -> None:
    """Rotate the list to the right by k places."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False