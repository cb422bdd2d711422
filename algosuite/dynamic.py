"""Dynamic programming over grids, triangles and price series."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, pairwise


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a path from top-left to bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    best = list(accumulate(grid[0]))
    for row in grid[1:]:
        current: list[int] = []
        for value, above in zip(row, best):
            current.append(value + (min(current[-1], above) if current else above))
        best = current
    return best[-1]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a number triangle."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(a, b) for value, a, b in zip(row, best, best[1:])]
    return best[0]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sale, or 0."""
    result = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        result = max(result, price - lowest)
    return result


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of non-overlapping trades is allowed."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))