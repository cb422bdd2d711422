import copy

import pytest

from algosuite.dynamic import max_profit, max_profit_multiple, min_path_sum, minimum_total


def test_min_path_sum_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_single_row_and_column():
    row = [4, 1, 6, 2]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[v] for v in row]) == sum(row)


def test_min_path_sum_does_not_mutate():
    grid = [[1, 2, 3], [4, 5, 6]]
    snapshot = copy.deepcopy(grid)
    min_path_sum(grid)
    assert grid == snapshot


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_minimum_total_example():
    assert minimum_total([[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]) == 11


def test_minimum_total_single_row():
    assert minimum_total([[-10]]) == -10


def test_minimum_total_does_not_mutate():
    triangle = [[1], [2, 3], [4, 5, 6]]
    snapshot = copy.deepcopy(triangle)
    minimum_total(triangle)
    assert triangle == snapshot


def test_minimum_total_empty_raises():
    with pytest.raises(ValueError):
        minimum_total([])


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@pytest.mark.parametrize("prices", [[], [3], [7, 6, 4, 3, 1]])
def test_max_profit_no_gain(prices):
    assert max_profit(prices) == 0
    assert max_profit_multiple(prices) == 0


def test_max_profit_multiple_increasing():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_multiple(prices) == prices[-1] - prices[0]
    assert max_profit(prices) == prices[-1] - prices[0]


@pytest.mark.parametrize("prices", [[7, 1, 5, 3, 6, 4], [3, 8, 2, 9, 1], [5, 5, 5]])
def test_multiple_trades_never_worse(prices):
    assert max_profit_multiple(prices) >= max_profit(prices)