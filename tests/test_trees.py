import pytest

from algosuite.trees import (
    TreeNode,
    average_of_levels,
    invert_tree,
    is_same_tree,
    max_depth,
)

SAMPLE = [3, 9, 20, None, None, 15, 7]


@pytest.mark.parametrize("values", [SAMPLE, [1], [1, 2, 3, 4, 5, 6, 7], [1, None, 2, None, 3]])
def test_level_order_round_trip(values):
    assert TreeNode.from_level_order(values).to_level_order() == values


def test_from_level_order_empty():
    assert TreeNode.from_level_order([]) is None
    assert TreeNode.from_level_order([None]) is None


def test_is_same_tree():
    assert is_same_tree(TreeNode.from_level_order(SAMPLE), TreeNode.from_level_order(SAMPLE)) is True
    assert is_same_tree(None, None) is True


def test_is_same_tree_differences():
    assert is_same_tree(TreeNode.from_level_order([1, 2]), TreeNode.from_level_order([1, None, 2])) is False
    assert is_same_tree(TreeNode.from_level_order([1, 2, 1]), TreeNode.from_level_order([1, 1, 2])) is False
    assert is_same_tree(TreeNode.from_level_order([1]), None) is False


def test_max_depth():
    assert max_depth(TreeNode.from_level_order(SAMPLE)) == 3
    assert max_depth(None) == 0


def test_max_depth_chain_matches_length():
    chain = [1, None, 2, None, 3, None, 4]
    assert max_depth(TreeNode.from_level_order(chain)) == len([v for v in chain if v is not None])


def test_invert_tree_example():
    root = TreeNode.from_level_order([4, 2, 7, 1, 3, 6, 9])
    assert invert_tree(root).to_level_order() == [4, 7, 2, 9, 6, 3, 1]


def test_invert_twice_restores():
    original = TreeNode.from_level_order(SAMPLE)
    tree = TreeNode.from_level_order(SAMPLE)
    result = invert_tree(invert_tree(tree))
    assert result is tree
    assert is_same_tree(result, original) is True
    assert invert_tree(None) is None


def test_average_of_levels_example():
    assert average_of_levels(TreeNode.from_level_order(SAMPLE)) == [3.0, 14.5, 11.0]


def test_average_of_levels_length_is_depth():
    root = TreeNode.from_level_order([1, 2, 3, 4, None, None, 5, 6])
    assert len(average_of_levels(root)) == max_depth(root)


def test_average_of_levels_empty():
    with pytest.raises(ValueError):
        average_of_levels(None)