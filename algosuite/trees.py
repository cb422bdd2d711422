"""Binary trees and a few recursive and level-wise algorithms on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional["TreeNode"]:
        """Build a tree from level-order values where None marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for side in ("left", "right"):
                try:
                    value = next(items)
                except StopIteration:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(node, side, child)
                    queue.append(child)
        return root

    def to_level_order(self) -> list[Optional[int]]:
        """Return level-order values with None for missing children, trailing Nones dropped."""
        result: list[Optional[int]] = []
        queue: deque[Optional[TreeNode]] = deque([self])
        while queue:
            node = queue.popleft()
            if node is None:
                result.append(None)
                continue
            result.append(node.val)
            queue.append(node.left)
            queue.append(node.right)
        while result and result[-1] is None:
            result.pop()
        return result


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def _levels(root: TreeNode) -> Iterator[list[TreeNode]]:
    level = [root]
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean value of the nodes on each level, top to bottom."""
    if root is None:
        raise ValueError("tree must not be empty")
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]