"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = field(default=None, repr=False)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list from values; an empty input gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in _iter_nodes(self)]


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _iter_values(head: Optional[ListNode]) -> Iterator[int]:
    return (node.val for node in _iter_nodes(head))


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    digits = []
    carry = 0
    for a, b in zip_longest(_iter_values(l1), _iter_values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return ListNode.from_values(digits)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end and return the new head."""
    nodes = list(_iter_nodes(head))
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    index = len(nodes) - n
    removed = nodes[index]
    if index == 0:
        new_head = removed.next
    else:
        nodes[index - 1].next = removed.next
        new_head = head
    removed.next = None
    return new_head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
    if list1 is None:
        return list2
    if list2 is None:
        return list1

    if list1.val <= list2.val:
        head, list1 = list1, list1.next
    else:
        head, list2 = list2, list2.next

    current = head
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            current.next, list1 = list1, list1.next
        else:
            current.next, list2 = list2, list2.next
        current = current.next
    current.next = list1 if list1 is not None else list2
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places and return the new head."""
    if head is None:
        return None
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = list(_iter_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head
    new_tail = nodes[len(nodes) - k - 1]
    new_head = new_tail.next
    nodes[-1].next = head
    new_tail.next = None
    return new_head


def delete_duplicated_values(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every value that occurs more than once in a sorted list."""
    sentinel = ListNode(0, head)
    prev = sentinel
    while prev.next is not None and prev.next.next is not None:
        if prev.next.val == prev.next.next.val:
            duplicate = prev.next.val
            while prev.next is not None and prev.next.val == duplicate:
                prev.next = prev.next.next
        else:
            prev = prev.next
    return sentinel.next


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Return a new list with values below x first, keeping relative order."""
    values = list(_iter_values(head))
    smaller = [v for v in values if v < x]
    rest = [v for v in values if v >= x]
    return ListNode.from_values(smaller + rest)


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following next pointers from head ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _merge_sorted(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    sentinel = ListNode()
    tail = sentinel
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return sentinel.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Merge-sort the list in place and return the new head."""
    if head is None or head.next is None:
        return head
    prev = None
    slow = fast = head
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    prev.next = None
    return _merge_sorted(sort_list(head), sort_list(slow))