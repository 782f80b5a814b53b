"""Singly linked list helpers: building, cycle detection, middle and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: ListNode | None = None


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head, or None if empty."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list in order.

    Raises ValueError if the list contains a cycle.
    """
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    return [node.val for node in _nodes(head)]


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def find_middle(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def merge_two_lists(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list and return its head.

    On equal values the node from ``second`` comes first.
    """
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_two_lists_recursive(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Recursively splice two sorted lists; ties take the node from ``second``."""
    if first is None:
        return second
    if second is None:
        return first
    if first.val < second.val:
        first.next = merge_two_lists_recursive(first.next, second)
        return first
    second.next = merge_two_lists_recursive(first, second.next)
    return second


def reverse_values(head: ListNode | None) -> list[int]:
    """Return the values of the list from last to first."""
    values = list_values(head)
    values.reverse()
    return values