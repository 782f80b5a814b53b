"""Binary search tree checks: validity and k-th largest value."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_bst(root: TreeNode | None) -> bool:
    """Return True if every node lies strictly between its ancestors' bounds.

    Duplicate values make the tree invalid.
    """
    pending: list[tuple[TreeNode | None, int | None, int | None]] = [(root, None, None)]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        pending.append((node.left, low, node.val))
        pending.append((node.right, node.val, high))
    return True


def _descending(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        yield node.val
        node = node.left


def kth_largest_in_bst(root: TreeNode | None, k: int) -> int | None:
    """Return the k-th largest value (k counts from 1), or None if out of range."""
    if k < 1:
        return None
    for rank, value in enumerate(_descending(root), start=1):
        if rank == k:
            return value
    return None