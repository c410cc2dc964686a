"""Read-only queries on a binary search tree."""

from __future__ import annotations

from itertools import islice
from typing import Optional

from bstkit.iterators import BSTIterator
from bstkit.tree import TreeNode

_MISSING = -1


def find_ceil(root: Optional[TreeNode], key: int) -> int:
    """Return the smallest value not less than ``key``, or -1 if there is none."""
    ceil = _MISSING
    node = root
    while node is not None:
        if node.val == key:
            return node.val
        if node.val < key:
            node = node.right
        else:
            ceil = node.val
            node = node.left
    return ceil


def find_floor(root: Optional[TreeNode], key: int) -> int:
    """Return the largest value not greater than ``key``, or -1 if there is none."""
    floor = _MISSING
    node = root
    while node is not None:
        if node.val == key:
            return node.val
        if node.val < key:
            floor = node.val
            node = node.right
        else:
            node = node.left
    return floor


def min_value(root: Optional[TreeNode]) -> int:
    """Return the smallest value in the tree, or -1 if it is empty."""
    if root is None:
        return _MISSING
    node = root
    while node.left is not None:
        node = node.left
    return node.val


def max_value(root: Optional[TreeNode]) -> int:
    """Return the largest value in the tree, or -1 if it is empty."""
    if root is None:
        return _MISSING
    node = root
    while node.right is not None:
        node = node.right
    return node.val


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that has both ``p`` and ``q`` beneath or at it."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    return None


def inorder_successor(root: Optional[TreeNode], x: TreeNode) -> int:
    """Return the value that follows ``x`` in order, or -1 if there is none."""
    successor: Optional[TreeNode] = None
    node = root
    while node is not None:
        if x.val >= node.val:
            node = node.right
        else:
            successor = node
            node = node.left
    return successor.val if successor is not None else _MISSING


def _kth(root: Optional[TreeNode], k: int, reverse: bool) -> int:
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    for value in islice(BSTIterator(root, reverse=reverse), k - 1, k):
        return value
    raise ValueError(f"tree has fewer than {k} nodes")


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based).

    Raises ValueError if ``k`` is not between 1 and the number of nodes.
    """
    return _kth(root, k, reverse=False)


def kth_largest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th largest value (1-based).

    Raises ValueError if ``k`` is not between 1 and the number of nodes.
    """
    return _kth(root, k, reverse=True)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every left value is strictly smaller and every right strictly larger."""
    pending: list[tuple[Optional[TreeNode], Optional[int], Optional[int]]] = [
        (root, None, None)
    ]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if (low is not None and node.val <= low) or (
            high is not None and node.val >= high
        ):
            return False
        pending.append((node.left, low, node.val))
        pending.append((node.right, node.val, high))
    return True