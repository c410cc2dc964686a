"""In-order iteration over a BST and the two-sum search built on it."""

from __future__ import annotations

from typing import Optional

from bstkit.tree import TreeNode


class BSTIterator:
    """Iterate a BST's values in ascending order, or descending if ``reverse``."""

    def __init__(self, root: Optional[TreeNode], reverse: bool = False) -> None:
        self.reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_path(root)

    def _push_path(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self.reverse else node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_path(node.left if self.reverse else node.right)
        return node.val

    def has_next(self) -> bool:
        """Return True if another value remains."""
        return bool(self._stack)


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Return True if two distinct nodes of the BST sum to ``k``."""
    if root is None:
        return False
    ascending = BSTIterator(root, reverse=False)
    descending = BSTIterator(root, reverse=True)
    low = next(ascending)
    high = next(descending)
    while low < high:
        total = low + high
        if total == k:
            return True
        if total < k:
            low = next(ascending)
        else:
            high = next(descending)
    return False