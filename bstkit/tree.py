"""Binary search tree nodes and the basic operations on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def bst_from_preorder(preorder: Iterable[int]) -> Optional[TreeNode]:
    """Build a BST from its preorder traversal and return the root.

    A value equal to its parent's value is placed in the left subtree.
    """
    root: Optional[TreeNode] = None
    # Stack holds the path of nodes whose right subtree may still be filled.
    path: list[TreeNode] = []
    for value in preorder:
        node = TreeNode(value)
        if root is None:
            root = node
        else:
            parent: Optional[TreeNode] = None
            while path and path[-1].val < value:
                parent = path.pop()
            if parent is not None:
                parent.right = node
            else:
                path[-1].left = node
        path.append(node)
    return root


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf and return the root.

    Values equal to an existing node go to its right subtree.
    """
    new_node = TreeNode(val)
    if root is None:
        return new_node
    current = root
    while True:
        if current.val <= val:
            if current.right is None:
                current.right = new_node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = new_node
                return root
            current = current.left


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _detach(node: TreeNode) -> Optional[TreeNode]:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    # Hang the right subtree off the largest node of the left subtree.
    _rightmost(node.left).right = node.right
    return node.left


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the first node holding ``key`` and return the new root."""
    if root is None:
        return None
    if root.val == key:
        return _detach(root)

    current: Optional[TreeNode] = root
    while current is not None:
        if current.val > key:
            if current.left is not None and current.left.val == key:
                current.left = _detach(current.left)
                break
            current = current.left
        else:
            if current.right is not None and current.right.val == key:
                current.right = _detach(current.right)
                break
            current = current.right
    return root


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or None if there is none."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def search_bst_recursive(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, searching recursively."""
    if root is None:
        return None
    if root.val == val:
        return root
    if val < root.val:
        return search_bst_recursive(root.left, val)
    return search_bst_recursive(root.right, val)