# bstkit

Small, dependency-free helpers for integer binary search trees. You can build
a tree, insert and delete values, and search it. You can also ask order
questions of it and walk it in either direction.

Trees are plain `TreeNode` objects. Each has `val`, `left` and `right`. An
empty tree is `None`.

## Install

    pip install .

## Building and editing a tree

```python
from bstkit.tree import (
    TreeNode, bst_from_preorder, insert_into_bst, delete_node,
    search_bst, search_bst_recursive,
)

root = bst_from_preorder([8, 5, 1, 7, 10, 12])
root = insert_into_bst(root, 6)
root = delete_node(root, 5)

node = search_bst(root, 7)       # the node holding 7, or None
```

- `bst_from_preorder(preorder)` takes any iterable of integers in preorder
  and returns the root. It returns `None` for an empty input. A value equal to
  its parent's value goes into the left subtree.
- `insert_into_bst(root, val)` adds `val` as a new leaf and returns the root.
  Values equal to a node go into its right subtree.
- `delete_node(root, key)` removes the first node holding `key` that it finds
  on the search path, and returns the new root. If the node has two children,
  the right subtree is hung off the rightmost node of the left subtree, and the
  left subtree takes the node's place. If `key` is absent, the tree is returned
  unchanged.
- `search_bst(root, val)` and `search_bst_recursive(root, val)` both return
  the node holding `val`, or `None`. The first searches iteratively and the
  second recursively.

## Queries

```python
from bstkit.queries import (
    find_ceil, find_floor, min_value, max_value,
    lowest_common_ancestor, inorder_successor,
    kth_smallest, kth_largest, is_valid_bst,
)

find_ceil(root, 9)        # 10: smallest value >= 9, or -1
find_floor(root, 9)       # 8: largest value <= 9, or -1
min_value(root)           # 1; -1 for an empty tree
max_value(root)           # 12; -1 for an empty tree
kth_smallest(root, 2)     # 6
kth_largest(root, 1)      # 12
is_valid_bst(root)        # True
```

- `kth_smallest` and `kth_largest` count from 1. They raise `ValueError` if
  `k` is less than 1 or larger than the number of nodes.
- `is_valid_bst` requires strict ordering. A tree that holds duplicate values
  is not valid.
- `lowest_common_ancestor(root, p, q)` takes two nodes and returns the lowest
  node whose value lies between theirs, or `None` for an empty tree.
- `inorder_successor(root, x)` takes a node and returns the next larger value
  in the tree, or -1 if there is none.

## Iteration

`BSTIterator(root, reverse=False)` walks a tree in order, smallest first. With
`reverse=True` it walks largest first. It keeps a stack, so its memory is
bounded by the height of the tree. It is a standard Python iterator.
`has_next()` reports whether another value remains.

```python
from bstkit.iterators import BSTIterator, find_target

list(BSTIterator(root))                # [1, 6, 7, 8, 10, 12]
list(BSTIterator(root, reverse=True))  # [12, 10, 8, 7, 6, 1]

find_target(root, 15)   # True: two distinct nodes sum to 15 (7 + 8)
```

## What it does not do

`bstkit` is a library only and has no command-line program. It does not
balance trees, so heights follow the order in which values arrive. It does not
save trees or load them from storage.

## Tests

    pip install ".[test]"
    pytest