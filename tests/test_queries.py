import pytest

from bstkit.queries import (
    find_ceil,
    find_floor,
    inorder_successor,
    is_valid_bst,
    kth_largest,
    kth_smallest,
    lowest_common_ancestor,
    max_value,
    min_value,
)
from bstkit.tree import TreeNode, bst_from_preorder, search_bst

PREORDER = [8, 5, 1, 7, 10, 12]
VALUES = sorted(PREORDER)


@pytest.fixture
def tree():
    return bst_from_preorder(PREORDER)


@pytest.fixture
def example_tree():
    # 20 with children 10 and 30; 30 has left child 25.
    return bst_from_preorder([20, 10, 30, 25])


def test_ceil_exact_match(tree):
    for value in VALUES:
        assert find_ceil(tree, value) == value


def test_ceil_between_values(tree):
    assert find_ceil(tree, 6) == 7
    assert find_ceil(tree, 9) == 10
    assert find_ceil(tree, 0) == 1


def test_ceil_missing(tree):
    assert find_ceil(tree, 13) == -1
    assert find_ceil(None, 5) == -1


def test_floor_exact_match(tree):
    for value in VALUES:
        assert find_floor(tree, value) == value


def test_floor_between_values(tree):
    assert find_floor(tree, 6) == 5
    assert find_floor(tree, 11) == 10
    assert find_floor(tree, 100) == 12


def test_floor_missing(tree):
    assert find_floor(tree, 0) == -1
    assert find_floor(None, 5) == -1


def test_floor_not_above_ceil(tree):
    for key in range(0, 14):
        floor = find_floor(tree, key)
        ceil = find_ceil(tree, key)
        if floor != -1 and ceil != -1:
            assert floor <= key <= ceil


def test_min_and_max(tree):
    assert min_value(tree) == VALUES[0]
    assert max_value(tree) == VALUES[-1]


def test_min_and_max_empty():
    assert min_value(None) == -1
    assert max_value(None) == -1


def test_min_and_max_single():
    node = TreeNode(7)
    assert min_value(node) == 7
    assert max_value(node) == 7


def test_lca_across_sides(tree):
    p = search_bst(tree, 1)
    q = search_bst(tree, 12)
    assert lowest_common_ancestor(tree, p, q) is tree


def test_lca_within_left_subtree(tree):
    p = search_bst(tree, 1)
    q = search_bst(tree, 7)
    assert lowest_common_ancestor(tree, p, q) is search_bst(tree, 5)


def test_lca_node_is_ancestor_of_other(tree):
    p = search_bst(tree, 10)
    q = search_bst(tree, 12)
    assert lowest_common_ancestor(tree, p, q) is p


def test_lca_empty_tree():
    assert lowest_common_ancestor(None, TreeNode(1), TreeNode(2)) is None


def test_inorder_successor_worked_example(example_tree):
    assert inorder_successor(example_tree, search_bst(example_tree, 20)) == 25
    assert inorder_successor(example_tree, search_bst(example_tree, 30)) == -1


def test_inorder_successor_follows_sorted_order(tree):
    for current, following in zip(VALUES, VALUES[1:]):
        assert inorder_successor(tree, search_bst(tree, current)) == following


def test_kth_smallest_matches_sorted(tree):
    for k, value in enumerate(VALUES, start=1):
        assert kth_smallest(tree, k) == value


def test_kth_largest_matches_sorted(tree):
    for k, value in enumerate(reversed(VALUES), start=1):
        assert kth_largest(tree, k) == value


@pytest.mark.parametrize("func", [kth_smallest, kth_largest])
@pytest.mark.parametrize("k", [0, -1, len(PREORDER) + 1])
def test_kth_out_of_range(tree, func, k):
    with pytest.raises(ValueError):
        func(tree, k)


@pytest.mark.parametrize("func", [kth_smallest, kth_largest])
def test_kth_empty_tree(func):
    with pytest.raises(ValueError):
        func(None, 1)


def test_valid_bst_built_from_preorder(tree):
    assert is_valid_bst(tree) is True


def test_empty_tree_is_valid():
    assert is_valid_bst(None) is True


def test_invalid_deep_violation():
    root = TreeNode(5, TreeNode(1), TreeNode(8, TreeNode(3), TreeNode(9)))
    assert is_valid_bst(root) is False


def test_duplicates_are_invalid():
    assert is_valid_bst(TreeNode(2, TreeNode(2))) is False
    assert is_valid_bst(TreeNode(2, None, TreeNode(2))) is False


def test_extreme_values_are_valid():
    root = TreeNode(0, TreeNode(-(2**31)), TreeNode(2**31 - 1))
    assert is_valid_bst(root) is True