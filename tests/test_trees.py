from collections import deque

import pytest

from algobox.trees import (
    TreeNode,
    average_of_subtree,
    build_tree_from_inorder_postorder,
    build_tree_from_preorder_inorder,
    flatten,
    has_path_sum,
    inorder_traversal,
    largest_values,
    lowest_common_ancestor,
    path_sum_count,
    postorder_traversal,
    preorder_traversal,
    right_side_view,
)


def from_level_order(values):
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def left_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


PREORDER = [3, 9, 20, 15, 7, 1, 8]
INORDER = [9, 3, 15, 20, 1, 7, 8]


def test_preorder_inorder_round_trip():
    root = build_tree_from_preorder_inorder(PREORDER, INORDER)
    assert preorder_traversal(root) == PREORDER
    assert inorder_traversal(root) == INORDER


def test_postorder_round_trip_through_both_builders():
    root = build_tree_from_preorder_inorder(PREORDER, INORDER)
    postorder = postorder_traversal(root)
    assert sorted(postorder) == sorted(PREORDER)
    rebuilt = build_tree_from_inorder_postorder(INORDER, postorder)
    assert preorder_traversal(rebuilt) == PREORDER
    assert inorder_traversal(rebuilt) == INORDER
    assert postorder_traversal(rebuilt) == postorder


def test_empty_trees():
    assert inorder_traversal(None) == []
    assert preorder_traversal(None) == []
    assert postorder_traversal(None) == []
    assert right_side_view(None) == []
    assert largest_values(None) == []
    assert build_tree_from_preorder_inorder([], []) is None
    assert build_tree_from_inorder_postorder([], []) is None


def test_builder_rejects_unknown_value():
    with pytest.raises(ValueError):
        build_tree_from_preorder_inorder([1, 2], [1, 5])


def test_right_side_view_example():
    root = from_level_order([1, 2, 3, None, 5, None, 4])
    assert right_side_view(root) == [1, 3, 4]


def test_right_side_view_of_left_chain_is_every_node():
    values = [4, 7, 1, 9]
    assert right_side_view(left_chain(values)) == values


def test_largest_values_invariants():
    root = build_tree_from_preorder_inorder(PREORDER, INORDER)
    levels = largest_values(root)
    assert len(levels) == len(right_side_view(root))
    assert levels[0] == PREORDER[0]
    assert max(levels) == max(PREORDER)
    assert all(a >= b for a, b in zip(levels, right_side_view(root)))


def test_has_path_sum_on_chain():
    values = [5, -2, 8, 3]
    root = left_chain(values)
    assert has_path_sum(root, sum(values)) is True
    assert has_path_sum(root, sum(values) + 1) is False
    assert has_path_sum(root, values[0]) is False


def test_has_path_sum_empty_tree():
    assert has_path_sum(None, 0) is False


def test_path_sum_count_example():
    root = from_level_order([10, 5, -3, 3, 2, None, 11, 3, -2, None, 1])
    assert path_sum_count(root, 8) == 3


def test_path_sum_count_matches_has_path_sum_on_single_node():
    root = TreeNode(6)
    assert path_sum_count(root, 6) == int(has_path_sum(root, 6))
    assert path_sum_count(None, 6) == 0


def test_flatten_follows_preorder():
    root = build_tree_from_preorder_inorder(PREORDER, INORDER)
    flatten(root)
    seen = []
    node = root
    while node:
        assert node.left is None
        seen.append(node.val)
        node = node.right
    assert seen == PREORDER


def test_flatten_none_is_noop():
    assert flatten(None) is None


def test_lowest_common_ancestor_siblings_and_ancestor():
    left = TreeNode(2)
    right = TreeNode(3)
    grandchild = TreeNode(4)
    left.left = grandchild
    root = TreeNode(1, left, right)
    assert lowest_common_ancestor(root, grandchild, right) is root
    assert lowest_common_ancestor(root, left, grandchild) is left
    assert lowest_common_ancestor(root, grandchild, grandchild) is grandchild


def test_average_of_subtree_example():
    root = from_level_order([4, 8, 5, 0, 1, None, 6])
    assert average_of_subtree(root) == 5


def test_average_of_subtree_uniform_tree_counts_all():
    root = from_level_order([7, 7, 7, 7, None, 7])
    assert average_of_subtree(root) == len(inorder_traversal(root))
    assert average_of_subtree(None) == 0