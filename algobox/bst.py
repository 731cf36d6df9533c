"""Algorithms on binary search trees."""

from __future__ import annotations

from itertools import groupby, islice
from math import inf
from typing import Iterator, Optional

from .trees import TreeNode, inorder_traversal


def _iter_inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes of the tree in ascending (inorder) order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether every node lies strictly between its ancestors' bounds."""
    stack: list[tuple[Optional[TreeNode], Optional[int], Optional[int]]] = [
        (root, None, None)
    ]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (low is not None and node.val <= low) or (
            high is not None and node.val >= high
        ):
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value, counting from 1."""
    if k >= 1:
        for node in islice(_iter_inorder(root), k - 1, None):
            return node.val
    raise ValueError(f"k={k} is out of range for this tree")


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node whose value separates p and q."""
    node = root
    while node:
        if node.val > p.val and node.val > q.val:
            node = node.left
        elif node.val < p.val and node.val < q.val:
            node = node.right
        else:
            return node
    return None


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the node holding key and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
        return root
    if key > root.val:
        root.right = delete_node(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = root.right
    while successor.left:
        successor = successor.left
    root.val = successor.val
    root.right = delete_node(root.right, successor.val)
    return root


def find_mode(root: Optional[TreeNode]) -> list[int]:
    """Return the most frequent values, in ascending order."""
    values = inorder_traversal(root)
    if not values:
        raise ValueError("an empty tree has no mode")
    runs = [(value, sum(1 for _ in group)) for value, group in groupby(values)]
    best = max(count for _, count in runs)
    return [value for value, count in runs if count == best]


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding val, or None."""
    node = root
    while node:
        if node.val == val:
            return node
        node = node.left if node.val > val else node.right
    return None


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val as a new leaf (equal values go right) and return the root."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if node.val > val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def bst_from_preorder(preorder: list[int]) -> Optional[TreeNode]:
    """Build the search tree whose preorder traversal is given."""
    cursor = 0

    def build(low: float, high: float) -> Optional[TreeNode]:
        nonlocal cursor
        if cursor >= len(preorder):
            return None
        value = preorder[cursor]
        if value < low or value > high:
            return None
        node = TreeNode(value)
        cursor += 1
        node.left = build(low, value)
        node.right = build(value, high)
        return node

    return build(-inf, inf)


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a height-balanced search tree holding the same values."""
    values = inorder_traversal(root)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        middle = (start + end) // 2
        return TreeNode(values[middle], build(start, middle - 1), build(middle + 1, end))

    return build(0, len(values) - 1)