"""Binary tree node type and general binary tree algorithms."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Optional

_MOD = 10**9 + 7


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, m: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % m
    return r if a >= 0 else -r


def _levels(root: Optional[TreeNode]):
    """Yield the nodes of each level, top to bottom, left to right."""
    if root is None:
        return
    level = [root]
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, right, root order."""
    reversed_order: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.val)
        if node.left:
            stack.append(node.left)
        if node.right:
            stack.append(node.right)
    return reversed_order[::-1]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the value of the rightmost node on each level."""
    return [level[-1].val for level in _levels(root)]


def largest_values(root: Optional[TreeNode]) -> list[int]:
    """Return the largest value on each level."""
    return [max(node.val for node in level) for level in _levels(root)]


def _index_of(inorder: list[int]) -> dict[int, int]:
    return {value: position for position, value in enumerate(inorder)}


def _position(index: dict[int, int], value: int) -> int:
    try:
        return index[value]
    except KeyError:
        raise ValueError(f"value {value!r} is missing from the inorder sequence") from None


def build_tree_from_preorder_inorder(
    preorder: list[int], inorder: list[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    index = _index_of(inorder)
    cursor = 0

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal cursor
        if cursor >= len(preorder) or start > end:
            return None
        value = preorder[cursor]
        node = TreeNode(value)
        middle = _position(index, value)
        cursor += 1
        node.left = build(start, middle - 1)
        node.right = build(middle + 1, end)
        return node

    return build(0, len(inorder) - 1)


def build_tree_from_inorder_postorder(
    inorder: list[int], postorder: list[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    index = _index_of(inorder)
    cursor = len(postorder) - 1

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal cursor
        if cursor < 0 or start > end:
            return None
        value = postorder[cursor]
        node = TreeNode(value)
        middle = _position(index, value)
        cursor -= 1
        node.right = build(middle + 1, end)
        node.left = build(start, middle - 1)
        return node

    return build(0, len(inorder) - 1)


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to target_sum."""
    stack = [(root, root.val)] if root else []
    while stack:
        node, total = stack.pop()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child:
                stack.append((child, total + child.val))
    return False


def path_sum_count(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to target_sum."""
    prefix_counts: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running = _trunc_mod(running + node.val, _MOD)
        found = prefix_counts[running - target_sum]
        prefix_counts[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        prefix_counts[running] -= 1
        return found

    return walk(root, 0)


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-leaning chain in preorder."""
    current = root
    while current:
        if current.left:
            predecessor = current.left
            while predecessor.right:
                predecessor = predecessor.right
            predecessor.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node having both p and q as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left and right:
        return root
    return left or right


def average_of_subtree(root: Optional[TreeNode]) -> int:
    """Count nodes whose value equals the truncated average of their subtree."""
    matches = 0

    def walk(node: Optional[TreeNode]) -> tuple[int, int]:
        nonlocal matches
        if node is None:
            return 0, 0
        left_sum, left_count = walk(node.left)
        right_sum, right_count = walk(node.right)
        total = left_sum + right_sum + node.val
        count = left_count + right_count + 1
        if node.val == _trunc_div(total, count):
            matches += 1
        return total, count

    walk(root)
    return matches