"""Measurements and shape checks over binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from bintree.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down; 0 for a leaf or None."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def count_leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return count_leaves(tree.left) + count_leaves(tree.right)


def count_internal(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + count_internal(tree.left) + count_internal(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right's, counted in nodes."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves are on the same level."""
    if tree is None:
        return False

    expected = 0
    node: Optional[Node] = tree
    while node is not None:
        expected += 1
        node = node.left

    def check(subtree: Optional[Node], level: int) -> bool:
        if subtree is None:
            return True
        if subtree.is_leaf():
            return expected == level + 1
        if subtree.left is None or subtree.right is None:
            return False
        return check(subtree.left, level + 1) and check(subtree.right, level + 1)

    return check(tree, 0)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except the last, which fills from the left."""
    if tree is None:
        return False
    queue: deque[Optional[Node]] = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True