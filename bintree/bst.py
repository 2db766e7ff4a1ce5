"""Binary search trees built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from bintree.metrics import size
from bintree.node import Node
from bintree.traversal import inorder


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if every left value is smaller and every right value larger.

    Duplicate values make a tree invalid. An empty tree is not a BST.
    """
    if tree is None:
        return False

    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


@dataclass
class BinarySearchTree:
    """A binary search tree of distinct integers."""

    root: Optional[Node] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting the values in order; duplicates are skipped."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: int) -> Optional[Node]:
        """Insert a value and return its new node, or None if it is already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, current)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value, current)
                    return current.right
                current = current.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding the value, or None if it is absent."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)