"""Binary tree nodes with parent links and the operations on single nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to parent and children.

    Creating a node with a parent does not attach it to that parent; the
    caller decides which side it goes on.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in self.ancestors())

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _replace_in_parent(self, replacement: Node) -> None:
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = replacement
        elif parent.right is self:
            parent.right = replacement

    def rotate_left(self) -> Node:
        """Rotate the subtree rooted here to the left and return its new root."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left: node has no right child")
        self.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = self
        pivot.left = self
        self._replace_in_parent(pivot)
        pivot.parent = self.parent
        self.parent = pivot
        return pivot

    def rotate_right(self) -> Node:
        """Rotate the subtree rooted here to the right and return its new root."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right: node has no left child")
        self.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = self
        pivot.right = self
        self._replace_in_parent(pivot)
        pivot.parent = self.parent
        self.parent = pivot
        return pivot


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest node that is an ancestor of both (or either) node, or None."""
    if first is None or second is None:
        return None
    depth1, depth2 = first.depth(), second.depth()
    a: Optional[Node] = first
    b: Optional[Node] = second
    while depth1 > depth2 and a is not None:
        a = a.parent
        depth1 -= 1
    while depth2 > depth1 and b is not None:
        b = b.parent
        depth2 -= 1
    while a is not None and b is not None:
        if a is b:
            return a
        a, b = a.parent, b.parent
    return None