"""ASCII drawing of binary trees with slashes for edges."""

from __future__ import annotations

import sys
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional, TextIO

from bintree.node import Node

MAX_HEIGHT = 1000
_INFINITY = 1 << 20
_GAP = 3


@dataclass
class _Box:
    label: str
    parent_dir: int
    left: Optional[_Box] = None
    right: Optional[_Box] = None
    edge_length: int = 0
    height: int = 0

    @property
    def lablen(self) -> int:
        return len(self.label)


@dataclass
class _Line:
    parts: list[str] = field(default_factory=list)
    next: int = 0

    def pad(self, count: int) -> None:
        if count > 0:
            self.parts.append(" " * count)
            self.next += count

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.next += len(text)


def _build(tree: Optional[Node], parent_dir: int = 0) -> Optional[_Box]:
    if tree is None:
        return None
    return _Box(
        label=str(tree.value),
        parent_dir=parent_dir,
        left=_build(tree.left, -1),
        right=_build(tree.right, 1),
    )


def _left_profile(node: Optional[_Box], x: int, y: int, profile: dict[int, int]) -> None:
    if node is None:
        return
    isleft = int(node.parent_dir == -1)
    profile[y] = min(profile[y], x - (node.lablen - isleft) // 2)
    if node.left is not None:
        for i in range(1, node.edge_length + 1):
            if y + i >= MAX_HEIGHT:
                break
            profile[y + i] = min(profile[y + i], x - i)
    step = node.edge_length + 1
    _left_profile(node.left, x - step, y + step, profile)
    _left_profile(node.right, x + step, y + step, profile)


def _right_profile(node: Optional[_Box], x: int, y: int, profile: dict[int, int]) -> None:
    if node is None:
        return
    notleft = int(node.parent_dir != -1)
    profile[y] = max(profile[y], x + (node.lablen - notleft) // 2)
    if node.right is not None:
        for i in range(1, node.edge_length + 1):
            if y + i >= MAX_HEIGHT:
                break
            profile[y + i] = max(profile[y + i], x + i)
    step = node.edge_length + 1
    _right_profile(node.left, x - step, y + step, profile)
    _right_profile(node.right, x + step, y + step, profile)


def _edge_lengths(node: Optional[_Box]) -> None:
    if node is None:
        return
    _edge_lengths(node.left)
    _edge_lengths(node.right)

    if node.left is None and node.right is None:
        node.edge_length = 0
    else:
        rprofile: dict[int, int] = defaultdict(lambda: -_INFINITY)
        lprofile: dict[int, int] = defaultdict(lambda: _INFINITY)
        if node.left is not None:
            _right_profile(node.left, 0, 0, rprofile)
            hmin = node.left.height
        else:
            hmin = 0
        if node.right is not None:
            _left_profile(node.right, 0, 0, lprofile)
            hmin = min(node.right.height, hmin)
        else:
            hmin = 0

        delta = 4
        for i in range(hmin):
            delta = max(delta, _GAP + 1 + rprofile[i] - lprofile[i])

        # Two children of height 1 may sit one column closer.
        short_child = (node.left is not None and node.left.height == 1) or (
            node.right is not None and node.right.height == 1
        )
        if short_child and delta > 4:
            delta -= 1
        node.edge_length = (delta + 1) // 2 - 1

    h = 1
    if node.left is not None:
        h = max(node.left.height + node.edge_length + 1, h)
    if node.right is not None:
        h = max(node.right.height + node.edge_length + 1, h)
    node.height = h


def _draw_level(node: Optional[_Box], x: int, level: int, line: _Line) -> None:
    if node is None:
        return
    isleft = int(node.parent_dir == -1)
    if level == 0:
        line.pad(x - line.next - (node.lablen - isleft) // 2)
        line.write(node.label)
    elif node.edge_length >= level:
        if node.left is not None:
            line.pad(x - line.next - level)
            line.write("/")
        if node.right is not None:
            line.pad(x - line.next + level)
            line.write("\\")
    else:
        step = node.edge_length + 1
        _draw_level(node.left, x - step, level - step, line)
        _draw_level(node.right, x + step, level - step, line)


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one newline-terminated line per row."""
    root = _build(tree)
    if root is None:
        return ""
    _edge_lengths(root)

    lprofile: dict[int, int] = defaultdict(lambda: _INFINITY)
    _left_profile(root, 0, 0, lprofile)
    rows = min(root.height, MAX_HEIGHT)
    xmin = min([0, *(lprofile[i] for i in range(rows))])

    lines = []
    for level in range(root.height):
        line = _Line()
        _draw_level(root, -xmin, level, line)
        lines.append("".join(line.parts))
    if root.height >= MAX_HEIGHT:
        lines.append(f"(Tree is taller than {MAX_HEIGHT}, may not print properly)")
    return "".join(f"{text}\n" for text in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))