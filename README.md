# bintree

Linked binary trees of integers whose nodes know their parent, with
traversals, measurements, rotations, binary search trees and an ASCII
drawing of any tree.

## Modules

### `bintree.node`

`Node(value, parent=None, left=None, right=None)` is a node holding an
integer `value` and links to `parent`, `left` and `right`. Passing a parent
does not attach the node to it; the caller chooses the side. Nodes compare
by identity.

- `insert_left(value)` / `insert_right(value)`: put a new child on that side
  and return it. An existing child on that side moves down to become the new
  node's child on the same side.
- `delete()`: detach the subtree from its parent and clear every link inside
  it.
- `is_leaf()`, `is_root()`: whether the node has no children / no parent.
- `ancestors()`: yield the parent, grandparent and so on up to the root.
- `depth()`: number of edges from the node up to the root.
- `sibling()`: the other child of the parent, or `None`.
- `uncle()`: the sibling of the parent, or `None`.
- `rotate_left()` / `rotate_right()`: rotate the subtree rooted at the node
  and return its new root. The parent, if any, is relinked to the new root.
  Rotating without a right (left) child raises `ValueError`.

`lowest_common_ancestor(first, second)` returns the lowest node that is an
ancestor of both nodes (a node counts as its own ancestor), or `None` if
either is `None` or they are in different trees.

### `bintree.metrics`

Every function takes a root node or `None`.

- `height(tree)`: edges on the longest downward path; `0` for a leaf or `None`.
- `size(tree)`: number of nodes.
- `count_leaves(tree)`: nodes without children.
- `count_internal(tree)`: nodes with at least one child.
- `balance(tree)`: height of the left subtree minus that of the right,
  counted in nodes; `0` for `None`.
- `is_full(tree)`: every node has zero or two children.
- `is_perfect(tree)`: full, with all leaves on the same level.
- `is_complete(tree)`: every level filled except possibly the last, which is
  filled from the left.

The three shape checks return `False` for `None`.

### `bintree.traversal`

`preorder(tree)`, `inorder(tree)`, `postorder(tree)` and `levelorder(tree)`
are generators yielding node values; an empty tree yields nothing.

### `bintree.bst`

`BinarySearchTree(root=None)` holds distinct integers.

- `insert(value)`: add the value and return its new node, or `None` if the
  value is already present (the tree is left unchanged).
- `search(value)`: the node holding the value, or `None`.
- `BinarySearchTree.from_iterable(values)`: build a tree by inserting the
  values in order, skipping duplicates.
- `value in tree`, `iter(tree)` (values in sorted order) and `len(tree)`.

`is_bst(tree)` checks any tree of nodes: every value in a left subtree is
smaller and every value in a right subtree larger. Duplicates make a tree
invalid, and `None` is not a BST.

### `bintree.render`

- `render(tree)`: the tree drawn as text, one newline-terminated line per
  row, with `/` and `\` for edges; an empty string for `None`. Trees of
  `MAX_HEIGHT` (1000) rows or more get a trailing note that they may not
  draw properly.
- `print_tree(tree, file=None)`: write that drawing to `file`, standard
  output by default.

## Installation

    pip install .

## Example

```python
from bintree.node import Node
from bintree.traversal import inorder
from bintree.metrics import height
from bintree.render import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)

print(list(inorder(root)))   # [12, 54, 98, 402]
print(height(root))          # 2
print_tree(root)
```

Building a search tree from values:

```python
from bintree.bst import BinarySearchTree, is_bst

tree = BinarySearchTree.from_iterable([79, 47, 68, 87, 84, 91])
print(tree.search(68).value)   # 68
print(tree.insert(68))         # None, already present
print(list(tree))              # [47, 68, 79, 84, 87, 91]
print(is_bst(tree.root))       # True
```

## What it does not do

- There is no command-line program; the package is used as a library.
- Search trees support insertion and lookup only: there is no removal and
  no self-balancing (AVL or heap) structure. Rotations are available on
  nodes for callers who balance trees themselves.

## Running the tests

    pip install .[test]
    pytest