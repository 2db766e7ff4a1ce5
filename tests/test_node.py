import pytest

from bintree.node import Node, lowest_common_ancestor


def _attach(parent, side, value):
    child = Node(value, parent)
    setattr(parent, side, child)
    return child


@pytest.fixture
def family_tree():
    root = Node(98)
    left = _attach(root, "left", 12)
    right = _attach(root, "right", 128)
    _attach(left, "right", 54)
    rr = _attach(right, "right", 402)
    _attach(left, "left", 10)
    _attach(right, "left", 110)
    _attach(rr, "left", 200)
    _attach(rr, "right", 512)
    return root


def test_new_node_is_not_attached_to_parent():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None


def test_insert_left_pushes_old_child_down():
    root = Node(98)
    old = _attach(root, "left", 12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new
    assert new.value == 54


def test_insert_right_pushes_old_child_down():
    root = Node(98)
    old = _attach(root, "right", 402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_insert_into_empty_side():
    right = Node(402)
    new = right.insert_left(128)
    assert right.left is new
    assert new.is_leaf()


def test_delete_detaches_subtree(family_tree):
    right = family_tree.right
    grandchild = right.right
    right.delete()
    assert family_tree.right is None
    assert right.parent is None and right.left is None and right.right is None
    assert grandchild.parent is None
    assert family_tree.left.value == 12


def test_is_leaf_and_is_root(family_tree):
    assert family_tree.is_root()
    assert not family_tree.is_leaf()
    leaf = family_tree.left.left
    assert leaf.is_leaf()
    assert not leaf.is_root()


def test_depth_grows_by_one_per_level(family_tree):
    assert family_tree.depth() == 0
    for node in (family_tree.left, family_tree.right.right, family_tree.right.right.left):
        assert node.depth() == node.parent.depth() + 1


def test_ancestors_end_at_root(family_tree):
    node = family_tree.right.right.right
    chain = list(node.ancestors())
    assert chain[-1] is family_tree
    assert len(chain) == node.depth()


def test_sibling(family_tree):
    assert family_tree.left.sibling() is family_tree.right
    assert family_tree.right.left.sibling() is family_tree.right.right
    assert family_tree.left.right.sibling() is family_tree.left.left
    assert family_tree.sibling() is None


def test_sibling_missing():
    root = Node(98)
    only = _attach(root, "left", 12)
    assert only.sibling() is None


def test_uncle(family_tree):
    assert family_tree.right.left.uncle() is family_tree.left
    assert family_tree.left.right.uncle() is family_tree.right
    assert family_tree.left.uncle() is None
    assert family_tree.uncle() is None


@pytest.fixture
def ancestor_tree():
    root = Node(98)
    left = _attach(root, "left", 12)
    right = _attach(root, "right", 402)
    _attach(left, "right", 54)
    rr = _attach(right, "right", 128)
    _attach(left, "left", 10)
    _attach(right, "left", 45)
    _attach(rr, "left", 92)
    _attach(rr, "right", 65)
    return root


def test_lowest_common_ancestor(ancestor_tree):
    root = ancestor_tree
    assert lowest_common_ancestor(root.left, root.right) is root
    assert lowest_common_ancestor(root.right.left, root.right.right.right) is root.right
    assert lowest_common_ancestor(root.right.right, root.right.right.right) is root.right.right


def test_lowest_common_ancestor_same_node_and_none(ancestor_tree):
    node = ancestor_tree.left
    assert lowest_common_ancestor(node, node) is node
    assert lowest_common_ancestor(None, node) is None
    assert lowest_common_ancestor(node, None) is None


def test_lowest_common_ancestor_separate_trees():
    assert lowest_common_ancestor(Node(1), Node(2)) is None


def test_rotate_left():
    root = Node(98)
    mid = _attach(root, "right", 128)
    low = _attach(mid, "right", 402)
    new_root = root.rotate_left()
    assert new_root is mid
    assert new_root.parent is None
    assert new_root.left is root and root.parent is mid
    assert new_root.right is low
    assert root.right is None

    far = _attach(low, "right", 450)
    inner = _attach(low, "left", 420)
    newer = new_root.rotate_left()
    assert newer is low
    assert low.left is mid and low.right is far
    assert mid.right is inner and inner.parent is mid


def test_rotate_right():
    root = Node(98)
    mid = _attach(root, "left", 64)
    low = _attach(mid, "left", 32)
    new_root = root.rotate_right()
    assert new_root is mid
    assert mid.right is root and mid.left is low
    assert root.left is None and root.parent is mid

    far = _attach(low, "left", 20)
    inner = _attach(low, "right", 56)
    newer = new_root.rotate_right()
    assert newer is low
    assert low.right is mid and low.left is far
    assert mid.left is inner and inner.parent is mid


def test_rotate_updates_parent_link(family_tree):
    right = family_tree.right
    pivot = right.right
    assert right.rotate_left() is pivot
    assert family_tree.right is pivot
    assert pivot.parent is family_tree


def test_rotate_without_child_raises():
    leaf = Node(7)
    with pytest.raises(ValueError):
        leaf.rotate_left()
    with pytest.raises(ValueError):
        leaf.rotate_right()