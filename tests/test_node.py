from ygzip.node import HuffmanNode


def test_new_node_is_leaf_without_parent():
    node = HuffmanNode(3, 97)
    assert node.is_leaf() is True
    assert node.parent is None
    assert (node.weight, node.value) == (3, 97)


def test_node_with_children_is_not_leaf():
    left = HuffmanNode(1, 97)
    right = HuffmanNode(2, 98)
    parent = HuffmanNode(3, left=left, right=right)
    assert parent.is_leaf() is False
    assert parent.value == 0


def test_node_with_single_child_is_not_leaf():
    assert HuffmanNode(1, left=HuffmanNode(1, 5)).is_leaf() is False


def test_repr_does_not_follow_parent_link():
    child = HuffmanNode(1, 97)
    parent = HuffmanNode(1, left=child)
    child.parent = parent
    text = repr(child)
    assert "parent" not in text
    assert "97" in text