import pytest

from dsakit.tree import (
    Node,
    has_children_sum_property,
    height,
    inorder,
    is_balanced,
    level_order,
    level_order_by_line,
    max_width,
    maximum,
    nodes_at_distance,
    postorder,
    preorder,
    size,
)

KEYS = [20, 8, 12, 3, 9]


@pytest.fixture
def sample():
    root = Node(20)
    root.left = Node(8)
    root.right = Node(12)
    root.right.right = Node(9)
    root.right.left = Node(3)
    return root


def _bst(keys):
    root = None

    def insert(node, key):
        if node is None:
            return Node(key)
        if key < node.key:
            node.left = insert(node.left, key)
        else:
            node.right = insert(node.right, key)
        return node

    for key in keys:
        root = insert(root, key)
    return root


def _chain(keys):
    root = None
    for key in reversed(keys):
        root = Node(key, left=root)
    return root


def test_max_width_of_sample(sample):
    assert max_width(sample) == 2


def test_width_matches_widest_line(sample):
    assert max_width(sample) == max(len(row) for row in level_order_by_line(sample))


def test_lines_count_equals_height(sample):
    assert len(level_order_by_line(sample)) == height(sample)


def test_level_order_flattens_lines(sample):
    lines = level_order_by_line(sample)
    assert level_order(sample) == [key for row in lines for key in row]
    assert lines[0] == [sample.key]


def test_traversals_cover_every_key(sample):
    for traversal in (inorder, preorder, postorder, level_order):
        assert sorted(traversal(sample)) == sorted(KEYS)
    assert size(sample) == len(KEYS)


def test_preorder_and_postorder_root_position(sample):
    assert preorder(sample)[0] == sample.key
    assert postorder(sample)[-1] == sample.key


def test_inorder_of_search_tree_is_sorted():
    keys = [50, 30, 70, 20, 40, 60, 80, 35]
    assert inorder(_bst(keys)) == sorted(keys)


def test_maximum(sample):
    assert maximum(sample) == max(KEYS)


def test_maximum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        maximum(None)


def test_children_sum_holds_for_sample(sample):
    assert has_children_sum_property(sample)


def test_children_sum_broken():
    root = Node(10, Node(4), Node(5))
    assert not has_children_sum_property(root)


def test_sample_is_balanced(sample):
    assert is_balanced(sample)


def test_chain_is_not_balanced():
    root = _chain([1, 2, 3])
    assert not is_balanced(root)
    assert height(root) == len([1, 2, 3])


def test_nodes_at_distance(sample):
    assert nodes_at_distance(sample, 0) == [sample.key]
    assert nodes_at_distance(sample, 1) == [sample.left.key, sample.right.key]
    assert nodes_at_distance(sample, 2) == [sample.right.left.key, sample.right.right.key]
    assert nodes_at_distance(sample, height(sample)) == []


def test_nodes_at_each_distance_match_lines(sample):
    lines = level_order_by_line(sample)
    for depth, row in enumerate(lines):
        assert nodes_at_distance(sample, depth) == row


def test_empty_tree():
    assert height(None) == 0
    assert size(None) == 0
    assert max_width(None) == 0
    assert inorder(None) == []
    assert level_order_by_line(None) == []
    assert is_balanced(None)
    assert has_children_sum_property(None)