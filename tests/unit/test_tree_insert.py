"""Unit tests for key-mode insertion and insert rebalancing."""

import pytest

from avl_list import AVLTree, Outcome, check_invariants


@pytest.fixture
def tree():
    """Create empty tree for tests."""
    return AVLTree()


def test_new_tree_is_empty(tree):
    """Test the state of a fresh tree."""
    assert tree.empty()
    assert tree.size() == 0
    assert len(tree) == 0
    assert tree.height() == -1
    assert tree.min() is None
    assert tree.max() is None
    assert tree.keys_in_order() == []
    assert tree.values_in_order() == []


def test_insert_single_key(tree):
    """Test that the first insert seeds root, min and max."""
    assert tree.insert(10, "ten") == 0

    assert not tree.empty()
    assert tree.size() == 1
    assert tree.height() == 0
    assert tree.min() == "ten"
    assert tree.max() == "ten"
    root = tree.get_root()
    assert root.key == 10
    assert root.parent is None
    assert root.is_leaf()


def test_insert_without_rotation(tree):
    """Test inserts that keep the tree balanced on their own."""
    for key in [10, 5, 15]:
        assert tree.insert(key, str(key)) == 0

    assert tree.get_root().key == 10
    assert tree.height() == 1
    check_invariants(tree)


@pytest.mark.parametrize(
    "keys, expected_rotations",
    [
        ([30, 20, 10], 1),  # left-left: single right rotation
        ([10, 20, 30], 1),  # right-right: single left rotation
        ([30, 10, 20], 2),  # left-right: double rotation
        ([10, 30, 20], 2),  # right-left: double rotation
    ],
)
def test_insert_rotation_cases(tree, keys, expected_rotations):
    """Test the rotation count reported by the third insert of each case."""
    assert tree.insert(keys[0], "a") == 0
    assert tree.insert(keys[1], "b") == 0
    assert tree.insert(keys[2], "c") == expected_rotations

    root = tree.get_root()
    assert root.key == 20
    assert root.left.key == 10
    assert root.right.key == 30
    assert root.left.parent is root
    assert root.right.parent is root
    assert tree.height() == 1
    check_invariants(tree)


def test_insert_duplicate_is_no_op(tree):
    """Test duplicate keys are rejected without mutation."""
    for key in [10, 20, 5, 15, 25]:
        tree.insert(key, f"v{key}")
    root_before = tree.get_root()
    keys_before = tree.keys_in_order()
    values_before = tree.values_in_order()

    assert tree.insert(15, "other") == Outcome.DUPLICATE_KEY
    assert tree.insert(15, "other") < 0

    assert tree.size() == 5
    assert tree.get_root() is root_before
    assert tree.keys_in_order() == keys_before
    assert tree.values_in_order() == values_before
    assert tree.search(15) == "v15"
    assert tree.min() == "v5"
    assert tree.max() == "v25"


def test_insert_updates_min_and_max(tree):
    """Test cached extremes follow new smallest and largest keys."""
    tree.insert(10, "ten")
    tree.insert(20, "twenty")
    assert tree.max() == "twenty"

    tree.insert(5, "five")
    assert tree.min() == "five"

    tree.insert(7, "seven")
    assert tree.min() == "five"
    assert tree.max() == "twenty"


def test_insert_ascending_keys_stays_logarithmic(tree):
    """Test sequential inserts keep AVL height bounds."""
    for key in range(1, 128):
        tree.insert(key, str(key))

    # 127 keys in ascending order end as a perfect tree
    assert tree.height() == 6
    assert tree.keys_in_order() == list(range(1, 128))
    check_invariants(tree)


def test_insert_rotation_count_at_most_two(tree):
    """Test a single insert never reports more than one double rotation."""
    keys = [(i * 7919) % 1009 for i in range(1, 500)]
    for key in keys:
        result = tree.insert(key, str(key))
        if result == Outcome.DUPLICATE_KEY:
            continue
        assert 0 <= result <= 2

    check_invariants(tree)


def test_insert_maintains_sizes(tree):
    """Test subtree sizes after a mixed insert sequence."""
    for key in [50, 30, 70, 20, 40, 60, 80, 10]:
        tree.insert(key, str(key))

    root = tree.get_root()
    assert root.size == 8
    assert root.left.size + root.right.size + 1 == 8
    check_invariants(tree)


def test_insert_negative_keys(tree):
    """Test keys below zero order correctly."""
    for key in [0, -5, 5, -10, 10]:
        tree.insert(key, str(key))

    assert tree.keys_in_order() == [-10, -5, 0, 5, 10]
    assert tree.min() == "-10"
    assert tree.max() == "10"
