"""Performance benchmarks for the AVL tree and positional lists."""

import math
import random
import time

import pytest

from avl_list import AVLTree, CircularList, TreeList


@pytest.fixture
def shuffled_keys():
    """50k distinct keys in random order."""
    keys = list(range(50_000))
    random.Random(42).shuffle(keys)
    return keys


def test_random_insert_performance(shuffled_keys):
    """Benchmark key-mode inserts."""
    tree = AVLTree()

    start_time = time.time()
    rotations = 0
    for key in shuffled_keys:
        rotations += tree.insert(key, "x")
    duration = time.time() - start_time

    ops_per_second = len(shuffled_keys) / duration if duration > 0 else float("inf")
    print(f"\nRandom inserts: {ops_per_second:.0f} ops/sec")
    print(f"Rotations: {rotations} ({rotations / len(shuffled_keys):.3f} per insert)")
    print(f"Height: {tree.height()}")

    assert ops_per_second > 5000
    assert tree.height() <= 1.4405 * math.log2(len(shuffled_keys) + 2)


def test_search_performance(shuffled_keys):
    """Benchmark lookups on a populated tree."""
    tree = AVLTree()
    for key in shuffled_keys:
        tree.insert(key, str(key))

    probes = [random.Random(7).randrange(60_000) for _ in range(50_000)]

    start_time = time.time()
    hits = sum(1 for key in probes if tree.search(key) is not None)
    duration = time.time() - start_time

    ops_per_second = len(probes) / duration if duration > 0 else float("inf")
    print(f"\nSearches: {ops_per_second:.0f} ops/sec ({hits} hits)")

    assert ops_per_second > 10000


def test_delete_performance(shuffled_keys):
    """Benchmark key-mode deletes down to an empty tree."""
    tree = AVLTree()
    for key in shuffled_keys:
        tree.insert(key, "x")

    start_time = time.time()
    rotations = 0
    for key in reversed(shuffled_keys):
        rotations += tree.delete(key)
    duration = time.time() - start_time

    ops_per_second = len(shuffled_keys) / duration if duration > 0 else float("inf")
    print(f"\nDeletes: {ops_per_second:.0f} ops/sec, {rotations} rotations")

    assert tree.empty()
    assert ops_per_second > 5000


def test_tree_list_middle_inserts_scale():
    """Test middle inserts stay fast where an array list has to shift."""
    num_items = 4_000
    tree_list = TreeList()
    circular = CircularList(num_items)

    start_time = time.time()
    for i in range(num_items):
        tree_list.insert(len(tree_list) // 2, i, "")
    tree_duration = time.time() - start_time

    start_time = time.time()
    for i in range(num_items):
        circular.insert(len(circular) // 2, i, "")
    circular_duration = time.time() - start_time

    print(f"\nTreeList middle inserts: {tree_duration:.3f}s")
    print(f"CircularList middle inserts: {circular_duration:.3f}s")

    assert len(tree_list) == len(circular) == num_items
    assert tree_list.tree.height() <= 1.4405 * math.log2(num_items + 2)
    assert tree_duration == 0 or num_items / tree_duration > 2000
