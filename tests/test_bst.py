import random

import pytest

from searchtrees.bst import BinarySearchTree, EmptyTreeError, main


def build(keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.size() == 0
    assert tree.is_empty() is True
    assert list(tree.level_order()) == []
    assert tree.search(1) is None


def test_minimum_of_empty_raises():
    with pytest.raises(EmptyTreeError):
        BinarySearchTree().minimum()


def test_maximum_of_empty_raises():
    with pytest.raises(EmptyTreeError):
        BinarySearchTree().maximum()


def test_insert_and_search():
    tree = build([5, 3, 8])
    assert tree.search(3) == "v3"
    assert tree.search(8) == "v8"
    assert tree.search(4) is None
    assert 5 in tree
    assert 7 not in tree
    assert len(tree) == 3


def test_insert_existing_key_replaces_value():
    tree = build([5, 3])
    tree.insert(3, "new")
    assert tree.search(3) == "new"
    assert tree.size() == 2


def test_in_order_is_sorted():
    keys = random.Random(7).sample(range(200), 60)
    tree = build(keys)
    assert list(tree.in_order()) == sorted(keys)
    assert list(tree) == sorted(keys)


def test_pre_order_example():
    tree = build([5, 3, 8, 1, 4])
    assert list(tree.pre_order()) == [5, 3, 1, 4, 8]


def test_traversal_roots():
    keys = [50, 30, 70, 20, 40, 60, 80]
    tree = build(keys)
    assert list(tree.pre_order())[0] == 50
    assert list(tree.post_order())[-1] == 50
    assert list(tree.level_order())[0] == 50
    assert sorted(tree.post_order()) == sorted(keys)
    assert sorted(tree.level_order()) == sorted(keys)


def test_level_order_visits_children_after_root():
    tree = build([50, 30, 70])
    assert list(tree.level_order()) == [50, 30, 70]


def test_minimum_and_maximum():
    keys = [42, 17, 99, 3, 58]
    tree = build(keys)
    assert tree.minimum() == min(keys)
    assert tree.maximum() == max(keys)


def test_remove_min_and_max():
    keys = [42, 17, 99, 3, 58]
    tree = build(keys)
    tree.remove_min()
    tree.remove_max()
    assert list(tree) == [17, 42, 58]
    assert tree.size() == 3


def test_remove_min_max_on_empty_is_noop():
    tree = BinarySearchTree()
    tree.remove_min()
    tree.remove_max()
    assert tree.size() == 0


def test_remove_leaf_and_single_child():
    tree = build([5, 3, 8, 1])
    tree.remove(1)
    assert 1 not in tree
    tree.remove(3)
    assert list(tree) == [5, 8]
    assert tree.size() == 2


def test_remove_node_with_two_children_uses_successor():
    tree = build([5, 3, 8, 7, 9])
    tree.remove(5)
    assert list(tree.pre_order())[0] == 7
    assert list(tree) == [3, 7, 8, 9]
    assert tree.search(7) == "v7"
    assert tree.size() == 4


def test_remove_absent_key_is_noop():
    tree = build([5, 3, 8])
    tree.remove(100)
    assert list(tree) == [3, 5, 8]
    assert tree.size() == 3


def test_remove_everything():
    keys = random.Random(3).sample(range(100), 40)
    tree = build(keys)
    remaining = set(keys)
    for key in random.Random(4).sample(keys, len(keys)):
        tree.remove(key)
        remaining.discard(key)
        assert list(tree) == sorted(remaining)
        assert tree.size() == len(remaining)
    assert tree.is_empty()


def test_string_keys():
    tree = BinarySearchTree()
    for word in ["pear", "apple", "fig"]:
        tree.insert(word, len(word))
    assert list(tree) == ["apple", "fig", "pear"]
    assert tree.search("fig") == 3


def test_main_prints_sorted_keys(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "10\n20\n"