import random

import pytest

from dsakit.avl import AVLNode, AVLTree


def _check_balanced(node: AVLNode | None) -> int:
    if node is None:
        return 0
    left = _check_balanced(node.left)
    right = _check_balanced(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    return node.height


def test_left_right_rotation_from_source_example():
    tree = AVLTree([50, 10, 20])
    assert tree.inorder() == [10, 20, 50]
    assert tree.root.key == 20


def test_right_left_rotation_from_source_example():
    tree = AVLTree([20, 50, 30])
    assert tree.inorder() == [20, 30, 50]
    assert tree.root.key == 30


def test_left_left_rotation_makes_middle_the_root():
    tree = AVLTree([30, 20, 10])
    assert tree.root.key == 20
    assert tree.root.left.key == 10
    assert tree.root.right.key == 30


def test_right_right_rotation_makes_middle_the_root():
    tree = AVLTree([10, 20, 30])
    assert tree.root.key == 20


def test_duplicates_are_ignored():
    tree = AVLTree([5, 3, 5, 3, 8])
    assert tree.inorder() == [3, 5, 8]
    assert len(tree) == 3


def test_empty_tree():
    tree = AVLTree()
    assert tree.inorder() == []
    assert tree.height == 0
    assert 4 not in tree


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_inserts_stay_sorted_and_balanced(seed):
    keys = random.Random(seed).sample(range(1000), 200)
    tree = AVLTree(keys)
    assert tree.inorder() == sorted(keys)
    _check_balanced(tree.root)
    assert all(key in tree for key in keys)


def test_ascending_inserts_stay_balanced():
    tree = AVLTree(range(1, 128))
    _check_balanced(tree.root)
    assert tree.height == 7