from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import BinarySearchTree


def test_in_order_traversal_of_source_example():
    tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
    assert list(tree) == [20, 30, 40, 50, 60, 70, 80]
    assert len(tree) == 7


def test_duplicates_are_ignored():
    tree = BinarySearchTree([5, 3, 5, 3])
    assert list(tree) == [3, 5]
    assert len(tree) == 2
    assert tree.insert(5) is False
    assert tree.insert(4) is True
    assert list(tree) == [3, 4, 5]


def test_membership():
    tree = BinarySearchTree([50, 30, 70])
    assert 30 in tree
    assert 70 in tree
    assert 40 not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert len(tree) == 0
    assert 1 not in tree


@given(st.lists(st.integers()))
def test_traversal_is_sorted_distinct(values):
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    assert all(value in tree for value in values)


@given(st.lists(st.integers(0, 50)), st.integers(51, 100))
def test_absent_values_not_contained(values, missing):
    tree = BinarySearchTree(values)
    assert missing not in tree