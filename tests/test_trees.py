import pytest

from cpalgos.trees import (
    TreeNode,
    ancestor_sum,
    build_tree,
    height,
    inorder,
    insert,
    is_balanced,
    postorder,
    preorder,
)

SAMPLE = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def test_insert_into_empty_returns_new_root():
    root = insert(None, 7)
    assert root == TreeNode(7)


def test_insert_places_smaller_left_and_equal_right():
    root = build_tree([5, 3, 5])
    assert root.left.data == 3
    assert root.right.data == 5
    assert root.right.left is None


def test_insert_returns_same_root():
    root = build_tree([10])
    assert insert(root, 4) is root


def test_build_tree_empty():
    assert build_tree([]) is None


@pytest.mark.parametrize("values", [SAMPLE, [3, 3, 1, 2, 9, 1], [], [42]])
def test_inorder_is_sorted(values):
    assert list(inorder(build_tree(values))) == sorted(values)


def test_preorder_starts_with_first_inserted():
    order = list(preorder(build_tree(SAMPLE)))
    assert order[0] == SAMPLE[0]
    assert sorted(order) == sorted(SAMPLE)


def test_preorder_of_level_order_insertion_for_small_tree():
    assert list(preorder(build_tree([2, 1, 3]))) == [2, 1, 3]


def test_postorder_ends_with_root():
    order = list(postorder(build_tree(SAMPLE)))
    assert order[-1] == SAMPLE[0]
    assert sorted(order) == sorted(SAMPLE)


def test_postorder_small_tree():
    assert list(postorder(build_tree([2, 1, 3]))) == [1, 3, 2]


def test_traversals_of_empty_tree():
    assert list(inorder(None)) == []
    assert list(preorder(None)) == []
    assert list(postorder(None)) == []


def test_height_of_empty_tree():
    assert height(None) == 0


def test_height_of_chain_equals_length():
    values = list(range(25))
    assert height(build_tree(values)) == len(values)


def test_height_of_balanced_three():
    assert height(build_tree([2, 1, 3])) == 2


def test_deep_chain_does_not_overflow_recursion():
    values = list(range(5000))
    root = build_tree(values)
    assert list(inorder(root)) == values
    assert height(root) == len(values)


def test_is_balanced():
    assert is_balanced(None) is True
    assert is_balanced(build_tree([2, 1, 3])) is True
    assert is_balanced(build_tree([1, 2, 3])) is False
    assert is_balanced(build_tree(SAMPLE)) is True


def test_ancestor_sum_base_cases():
    assert ancestor_sum(1) == 1
    assert ancestor_sum(0) == 0


@pytest.mark.parametrize("n", [2, 3, 10, 37, 10**18])
def test_ancestor_sum_recurrence(n):
    assert ancestor_sum(n) == n + ancestor_sum(n // 2)


@pytest.mark.parametrize("k", [0, 1, 5, 40])
def test_ancestor_sum_of_power_of_two(k):
    assert ancestor_sum(2**k) == 2 ** (k + 1) - 1