import pytest

from algodrills.trees import (
    TreeNode,
    height,
    invert_tree,
    is_balanced,
    is_same_tree,
    max_depth,
)


def _left_chain(length):
    root = None
    for value in range(length):
        root = TreeNode(value, root, None)
    return root


def _sample():
    return TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3, None, TreeNode(7)))


def test_empty_tree_height_is_zero():
    assert height(None) == 0
    assert is_balanced(None)


def test_sample_is_balanced():
    assert is_balanced(_sample())
    assert height(_sample()) == max_depth(_sample())


def test_long_chain_is_not_balanced():
    chain = _left_chain(3)
    assert height(chain) == -1
    assert not is_balanced(chain)


@pytest.mark.parametrize("length", [0, 1, 2, 5, 9])
def test_max_depth_of_chain_is_its_length(length):
    assert max_depth(_left_chain(length)) == length


def test_invert_twice_gives_original():
    tree = _sample()
    assert is_same_tree(invert_tree(invert_tree(tree)), tree)


def test_invert_swaps_children_and_keeps_input():
    tree = _sample()
    inverted = invert_tree(tree)
    assert inverted.left.val == tree.right.val
    assert inverted.right.val == tree.left.val
    assert is_same_tree(tree, _sample())
    assert not is_same_tree(inverted, tree)


def test_invert_keeps_depth():
    tree = _sample()
    assert max_depth(invert_tree(tree)) == max_depth(tree)


def test_invert_none():
    assert invert_tree(None) is None


def test_same_tree_cases():
    assert is_same_tree(None, None)
    assert not is_same_tree(TreeNode(1), None)
    assert not is_same_tree(None, TreeNode(1))
    assert not is_same_tree(TreeNode(1), TreeNode(2))
    assert not is_same_tree(TreeNode(1, TreeNode(2)), TreeNode(1, None, TreeNode(2)))
    assert is_same_tree(_sample(), _sample())