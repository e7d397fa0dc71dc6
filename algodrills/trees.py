"""Binary tree checks and transformations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["TreeNode", "height", "is_balanced", "max_depth", "invert_tree", "is_same_tree"]


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def height(root: Optional[TreeNode]) -> int:
    """Return the height of the tree, or -1 if any subtree is unbalanced."""
    if root is None:
        return 0
    left = height(root.left)
    if left == -1:
        return -1
    right = height(root.right)
    if right == -1:
        return -1
    if abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return height(root) != -1


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new tree that mirrors the given one; the input is left untouched."""
    if root is None:
        return None
    return TreeNode(root.val, invert_tree(root.right), invert_tree(root.left))


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    if p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)