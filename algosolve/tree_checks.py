"""Height-based checks on binary trees."""

from __future__ import annotations

from typing import Optional

from algosolve.tree import TreeNode


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True when no node's subtrees differ in height by more than one."""
    return _balanced_height(root) is not None


def _balanced_height(root: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced tree, or None as soon as an imbalance is found."""
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))