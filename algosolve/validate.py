"""Checking the binary search tree property."""

from __future__ import annotations

from typing import Optional

from algosolve.tree import TreeNode


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True when every node lies strictly between its ancestors' bounds."""
    return _within(root, None, None)


def _within(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.val <= low:
        return False
    if high is not None and node.val >= high:
        return False
    return _within(node.left, low, node.val) and _within(node.right, node.val, high)