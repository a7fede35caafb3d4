"""Binary tree node type and basic whole-tree helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity; use compare_tree for shape."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def compare_tree(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and the same values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if a.val != b.val:
        return False
    return compare_tree(a.left, b.left) and compare_tree(a.right, b.right)


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root down to a leaf."""
    if root is None:
        return 0
    level = [root]
    depth = 0
    while True:
        depth += 1
        next_level = []
        for node in level:
            if node.left is None and node.right is None:
                return depth
            next_level.extend(
                child for child in (node.left, node.right) if child is not None
            )
        level = next_level