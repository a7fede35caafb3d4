"""Mirror-symmetry check for binary trees."""

from __future__ import annotations

from typing import Optional

from algosolve.tree import TreeNode


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True when the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrored(root.left, root.right)


def _mirrored(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrored(left.left, right.right)
        and _mirrored(left.right, right.left)
    )