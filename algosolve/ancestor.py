"""Lowest common ancestor of two nodes in a binary tree, matched by value."""

from __future__ import annotations

from typing import List, Optional

from algosolve.tree import TreeNode


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node that has both p's and q's values beneath it."""
    if root is None or root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lowest_common_ancestor_by_path(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Find both root-to-node paths and return the last node they share.

    Returns None when p or q is None or either value is not in the tree.
    """
    if p is None or q is None:
        return None
    p_path = _find_path(root, p.val)
    q_path = _find_path(root, q.val)
    if p_path is None or q_path is None:
        return None
    common = None
    for a, b in zip(p_path, q_path):
        if a.val != b.val:
            break
        common = a
    return common


def _find_path(root: Optional[TreeNode], target: int) -> Optional[List[TreeNode]]:
    if root is None:
        return None
    if root.val == target:
        return [root]
    for child in (root.left, root.right):
        sub = _find_path(child, target)
        if sub is not None:
            return [root] + sub
    return None