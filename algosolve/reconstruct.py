"""Rebuilding binary trees from pairs of traversals."""

from __future__ import annotations

from typing import Optional, Sequence

from algosolve.tree import TreeNode


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder value sequences.

    Returns None for empty input or sequences of different lengths.
    """
    if len(inorder) != len(postorder) or not inorder:
        return None
    root_val = postorder[-1]
    try:
        i = list(inorder).index(root_val)
    except ValueError:
        return TreeNode()
    node = TreeNode(root_val)
    if i > 0:
        node.left = build_from_inorder_postorder(inorder[:i], postorder[:i])
    if i < len(inorder) - 1:
        node.right = build_from_inorder_postorder(inorder[i + 1:], postorder[i:-1])
    return node


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder value sequences.

    Returns None for empty input or sequences of different lengths.
    """
    if len(inorder) != len(preorder) or not inorder:
        return None
    root_val = preorder[0]
    try:
        i = list(inorder).index(root_val)
    except ValueError:
        return TreeNode()
    node = TreeNode(root_val)
    if i > 0:
        node.left = build_from_preorder_inorder(preorder[1:i + 1], inorder[:i])
    if i < len(inorder) - 1:
        node.right = build_from_preorder_inorder(preorder[i + 1:], inorder[i + 1:])
    return node