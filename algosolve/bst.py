"""Search, insertion and deletion on binary search trees."""

from __future__ import annotations

from typing import Optional

from algosolve.tree import TreeNode


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding val, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if node.val > val else node.right
    return node


def insert_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val and return the root; an existing equal value is left as is."""
    if root is None:
        return TreeNode(val)
    if root.val > val:
        root.left = insert_bst(root.left, val)
    elif root.val < val:
        root.right = insert_bst(root.right, val)
    return root


def delete_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Remove val from the tree and return the new root."""
    if root is None:
        return None
    if root.val == val:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = bst_min_node(root.right)
        root.val = successor.val
        root.right = delete_bst(root.right, successor.val)
    if root.val > val:
        root.left = delete_bst(root.left, val)
    if root.val < val:
        root.right = delete_bst(root.right, val)
    return root


def bst_min_node(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the leftmost node of the tree, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node