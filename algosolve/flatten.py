"""Flattening a binary tree into a right-linked chain in preorder."""

from __future__ import annotations

from typing import List, Optional

from algosolve.traversal import preorder_iterative
from algosolve.tree import TreeNode


def flatten_to_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new chain of nodes, linked by right, holding the preorder values.

    The input tree is left unchanged.
    """
    head: Optional[TreeNode] = None
    for val in reversed(preorder_iterative(root)):
        head = TreeNode(val, None, head)
    return head


def right_chain(root: Optional[TreeNode]) -> List[str]:
    """Describe a right-linked chain as values separated by "null" markers."""
    out: List[str] = []
    node = root
    while node is not None:
        out.append(str(node.val))
        if node.right is not None:
            out.append("null")
        node = node.right
    return out