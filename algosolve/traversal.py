"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from typing import List, Optional

from algosolve.tree import TreeNode


def preorder_recursive(node: Optional[TreeNode]) -> List[int]:
    """Values in root, left, right order."""
    if node is None:
        return []
    return [node.val] + preorder_recursive(node.left) + preorder_recursive(node.right)


def preorder_iterative(node: Optional[TreeNode]) -> List[int]:
    """Values in root, left, right order, using an explicit stack."""
    if node is None:
        return []
    out = []
    stack = [node]
    while stack:
        current = stack.pop()
        out.append(current.val)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return out


def inorder_recursive(node: Optional[TreeNode]) -> List[int]:
    """Values in left, root, right order."""
    if node is None:
        return []
    return inorder_recursive(node.left) + [node.val] + inorder_recursive(node.right)


def inorder_iterative(node: Optional[TreeNode]) -> List[int]:
    """Values in left, root, right order, using an explicit stack."""
    out = []
    stack: List[TreeNode] = []
    current = node
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            out.append(current.val)
            current = current.right
    return out


def postorder_recursive(node: Optional[TreeNode]) -> List[int]:
    """Values in left, right, root order."""
    if node is None:
        return []
    return postorder_recursive(node.left) + postorder_recursive(node.right) + [node.val]


def postorder_iterative(node: Optional[TreeNode]) -> List[int]:
    """Values in left, right, root order, using an explicit stack."""
    out = []
    stack: List[TreeNode] = []
    current = node
    last_visited: Optional[TreeNode] = None
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            current = top.right
        else:
            out.append(top.val)
            last_visited = stack.pop()
    return out


def levelorder_recursive(node: Optional[TreeNode]) -> List[int]:
    """Values level by level, left to right, one recursion per level."""
    if node is None:
        return []
    return _levels([node])


def _levels(nodes: List[TreeNode]) -> List[int]:
    if not nodes:
        return []
    next_level = [
        child for n in nodes for child in (n.left, n.right) if child is not None
    ]
    return [n.val for n in nodes] + _levels(next_level)


def levelorder_iterative(node: Optional[TreeNode]) -> List[int]:
    """Values level by level, left to right, using a queue."""
    if node is None:
        return []
    out = []
    queue = deque([node])
    while queue:
        current = queue.popleft()
        out.append(current.val)
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)
    return out