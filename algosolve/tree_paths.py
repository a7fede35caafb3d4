"""Root-to-leaf path queries on binary trees."""

from __future__ import annotations

from typing import Iterator, List, Optional

from algosolve.tree import TreeNode


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def has_path_sum(root: Optional[TreeNode], total: int) -> bool:
    """Return True when some root-to-leaf path adds up to total."""
    if root is None:
        return False
    if _is_leaf(root):
        return total == root.val
    remaining = total - root.val
    return any(
        has_path_sum(child, remaining)
        for child in (root.left, root.right)
        if child is not None
    )


def leaf_path_sums(root: Optional[TreeNode]) -> List[int]:
    """Sum of every root-to-leaf path, leaves taken left to right."""
    if root is None:
        return []
    if _is_leaf(root):
        return [root.val]
    return [
        root.val + s
        for child in (root.left, root.right)
        for s in leaf_path_sums(child)
    ]


def path_sums(root: Optional[TreeNode], total: int) -> List[List[int]]:
    """Every root-to-leaf path whose values add up to total, left to right."""
    return list(_matching_paths(root, total, []))


def _matching_paths(
    node: Optional[TreeNode], remaining: int, prefix: List[int]
) -> Iterator[List[int]]:
    if node is None:
        return
    path = prefix + [node.val]
    if _is_leaf(node):
        if node.val == remaining:
            yield path
        return
    for child in (node.left, node.right):
        yield from _matching_paths(child, remaining - node.val, path)


def all_paths(root: Optional[TreeNode]) -> List[str]:
    """Every root-to-leaf path written as values joined by '->'."""
    return ["->".join(map(str, path)) for path in _all_value_paths(root, [])]


def _all_value_paths(
    node: Optional[TreeNode], prefix: List[int]
) -> Iterator[List[int]]:
    if node is None:
        return
    path = prefix + [node.val]
    if _is_leaf(node):
        yield path
        return
    for child in (node.left, node.right):
        yield from _all_value_paths(child, path)