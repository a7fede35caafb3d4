"""Building binary search trees from sorted data and iterating them in order."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from algosolve.tree import TreeNode


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced BST from ascending values, middle element as root."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(
        nums[mid],
        sorted_array_to_bst(nums[:mid]),
        sorted_array_to_bst(nums[mid + 1:]),
    )


class BSTIterator:
    """In-order iterator over a binary search tree, using O(height) memory."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: List[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """Return True while values remain."""
        return bool(self._stack)