"""Tracking the k-th largest value of a stream, plus BST value statistics."""

from __future__ import annotations

import heapq
from itertools import pairwise
from typing import Iterable, List, Optional

from algosolve.bst import bst_min_node
from algosolve.traversal import inorder_iterative
from algosolve.tree import TreeNode


class KthLargest:
    """Keeps the k largest values seen so far and reports the smallest of them."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k <= 0:
            raise ValueError("k must be positive")
        self._k = k
        self._heap: List[int] = []
        for num in nums:
            self.add(num)

    def add(self, val: int) -> int:
        """Add a value and return the current k-th largest (or smallest kept)."""
        if len(self._heap) < self._k:
            heapq.heappush(self._heap, val)
        elif self._heap[0] < val:
            heapq.heapreplace(self._heap, val)
        return self._heap[0]


def bst_value_span(root: Optional[TreeNode]) -> Optional[int]:
    """Difference between the largest and smallest value of a BST, or None."""
    smallest = bst_min_node(root)
    if smallest is None:
        return None
    largest = root
    while largest.right is not None:
        largest = largest.right
    return largest.val - smallest.val


def bst_min_gap(root: Optional[TreeNode]) -> Optional[int]:
    """Smallest difference between in-order neighbours, or None below two nodes."""
    gaps = [b - a for a, b in pairwise(inorder_iterative(root))]
    return min(gaps) if gaps else None