"""Running median of a stream of integers."""

from __future__ import annotations

import heapq
from typing import List


class MedianFinder:
    """Keeps the lower and upper halves of the numbers seen in two heaps."""

    def __init__(self) -> None:
        self._lower: List[int] = []  # max-heap, stored negated
        self._upper: List[int] = []  # min-heap

    def add_num(self, num: int) -> None:
        """Add a number to the stream."""
        if self.find_median() > num:
            heapq.heappush(self._lower, -num)
        else:
            heapq.heappush(self._upper, num)
        self._balance()

    def _balance(self) -> None:
        while len(self._lower) - len(self._upper) > 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        while len(self._upper) - len(self._lower) > 1:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Median of the numbers added so far; 0.0 before any are added."""
        low = -self._lower[0] if self._lower else 0
        high = self._upper[0] if self._upper else 0
        if len(self._lower) > len(self._upper):
            return float(low)
        if len(self._upper) > len(self._lower):
            return float(high)
        return low / 2 + high / 2