"""Detecting close values at close positions in a sequence."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import List, Sequence


def contains_nearby_almost_duplicate(
    nums: Sequence[int], index_diff: int, value_diff: int
) -> bool:
    """Return True when two positions at most index_diff apart hold values
    at most value_diff apart."""
    if index_diff <= 0:
        return False
    window: List[int] = []
    for i, x in enumerate(nums):
        if i > index_diff:
            del window[bisect_left(window, nums[i - index_diff - 1])]
        pos = bisect_left(window, x)
        if pos < len(window) and window[pos] - x <= value_diff:
            return True
        if pos > 0 and x - window[pos - 1] <= value_diff:
            return True
        insort(window, x)
    return False