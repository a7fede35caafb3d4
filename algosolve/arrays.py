"""Assorted problems over integer arrays."""

from __future__ import annotations

import heapq
from itertools import pairwise
from typing import Dict, List, Sequence


def max_area(height: Sequence[int]) -> int:
    """Most water held between two of the vertical lines."""
    best = 0
    i, j = 0, len(height) - 1
    while i < j:
        best = max(best, min(height[i], height[j]) * (j - i))
        if height[i] > height[j]:
            j -= 1
        else:
            i += 1
    return best


def is_monotonic(nums: Sequence[int]) -> bool:
    """Return True when the values never decrease or never increase."""
    steps = [b - a for a, b in pairwise(nums)]
    return all(s >= 0 for s in steps) or all(s <= 0 for s in steps)


def largest_perimeter(nums: Sequence[int]) -> int:
    """Largest perimeter of a triangle with non-zero area from three of the
    lengths, or 0 when none can be formed. The input is not modified."""
    ordered = sorted(nums)
    for a, b, c in reversed(list(zip(ordered, ordered[1:], ordered[2:]))):
        if a + b > c:
            return a + b + c
    return 0


def median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two ascending sequences; 0.0 when both are empty."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        return 0.0
    half = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[half - 1] + merged[half]) / 2
    return float(merged[half])


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Indices of two different positions adding up to target, or []."""
    last_index: Dict[int, int] = {num: i for i, num in enumerate(nums)}
    for i, num in enumerate(nums):
        j = last_index.get(target - num)
        if j is not None and j != i:
            return [i, j]
    return []


def monotone_increasing_digits(n: int) -> int:
    """Largest number not above n whose digits never decrease left to right."""
    if n < 10:
        return n
    # Least significant digit first.
    digits = [int(d) for d in reversed(str(n))]
    for i in range(len(digits) - 1):
        if digits[i] < digits[i + 1]:
            digits[i + 1] -= 1
            digits[: i + 1] = [9] * (i + 1)
    return int("".join(map(str, reversed(digits))))