"""Problems solved with monotonic stacks over integer sequences."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

_MODULUS = 1_000_000_007

_Pops = Callable[[int, int], bool]


def _previous(nums: Sequence[int], pops: _Pops) -> List[int]:
    """For each position, the index of the nearest earlier element that
    survives popping, or -1. pops(stacked, current) decides removal."""
    stack: List[int] = []
    out: List[int] = []
    for i, value in enumerate(nums):
        while stack and pops(nums[stack[-1]], value):
            stack.pop()
        out.append(stack[-1] if stack else -1)
        stack.append(i)
    return out


def _following(nums: Sequence[int], pops: _Pops) -> List[int]:
    """For each position, the index of the nearest later element that
    survives popping, or len(nums)."""
    stack: List[int] = []
    out = [len(nums)] * len(nums)
    for i in reversed(range(len(nums))):
        value = nums[i]
        while stack and pops(nums[stack[-1]], value):
            stack.pop()
        if stack:
            out[i] = stack[-1]
        stack.append(i)
    return out


def _contribution(nums: Sequence[int], left: List[int], right: List[int]) -> int:
    return sum(
        (i - lo) * (hi - i) * value
        for i, (value, lo, hi) in enumerate(zip(nums, left, right))
    )


def sum_subarray_ranges(nums: Sequence[int]) -> int:
    """Sum over all contiguous subarrays of (maximum - minimum)."""
    minimum = _contribution(
        nums,
        _previous(nums, lambda top, cur: top >= cur),
        _following(nums, lambda top, cur: top > cur),
    )
    maximum = _contribution(
        nums,
        _previous(nums, lambda top, cur: top <= cur),
        _following(nums, lambda top, cur: top < cur),
    )
    return maximum - minimum


def next_greater_elements(nums1: Sequence[int], nums2: Sequence[int]) -> List[int]:
    """For each value of nums1, the first value after it in nums2 that is not
    smaller than it, or -1 when there is none or the value is absent."""
    following: Dict[int, int] = {}
    stack: List[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] < value:
            stack.pop()
        following[value] = stack[-1] if stack else -1
        stack.append(value)
    return [following.get(value, -1) for value in nums1]


def daily_temperatures(temps: Sequence[int]) -> List[int]:
    """Days to wait for a strictly warmer day, 0 when none comes."""
    warmer = _following(temps, lambda top, cur: top <= cur)
    return [
        j - i if j < len(temps) else 0 for i, j in enumerate(warmer)
    ]


def _trunc_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def sum_subarray_mins(nums: Sequence[int]) -> int:
    """Sum over all contiguous subarrays of their minimum, modulo 10**9 + 7."""
    left = _previous(nums, lambda top, cur: top > cur)
    right = _following(nums, lambda top, cur: top >= cur)
    total = 0
    for i, (value, lo, hi) in enumerate(zip(nums, left, right)):
        total = _trunc_mod(total + (hi - i) * (i - lo) * value, _MODULUS)
    return total


def trap_rain_water(heights: Sequence[int]) -> int:
    """Units of water held between the bars of an elevation map."""
    water = 0
    stack: List[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] <= height:
            bottom = stack.pop()
            if stack:
                wall = stack[-1]
                level = min(height, heights[wall]) - heights[bottom]
                water += level * (i - wall - 1)
        stack.append(i)
    return water