"""Largest rectangles in histograms and binary matrices."""

from __future__ import annotations

from typing import List, Sequence


def _nearest_lower(heights: Sequence[int], indices: Sequence[int], default: int) -> List[int]:
    """Index of the nearest strictly lower bar met while walking indices."""
    out = [default] * len(heights)
    stack: List[int] = []
    for i in indices:
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        if stack:
            out[i] = stack[-1]
        stack.append(i)
    return out


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram."""
    n = len(heights)
    left = _nearest_lower(heights, range(n), -1)
    right = _nearest_lower(heights, range(n - 1, -1, -1), n)
    return max(
        ((hi - lo - 1) * h for h, lo, hi in zip(heights, left, right)),
        default=0,
    )


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest all-'1' rectangle in a matrix of '0'/'1' cells.

    Raises ValueError for an empty matrix or rows of different widths.
    """
    if not matrix:
        raise ValueError("matrix must have at least one row")
    width = len(matrix[0])
    heights = [0] * width
    best = 0
    for row in matrix:
        if len(row) != width:
            raise ValueError("all rows must have the same width")
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle(heights))
    return best