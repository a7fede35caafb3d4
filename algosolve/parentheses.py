"""Bracket matching over strings."""

from __future__ import annotations

from typing import List, Tuple

_PAIRS = {"(": ")", "[": "]", "{": "}"}


def is_valid_parentheses(s: str) -> bool:
    """Return True when every bracket in s is closed in the right order.

    Any character that is not a bracket stays unmatched and makes the
    string invalid.
    """
    stack: List[str] = []
    for ch in s:
        if stack and _PAIRS.get(stack[-1]) == ch:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed run of '(' and ')' in s."""
    unmatched: List[str] = []
    # (number of unmatched characters left, index of the closing bracket)
    marks: List[Tuple[int, int]] = []
    for i, ch in enumerate(s):
        if unmatched and unmatched[-1] == "(" and ch == ")":
            unmatched.pop()
            depth = len(unmatched)
            while marks and marks[-1][0] >= depth:
                marks.pop()
            marks.append((depth, i))
        else:
            unmatched.append(ch)

    best = 0
    consumed = 0
    for depth, index in marks:
        run = index + 1 - depth - consumed
        best = max(best, run)
        consumed += run
    return best