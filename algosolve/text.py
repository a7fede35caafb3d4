"""Assorted problems over strings."""

from __future__ import annotations

from typing import Dict, List


def repeated_substring_pattern(s: str) -> bool:
    """Return True when s is some shorter substring repeated at least twice."""
    n = len(s)
    if n < 2:
        return False
    return any(
        n % size == 0 and s[size:] == s[:-size] for size in range(1, n // 2 + 1)
    )


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    if not s:
        return ""
    n = len(s)
    best_lo, best_hi = 0, 0
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        if s[lo] != s[hi]:
            continue
        while lo > 0 and hi < n - 1 and s[lo - 1] == s[hi + 1]:
            lo -= 1
            hi += 1
        if hi - lo > best_hi - best_lo:
            best_lo, best_hi = lo, hi
    return s[best_lo:best_hi + 1]


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: Dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def min_changes(s: str) -> int:
    """Characters to change so every aligned pair of s holds equal characters.

    Raises ValueError for a string of odd length.
    """
    if len(s) % 2:
        raise ValueError("string length must be even")
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def apply_backspaces(s: str) -> str:
    """Text left after typing s where '#' deletes the previous character."""
    typed: List[str] = []
    for ch in s:
        if ch == "#":
            if typed:
                typed.pop()
        else:
            typed.append(ch)
    return "".join(typed)


def backspace_compare(s: str, t: str) -> bool:
    """Return True when s and t type out the same text."""
    return apply_backspaces(s) == apply_backspaces(t)