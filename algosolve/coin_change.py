"""Fewest coins adding up to an amount."""

from __future__ import annotations

from typing import List, Sequence


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to amount, or -1 when it cannot be made.

    Every coin may be used any number of times; coins that are not
    positive are never used. A negative amount cannot be made.
    """
    if amount < 0:
        return -1
    usable = [c for c in coins if c > 0]
    fewest: List[int] = [0] + [-1] * amount
    for value in range(1, amount + 1):
        counts = [
            fewest[value - c] + 1
            for c in usable
            if c <= value and fewest[value - c] >= 0
        ]
        fewest[value] = min(counts, default=-1)
    return fewest[amount]