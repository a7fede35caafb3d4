"""A stack that also reports its smallest element in constant time."""

from __future__ import annotations

from typing import List, Tuple


class MinStack:
    """Last-in first-out stack with constant-time minimum lookup."""

    def __init__(self) -> None:
        # Each entry holds a value and the minimum of the stack up to it.
        self._items: List[Tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Place val on top of the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top value; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value held; raises IndexError when empty."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)