"""A last-in first-out stack and a first-in first-out queue built on two stacks."""

from __future__ import annotations

from typing import List


class Stack:
    """Last-in first-out stack of integers."""

    def __init__(self) -> None:
        self._data: List[int] = []

    def push(self, x: int) -> None:
        """Place x on top."""
        self._data.append(x)

    def pop(self) -> int:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def top(self) -> int:
        """Return the top value; raises IndexError when empty."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._data


class Queue:
    """First-in first-out queue made of an inbox and an outbox stack."""

    def __init__(self) -> None:
        self._inbox = Stack()
        self._outbox = Stack()

    def _refill(self) -> None:
        if self._outbox.empty():
            while not self._inbox.empty():
                self._outbox.push(self._inbox.pop())

    def push(self, x: int) -> None:
        """Add x at the back."""
        self._inbox.push(x)

    def pop(self) -> int:
        """Remove and return the front value; raises IndexError when empty."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front value; raises IndexError when empty."""
        self._refill()
        return self._outbox.top()

    def empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._inbox.empty() and self._outbox.empty()