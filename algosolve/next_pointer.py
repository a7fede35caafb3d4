"""Linking each binary tree node to its right-hand neighbour on the same level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node with an extra link to the next node on its level."""

    val: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None
    next: Optional[Node] = None


def connect_next_right(root: Optional[Node]) -> Optional[Node]:
    """Set each node's next to the node to its right on the same level.

    The last node of each level gets None. Returns the root.
    """
    level = [root] if root is not None else []
    while level:
        for current, following in zip(level, level[1:] + [None]):
            current.next = following
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root