"""Binary encoding of trees as their preorder and inorder value sequences.

Each sequence is written as a big-endian signed 32-bit count followed by
that many big-endian signed 64-bit values: preorder first, then inorder.
"""

from __future__ import annotations

import struct
from typing import List, Optional, Sequence, Tuple

from algosolve.reconstruct import build_from_preorder_inorder
from algosolve.traversal import inorder_recursive, preorder_recursive
from algosolve.tree import TreeNode

_COUNT = struct.Struct(">i")
_VALUE_SIZE = 8


def _pack(values: Sequence[int]) -> bytes:
    return struct.pack(f">i{len(values)}q", len(values), *values)


def _unpack(data: bytes, offset: int) -> Tuple[List[int], int]:
    if len(data) < offset + _COUNT.size:
        raise ValueError("truncated data: missing sequence length")
    (count,) = _COUNT.unpack_from(data, offset)
    if count < 0:
        raise ValueError(f"invalid sequence length {count}")
    start = offset + _COUNT.size
    end = start + count * _VALUE_SIZE
    if len(data) < end:
        raise ValueError("truncated data: missing sequence values")
    values = list(struct.unpack_from(f">{count}q", data, start))
    return values, end


def serialize(root: Optional[TreeNode]) -> bytes:
    """Encode a tree; values must fit in a signed 64-bit integer."""
    try:
        return _pack(preorder_recursive(root)) + _pack(inorder_recursive(root))
    except struct.error as exc:
        raise ValueError(f"cannot encode tree: {exc}") from exc


def deserialize(data: bytes) -> Optional[TreeNode]:
    """Decode bytes produced by serialize; empty input gives None.

    Raises ValueError when the data is truncated or malformed.
    """
    if not data:
        return None
    preorder, offset = _unpack(data, 0)
    inorder, _ = _unpack(data, offset)
    return build_from_preorder_inorder(preorder, inorder)