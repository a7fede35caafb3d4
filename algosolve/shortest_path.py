"""Cheapest routes through weighted directed graphs given as edge lists."""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List, Sequence, Set, Tuple

Edge = Sequence[int]


def _adjacency(edges: Iterable[Edge]) -> Dict[int, Dict[int, int]]:
    """Map each source to its targets; a repeated edge keeps its last weight."""
    graph: Dict[int, Dict[int, int]] = {}
    for src, dst, weight in edges:
        graph.setdefault(src, {})[dst] = weight
    return graph


def with_return_roads(edges: Iterable[Edge]) -> List[List[int]]:
    """Return the edges with a reversed copy of each following it."""
    out: List[List[int]] = []
    for src, dst, weight in edges:
        out.append([src, dst, weight])
        out.append([dst, src, weight])
    return out


def dijkstra(n: int, edges: Iterable[Edge], src: int, dst: int) -> int:
    """Cost of the cheapest path from src to dst, or -1 when dst is unreachable.

    Edge weights must not be negative.
    """
    graph = _adjacency(edges)
    frontier: List[Tuple[int, int]] = [(0, src)]
    visited: Set[int] = set()
    while frontier:
        cost, node = heapq.heappop(frontier)
        if node == dst:
            return cost
        if node in visited:
            continue
        visited.add(node)
        for target, weight in graph.get(node, {}).items():
            heapq.heappush(frontier, (cost + weight, target))
    return -1


def bounded_dijkstra(
    n: int, edges: Iterable[Edge], src: int, dst: int, depth: int
) -> int:
    """Cost of the cheapest path from src to dst with at most depth stops
    in between, or -1 when there is none.

    Edge weights must not be negative.
    """
    graph = _adjacency(edges)
    frontier: List[Tuple[int, int, int]] = [(0, 0, src)]
    shallowest: Dict[int, int] = {}
    while frontier:
        cost, level, node = heapq.heappop(frontier)
        if node == dst:
            return cost
        if level > depth:
            continue
        # A node already expanded at this cost or less and no deeper is useless.
        seen = shallowest.get(node)
        if seen is not None and seen <= level:
            continue
        shallowest[node] = level
        for target, weight in graph.get(node, {}).items():
            heapq.heappush(frontier, (cost + weight, level + 1, target))
    return -1