"""Cheapest flight prices with a limit on the number of stops."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence


class FlightMap:
    """Directed flight routes, keeping the lowest price for each pair of cities."""

    def __init__(self, flights: Iterable[Sequence[int]]) -> None:
        self._routes: Dict[int, Dict[int, int]] = {}
        for route in flights:
            if len(route) < 3:
                continue
            src, dst, price = route[0], route[1], route[2]
            targets = self._routes.setdefault(src, {})
            if dst not in targets or targets[dst] > price:
                targets[dst] = price

    def cheapest_price(self, src: int, dst: int, k: int) -> int:
        """Lowest total price from src to dst with at most k stops, or -1."""
        best: Dict[int, Dict[int, int]] = {}
        self._explore(src, dst, k, 0, best)
        if dst in best:
            return min(best[dst].values())
        return -1

    def _explore(
        self,
        city: int,
        dst: int,
        stops_left: int,
        spent: int,
        best: Dict[int, Dict[int, int]],
    ) -> None:
        for target, price in self._routes.get(city, {}).items():
            total = spent + price
            records = best.get(target, {})
            # Skip when an earlier arrival was as cheap with as many stops left.
            if any(
                left >= stops_left and cost <= total
                for left, cost in records.items()
            ):
                continue
            best.setdefault(target, {})[stops_left] = total
            if target == dst:
                continue
            if stops_left > 0:
                self._explore(target, dst, stops_left - 1, total, best)


def find_cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Lowest total price from src to dst with at most k stops, or -1."""
    return FlightMap(flights).cheapest_price(src, dst, k)