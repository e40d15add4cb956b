"""Solution to a Japanese Olympiad in Informatics shortest-path task."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable


def robot_min_cost(n: int, edges: Iterable[tuple[int, int, int, int]]) -> int | None:
    """Return the least recolouring cost for the robot to go from node 1 to node
    ``n``, or None if it cannot.

    Each edge is (u, v, colour, cost of recolouring it).
    """
    if n < 1:
        raise ValueError("there must be at least one node")
    adj: list[list[tuple[int, int, int]]] = [[] for _ in range(n + 1)]
    for u, v, colour, weight in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves the range 1..{n}")
        adj[u].append((v, weight, colour))
        adj[v].append((u, weight, colour))

    dist: list[float] = [math.inf] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    heap = [(0, 1)]
    while heap:
        _, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        totals: dict[int, int] = defaultdict(int)
        for _, weight, colour in adj[node]:
            totals[colour] += weight
        cheapest: dict[int, float] = {}
        for other, _, colour in adj[node]:
            if dist[other] != math.inf:
                cheapest[colour] = min(cheapest.get(colour, math.inf), dist[other] + totals[colour])
        for other, weight, colour in adj[node]:
            candidate = min(
                dist[node] + weight,
                dist[node] + totals[colour] - weight,
                cheapest.get(colour, math.inf) - weight,
            )
            if dist[other] > candidate:
                dist[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return None if dist[n] == math.inf else int(dist[n])