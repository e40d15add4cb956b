"""Solutions to a selection of Asia-Pacific Informatics Olympiad tasks."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def dispatch_max_satisfaction(budget: int, ninjas: Sequence[tuple[int, int, int]]) -> int:
    """Return the best leadership times dispatched ninjas within ``budget``.

    Each ninja is (parent, salary, leadership), numbered from 1; the root's parent is 0.
    """
    n = len(ninjas)
    if n == 0:
        return 0
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for i, (parent, _, _) in enumerate(ninjas, 1):
        children[parent].append(i)

    order: list[int] = []
    stack = [1]
    while stack:
        v = stack.pop()
        order.append(v)
        stack.extend(children[v])

    heaps: list[list[int]] = [[] for _ in range(n + 1)]
    totals = [0] * (n + 1)
    best = 0
    for v in reversed(order):
        _, salary, leadership = ninjas[v - 1]
        total = salary + sum(totals[c] for c in children[v])
        if children[v]:
            largest = max(children[v], key=lambda c: len(heaps[c]))
            heap = heaps[largest]
            heaps[largest] = []
            for c in children[v]:
                if c != largest:
                    for item in heaps[c]:
                        heapq.heappush(heap, item)
                    heaps[c] = []
        else:
            heap = []
        heapq.heappush(heap, -salary)
        while total > budget:
            total += heapq.heappop(heap)
        heaps[v] = heap
        totals[v] = total
        best = max(best, len(heap) * leadership)
    return best


def skyscraper_jumps(n: int, doges: Sequence[tuple[int, int]]) -> int | None:
    """Return the fewest jumps to pass news from doge 0 to doge 1, each doge
    (building, power) jumping ``power`` buildings at a time; None if impossible."""
    if len(doges) < 2:
        raise ValueError("at least two doges are needed")
    powers: list[set[int]] = [set() for _ in range(n)]
    for building, power in doges:
        powers[building].add(power)
    source, target = doges[0][0], doges[1][0]

    def jumps(i: int) -> Iterable[tuple[int, int]]:
        for power in sorted(powers[i]):
            j = i
            while j - power >= 0:
                j -= power
                yield j, (i - j) // power
                if power in powers[j]:
                    break
            j = i
            while j + power <= n - 1:
                j += power
                yield j, (j - i) // power
                if power in powers[j]:
                    break

    dist: list[int | None] = [None] * n
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        d, node = heapq.heappop(queue)
        if dist[node] is not None and dist[node] < d:
            continue
        if node == target:
            break
        for nxt, cost in jumps(node):
            if dist[nxt] is None or d + cost < dist[nxt]:
                dist[nxt] = d + cost
                heapq.heappush(queue, (d + cost, nxt))
    return dist[target]