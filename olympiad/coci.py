"""Solutions to a selection of Croatian Open Competition in Informatics tasks."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from fractions import Fraction
from itertools import groupby
from operator import itemgetter

from .boi import _preorder, _tree


def count_monochrome_rectangles(grid: Sequence[Sequence[int]]) -> int:
    """Count the sub-rectangles of ``grid`` whose cells all hold the same value."""
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    m = len(rows[0])
    if any(len(row) != m for row in rows):
        raise ValueError("grid must be rectangular")
    total = 0
    stacks: list[list[tuple[int, int]]] = [[] for _ in range(m)]
    column_sums = [0] * m
    previous: list[int] | None = None
    for i, row in enumerate(rows):
        runs = [0] * m
        for j in range(m - 1, -1, -1):
            runs[j] = 1 + (runs[j + 1] if j + 1 < m and row[j] == row[j + 1] else 0)
        for j, (value, run) in enumerate(zip(row, runs)):
            stack = stacks[j]
            if previous is None or previous[j] != value:
                column_sums[j] = run
                stack[:] = [(0, i - 1), (run, i)]
            else:
                current = column_sums[j] + run
                while len(stack) >= 2 and stack[-1][0] >= run:
                    width, top = stack.pop()
                    current -= (width - run) * (top - stack[-1][1])
                stack.append((run, i))
                column_sums[j] = current
            total += column_sums[j]
        previous = row
    return total


def max_independent_suspects(accusations: Sequence[int]) -> int:
    """Return how many people a greedy choice can mark as mobsters when person
    ``i`` (from 1) accuses ``accusations[i - 1]`` and no accuser and accused are
    both mobsters."""
    n = len(accusations)
    incoming: list[list[int]] = [[] for _ in range(n + 1)]
    for accuser, accused in enumerate(accusations, 1):
        if not 1 <= accused <= n:
            raise ValueError(f"person {accused} outside 1..{n}")
        if accused == accuser:
            raise ValueError(f"person {accuser} accuses themselves")
        incoming[accused].append(accuser)
    neighbours = [[]] + [[accused, *incoming[i]] for i, accused in enumerate(accusations, 1)]
    degree = [len(links) for links in neighbours]
    removed = [False] * (n + 1)
    heap = [(degree[i], -i) for i in range(1, n + 1)]
    heapq.heapify(heap)
    chosen = 0
    while heap:
        _, negative = heapq.heappop(heap)
        v = -negative
        if removed[v]:
            continue
        removed[v] = True
        chosen += 1
        for j in neighbours[v]:
            if removed[j]:
                continue
            for k in neighbours[j]:
                if removed[k]:
                    continue
                degree[k] -= 1
                heapq.heappush(heap, (degree[k], -k))
            removed[j] = True
    return chosen


def _merged_size(pairs: Iterable[tuple[int, int]], size: list[int]) -> int:
    parent: dict[int, int] = {}
    total: dict[int, int] = {}

    def root(x: int) -> int:
        if x not in parent:
            parent[x] = x
            total[x] = size[x]
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    largest = 0
    for a, b in pairs:
        ra, rb = root(a), root(b)
        if ra == rb:
            continue
        if total[ra] < total[rb]:
            ra, rb = rb, ra
        parent[rb] = ra
        total[ra] += total[rb]
        largest = max(largest, total[ra])
    return largest


def largest_simultaneous_region(
    heights: Sequence[Sequence[float]], growth: Sequence[Sequence[float]]
) -> int:
    """Return the largest connected region of equal height at any single moment,
    each cell starting at ``heights`` and growing by ``growth`` per unit of time."""
    h = [list(row) for row in heights]
    g = [list(row) for row in growth]
    n = len(h)
    if n == 0 or len(g) != n or any(len(row) != n for row in (*h, *g)):
        raise ValueError("heights and growth must be equal square grids")

    parent = list(range(n * n))
    size = [1] * (n * n)

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(a: int, b: int) -> None:
        a, b = find(a), find(b)
        if a == b:
            return
        if size[a] < size[b]:
            a, b = b, a
        parent[b] = a
        size[a] += size[b]

    events: list[tuple[Fraction, int, int]] = []
    for i in range(n):
        for j in range(n):
            for a, b in ((i + 1, j), (i, j + 1)):
                if a >= n or b >= n:
                    continue
                h1, h2, g1, g2 = h[i][j], h[a][b], g[i][j], g[a][b]
                if (h1 < h2 and g1 > g2) or (h1 > h2 and g1 < g2) or h1 == h2:
                    if g1 == g2:
                        union(i * n + j, a * n + b)
                    else:
                        moment = Fraction(h1 - h2) / Fraction(g2 - g1)
                        events.append((moment, i * n + j, a * n + b))

    best = max(size[find(x)] for x in range(n * n))
    for _, group in groupby(sorted(events), key=itemgetter(0)):
        pairs = [(find(a), find(b)) for _, a, b in group]
        best = max(best, _merged_size(pairs, size))
    return best


def min_magic_path(magic: Sequence[int], edges: Iterable[tuple[int, int]]) -> Fraction:
    """Return the least product of magic values divided by node count over all
    paths of the tree; nodes are numbered from 1."""
    n = len(magic)
    if n == 0:
        raise ValueError("the tree needs at least one node")
    if any(value < 1 for value in magic):
        raise ValueError("magic values must be positive")
    m = [0, *magic]
    adj = _tree(n, edges)
    order, parent = _preorder(adj, 1)
    down_ones = [-1] * (n + 1)
    down_two = [-1] * (n + 1)
    best: Fraction | None = None

    def consider(num: int, den: int) -> None:
        nonlocal best
        value = Fraction(num, den)
        if best is None or value < best:
            best = value

    for v in reversed(order):
        mv = m[v]
        consider(mv, 1)
        if mv >= 3:
            continue
        ones = two = -1
        z1 = z2 = o1 = o2 = -1
        idz = ido = -1
        for w in adj[v]:
            if w == parent[v]:
                continue
            d0, d1 = down_ones[w], down_two[w]
            if d0 != -1:
                if mv == 2:
                    two = max(two, d0 + 1)
                    consider(2, two)
                else:
                    ones = max(ones, d0 + 1)
                    consider(1, ones)
                if d0 > z1:
                    z2 = z1
                    z1, idz = d0, w
                elif d0 > z2:
                    z2 = d0
            if d1 != -1:
                if mv == 1:
                    two = max(two, d1 + 1)
                    consider(2, two)
                if d1 > o1:
                    o2 = o1
                    o1, ido = d1, w
                elif d1 > o2:
                    o2 = d1
        if mv == 1:
            if ido != idz:
                if z1 != -1 and o1 != -1:
                    consider(2, 1 + z1 + o1)
            else:
                if z1 != -1 and o2 != -1:
                    consider(2, 1 + z1 + o2)
                if z2 != -1 and o1 != -1:
                    consider(2, 1 + z2 + o1)
            if z1 != -1 and z2 != -1:
                consider(1, 1 + z1 + z2)
            ones = max(ones, 1)
        else:
            if z1 != -1 and z2 != -1:
                consider(2, 1 + z1 + z2)
            two = max(two, 1)
        down_ones[v] = ones
        down_two[v] = two
    return best


def karte_arrangement(cards: Sequence[int], k: int) -> list[int] | None:
    """Order the cards so that exactly ``k`` of them are claimed correctly, or
    return None when that cannot be done."""
    n = len(cards)
    if not 0 <= k <= n:
        raise ValueError(f"k must lie in 0..{n}")
    ordered = sorted(cards)
    low, high = ordered[: n - k], ordered[n - k :]
    if any(value < rank for rank, value in enumerate(high, 1)):
        return None
    if low and low[-1] > k:
        return None
    return low[::-1] + high[::-1]