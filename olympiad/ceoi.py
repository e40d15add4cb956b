"""Solutions to a selection of Central European Olympiad in Informatics tasks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence


def _strong_components(adj: list[list[int]]) -> tuple[list[int], int]:
    """Label strongly connected components.

    Components are numbered so that every edge between two of them leads to a
    lower number.
    """
    n = len(adj)
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    comp = [-1] * n
    stack: list[int] = []
    counter = 0
    count = 0
    for root in range(n):
        if index[root] != -1:
            continue
        index[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, iter(adj[root]))]
        while work:
            v, neighbours = work[-1]
            for w in neighbours:
                if index[w] == -1:
                    index[w] = low[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack[w] = True
                    work.append((w, iter(adj[w])))
                    break
                if on_stack[w]:
                    low[v] = min(low[v], index[w])
            else:
                work.pop()
                if work:
                    u = work[-1][0]
                    low[u] = min(low[u], low[v])
                if low[v] == index[v]:
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        comp[w] = count
                        if w == v:
                            break
                    count += 1
    return comp, count


def count_reachable_east(
    max_x: int,
    points: Sequence[tuple[int, int]],
    roads: Iterable[tuple[int, int, int]],
) -> list[int]:
    """For every western junction (x == 0), from north to south, count the eastern
    junctions (x == max_x) it can reach.

    Junctions are numbered from 1; a road (a, b, 1) runs one way from a to b and a
    road (a, b, 2) runs both ways.
    """
    n = len(points)
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b, kind in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) leaves the range 1..{n}")
        if kind not in (1, 2):
            raise ValueError(f"road kind must be 1 or 2, not {kind}")
        adj[a - 1].append(b - 1)
        if kind == 2:
            adj[b - 1].append(a - 1)

    west = [i for i, (x, _) in enumerate(points) if x == 0]
    reached = [False] * n
    for i in west:
        reached[i] = True
    queue = deque(west)
    while queue:
        v = queue.popleft()
        for w in adj[v]:
            if not reached[w]:
                reached[w] = True
                queue.append(w)

    east = sorted((y, i) for i, (x, y) in enumerate(points) if x == max_x and reached[i])
    comp, count = _strong_components(adj)
    low: list[int | None] = [None] * count
    high: list[int | None] = [None] * count
    for rank, (_, i) in enumerate(east, 1):
        c = comp[i]
        low[c] = rank if low[c] is None else min(low[c], rank)
        high[c] = rank if high[c] is None else max(high[c], rank)

    successors: list[set[int]] = [set() for _ in range(count)]
    for v, targets in enumerate(adj):
        for w in targets:
            if comp[v] != comp[w]:
                successors[comp[v]].add(comp[w])
    for c in range(count):
        for d in successors[c]:
            if low[d] is not None:
                low[c] = low[d] if low[c] is None else min(low[c], low[d])
                high[c] = high[d] if high[c] is None else max(high[c], high[d])

    starts = sorted({(-points[i][1], comp[i]) for i in west})
    return [0 if low[c] is None else high[c] - low[c] + 1 for _, c in starts]


def find_treasure(
    n: int, count_treasure: Callable[[int, int, int, int], int]
) -> list[tuple[int, int]]:
    """Locate every treasure cell of an ``n`` by ``n`` grid.

    ``count_treasure(r1, c1, r2, c2)`` reports the treasures inside a rectangle;
    every query covers at least the centre of the grid. Cells come back in
    row-major order, numbered from 1.
    """
    if n < 1:
        raise ValueError("the grid needs at least one cell")
    half = n // 2
    pfx = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n, 0, -1):
        for j in range(n, 0, -1):
            if i > half and j > half:
                pfx[i][j] = count_treasure(1, 1, i, j)
            elif i > half:
                pfx[i][j] = pfx[i][n] - count_treasure(1, j + 1, i, n)
            elif j > half:
                pfx[i][j] = pfx[n][j] - count_treasure(i + 1, 1, n, j)
            else:
                pfx[i][j] = pfx[n][j] + pfx[i][n] - (pfx[n][n] - count_treasure(i + 1, j + 1, n, n))
    return [
        (i, j)
        for i in range(1, n + 1)
        for j in range(1, n + 1)
        if pfx[i][j] - pfx[i - 1][j] - pfx[i][j - 1] + pfx[i - 1][j - 1]
    ]


def guess_costumes(n: int, ask: Callable[[list[int]], int]) -> list[int]:
    """Work out which of ``n`` people share costumes.

    ``ask(people)`` returns how many distinct costumes the listed people (numbered
    from 1) wear. Returns a label per person; two people share a label exactly when
    they share a costume.
    """
    if n < 1:
        raise ValueError("there must be at least one person")
    kinds = ask(list(range(1, n + 1)))
    labels: list[int | None] = [None] * (n + 1)
    labels[1] = 1
    firsts = [1]
    previous = 1
    for i in range(2, n + 1):
        current = ask(list(range(1, i + 1)))
        if current != previous:
            labels[i] = labels[firsts[-1]] + 1
            firsts.append(i)
        previous = current

    for i in range(1, n + 1):
        if labels[i] is not None:
            continue
        low, high = 1, kinds
        while low < high:
            mid = (low + high) // 2
            if ask([i, *firsts[:mid]]) == mid:
                high = mid
            else:
                low = mid + 1
        labels[i] = low
    return labels[1:]