"""Solutions to a selection of Baltic Olympiad in Informatics tasks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList

BRACKET_MOD = 1_000_000_009
UNSET_FLOW = 1_000_000_001


def count_bracket_sequences(s: str) -> int:
    """Count the balanced sequences obtainable by turning some '(' into ')',
    modulo 1000000009. The first character always opens."""
    n = len(s)
    if n == 0:
        raise ValueError("the bracket string must not be empty")
    depths = {1: 1}
    for ch in s[1:]:
        following: dict[int, int] = {}
        for depth, ways in depths.items():
            if ch == "(":
                following[depth + 1] = (following.get(depth + 1, 0) + ways) % BRACKET_MOD
            if depth > 0:
                following[depth - 1] = (following.get(depth - 1, 0) + ways) % BRACKET_MOD
        depths = following
    return depths.get(0, 0)


def pipe_flows(temps: Sequence[int], edges: Sequence[tuple[int, int]]) -> list[int] | None:
    """Return the flow through each pipe, or None when it is not uniquely determined.

    Nodes are numbered from 1; each node's value is half the sum of its pipes' flows.
    """
    n = len(temps)
    m = len(edges)
    t = [0, *temps]
    ends = [(0, 0), *edges]
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    degree = [0] * (n + 1)
    for index, (a, b) in enumerate(edges, 1):
        adj[a].append((b, index))
        adj[b].append((a, index))
        degree[a] += 1
        degree[b] += 1
    flows = [UNSET_FLOW] * (m + 1)
    if m not in (n - 1, n):
        return None

    visited = [False] * (n + 1)
    queue = deque(i for i in range(1, n + 1) if degree[i] == 1)
    remaining = n
    while queue:
        node = queue.popleft()
        if visited[node]:
            continue
        visited[node] = True
        remaining -= 1
        if degree[node] == 0:
            continue
        for other, index in adj[node]:
            if flows[index] == UNSET_FLOW:
                flows[index] = 2 * t[node]
                t[other] -= t[node]
                degree[other] -= 1
                if not visited[other] and degree[other] == 1:
                    queue.append(other)

    if remaining != 0 and remaining % 2 == 0:
        return None

    unvisited = [i for i in range(1, n + 1) if not visited[i]]
    if not unvisited:
        return flows[1:]
    current = start = unvisited[-1]
    previous = -1
    first_edge = 0
    alternating = 0
    walk: list[int] = []
    while True:
        for other, index in adj[current]:
            if flows[index] == UNSET_FLOW and previous not in ends[index]:
                previous, current = current, other
                if start != current:
                    alternating = t[other] - alternating
                if first_edge == 0:
                    first_edge = index
                break
        else:
            return None
        walk.append(current)
        if current == start:
            break

    last = flows[first_edge] = t[start] - alternating
    if last % 2:
        return None
    before = walk.pop()
    while walk:
        node = walk.pop()
        for _, index in adj[node]:
            if before in ends[index]:
                last = flows[index] = 2 * (t[before] - last // 2)
                if last % 2:
                    return None
        before = node
    return flows[1:]


def _tree(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) leaves the range 1..{n}")
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _preorder(adj: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    parent = [-1] * len(adj)
    order: list[int] = []
    stack = [root]
    while stack:
        v = stack.pop()
        order.append(v)
        for w in reversed(adj[v]):
            if w != parent[v]:
                parent[w] = v
                stack.append(w)
    return order, parent


def net_connections(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest extra links that pair up the leaves of a tree so that
    removing any single edge keeps it connected."""
    if n < 2:
        raise ValueError("the network needs at least two nodes")
    adj = _tree(n, edges)
    order, parent = _preorder(adj, 1)
    state: list[tuple[int, int]] = [(2, -1)] * (n + 1)
    pairs: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for v in reversed(order):
        p = parent[v]
        if len(adj[v]) == 1 and adj[v][0] == p:
            state[v] = (1, v)
            continue
        kind, end = 2, -1
        for w in adj[v]:
            if w == p:
                continue
            if kind == 2:
                pairs[v], pairs[w] = pairs[w], pairs[v]
                kind, end = state[w]
                continue
            child_kind, child_end = state[w]
            if kind == 0:
                if child_kind == 0:
                    a = pairs[v].pop()
                    b = pairs[w].pop()
                    pairs[v].append((a[0], b[0]))
                    pairs[w].append((a[1], b[1]))
                else:
                    a = pairs[v].pop()
                    pairs[v].append((a[0], child_end))
                    kind, end = 1, a[1]
            elif child_kind == 0:
                b = pairs[w].pop()
                pairs[w].append((b[0], end))
                end = b[1]
            else:
                pairs[v].append((end, child_end))
                kind = 0
            if len(pairs[v]) < len(pairs[w]):
                pairs[v], pairs[w] = pairs[w], pairs[v]
        state[v] = (kind, end)

    root_kind, root_end = state[1]
    attach_root = len(adj[1]) == 1 and root_kind == 0
    result: list[tuple[int, int]] = []
    for bucket in pairs[1:]:
        for a, b in bucket:
            if attach_root:
                result.extend([(a, 1), (b, 1)])
                attach_root = False
            else:
                result.append((a, b))
    if root_kind:
        result.append((root_end, 1))
    return result


def city_destination(values: Sequence[int], edges: Iterable[tuple[int, int]], k: int) -> int:
    """Return where one ends after ``k`` moves from city 1, each move going to the
    city maximising its value minus distance (lowest number on ties)."""
    n = len(values)
    if n < 2:
        raise ValueError("there must be at least two cities")
    a = [0, *values]
    adj = _tree(n, edges)
    order, parent = _preorder(adj, 1)
    best: list[tuple[int, int] | None] = [None] * (n + 1)
    second: list[tuple[int, int] | None] = [None] * (n + 1)

    def offer(v: int, node: int, score: int) -> None:
        top = best[v]
        if top is None or score > top[1] or (score == top[1] and node < top[0]):
            second[v] = top
            best[v] = (node, score)
            return
        runner = second[v]
        if runner is None or score > runner[1] or (score == runner[1] and node < runner[0]):
            second[v] = (node, score)

    for v in reversed(order):
        for w in adj[v]:
            if w == parent[v]:
                continue
            for cand in (best[w], second[w]):
                if cand is not None:
                    offer(v, cand[0], cand[1] - 1)
            offer(v, w, a[w] - 1)

    def node_of(cand: tuple[int, int] | None) -> int | None:
        return None if cand is None else cand[0]

    for v in order:
        p = parent[v]
        if p == -1:
            continue
        for cand in (best[p], second[p]):
            if cand is not None and cand[0] not in (v, node_of(best[v]), node_of(second[v])):
                offer(v, cand[0], cand[1] - 1)
        offer(v, p, a[p] - 1)

    seq: list[int] = []
    seen: set[int] = set()
    current = 1
    while current not in seen:
        seq.append(current)
        seen.add(current)
        current = best[current][0]
    loop_start = seq.index(current) + 1
    loop_size = len(seq) - loop_start + 1
    steps = k + 1
    if steps <= len(seq):
        return seq[steps - 1]
    steps = (steps - (loop_start - 1)) % loop_size or loop_size
    return seq[loop_start - 1 + steps - 1]


def min_dna_window_binary_search(
    sequence: Sequence[int], alphabet_size: int, requirements: Iterable[tuple[int, int]]
) -> int | None:
    """Return the shortest window holding the required counts of each base, found by
    binary search on its length; None when none exists."""
    needed = dict(requirements)
    n = len(sequence)
    if any(not 0 <= base < alphabet_size for base in needed):
        raise ValueError("required base outside the alphabet")

    def fits(size: int) -> bool:
        if size == n + 1:
            return True
        counts = [0] * alphabet_size
        for base, count in needed.items():
            counts[base] = count
        satisfied = alphabet_size - len(needed)
        for base in sequence[:size]:
            counts[base] -= 1
            if counts[base] == 0:
                satisfied += 1
        if satisfied == alphabet_size:
            return True
        for leaving, entering in zip(sequence, sequence[size:]):
            counts[leaving] += 1
            if counts[leaving] == 1:
                satisfied -= 1
            counts[entering] -= 1
            if counts[entering] == 0:
                satisfied += 1
            if satisfied == alphabet_size:
                return True
        return False

    low, high = 1, n + 1
    while low < high:
        mid = (low + high) // 2
        if fits(mid):
            high = mid
        else:
            low = mid + 1
    return None if low == n + 1 else low


def min_dna_window(
    sequence: Sequence[int], requirements: Iterable[tuple[int, int]]
) -> int | None:
    """Return the shortest window holding the required counts of each base, found
    with two pointers; None when none exists."""
    missing: dict[int, int] = dict(requirements)
    required = len(missing)
    n = len(sequence)
    satisfied = 0
    best: int | None = None
    right = 0
    for left in range(n):
        while right < n and satisfied != required:
            base = sequence[right]
            right += 1
            if missing.get(base, 0) == 1:
                satisfied += 1
            missing[base] = missing.get(base, 0) - 1
        if satisfied == required:
            width = right - left
            best = width if best is None else min(best, width)
        base = sequence[left]
        if missing.get(base, 0) == 0:
            satisfied -= 1
        missing[base] = missing.get(base, 0) + 1
    return best


def count_colourful_paths(
    colours: Sequence[int], edges: Iterable[tuple[int, int]], k: int
) -> int:
    """Count directed paths of two or more nodes whose colours (1..k) are all distinct."""
    n = len(colours)
    if any(not 1 <= c <= k for c in colours):
        raise ValueError(f"colours must lie in 1..{k}")
    bit = [0] + [1 << (c - 1) for c in colours]
    adj = _tree(n, edges)
    layer: list[dict[int, int]] = [{} for _ in range(n + 1)]
    for a in range(1, n + 1):
        for b in adj[a]:
            if bit[a] != bit[b]:
                mask = bit[a] | bit[b]
                layer[a][mask] = layer[a].get(mask, 0) + 1
    total = sum(sum(counts.values()) for counts in layer)
    for _ in range(3, k + 1):
        following: list[dict[int, int]] = [{} for _ in range(n + 1)]
        for i in range(1, n + 1):
            for j in adj[i]:
                for mask, ways in layer[j].items():
                    if not mask & bit[i]:
                        grown = mask | bit[i]
                        following[i][grown] = following[i].get(grown, 0) + ways
        layer = following
        total += sum(sum(counts.values()) for counts in layer)
    return total


def min_love_polygon_changes(relations: Sequence[tuple[str, str]]) -> int | None:
    """Return the changes needed so everyone is in a mutual pair, following the
    greedy matching on the love graph; None when the count of people is odd."""
    n = len(relations)
    index: dict[str, int] = {}
    for i, (name, _) in enumerate(relations, 1):
        index.setdefault(name, i)
    try:
        target = [0] + [index[loved] for _, loved in relations]
    except KeyError as err:
        raise ValueError(f"unknown person {err.args[0]!r}") from None
    if n % 2:
        return None

    paired = [False] + [target[target[i]] == i and target[i] != i for i in range(1, n + 1)]
    degree = [0] * (n + 1)
    adj: list[set[int]] = [set() for _ in range(n + 1)]
    for i in range(1, n + 1):
        j = target[i]
        if i == j or paired[i] or paired[j]:
            continue
        degree[i] += 1
        degree[j] += 1
        adj[i].add(j)
        adj[j].add(i)

    queue = SortedList((degree[i], i) for i in range(1, n + 1) if not paired[i])
    done = [False] * (n + 1)

    def detach(node: int) -> None:
        for other in sorted(adj[node]):
            if not done[other]:
                queue.discard((degree[other], other))
                adj[other].discard(node)
                degree[other] -= 1
                queue.add((degree[other], other))

    changes = 0
    while queue:
        count, node = queue.pop(0)
        done[node] = True
        changes += 1
        if count:
            partner = min(sorted(adj[node]), key=lambda x: degree[x])
            queue.discard((degree[partner], partner))
            done[partner] = True
            detach(partner)
        detach(node)
    return changes