"""Offline distinct-value range queries."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence


class _Fenwick:
    """Prefix sums over a fixed number of slots."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        index += 1
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix(self, count: int) -> int:
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def span(self, low: int, high: int) -> int:
        return self.prefix(high + 1) - self.prefix(low)


def distinct_value_counts(
    values: Sequence[Hashable], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer, for each (a, b) with positions from 1, how many distinct values
    lie in ``values[a..b]``."""
    n = len(values)
    queries = list(queries)
    for a, b in queries:
        if a < 1 or b > n:
            raise ValueError(f"query ({a}, {b}) leaves the range 1..{n}")

    following: list[int | None] = [None] * n
    last: dict[Hashable, int] = {}
    tree = _Fenwick(n)
    for i, value in enumerate(values):
        if value in last:
            following[last[value]] = i
        else:
            tree.add(i, 1)
        last[value] = i

    answers = [0] * len(queries)
    start = 0
    for (a, b), slot in sorted((query, slot) for slot, query in enumerate(queries)):
        while start < a - 1:
            nxt = following[start]
            if nxt is not None:
                tree.add(nxt, 1)
            start += 1
        answers[slot] = tree.span(a - 1, b - 1) if a <= b else 0
    return answers