"""Solutions to a selection of International Olympiad in Informatics tasks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache, reduce
from itertools import chain
from operator import xor

GONDOLA_MOD = 1_000_000_009
BOARD_SIZE = 64

_START = 0
_END = 1


def min_palindrome_insertions(s: str) -> int:
    """Return the fewest characters to insert so that ``s`` reads as a palindrome."""
    n = len(s)
    if n < 2:
        return 0
    two_shorter = [0] * (n + 1)
    one_shorter = [0] * n
    for length in range(2, n + 1):
        current = []
        for i in range(n - length + 1):
            j = i + length - 1
            best = min(one_shorter[i], one_shorter[i + 1]) + 1
            if s[i] == s[j]:
                best = min(best, two_shorter[i + 1])
            current.append(best)
        two_shorter, one_shorter = one_shorter, current
    return one_shorter[0]


def valley_route(c: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Find a path through all ``c`` points on a circle using only the given edges
    without crossings.

    Points are numbered 1..c in circular order. Returns the visiting order, or
    None when no such route exists.
    """
    if c < 1:
        raise ValueError("there must be at least one point")
    adjacent: set[tuple[int, int]] = set()
    for a, b in edges:
        if not (1 <= a <= c and 1 <= b <= c):
            raise ValueError(f"edge ({a}, {b}) leaves the range 1..{c}")
        adjacent.add((a, b))
        adjacent.add((b, a))

    def step(x: int, a: int) -> int:
        return (x + a - 1) % c + 1

    def back(x: int, a: int) -> int:
        return (x - a - 1) % c + 1

    # tables[side][i][j] is None when the clockwise arc i..j cannot be covered by a
    # path starting at that side's end; otherwise it names the side the rest starts from.
    size = c + 1
    from_start: list[list[int | None]] = [[None] * size for _ in range(size)]
    from_end: list[list[int | None]] = [[None] * size for _ in range(size)]
    for i in range(1, c + 1):
        from_start[i][i] = from_end[i][i] = _START

    for length in range(2, c + 1):
        for i in range(1, c + 1):
            j = step(i, length - 1)
            after_i = step(i, 1)
            before_j = back(j, 1)
            if from_start[after_i][j] is not None and (after_i, i) in adjacent:
                from_start[i][j] = _START
            if from_end[after_i][j] is not None and (j, i) in adjacent:
                from_start[i][j] = _END
            if from_start[i][before_j] is not None and (i, j) in adjacent:
                from_end[i][j] = _START
            if from_end[i][before_j] is not None and (before_j, j) in adjacent:
                from_end[i][j] = _END

    tables = (from_start, from_end)
    for i in range(1, c + 1):
        j = step(i, c - 1)
        for side in (_START, _END):
            if tables[side][i][j] is not None:
                return _trace_route(tables, i, j, side, step, back)
    return None


def _trace_route(tables, i, j, side, step, back) -> list[int]:
    route = []
    while i != j and tables[side][i][j] is not None:
        next_side = tables[side][i][j]
        if side == _START:
            route.append(i)
            i = step(i, 1)
        else:
            route.append(j)
            j = back(j, 1)
        side = next_side
    route.append(i)
    return route


def raisins_min_payment(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total paid to cut a chocolate grid into single cells,
    each cut costing the number of raisins on the piece being cut."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0] or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be a non-empty rectangle")
    n, m = len(rows), len(rows[0])
    prefix = [[0] * (m + 1) for _ in range(n + 1)]
    for i, row in enumerate(rows, 1):
        for j, value in enumerate(row, 1):
            prefix[i][j] = value + prefix[i - 1][j] + prefix[i][j - 1] - prefix[i - 1][j - 1]

    def raisins(top: int, left: int, bottom: int, right: int) -> int:
        return (
            prefix[bottom][right]
            - prefix[bottom][left - 1]
            - prefix[top - 1][right]
            + prefix[top - 1][left - 1]
        )

    @lru_cache(maxsize=None)
    def cost(top: int, left: int, bottom: int, right: int) -> int:
        if top == bottom and left == right:
            return 0
        horizontal = (
            cost(top, left, r, right) + cost(r + 1, left, bottom, right)
            for r in range(top, bottom)
        )
        vertical = (
            cost(top, left, bottom, col) + cost(top, col + 1, bottom, right)
            for col in range(left, right)
        )
        return raisins(top, left, bottom, right) + min(chain(horizontal, vertical))

    return cost(1, 1, n, m)


def _post_order_loads(
    populations: Sequence[int], sources: Sequence[int], destinations: Sequence[int]
) -> list[tuple[int, int]]:
    """Return (city, worst incoming traffic) pairs in depth-first post-order from city 0."""
    n = len(populations)
    if n == 0:
        raise ValueError("there must be at least one city")
    if len(sources) != n - 1 or len(destinations) != n - 1:
        raise ValueError("a tree of n cities needs exactly n - 1 roads")
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in zip(sources, destinations):
        neighbours[a].append(b)
        neighbours[b].append(a)

    total = sum(populations)
    subtree = list(populations)
    heaviest = [0] * n
    order: list[tuple[int, int]] = []
    stack = [(0, -1, iter(neighbours[0]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child != parent:
                stack.append((child, node, iter(neighbours[child])))
                break
        else:
            stack.pop()
            order.append((node, max(heaviest[node], total - subtree[node])))
            if parent >= 0:
                subtree[parent] += subtree[node]
                heaviest[parent] = max(heaviest[parent], subtree[node])
    return order


def locate_centre(
    populations: Sequence[int], sources: Sequence[int], destinations: Sequence[int]
) -> int:
    """Return the city minimising the largest traffic into it; on ties, the one
    finished first by a depth-first search from city 0."""
    order = _post_order_loads(populations, sources, destinations)
    return min(order, key=lambda item: item[1])[0]


def locate_centre_by_dfs(
    populations: Sequence[int], sources: Sequence[int], destinations: Sequence[int]
) -> int:
    """Return the city minimising the largest traffic into it; on ties, the lowest."""
    order = _post_order_loads(populations, sources, destinations)
    return min((load, node) for node, load in order)[1]


class TypeWriter:
    """A text editor with typing, undoable commands and letter lookup by position."""

    def __init__(self) -> None:
        self._letters = [""]
        self._depths = [0]
        self._jumps: list[list[int]] = [[0]]
        self._states = [0]

    def type_letter(self, letter: str) -> None:
        """Append a letter to the end of the text."""
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError("a single character is required")
        parent = self._states[-1]
        depth = self._depths[parent] + 1
        jumps = [parent]
        while 1 << len(jumps) <= depth - 1:
            jumps.append(self._jumps[jumps[-1]][len(jumps) - 1])
        node = len(self._letters)
        self._letters.append(letter)
        self._depths.append(depth)
        self._jumps.append(jumps)
        self._states.append(node)

    def undo_commands(self, count: int) -> None:
        """Undo the last ``count`` commands; an undo is itself a command."""
        if not 0 <= count < len(self._states):
            raise ValueError(f"cannot undo {count} commands")
        self._states.append(self._states[-count - 1])

    def get_letter(self, position: int) -> str:
        """Return the letter at ``position`` (0-based) in the current text."""
        node = self._states[-1]
        depth = self._depths[node]
        if not 0 <= position < depth:
            raise IndexError(f"position {position} outside text of length {depth}")
        remaining = depth - position - 1
        level = 0
        while remaining:
            if remaining & 1:
                node = self._jumps[node][level]
            remaining >>= 1
            level += 1
        return self._letters[node]


def _original_at(start: int, position: int, n: int) -> int:
    return (start + position) % n or n


def valid_gondola(sequence: Sequence[int]) -> bool:
    """Tell whether the circular gondola sequence can arise from replacements."""
    n = len(sequence)
    anchor: tuple[int, int] | None = None
    replaced: set[int] = set()
    for position, value in enumerate(sequence):
        if value <= n:
            if anchor is not None:
                previous_position, previous_value = anchor
                expected = (previous_value + position - previous_position) % n or n
                if expected != value:
                    return False
            anchor = (position, value)
        else:
            if value in replaced:
                return False
            replaced.add(value)
    return True


def gondola_replacement(sequence: Sequence[int]) -> list[int]:
    """Return, in order, the gondola numbers replaced to reach ``sequence``."""
    n = len(sequence)
    start = 1
    for position, value in enumerate(sequence):
        if value <= n:
            start = value - position
            if start <= 0:
                start += n
    replaced = sorted((value, position) for position, value in enumerate(sequence) if value > n)
    if not replaced:
        return []
    highest = replaced[-1][0]
    result = [0] * (highest - n)
    settled: set[int] = set()
    for value, position in replaced[:-1]:
        settled.add(value)
        result[value - n - 1] = _original_at(start, position, n)
    previous = _original_at(start, replaced[-1][1], n)
    for value in range(n + 1, highest + 1):
        if value not in settled:
            result[value - n - 1] = previous
            previous = value
    return result


def count_replacements(sequence: Sequence[int]) -> int:
    """Count replacement sequences producing ``sequence``, modulo 1000000009."""
    if not valid_gondola(sequence):
        return 0
    n = len(sequence)
    replaced = sorted({value for value in sequence if value > n})
    remaining = sum(1 for value in sequence if value > n)
    result = 1
    previous = n
    for done, value in enumerate(replaced):
        result = result * pow(remaining - done, value - previous - 1, GONDOLA_MOD) % GONDOLA_MOD
        previous = value
    if all(value > n for value in sequence):
        result = result * n % GONDOLA_MOD
    return result


def world_peace_min_weight(
    n: int, edges: Iterable[tuple[int, int, int]], requests: Iterable[tuple[int, int]]
) -> int | None:
    """Return the smallest maximum edge weight connecting every requested pair,
    taking edges by increasing weight; None when some pair cannot be joined."""
    parent = list(range(n + 1))
    size = [1] * (n + 1)

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
        if size[a] > size[b]:
            a, b = b, a
        parent[b] = a
        size[a] += size[b]

    pending = iter(sorted(edges, key=lambda edge: edge[2]))
    heaviest = 0
    for a, b in requests:
        while find(a) != find(b):
            edge = next(pending, None)
            if edge is None:
                return None
            u, v, weight = edge
            heaviest = weight
            union(u, v)
    return heaviest


def delivery(k: int, length: int, positions: Sequence[int]) -> int:
    """Return the least time to deliver souvenirs to the sorted ``positions`` on a
    circle of ``length``, carrying at most ``k`` at a time from position 0."""
    if k < 1:
        raise ValueError("capacity must be positive")
    n = len(positions)
    clockwise = [0] * (n + 1)
    for i in range(1, n + 1):
        clockwise[i] = clockwise[max(0, i - k)] + 2 * positions[i - 1]
    counter = [0] * (n + 2)
    for i in range(n, 0, -1):
        counter[i] = counter[min(n + 1, i + k)] + 2 * (length - positions[i - 1])

    best = min(cw + ccw for cw, ccw in zip(clockwise, counter[1:]))
    if n >= k:
        # At most one full lap around the circle is ever useful.
        best = min(
            best,
            min(
                cw + (counter[i + k + 1] if i + k + 1 <= n + 1 else 0) + length
                for i, cw in enumerate(clockwise)
            ),
        )
    return best


def _board_parity(board: Sequence[int]) -> int:
    if len(board) != BOARD_SIZE:
        raise ValueError(f"board must hold {BOARD_SIZE} coins")
    return reduce(xor, (i for i, heads in enumerate(board) if heads), 0)


def coin_flips(board: Sequence[int], c: int) -> list[int]:
    """Return the coins to flip so that ``find_coin`` then points at cell ``c``."""
    if not 0 <= c < BOARD_SIZE:
        raise ValueError(f"cell must lie in 0..{BOARD_SIZE - 1}")
    return [_board_parity(board) ^ c]


def find_coin(board: Sequence[int]) -> int:
    """Return the cell encoded by the heads on the board."""
    return _board_parity(board)