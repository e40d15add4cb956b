"""Dynamic-programming solutions to two interview puzzles."""

from __future__ import annotations

from collections.abc import Sequence


def _encoded_length(run: int) -> int:
    if run <= 1:
        return run
    if run <= 9:
        return 2
    if run == 100:
        return 4
    return 3


def _relax(table: dict, key: tuple, cost: int) -> None:
    if cost < table.get(key, cost + 1):
        table[key] = cost


def optimal_compression_length(s: str, k: int) -> int:
    """Return the shortest run-length encoding of ``s`` after deleting at most ``k``
    characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    # (deletions used, letter of the open run, its length) -> cost of the closed runs
    states: dict[tuple[int, str, int], int] = {(0, "", 0): 0}
    for ch in s:
        following: dict[tuple[int, str, int], int] = {}
        for (used, last, run), cost in states.items():
            if used < k:
                _relax(following, (used + 1, last, run), cost)
            if ch == last:
                _relax(following, (used, last, run + 1), cost)
            else:
                _relax(following, (used, ch, 1), cost + _encoded_length(run))
        states = following
    return min(cost + _encoded_length(run) for (_, _, run), cost in states.items())


def min_difficulty(job_difficulty: Sequence[int], d: int) -> int:
    """Return the least total difficulty of scheduling the jobs, in order, over
    ``d`` days with at least one job a day; a day costs its hardest job."""
    jobs = list(job_difficulty)
    n = len(jobs)
    if d < 1 or n < d:
        raise ValueError("every day needs at least one job")
    infinity = float("inf")
    best: list[float] = [0] + [infinity] * n
    for day in range(1, d + 1):
        current: list[float] = [infinity] * (n + 1)
        for end in range(day, n + 1):
            hardest = jobs[end - 1]
            for start in range(end, day - 1, -1):
                hardest = max(hardest, jobs[start - 1])
                current[end] = min(current[end], best[start - 1] + hardest)
        best = current
    return int(best[n])