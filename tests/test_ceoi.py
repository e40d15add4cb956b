from itertools import combinations

import pytest

from olympiad.ceoi import count_reachable_east, find_treasure, guess_costumes


def test_one_way_road_reaches_east():
    assert count_reachable_east(10, [(0, 0), (10, 0)], [(1, 2, 1)]) == [1]


def test_road_pointing_west_reaches_nothing():
    assert count_reachable_east(10, [(0, 0), (10, 0)], [(2, 1, 1)]) == [0]


def test_two_way_road_reaches_east():
    result = count_reachable_east(10, [(0, 0), (10, 0)], [(2, 1, 2)])
    assert result == count_reachable_east(10, [(0, 0), (10, 0)], [(1, 2, 1)])


def test_no_roads_gives_zero_for_every_west_junction():
    points = [(0, 0), (0, 1), (0, 2), (10, 0), (10, 1)]
    result = count_reachable_east(10, points, [])
    assert result == [0] * 3


def test_cycle_is_crossed():
    points = [(0, 0), (5, 0), (5, 1), (10, 0), (10, 3)]
    roads = [(1, 2, 1), (2, 3, 2), (3, 4, 1), (2, 5, 1)]
    result = count_reachable_east(10, points, roads)
    assert result == [sum(1 for x, _ in points if x == 10)]


def test_results_run_north_to_south():
    points = [(0, 5), (0, 1), (10, 5), (10, 1)]
    roads = [(1, 3, 1), (1, 4, 1), (2, 4, 1)]
    result = count_reachable_east(10, points, roads)
    assert result == [2, 1]


def test_counts_never_exceed_east_junctions():
    points = [(0, 0), (0, 4), (3, 2), (10, 1), (10, 3), (10, 5)]
    roads = [(1, 3, 1), (2, 3, 1), (3, 4, 1), (3, 6, 1), (5, 3, 1)]
    result = count_reachable_east(10, points, roads)
    assert len(result) == 2
    assert all(0 <= value <= 3 for value in result)


def test_bad_road_is_rejected():
    with pytest.raises(ValueError):
        count_reachable_east(10, [(0, 0), (10, 0)], [(1, 3, 1)])
    with pytest.raises(ValueError):
        count_reachable_east(10, [(0, 0), (10, 0)], [(1, 2, 3)])


def _counter(treasures, calls):
    def count(r1, c1, r2, c2):
        calls.append((r1, c1, r2, c2))
        return sum(1 for r, c in treasures if r1 <= r <= r2 and c1 <= c <= c2)

    return count


@pytest.mark.parametrize(
    "n, treasures",
    [
        (1, {(1, 1)}),
        (2, {(1, 2), (2, 1)}),
        (3, {(1, 1), (2, 2), (3, 3), (1, 3)}),
        (4, {(4, 4), (1, 1), (2, 3)}),
        (5, {(r, c) for r in range(1, 6) for c in range(1, 6) if (r + c) % 2}),
    ],
)
def test_find_treasure_recovers_grid(n, treasures):
    calls = []
    assert find_treasure(n, _counter(treasures, calls)) == sorted(treasures)
    assert len(calls) <= n * n


def test_find_treasure_empty_grid():
    assert find_treasure(3, _counter(set(), [])) == []


def test_find_treasure_rejects_empty_size():
    with pytest.raises(ValueError):
        find_treasure(0, _counter(set(), []))


@pytest.mark.parametrize(
    "costumes",
    [[3, 1, 3, 2, 1], [7], [1, 1, 1, 1], [1, 2, 3, 4], [5, 4, 5, 4, 6, 6, 5]],
)
def test_guess_costumes_partitions_people(costumes):
    def ask(people):
        return len({costumes[p - 1] for p in people})

    labels = guess_costumes(len(costumes), ask)
    assert len(labels) == len(costumes)
    for a, b in combinations(range(len(costumes)), 2):
        assert (labels[a] == labels[b]) == (costumes[a] == costumes[b])
    assert set(labels) == set(range(1, len(set(costumes)) + 1))


def test_guess_costumes_rejects_nobody():
    with pytest.raises(ValueError):
        guess_costumes(0, lambda people: 0)