import pytest

from olympiad.joi import robot_min_cost


def test_single_edge_of_unique_colour_is_free():
    assert robot_min_cost(2, [(1, 2, 1, 5)]) == 0


def test_cheaper_conflicting_edge_is_recoloured():
    assert robot_min_cost(3, [(1, 2, 1, 5), (1, 3, 1, 7)]) == 5


def test_unreachable_target():
    assert robot_min_cost(3, [(1, 2, 1, 4)]) is None


def test_start_is_target():
    assert robot_min_cost(1, []) == 0


def test_cost_never_exceeds_total_weight():
    edges = [(1, 2, 1, 3), (1, 3, 1, 4), (2, 4, 2, 6), (3, 4, 2, 1), (2, 3, 1, 2), (4, 5, 2, 9)]
    result = robot_min_cost(5, edges)
    assert result is not None
    assert 0 <= result <= sum(weight for *_, weight in edges)


def test_adding_parallel_colours_does_not_block():
    base = [(1, 2, 1, 5), (2, 3, 2, 5)]
    with_extra = base + [(1, 3, 3, 100)]
    assert robot_min_cost(3, with_extra) <= robot_min_cost(3, base) + 100


def test_edge_outside_range_is_rejected():
    with pytest.raises(ValueError):
        robot_min_cost(2, [(1, 3, 1, 1)])