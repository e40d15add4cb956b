import pytest

from fractions import Fraction

from olympiad.coci import (
    count_monochrome_rectangles,
    karte_arrangement,
    largest_simultaneous_region,
    max_independent_suspects,
    min_magic_path,
)


def _transpose(grid):
    return [list(column) for column in zip(*grid)]


def test_distinct_grid_counts_single_cells():
    grid = [[1, 2, 3], [4, 5, 6]]
    assert count_monochrome_rectangles(grid) == 2 * 3


def test_uniform_grid_counts_every_rectangle():
    rows, cols = 2, 3
    grid = [[7] * cols for _ in range(rows)]
    expected = (rows * (rows + 1) // 2) * (cols * (cols + 1) // 2)
    assert count_monochrome_rectangles(grid) == expected


def test_single_uniform_row():
    length = 5
    assert count_monochrome_rectangles([[2] * length]) == length * (length + 1) // 2


@pytest.mark.parametrize(
    "grid",
    [
        [[1, 1, 2], [1, 1, 2], [3, 1, 1]],
        [[1, 1, 1, 1], [1, 2, 2, 1], [1, 2, 2, 1]],
        [[5, 5], [5, 5], [5, 4], [5, 5]],
    ],
)
def test_count_is_unchanged_by_transposition(grid):
    assert count_monochrome_rectangles(grid) == count_monochrome_rectangles(_transpose(grid))


def test_count_rejects_ragged_grid():
    with pytest.raises(ValueError):
        count_monochrome_rectangles([[1, 2], [3]])


def test_mutual_accusers():
    assert max_independent_suspects([2, 1]) == 1


def test_star_of_accusers():
    accusations = [2, 1, 1, 1, 1, 1]
    assert max_independent_suspects(accusations) == len(accusations) - 1


def test_even_cycle_of_accusers():
    accusations = [2, 3, 4, 1]
    assert max_independent_suspects(accusations) == len(accusations) // 2


def test_suspect_count_bounds():
    accusations = [3, 3, 4, 1, 4, 5, 2]
    result = max_independent_suspects(accusations)
    assert 1 <= result <= len(accusations) - 1


def test_self_accusation_is_rejected():
    with pytest.raises(ValueError):
        max_independent_suspects([1, 1])
    with pytest.raises(ValueError):
        max_independent_suspects([3, 1])


def test_uniform_field_is_one_region():
    n = 3
    heights = [[4] * n for _ in range(n)]
    growth = [[2] * n for _ in range(n)]
    assert largest_simultaneous_region(heights, growth) == n * n


def test_still_distinct_heights_never_meet():
    assert largest_simultaneous_region([[1, 2], [3, 4]], [[0, 0], [0, 0]]) == 1


def test_three_cells_meet_together():
    heights = [[0, 10], [10, 30]]
    growth = [[1, 0], [0, 0]]
    assert largest_simultaneous_region(heights, growth) == 3


def test_region_is_unchanged_by_transposition():
    heights = [[0, 10, 3], [10, 30, 3], [6, 2, 8]]
    growth = [[1, 0, 2], [0, 0, 2], [1, 3, 0]]
    assert largest_simultaneous_region(heights, growth) == largest_simultaneous_region(
        _transpose(heights), _transpose(growth)
    )


def test_region_rejects_mismatched_grids():
    with pytest.raises(ValueError):
        largest_simultaneous_region([[1, 2], [3, 4]], [[0, 0]])


def test_chain_of_ones_uses_whole_path():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    assert min_magic_path([1] * n, edges) == Fraction(1, n)


def test_single_node_path():
    assert min_magic_path([5], []) == Fraction(5)


def test_two_between_ones():
    assert min_magic_path([1, 2, 1], [(1, 2), (2, 3)]) == Fraction(2, 3)


def test_magic_path_never_worse_than_best_node():
    magic = [3, 1, 4, 2, 1, 5]
    edges = [(1, 2), (1, 3), (2, 4), (4, 5), (3, 6)]
    assert min_magic_path(magic, edges) <= min(magic)


def test_magic_path_rejects_zero():
    with pytest.raises(ValueError):
        min_magic_path([0, 1], [(1, 2)])


def test_karte_keeps_every_card():
    cards = [3, 1, 2, 2, 4]
    result = karte_arrangement(cards, 2)
    assert result is not None
    assert sorted(result) == sorted(cards)
    assert result[:3] == sorted(result[:3], reverse=True)


def test_karte_impossible():
    assert karte_arrangement([1, 2, 3], 1) is None
    assert karte_arrangement([5], 0) is None


def test_karte_rejects_bad_k():
    with pytest.raises(ValueError):
        karte_arrangement([1, 2], 3)