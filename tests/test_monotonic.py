import pytest

from contestkit.monotonic import (
    largest_a_rectangle,
    max_strength_by_group_size,
    min_of_window_maxima,
    trapped_water,
)


def test_strength_worked_example():
    heights = [1, 2, 3, 4, 5, 4, 3, 2, 1, 6]
    assert max_strength_by_group_size(heights) == [6, 4, 4, 3, 3, 2, 2, 1, 1, 1]


@pytest.mark.parametrize(
    "heights",
    [[5], [3, 1, 2], [2, 2, 2, 2], [7, 3, 9, 1, 4, 8, 2], [1, 2, 3, 4, 5]],
)
def test_strength_invariants(heights):
    result = max_strength_by_group_size(heights)
    assert len(result) == len(heights)
    assert result[0] == max(heights)
    assert result[-1] == min(heights)
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_strength_empty():
    assert max_strength_by_group_size([]) == []


@pytest.mark.parametrize("values", [[4, 1, 7, 3], [2, 9, 9, 1, 5], [6]])
def test_window_maxima_extremes(values):
    assert min_of_window_maxima(values, 1) == min(values)
    assert min_of_window_maxima(values, len(values)) == max(values)


def test_window_maxima_non_decreasing_in_width():
    values = [5, 1, 8, 2, 7, 3, 6, 4]
    results = [min_of_window_maxima(values, w) for w in range(1, len(values) + 1)]
    assert all(a <= b for a, b in zip(results, results[1:]))


@pytest.mark.parametrize("width", [0, -1, 5])
def test_window_maxima_rejects_bad_width(width):
    with pytest.raises(ValueError):
        min_of_window_maxima([1, 2, 3, 4], width)


def test_rectangle_full_grid():
    rows = ["AAAA", "AAAA", "AAAA"]
    assert largest_a_rectangle(rows) == len(rows) * len(rows[0])


def test_rectangle_all_blocked():
    assert largest_a_rectangle(["RRR", "RRR"]) == 0


def test_rectangle_reset_by_r():
    rows = ["AAA", "RRR", "AAA"]
    assert largest_a_rectangle(rows) == len(rows[0])


def test_rectangle_other_characters_keep_height():
    assert largest_a_rectangle(["A", "X", "A"]) == 2


def test_trap_worked_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_simple_basin():
    assert trapped_water([2, 0, 2]) == 2


@pytest.mark.parametrize("heights", [[], [1, 2, 3, 4], [4, 3, 2, 1], [5]])
def test_trap_no_basin(heights):
    assert trapped_water(heights) == 0


def test_trap_mirror_symmetry():
    heights = [4, 2, 0, 3, 2, 5, 1, 3]
    assert trapped_water(heights) == trapped_water(list(reversed(heights)))