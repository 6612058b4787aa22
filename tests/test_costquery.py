import pytest

from contestkit.costquery import CostQuery

PATH = [(1, 2, 1), (2, 3, 2)]


def test_path_counts_by_cost():
    query = CostQuery(3, PATH)
    assert query.count(1, 1) == 1
    assert query.count(2, 2) == 2


def test_full_range_counts_every_pair():
    n = 6
    edges = [(1, 2, 5), (1, 3, 2), (3, 4, 9), (3, 5, 1), (5, 6, 5)]
    query = CostQuery(n, edges)
    assert query.count(1, 9) == n * (n - 1) // 2
    assert query.count(-100, 100) == n * (n - 1) // 2


def test_ranges_are_additive():
    edges = [(1, 2, 5), (1, 3, 2), (3, 4, 9), (3, 5, 1), (5, 6, 5)]
    query = CostQuery(6, edges)
    for split in range(1, 10):
        assert query.count(1, split) + query.count(split + 1, 9) == query.count(1, 9)


def test_star_with_equal_weights():
    n = 5
    edges = [(1, node, 4) for node in range(2, n + 1)]
    query = CostQuery(n, edges)
    assert query.count(4, 4) == n * (n - 1) // 2
    assert query.count(1, 3) == query.count(5, 50)


def test_ranges_outside_weights_and_inverted_are_empty():
    query = CostQuery(3, PATH)
    assert query.count(3, 10) == query.count(-5, 0)
    assert query.count(2, 1) == query.count(3, 10)
    assert query.count(1, 2) == 3


def test_single_node_has_no_pairs():
    query = CostQuery(1, [])
    assert query.count(0, 100) == query.count(5, 5)


def test_rejects_bad_nodes():
    with pytest.raises(ValueError):
        CostQuery(2, [(1, 3, 1)])
    with pytest.raises(ValueError):
        CostQuery(0, [])