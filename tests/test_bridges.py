import pytest

from contestkit.bridges import bridge_counts


def test_path_edges_are_all_bridges():
    assert bridge_counts(5, [(0, 1), (1, 2), (2, 3), (3, 4)]) == list(range(1, 5))


def test_triangle_closes_cycle():
    assert bridge_counts(3, [(0, 1), (1, 2), (2, 0)]) == [1, 2, 0]


def test_repeated_edge_removes_bridge():
    assert bridge_counts(2, [(0, 1), (0, 1)]) == [1, 0]


def test_self_loop_changes_nothing():
    counts = bridge_counts(2, [(0, 1), (1, 1)])
    assert counts[1] == counts[0]


def test_cycle_only_affects_its_own_component():
    counts = bridge_counts(4, [(0, 1), (2, 3), (1, 0)])
    assert counts[2] == counts[1] - 1


def test_counts_bounded_and_steps_valid():
    edges = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 2), (0, 6), (6, 1), (3, 7)]
    n = 8
    counts = bridge_counts(n, edges)
    assert len(counts) == len(edges)
    assert all(0 <= c <= n - 1 for c in counts)
    previous = 0
    for c in counts:
        assert c - previous <= 1
        previous = c


def test_no_edges():
    assert bridge_counts(3, []) == []


def test_out_of_range_node_raises():
    with pytest.raises(ValueError):
        bridge_counts(2, [(0, 2)])