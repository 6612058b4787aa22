"""Cheapest way to give every city access to a library."""

from collections.abc import Iterable

__all__ = ["min_library_cost"]


def min_library_cost(
    n: int, edges: Iterable[tuple[int, int]], library_cost: int, road_cost: int
) -> int:
    """Minimum total cost so every city (1..n) has a library or a road path to one.

    Building a library costs library_cost; repairing a listed road costs road_cost.
    Solved as a minimum spanning tree with a virtual node joined to every city.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    virtual = n + 1
    parent = list(range(n + 2))
    size = [1] * (n + 2)

    def find(u: int) -> int:
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    candidates = [(library_cost, city, virtual) for city in range(1, n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"road ({u}, {v}) joins a city outside 1..{n}")
        candidates.append((road_cost, u, v))
    candidates.sort(key=lambda edge: edge[0])

    total = 0
    for weight, u, v in candidates:
        ru, rv = find(u), find(v)
        if ru == rv:
            continue
        if size[ru] < size[rv]:
            ru, rv = rv, ru
        parent[rv] = ru
        size[ru] += size[rv]
        total += weight
    return total