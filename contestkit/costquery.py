"""Count tree paths whose heaviest edge falls within a weight range."""

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable
from itertools import accumulate

__all__ = ["CostQuery"]


class CostQuery:
    """Answers how many node pairs of a weighted tree have path cost in [low, high].

    The cost of a path is the largest edge weight on it. Nodes are 1..n.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int, int]]):
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        parent = list(range(n + 1))
        size = [1] * (n + 1)

        def find(u: int) -> int:
            root = u
            while parent[root] != root:
                root = parent[root]
            while parent[u] != root:
                parent[u], u = root, parent[u]
            return root

        ordered = []
        for u, v, w in edges:
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError(f"edge ({u}, {v}) joins a node outside 1..{n}")
            ordered.append((w, u, v))
        ordered.sort(key=lambda edge: edge[0])

        pairs: Counter[int] = Counter()
        for w, u, v in ordered:
            ru, rv = find(u), find(v)
            if ru == rv:
                continue
            pairs[w] += size[ru] * size[rv]
            if size[ru] < size[rv]:
                ru, rv = rv, ru
            parent[rv] = ru
            size[ru] += size[rv]

        self._weights = sorted({w for w, _, _ in ordered})
        self._cumulative = [0, *accumulate(pairs[w] for w in self._weights)]

    def count(self, low: int, high: int) -> int:
        """Number of pairs u < v whose path cost lies in [low, high]."""
        if low > high:
            return 0
        start = bisect_left(self._weights, low)
        stop = bisect_right(self._weights, high)
        return self._cumulative[stop] - self._cumulative[start]