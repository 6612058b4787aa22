"""Number of bridges after each edge is added to a growing graph."""

from collections import deque
from collections.abc import Iterable

__all__ = ["bridge_counts"]


class _DisjointSets:
    def __init__(self, n: int):
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, u: int) -> int:
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        ru, rv = self.find(u), self.find(v)
        if ru == rv:
            return False
        if self._size[ru] < self._size[rv]:
            ru, rv = rv, ru
        self._parent[rv] = ru
        self._size[ru] += self._size[rv]
        return True


def bridge_counts(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """After each edge (u, v) is added, in order, the number of bridges in the graph.

    Nodes are numbered 0..n-1. Self-loops and repeated edges are allowed.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    pairs = list(edges)
    for u, v in pairs:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) joins a node outside 0..{n - 1}")

    forest: list[list[int]] = [[] for _ in range(n)]
    spanning = _DisjointSets(n)
    for u, v in pairs:
        if spanning.union(u, v):
            forest[u].append(v)
            forest[v].append(u)

    parent = list(range(n))
    depth = [-1] * n
    for root in range(n):
        if depth[root] >= 0:
            continue
        depth[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nxt in forest[node]:
                if depth[nxt] < 0:
                    depth[nxt] = depth[node] + 1
                    parent[nxt] = node
                    queue.append(nxt)

    # up[x] == x while the edge from x to its parent is still a bridge.
    up = list(range(n))

    def climb(x: int) -> int:
        root = x
        while up[root] != root:
            root = up[root]
        while up[x] != root:
            up[x], x = root, up[x]
        return root

    connected = _DisjointSets(n)
    bridges = 0
    counts = []
    for u, v in pairs:
        if connected.union(u, v):
            bridges += 1
        else:
            a, b = climb(u), climb(v)
            while a != b:
                if depth[a] < depth[b]:
                    a, b = b, a
                up[a] = parent[a]
                bridges -= 1
                a = climb(a)
        counts.append(bridges)
    return counts