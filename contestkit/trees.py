"""Path and ancestor queries on trees whose nodes are numbered 1..n."""

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from itertools import combinations

__all__ = ["milk_visits", "run_road_total", "count_similar_pairs"]


class _Fenwick:
    """Binary indexed tree over positions 1..size."""

    def __init__(self, size: int):
        self._tree = [0] * (size + 1)

    def add(self, pos: int, delta: int) -> None:
        while pos < len(self._tree):
            self._tree[pos] += delta
            pos += pos & -pos

    def prefix(self, pos: int) -> int:
        total = 0
        while pos > 0:
            total += self._tree[pos]
            pos -= pos & -pos
        return total

    def range_sum(self, lo: int, hi: int) -> int:
        return self.prefix(hi) - self.prefix(lo - 1)


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges, got {count}")
    return adjacency


def _rooted(
    adjacency: Sequence[Sequence[int]], root: int = 1
) -> tuple[list[int], list[int], list[int], list[int]]:
    """Parent, depth, entry and exit times (1-based preorder) of a tree rooted at root."""
    n = len(adjacency) - 1
    parent = [0] * (n + 1)
    depth = [0] * (n + 1)
    tin = [0] * (n + 1)
    tout = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[root] = True
    parent[root] = root
    clock = 1
    tin[root] = clock
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not seen[nxt]:
                seen[nxt] = True
                parent[nxt] = node
                depth[nxt] = depth[node] + 1
                clock += 1
                tin[nxt] = clock
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            tout[node] = clock
            stack.pop()
    if clock != n:
        raise ValueError("edges must connect every node")
    return parent, depth, tin, tout


def _ancestor_table(parent: list[int]) -> list[list[int]]:
    table = [parent]
    for _ in range(max(1, len(parent).bit_length()) - 1):
        prev = table[-1]
        table.append([prev[prev[v]] for v in range(len(prev))])
    return table


def _lca(table: list[list[int]], depth: list[int], u: int, v: int) -> int:
    if depth[u] < depth[v]:
        u, v = v, u
    diff = depth[u] - depth[v]
    for j, row in enumerate(table):
        if diff >> j & 1:
            u = row[u]
    if u == v:
        return u
    for row in reversed(table):
        if row[u] != row[v]:
            u, v = row[u], row[v]
    return table[0][u]


def milk_visits(
    colors: Iterable[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int, int]],
) -> list[bool]:
    """For each query (a, b, c), whether some node on the path a..b has color c.

    colors[i - 1] is the color of node i. Queries are answered offline, one
    color at a time, by counting marked ancestors along root paths.
    """
    palette = list(colors)
    n = len(palette)
    if not n:
        raise ValueError("the tree must have at least one node")
    adjacency = _tree_adjacency(n, edges)
    parent, depth, tin, tout = _rooted(adjacency)
    table = _ancestor_table(parent)

    by_color: dict[int, list[int]] = defaultdict(list)
    for node, color in enumerate(palette, start=1):
        by_color[color].append(node)

    items = list(queries)
    asked: dict[int, list[int]] = defaultdict(list)
    for index, (a, b, color) in enumerate(items):
        _check_node(a, n)
        _check_node(b, n)
        asked[color].append(index)

    answers = [False] * len(items)
    marks = _Fenwick(n + 1)

    def marked_on_root_path(node: int) -> int:
        return marks.prefix(tin[node])

    for color, indices in asked.items():
        nodes = by_color.get(color, [])
        for node in nodes:
            marks.add(tin[node], 1)
            marks.add(tout[node] + 1, -1)
        for index in indices:
            a, b, _ = items[index]
            top = _lca(table, depth, a, b)
            count = (
                marked_on_root_path(a)
                + marked_on_root_path(b)
                - 2 * marked_on_root_path(top)
                + (palette[top - 1] == color)
            )
            answers[index] = count > 0
        for node in nodes:
            marks.add(tin[node], -1)
            marks.add(tout[node] + 1, 1)
    return answers


def run_road_total(
    heights: Iterable[int], edges: Iterable[tuple[int, int]], target: int
) -> int:
    """Sum of pairwise path lengths over node triples whose highest node equals target.

    For each unordered triple of distinct nodes, the paths between its three
    pairs are joined; when the greatest height on them is exactly target, the
    three path lengths are added to the total. heights[i - 1] belongs to node i.
    """
    h = list(heights)
    n = len(h)
    if not n:
        raise ValueError("the tree must have at least one node")
    adjacency = _tree_adjacency(n, edges)
    _rooted(adjacency)

    distance: list[list[int]] = [[]]
    peak: list[list[int]] = [[]]
    for source in range(1, n + 1):
        dist = [-1] * (n + 1)
        top = [0] * (n + 1)
        dist[source] = 0
        top[source] = h[source - 1]
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if dist[v] < 0:
                    dist[v] = dist[u] + 1
                    top[v] = max(top[u], h[v - 1])
                    queue.append(v)
        distance.append(dist)
        peak.append(top)

    total = 0
    for i, j, k in combinations(range(1, n + 1), 3):
        if max(peak[i][j], peak[j][k], peak[k][i]) == target:
            total += distance[i][j] + distance[j][k] + distance[k][i]
    return total


def count_similar_pairs(n: int, k: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count ancestor/descendant pairs (a, b) with |a - b| <= k.

    Each edge is (parent, child); the root is the smallest node that is
    nobody's child.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    has_parent = [False] * (n + 1)
    count = 0
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        if has_parent[v]:
            raise ValueError(f"node {v} has more than one parent")
        children[u].append(v)
        has_parent[v] = True
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges, got {count}")
    root = next((node for node in range(1, n + 1) if not has_parent[node]), None)
    if root is None:
        raise ValueError("the tree has no root")

    active = _Fenwick(n)
    total = 0
    visited = 0
    stack = [(root, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            active.add(node, -1)
            continue
        visited += 1
        total += active.range_sum(max(node - k, 1), min(node + k, n))
        active.add(node, 1)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(children[node]))
    if visited != n:
        raise ValueError("edges must form a rooted tree")
    return total