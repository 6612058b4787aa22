"""Final values after repeated range sorts, found by binary search on the answer.

A threshold turns the sequence into bits (value >= threshold). Sorting a range
of bits only needs a count of ones followed by two range assignments, which a
lazy segment tree does quickly. The answer is the largest threshold whose bit
ends up set at the asked position.
"""

from collections.abc import Iterable, Sequence

__all__ = ["sorted_subsegment_value", "subtree_sort_value"]

ASCENDING = 1
DESCENDING = 2


class _BitTree:
    """Segment tree over 0/1 cells with range assignment and range counts."""

    def __init__(self, bits: Sequence[bool]):
        self._n = len(bits)
        capacity = 4 * max(self._n, 1)
        self._ones = [0] * capacity
        self._pending: list[int | None] = [None] * capacity
        if bits:
            self._build(1, 0, self._n - 1, bits)

    def _build(self, node: int, lo: int, hi: int, bits: Sequence[bool]) -> None:
        if lo == hi:
            self._ones[node] = int(bits[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, bits)
        self._build(2 * node + 1, mid + 1, hi, bits)
        self._ones[node] = self._ones[2 * node] + self._ones[2 * node + 1]

    def _fill(self, node: int, length: int, bit: int) -> None:
        self._ones[node] = bit * length
        self._pending[node] = bit

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        bit = self._pending[node]
        if bit is not None:
            self._fill(2 * node, mid - lo + 1, bit)
            self._fill(2 * node + 1, hi - mid, bit)
            self._pending[node] = None

    def _assign(self, node: int, lo: int, hi: int, left: int, right: int, bit: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._fill(node, hi - lo + 1, bit)
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._assign(2 * node, lo, mid, left, right, bit)
        self._assign(2 * node + 1, mid + 1, hi, left, right, bit)
        self._ones[node] = self._ones[2 * node] + self._ones[2 * node + 1]

    def _count(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._ones[node]
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        return self._count(2 * node, lo, mid, left, right) + self._count(
            2 * node + 1, mid + 1, hi, left, right
        )

    def assign(self, left: int, right: int, bit: int) -> None:
        """Set cells left..right (0-based, inclusive) to bit; an empty range does nothing."""
        if left <= right:
            self._assign(1, 0, self._n - 1, left, right, bit)

    def count(self, left: int, right: int) -> int:
        """Number of set cells in left..right (0-based, inclusive)."""
        if left > right:
            return 0
        return self._count(1, 0, self._n - 1, left, right)


def _bit_survives(
    values: Sequence[int],
    threshold: int,
    operations: Sequence[tuple[int, int, bool]],
    position: int,
) -> bool:
    tree = _BitTree([v >= threshold for v in values])
    for left, right, ascending in operations:
        ones = tree.count(left, right)
        zeros = right - left + 1 - ones
        if ascending:
            tree.assign(left, left + zeros - 1, 0)
            tree.assign(left + zeros, right, 1)
        else:
            tree.assign(left, left + ones - 1, 1)
            tree.assign(left + ones, right, 0)
    return tree.count(position, position) == 1


def _final_value(
    values: Sequence[int],
    operations: Sequence[tuple[int, int, bool]],
    position: int,
) -> int:
    candidates = sorted(set(values))
    lo, hi = 0, len(candidates) - 1
    best = candidates[0]
    while lo <= hi:
        mid = (lo + hi) // 2
        if _bit_survives(values, candidates[mid], operations, position):
            best = candidates[mid]
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def sorted_subsegment_value(
    values: Iterable[int], queries: Iterable[tuple[int, int]], k: int
) -> int:
    """Value at index k after sorting values[l..r] ascending for each query in turn.

    Indices are 0-based and every range (l, r) is inclusive.
    """
    items = list(values)
    n = len(items)
    if not n:
        raise ValueError("values must not be empty")
    if not 0 <= k < n:
        raise IndexError(f"k must be between 0 and {n - 1}, got {k}")
    operations = []
    for left, right in queries:
        if not 0 <= left <= right < n:
            raise IndexError(f"query ({left}, {right}) is outside 0..{n - 1}")
        operations.append((left, right, True))
    return _final_value(items, operations, k)


def _preorder_spans(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, tuple[int, int]]:
    """1-based (first, last) preorder positions of each node's subtree, rooted at 1."""
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) joins a node outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    first: dict[int, int] = {1: 1}
    last: dict[int, int] = {}
    clock = 1
    stack = [(1, 0, iter(adjacency[1]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child != parent:
                if child in first:
                    raise ValueError("edges must form a tree")
                clock += 1
                first[child] = clock
                stack.append((child, node, iter(adjacency[child])))
                break
        else:
            last[node] = clock
            stack.pop()
    if len(first) != n:
        raise ValueError("edges must connect every node")
    return {node: (first[node], last[node]) for node in first}


def subtree_sort_value(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    operations: Iterable[tuple[int, int]],
    node: int,
) -> int:
    """Value at preorder position node after sorting whole subtrees in turn.

    values[i - 1] belongs to tree node i; the tree is rooted at node 1 and
    laid out in preorder, children visited in the order their edges appear.
    Each operation (kind, u) sorts the preorder block of u's subtree:
    kind 1 ascending, kind 2 descending. The result is read at the 1-based
    preorder position given by node.
    """
    items = list(values)
    n = len(items)
    if not n:
        raise ValueError("values must not be empty")
    spans = _preorder_spans(n, edges)
    if not 1 <= node <= n:
        raise IndexError(f"position {node} is outside 1..{n}")

    sequence = [0] * n
    for vertex, (start, _) in spans.items():
        sequence[start - 1] = items[vertex - 1]

    planned = []
    for kind, vertex in operations:
        if kind not in (ASCENDING, DESCENDING):
            raise ValueError(f"operation kind must be 1 or 2, got {kind}")
        if vertex not in spans:
            raise ValueError(f"node {vertex} is outside 1..{n}")
        start, end = spans[vertex]
        planned.append((start - 1, end - 1, kind == ASCENDING))
    return _final_value(sequence, planned, node - 1)