"""Arrays with range queries backed by segment trees.

Positions are 1-based and ranges are inclusive on both ends.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

__all__ = ["PrefixSumArray", "RangeSumArray"]

T = TypeVar("T")


def _check_index(index: int, length: int) -> None:
    if not 1 <= index <= length:
        raise IndexError(f"position {index} is outside 1..{length}")


def _check_span(left: int, right: int, length: int) -> None:
    if not 1 <= left <= right <= length:
        raise IndexError(f"range ({left}, {right}) is outside 1..{length}")


class _PointTree(Generic[T]):
    """Bottom-up segment tree over an associative, possibly non-commutative combine."""

    def __init__(self, leaves: Sequence[T], combine: Callable[[T, T], T], identity: T):
        self._combine = combine
        self._identity = identity
        size = 1
        while size < len(leaves):
            size *= 2
        self._size = size
        self._tree = [identity] * (2 * size)
        self._tree[size : size + len(leaves)] = leaves
        for node in range(size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def set(self, pos: int, leaf: T) -> None:
        """Replace the leaf at 0-based position pos."""
        node = pos + self._size
        self._tree[node] = leaf
        node //= 2
        while node:
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2

    def query(self, lo: int, hi: int) -> T:
        """Combine the leaves in the 0-based half-open range [lo, hi), in order."""
        left_acc = self._identity
        right_acc = self._identity
        lo += self._size
        hi += self._size
        while lo < hi:
            if lo & 1:
                left_acc = self._combine(left_acc, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right_acc = self._combine(self._tree[hi], right_acc)
            lo //= 2
            hi //= 2
        return self._combine(left_acc, right_acc)


def _prefix_leaf(value: int) -> tuple[int, int]:
    return value, max(0, value)


def _prefix_combine(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return a[0] + b[0], max(a[1], a[0] + b[1])


class PrefixSumArray:
    """Integer array with point assignment and maximum-prefix-sum queries."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._tree = _PointTree(
            [_prefix_leaf(v) for v in self._values], _prefix_combine, (0, 0)
        )

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign value to the element at the given position."""
        _check_index(index, len(self._values))
        self._values[index - 1] = value
        self._tree.set(index - 1, _prefix_leaf(value))

    def max_prefix_sum(self, left: int, right: int) -> int:
        """Largest sum of a prefix of values[left..right]; the empty prefix counts as 0."""
        _check_span(left, right, len(self._values))
        return self._tree.query(left - 1, right)[1]


class RangeSumArray:
    """Integer array with range addition, range assignment and range sums."""

    def __init__(self, values: Iterable[int]):
        items = list(values)
        self._n = len(items)
        capacity = 4 * max(self._n, 1)
        self._sum = [0] * capacity
        self._assigned: list[int | None] = [None] * capacity
        self._pending = [0] * capacity
        if items:
            self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sum[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, items)
        self._build(2 * node + 1, mid + 1, hi, items)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _assign_node(self, node: int, length: int, value: int) -> None:
        self._sum[node] = value * length
        self._assigned[node] = value
        self._pending[node] = 0

    def _add_node(self, node: int, length: int, delta: int) -> None:
        self._sum[node] += delta * length
        assigned = self._assigned[node]
        if assigned is not None:
            self._assigned[node] = assigned + delta
        else:
            self._pending[node] += delta

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        assigned = self._assigned[node]
        if assigned is not None:
            self._assign_node(2 * node, mid - lo + 1, assigned)
            self._assign_node(2 * node + 1, hi - mid, assigned)
            self._assigned[node] = None
        delta = self._pending[node]
        if delta:
            self._add_node(2 * node, mid - lo + 1, delta)
            self._add_node(2 * node + 1, hi - mid, delta)
            self._pending[node] = 0

    def _update(
        self,
        node: int,
        lo: int,
        hi: int,
        left: int,
        right: int,
        apply: Callable[[int, int], None],
    ) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            apply(node, hi - lo + 1)
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._update(2 * node, lo, mid, left, right, apply)
        self._update(2 * node + 1, mid + 1, hi, left, right, apply)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def add(self, left: int, right: int, delta: int) -> None:
        """Add delta to every element of values[left..right]."""
        _check_span(left, right, self._n)
        self._update(
            1, 0, self._n - 1, left - 1, right - 1,
            lambda node, length: self._add_node(node, length, delta),
        )

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every element of values[left..right] to value."""
        _check_span(left, right, self._n)
        self._update(
            1, 0, self._n - 1, left - 1, right - 1,
            lambda node, length: self._assign_node(node, length, value),
        )

    def sum(self, left: int, right: int) -> int:
        """Sum of values[left..right]."""
        _check_span(left, right, self._n)
        return self._query(1, 0, self._n - 1, left - 1, right - 1)