"""Sequence queries over small value domains.

Positions are 1-based and ranges are inclusive on both ends.
"""

from collections import Counter
from collections.abc import Iterable
from operator import or_

from .rangetrees import _check_index, _check_span, _PointTree

__all__ = [
    "MAX_VALUE",
    "nested_segment_counts",
    "InversionArray",
    "DistinctArray",
]

MAX_VALUE = 40


def nested_segment_counts(sequence: Iterable[int]) -> list[int]:
    """For each value x in 1..n, count segments lying strictly inside segment x.

    The sequence holds every value 1..n exactly twice; segment x spans its
    two occurrences.
    """
    items = list(sequence)
    if len(items) % 2:
        raise ValueError("sequence length must be even")
    n = len(items) // 2
    occurrences = Counter(items)
    if set(occurrences) != set(range(1, n + 1)) or any(c != 2 for c in occurrences.values()):
        raise ValueError(f"every value 1..{n} must appear exactly twice")

    tree = [0] * (2 * n + 1)

    def add(pos: int) -> None:
        while pos <= 2 * n:
            tree[pos] += 1
            pos += pos & -pos

    def prefix(pos: int) -> int:
        total = 0
        while pos > 0:
            total += tree[pos]
            pos -= pos & -pos
        return total

    opened: dict[int, int] = {}
    counts = [0] * n
    closed = 0
    for pos, value in enumerate(items, start=1):
        start = opened.get(value)
        if start is None:
            opened[value] = pos
            continue
        counts[value - 1] = closed - prefix(start)
        add(start)
        closed += 1
    return counts


def _check_value(value: int) -> None:
    if not 1 <= value <= MAX_VALUE:
        raise ValueError(f"value must be between 1 and {MAX_VALUE}, got {value}")


_Summary = tuple[tuple[int, ...], int]
_EMPTY: _Summary = ((0,) * MAX_VALUE, 0)


def _inversion_leaf(value: int) -> _Summary:
    counts = [0] * MAX_VALUE
    counts[value - 1] = 1
    return tuple(counts), 0


def _inversion_combine(a: _Summary, b: _Summary) -> _Summary:
    left_counts, left_inv = a
    right_counts, right_inv = b
    cross = 0
    above = 0
    for v in range(MAX_VALUE - 1, -1, -1):
        cross += right_counts[v] * above
        above += left_counts[v]
    merged = tuple(x + y for x, y in zip(left_counts, right_counts))
    return merged, left_inv + right_inv + cross


class InversionArray:
    """Array of values 1..40 with point assignment and inversion counts on ranges."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        for value in self._values:
            _check_value(value)
        self._tree = _PointTree(
            [_inversion_leaf(v) for v in self._values], _inversion_combine, _EMPTY
        )

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign value to the element at the given position."""
        _check_index(index, len(self._values))
        _check_value(value)
        self._values[index - 1] = value
        self._tree.set(index - 1, _inversion_leaf(value))

    def count_inversions(self, left: int, right: int) -> int:
        """Number of pairs i < j in [left, right] with values[i] > values[j]."""
        _check_span(left, right, len(self._values))
        return self._tree.query(left - 1, right)[1]


class DistinctArray:
    """Array of values 1..40 with point assignment and distinct counts on ranges."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        for value in self._values:
            _check_value(value)
        self._tree = _PointTree([1 << (v - 1) for v in self._values], or_, 0)

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign value to the element at the given position."""
        _check_index(index, len(self._values))
        _check_value(value)
        self._values[index - 1] = value
        self._tree.set(index - 1, 1 << (value - 1))

    def count_distinct(self, left: int, right: int) -> int:
        """Number of different values among values[left..right]."""
        _check_span(left, right, len(self._values))
        return bin(self._tree.query(left - 1, right)).count("1")