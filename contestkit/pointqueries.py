"""Point-update range queries: alternating sums, candy totals, nearest distances.

Positions are 1-based and ranges are inclusive on both ends.
"""

from bisect import bisect_left
from collections.abc import Iterable
from math import inf
from operator import add

from .rangetrees import _check_index, _check_span, _PointTree

__all__ = ["AlternatingSumArray", "CandyArray", "nearest_distance_minimums"]


def _signed(position: int, value: int) -> int:
    return value if position % 2 else -value


class AlternatingSumArray:
    """Integer array with point assignment and alternating-sign range sums."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._tree = _PointTree(
            [_signed(pos, v) for pos, v in enumerate(self._values, start=1)], add, 0
        )

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign value to the element at the given position."""
        _check_index(index, len(self._values))
        self._values[index - 1] = value
        self._tree.set(index - 1, _signed(index, value))

    def alternating_sum(self, left: int, right: int) -> int:
        """values[left] - values[left+1] + values[left+2] - ... up to values[right]."""
        _check_span(left, right, len(self._values))
        total = self._tree.query(left - 1, right)
        return total if left % 2 else -total


_DIGITS = range(1, 10)


def _qualifies(position: int, digit: int) -> bool:
    return position % digit == 0 or str(digit) in str(position)


def _check_digit(digit: int) -> None:
    if digit not in _DIGITS:
        raise ValueError(f"digit must be between 1 and 9, got {digit}")


class CandyArray:
    """Array of candy counts whose range totals give a bonus to lucky positions.

    A position is lucky for a digit d when it is divisible by d or its
    decimal form contains d. A total counts every candy in the range once,
    and the candies at lucky positions once more.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        positions = range(1, len(self._values) + 1)
        self._lucky = {
            d: [_qualifies(pos, d) for pos in positions] for d in _DIGITS
        }
        self._total = _PointTree(self._values, add, 0)
        self._bonus = {
            d: _PointTree(
                [v if lucky else 0 for v, lucky in zip(self._values, self._lucky[d])],
                add,
                0,
            )
            for d in _DIGITS
        }

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: int) -> None:
        """Assign value to the element at the given position."""
        _check_index(index, len(self._values))
        self._values[index - 1] = value
        self._total.set(index - 1, value)
        for d in _DIGITS:
            if self._lucky[d][index - 1]:
                self._bonus[d].set(index - 1, value)

    def total(self, left: int, right: int, digit: int) -> int:
        """Candies in values[left..right] plus those at positions lucky for digit."""
        _check_digit(digit)
        _check_span(left, right, len(self._values))
        return self._total.query(left - 1, right) + self._bonus[digit].query(
            left - 1, right
        )


def nearest_distance_minimums(
    a: Iterable[int], b: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based range (l, r) of a, the smallest distance from a[l..r] to any value of b."""
    points = list(a)
    targets = sorted(b)
    if not targets:
        raise ValueError("b must hold at least one value")

    def nearest(x: int) -> int:
        i = bisect_left(targets, x)
        best = inf
        if i < len(targets):
            best = targets[i] - x
        if i > 0:
            best = min(best, x - targets[i - 1])
        return best

    tree = _PointTree([nearest(x) for x in points], min, inf)
    answers = []
    for left, right in queries:
        _check_span(left, right, len(points))
        answers.append(tree.query(left - 1, right))
    return answers