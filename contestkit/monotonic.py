"""Monotonic-stack and monotonic-deque computations over sequences."""

from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "max_strength_by_group_size",
    "min_of_window_maxima",
    "largest_a_rectangle",
    "trapped_water",
]


def _previous_smaller(values: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller element to the left, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def _smaller_bounds(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """Nearest strictly smaller index on each side (-1 and len(values) if none)."""
    n = len(values)
    left = _previous_smaller(values)
    mirrored = _previous_smaller(values[::-1])
    right = [n - 1 - mirrored[n - 1 - i] for i in range(n)]
    return left, right


def max_strength_by_group_size(heights: Iterable[int]) -> list[int]:
    """For every group size x in 1..n, the largest minimum over all contiguous groups of size x."""
    values = list(heights)
    n = len(values)
    if not n:
        return []
    left, right = _smaller_bounds(values)
    best = [0] * (n + 2)
    for value, lo, hi in zip(values, left, right):
        span = hi - lo - 1
        best[span] = max(best[span], value)
    for size in range(n, 0, -1):
        best[size] = max(best[size], best[size + 1])
    return best[1 : n + 1]


def min_of_window_maxima(values: Iterable[int], width: int) -> int:
    """The smallest maximum over all contiguous windows of the given width."""
    items = list(values)
    if width < 1 or width > len(items):
        raise ValueError(f"width must be between 1 and {len(items)}, got {width}")
    window: deque[int] = deque()
    smallest = None
    for i, value in enumerate(items):
        while window and items[window[-1]] < value:
            window.pop()
        window.append(i)
        if window[0] <= i - width:
            window.popleft()
        if i >= width - 1:
            current = items[window[0]]
            if smallest is None or current < smallest:
                smallest = current
    return smallest


def largest_a_rectangle(rows: Iterable[str]) -> int:
    """Area of the largest rectangle made only of 'A' cells.

    Each row is read in turn: an 'A' extends the column's run, an 'R'
    resets it, and any other character leaves the run unchanged.
    """
    columns: list[int] = []
    best = 0
    for row in rows:
        if len(row) > len(columns):
            columns.extend([0] * (len(row) - len(columns)))
        for j, cell in enumerate(row):
            if cell == "A":
                columns[j] += 1
            elif cell == "R":
                columns[j] = 0
        heights = columns[: len(row)]
        left, right = _smaller_bounds(heights)
        area = max(
            (h * (hi - lo - 1) for h, lo, hi in zip(heights, left, right)),
            default=0,
        )
        best = max(best, area)
    return best


def trapped_water(heights: Iterable[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    bars = list(heights)
    left_max: list[int] = []
    highest = None
    for h in bars:
        highest = h if highest is None else max(highest, h)
        left_max.append(highest)
    right_max: list[int] = []
    highest = None
    for h in reversed(bars):
        highest = h if highest is None else max(highest, h)
        right_max.append(highest)
    right_max.reverse()
    return sum(min(lo, hi) - h for h, lo, hi in zip(bars, left_max, right_max))