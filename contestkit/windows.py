"""Maximum and median over a sliding window."""

import bisect
from collections import deque
from collections.abc import Iterable

__all__ = ["sliding_window_maximum", "sliding_window_median"]


def _check_window(length: int, k: int) -> None:
    if k < 1 or k > length:
        raise ValueError(f"window size must be between 1 and {length}, got {k}")


def sliding_window_maximum(nums: Iterable[int], k: int) -> list[int]:
    """Maximum of every contiguous window of size k, left to right."""
    values = list(nums)
    _check_window(len(values), k)
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(values):
        while window and values[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def sliding_window_median(nums: Iterable[int], k: int) -> list[float]:
    """Median of every contiguous window of size k, left to right."""
    values = list(nums)
    _check_window(len(values), k)
    window = sorted(values[:k])
    half = k // 2

    def median() -> float:
        if k % 2:
            return float(window[half])
        return (window[half - 1] + window[half]) / 2

    result = [median()]
    for outgoing, incoming in zip(values, values[k:]):
        del window[bisect.bisect_left(window, outgoing)]
        bisect.insort(window, incoming)
        result.append(median())
    return result