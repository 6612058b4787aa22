"""Skyline outline of a set of rectangular buildings."""

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

__all__ = ["skyline"]

_START = 0
_END = 1


def skyline(buildings: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Key points (x, height) of the outline of buildings given as (left, right, height).

    Events at one x are handled starts first, then ends; a key point is
    emitted after each batch whenever the tallest active height changes.
    """
    events = []
    for left, right, height in buildings:
        events.append((left, _START, height))
        events.append((right, _END, height))
    events.sort(key=lambda event: (event[0], event[1]))

    active: Counter[int] = Counter()
    heap: list[int] = []
    result: list[tuple[int, int]] = []

    def tallest() -> int:
        while heap and active[-heap[0]] == 0:
            heapq.heappop(heap)
        return -heap[0] if heap else 0

    for (point, kind), batch in groupby(events, key=lambda event: (event[0], event[1])):
        for _, _, height in batch:
            if kind == _START:
                active[height] += 1
                heapq.heappush(heap, -height)
            else:
                active[height] -= 1
        current = tallest()
        if not result or result[-1][1] != current:
            result.append((point, current))
    return result