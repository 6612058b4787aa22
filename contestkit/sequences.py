"""Counting and optimisation over sequences with Fenwick trees."""

from collections.abc import Iterable
from math import inf

__all__ = ["count_leader_pairs", "max_weighted_increasing_subsequence"]


def count_leader_pairs(breeds: Iterable[int]) -> int:
    """Count pairs i < j whose breeds each occur exactly once within breeds[i..j]."""
    items = list(breeds)
    n = len(items)
    tree = [0] * (n + 1)

    def update(pos: int, delta: int) -> None:
        while pos <= n:
            tree[pos] += delta
            pos += pos & -pos

    def prefix(pos: int) -> int:
        total = 0
        while pos > 0:
            total += tree[pos]
            pos -= pos & -pos
        return total

    last: dict[int, int] = {}
    total = 0
    for i, breed in enumerate(items, start=1):
        update(i, 1)
        previous = last.get(breed, 0)
        if previous:
            update(previous, -1)
        total += prefix(i - 1) - prefix(previous)
        last[breed] = i
    return total


def max_weighted_increasing_subsequence(
    values: Iterable[int], weights: Iterable[int]
) -> int:
    """Largest total weight of a subsequence whose values strictly increase."""
    items = list(values)
    ws = list(weights)
    if len(items) != len(ws):
        raise ValueError("values and weights must have the same length")
    if not items:
        raise ValueError("at least one element is required")

    ranks = {v: r for r, v in enumerate(sorted(set(items)), start=1)}
    size = len(ranks)
    tree: list[float] = [-inf] * (size + 1)

    def raise_to(pos: int, value: int) -> None:
        while pos <= size:
            if tree[pos] < value:
                tree[pos] = value
            pos += pos & -pos

    def prefix_max(pos: int) -> float:
        best = -inf
        while pos > 0:
            best = max(best, tree[pos])
            pos -= pos & -pos
        return best

    best_total: int | None = None
    for value, weight in zip(items, ws):
        rank = ranks[value]
        before = prefix_max(rank - 1)
        current = (0 if before == -inf else int(before)) + weight
        if best_total is None or current > best_total:
            best_total = current
        raise_to(rank, current)
    return best_total