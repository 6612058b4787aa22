"""Counting and number-theory puzzles: digit DP, Fibonacci gcd, permutations, growth."""

from collections.abc import Iterable
from functools import lru_cache
from math import factorial, gcd

__all__ = [
    "count_beautiful_integers",
    "fibonacci_gcd",
    "permutation_sequence",
    "max_min_height",
]


def _count_beautiful_upto(limit: int, k: int) -> int:
    if limit <= 0:
        return 0
    digits = [int(c) for c in str(limit)]
    size = len(digits)

    @lru_cache(maxsize=None)
    def walk(idx: int, balance: int, tight: bool, started: bool, rem: int) -> int:
        if idx == size:
            return int(started and balance == 0 and rem == 0)
        top = digits[idx] if tight else 9
        total = 0
        for d in range(top + 1):
            now_started = started or d != 0
            delta = (1 if d % 2 else -1) if now_started else 0
            total += walk(
                idx + 1, balance + delta, tight and d == top, now_started, (rem * 10 + d) % k
            )
        return total

    return walk(0, 0, True, False, 0)


def count_beautiful_integers(low: int, high: int, k: int) -> int:
    """Count integers in [low, high] with as many odd as even digits and divisible by k."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if low < 0 or high < 0:
        raise ValueError("bounds must be non-negative")
    if high < low:
        return 0
    return _count_beautiful_upto(high, k) - _count_beautiful_upto(low - 1, k)


def _fibonacci_pair(n: int, modulus: int) -> tuple[int, int]:
    """(F(n), F(n+1)) modulo modulus, by fast doubling."""
    if n == 0:
        return 0, 1 % modulus
    f, g = _fibonacci_pair(n // 2, modulus)
    even = f * (2 * g - f) % modulus
    odd = (f * f + g * g) % modulus
    if n % 2:
        return odd, (even + odd) % modulus
    return even, odd


def fibonacci_gcd(a: int, b: int, modulus: int) -> int:
    """gcd(F(a), F(b)) modulo modulus, which equals F(gcd(a, b)) modulo modulus."""
    if a < 0 or b < 0:
        raise ValueError("indices must be non-negative")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    return _fibonacci_pair(gcd(a, b), modulus)[0]


def permutation_sequence(n: int, k: int) -> str:
    """The k-th (1-based) permutation of the digits 1..n in lexicographic order."""
    if not 1 <= n <= 9:
        raise ValueError(f"n must be between 1 and 9, got {n}")
    total = factorial(n)
    if not 1 <= k <= total:
        raise ValueError(f"k must be between 1 and {total}, got {k}")
    remaining = [str(d) for d in range(1, n + 1)]
    k -= 1
    out = []
    for size in range(n, 0, -1):
        block = factorial(size - 1)
        index, k = divmod(k, block)
        out.append(remaining.pop(index))
    return "".join(out)


def max_min_height(plants: Iterable[tuple[int, int]], budget: int) -> int:
    """Largest x >= 1 reachable as everyone's minimum height within the budget.

    Each plant is (height, growth); one unit of budget spent on a plant adds
    its growth to its height. Returns -1 when even x = 1 is out of reach.
    """
    items = list(plants)
    if not items:
        raise ValueError("at least one plant is required")
    if any(growth < 1 for _, growth in items):
        raise ValueError("growth must be positive")
    if budget < 0:
        raise ValueError("budget must be non-negative")

    def cost(target: int) -> int:
        return sum(
            -((height - target) // growth) for height, growth in items if target > height
        )

    lo = 1
    hi = min(height + budget * growth for height, growth in items)
    best = -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if cost(mid) <= budget:
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best