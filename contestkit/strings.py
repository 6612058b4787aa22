"""Substring searches over plain strings and digit strings."""

from collections import Counter
from collections.abc import Iterable
from math import gcd

__all__ = ["minimum_window", "count_divisible_substrings"]

_DIGITS = frozenset("0123456789")


def minimum_window(s: str, t: str) -> str:
    """Shortest substring of s holding every character of t, counted with multiplicity.

    Returns the leftmost such substring, or "" when none exists or t is empty.
    """
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            outgoing = s[left]
            need[outgoing] += 1
            if need[outgoing] > 0:
                missing += 1
            left += 1
    return "" if best is None else s[best[0] : best[1]]


def _check_range(left: int, right: int, length: int) -> None:
    if not 1 <= left <= right <= length:
        raise ValueError(f"query ({left}, {right}) is outside 1..{length}")


def count_divisible_substrings(
    digits: str, p: int, queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based inclusive range (l, r), count substrings of digits[l..r] divisible by p.

    Substrings with leading zeros count, each by its numeric value.
    """
    if p < 1:
        raise ValueError(f"divisor must be positive, got {p}")
    if not set(digits) <= _DIGITS:
        raise ValueError("digits must contain only the characters 0-9")
    values = [int(c) for c in digits]
    n = len(values)

    if 10 % p == 0:
        # Divisibility by a divisor of 10 depends on the last digit alone.
        hits = [0]
        weights = [0]
        for position, value in enumerate(values, start=1):
            ok = value % p == 0
            hits.append(hits[-1] + ok)
            weights.append(weights[-1] + (position if ok else 0))
        answers = []
        for left, right in queries:
            _check_range(left, right, n)
            ends = hits[right] - hits[left - 1]
            answers.append(weights[right] - weights[left - 1] - (left - 1) * ends)
        return answers

    coprime = gcd(p, 10) == 1
    answers = []
    for left, right in queries:
        _check_range(left, right, n)
        total = 0
        if coprime:
            # Equal suffix remainders bound a divisible substring, since 10 is invertible.
            seen = Counter({0: 1})
            suffix = 0
            power = 1
            for value in reversed(values[left - 1 : right]):
                suffix = (value * power + suffix) % p
                power = power * 10 % p
                total += seen[suffix]
                seen[suffix] += 1
        else:
            for start in range(left - 1, right):
                remainder = 0
                for value in values[start:right]:
                    remainder = (remainder * 10 + value) % p
                    total += remainder == 0
        answers.append(total)
    return answers