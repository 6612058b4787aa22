from collections import Counter

import pytest

from contestkit.strings import count_divisible_substrings, minimum_window


def _covers(window, t):
    have = Counter(window)
    return all(have[ch] >= n for ch, n in Counter(t).items())


def test_minimum_window_worked_example():
    assert minimum_window("ADOBECODEBANC", "ABC") == "BANC"


@pytest.mark.parametrize(
    "s, t",
    [("ADOBECODEBANC", "ABC"), ("aaabbbccc", "abc"), ("xyzzyx", "zz"), ("abab", "ba")],
)
def test_minimum_window_is_covering_substring(s, t):
    window = minimum_window(s, t)
    assert window in s
    assert _covers(window, t)
    assert len(window) >= len(t)


def test_minimum_window_no_cover():
    assert minimum_window("a", "aa") == ""
    assert minimum_window("abc", "d") == ""


def test_minimum_window_whole_string_when_needed():
    assert minimum_window("abc", "cba") == "abc"


def test_minimum_window_same_string():
    assert minimum_window("q", "q") == "q"


def test_minimum_window_empty_pattern():
    assert minimum_window("abc", "") == ""


def _all(length):
    return length * (length + 1) // 2


@pytest.mark.parametrize("p", [1, 2, 3, 4, 5, 6, 7, 10, 12])
def test_zeros_always_divisible(p):
    digits = "0000"
    assert count_divisible_substrings(digits, p, [(1, 4), (2, 3)]) == [_all(4), _all(2)]


def test_one_divides_everything():
    digits = "9173"
    assert count_divisible_substrings(digits, 1, [(1, 4), (2, 4)]) == [_all(4), _all(3)]


def test_two_counts_even_endings():
    assert count_divisible_substrings("2468", 2, [(1, 4)]) == [_all(4)]
    assert count_divisible_substrings("1357", 2, [(1, 4)]) == [0]


def test_coprime_divisor_all_divisible():
    assert count_divisible_substrings("3333", 3, [(1, 4), (2, 2)]) == [_all(4), 1]
    assert count_divisible_substrings("777", 7, [(1, 3)]) == [_all(3)]


def test_non_coprime_divisor_all_divisible():
    assert count_divisible_substrings("888", 4, [(1, 3)]) == [_all(3)]


def test_disjoint_parts_do_not_exceed_whole():
    digits = "123456789"
    whole, first, second = count_divisible_substrings(digits, 7, [(1, 9), (1, 4), (5, 9)])
    assert whole >= first + second


def test_single_digit_queries():
    digits = "1234"
    assert count_divisible_substrings(digits, 3, [(i, i) for i in range(1, 5)]) == [0, 0, 1, 0]


def test_bad_queries_raise():
    with pytest.raises(ValueError):
        count_divisible_substrings("123", 3, [(0, 2)])
    with pytest.raises(ValueError):
        count_divisible_substrings("123", 3, [(2, 4)])


def test_bad_input_raises():
    with pytest.raises(ValueError):
        count_divisible_substrings("12a", 3, [(1, 1)])
    with pytest.raises(ValueError):
        count_divisible_substrings("123", 0, [(1, 1)])