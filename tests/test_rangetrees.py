import random
from itertools import accumulate

import pytest

from contestkit.rangetrees import PrefixSumArray, RangeSumArray


def _model_prefix(values, left, right):
    return max(0, *accumulate(values[left - 1 : right]))


def test_prefix_sample():
    arr = PrefixSumArray([1, 2, -1, 3, 1, -5, 1, 4])
    assert arr.max_prefix_sum(2, 6) == 5
    arr.set(4, -2)
    assert arr.max_prefix_sum(2, 6) == 2
    assert arr.max_prefix_sum(3, 4) == 0


def test_prefix_all_negative_is_empty_prefix():
    arr = PrefixSumArray([-3, -1, -7])
    assert arr.max_prefix_sum(1, 3) == 0


def test_prefix_nonnegative_gives_total():
    values = [4, 0, 2, 9, 1]
    arr = PrefixSumArray(values)
    assert arr.max_prefix_sum(1, 5) == sum(values)
    assert arr.max_prefix_sum(2, 4) == sum(values[1:4])


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_prefix_matches_model(seed):
    rng = random.Random(seed)
    values = [rng.randint(-10, 10) for _ in range(23)]
    arr = PrefixSumArray(values)
    for _ in range(200):
        if rng.random() < 0.4:
            i = rng.randint(1, len(values))
            v = rng.randint(-10, 10)
            values[i - 1] = v
            arr.set(i, v)
        else:
            left = rng.randint(1, len(values))
            right = rng.randint(left, len(values))
            assert arr.max_prefix_sum(left, right) == _model_prefix(values, left, right)


def test_prefix_errors():
    arr = PrefixSumArray([1, 2, 3])
    assert len(arr) == 3
    with pytest.raises(IndexError):
        arr.set(0, 5)
    with pytest.raises(IndexError):
        arr.max_prefix_sum(2, 4)
    with pytest.raises(IndexError):
        arr.max_prefix_sum(3, 2)


def test_range_sum_sample_against_model():
    values = [2, 3, 1, 1, 5, 3]
    arr = RangeSumArray(values)
    assert arr.sum(3, 5) == sum(values[2:5])
    arr.add(2, 4, 2)
    for i in range(1, 4):
        values[i] += 2
    assert arr.sum(3, 5) == sum(values[2:5])
    arr.assign(2, 4, 5)
    values[1:4] = [5, 5, 5]
    assert arr.sum(3, 5) == sum(values[2:5])
    assert arr.sum(1, 6) == sum(values)


def test_assign_then_add_keeps_both():
    arr = RangeSumArray([0] * 8)
    arr.assign(1, 8, 3)
    arr.add(3, 6, 4)
    arr.assign(5, 8, 1)
    expected = [3, 3, 7, 7, 1, 1, 1, 1]
    assert [arr.sum(i, i) for i in range(1, 9)] == expected
    assert arr.sum(1, 8) == sum(expected)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_range_sum_matches_model(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(31)]
    arr = RangeSumArray(values)
    for _ in range(300):
        left = rng.randint(1, len(values))
        right = rng.randint(left, len(values))
        action = rng.randrange(3)
        if action == 0:
            delta = rng.randint(-20, 20)
            arr.add(left, right, delta)
            for i in range(left - 1, right):
                values[i] += delta
        elif action == 1:
            value = rng.randint(-20, 20)
            arr.assign(left, right, value)
            values[left - 1 : right] = [value] * (right - left + 1)
        else:
            assert arr.sum(left, right) == sum(values[left - 1 : right])
    assert arr.sum(1, len(values)) == sum(values)


def test_range_sum_errors():
    arr = RangeSumArray([1, 2])
    with pytest.raises(IndexError):
        arr.add(0, 1, 1)
    with pytest.raises(IndexError):
        arr.assign(1, 3, 1)
    with pytest.raises(IndexError):
        arr.sum(2, 1)