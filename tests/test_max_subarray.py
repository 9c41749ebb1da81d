import pytest
from hypothesis import given, settings, strategies as st

from clrsKit.core.max_subarray import (
    MaxSubarray,
    find_max_sum_cross_subarray,
    find_max_sum_subarray_dc,
    find_max_sum_subarray_kadane,
)

BIG_CASE = [
    22, -27, 38, -34, 49, 40, 13, -44, -13, 28, 46, 7, -26, 42, 29, 0, -6, 35, 23, -37, 10, 12, -2, 18, -12, -49, -10,
    37, -5, 17, 6, -11, -22, -17, -50, -40, 44, 14, -41, 19, -15, 45, -23, 48, -1, -39, -46, 15, 3, -32, -29, -48,
    -19, 27, -33, -8, 11, 21, -43, 24, 5, 34, -36, -9, 16, -31, -7, -24, -47, -14, -16, -18, 39, -30, 33, -45, -38,
    41, -3, 4, -25, 20, -35, 32, 26, 47, 2, -4, 8, 9, 31, -28, 36, 1, -21, 30, 43, 25, -20, -42,
]

CASES = [
    (BIG_CASE, 239),
    ([-3, -4, -5, -6, -7], 0),
    ([0, 0, 1, 2], 3),
    ([1, 2, 3, 4], 10),
    ([0] * 10, 0),
    ([0, 0, 0, -1, 0, 0], 0),
    ([100, 0, 0, 0, 0, 0, 0, 0], 100),
    ([-2, -3, -100, 0], 0),
    ([1, 2, 3, -100, 6], 6),
    ([0, -1], 0),
    ([-1, 0], 0),
    ([1, 2, 3, -2, 5], 9),
    ([10, -2, -3], 10),
]


def brute_force(values):
    best = 0
    for i in range(len(values)):
        for j in range(i, len(values)):
            best = max(best, sum(values[i:j + 1]))
    return best


@pytest.mark.parametrize("src, expected", CASES)
def test_both_methods_find_expected_sum(src, expected):
    dc_slice, dc_sum = find_max_sum_subarray_dc(src)
    k_slice, k_sum = find_max_sum_subarray_kadane(src)
    assert dc_sum == expected
    assert k_sum == expected
    for found in (dc_slice, k_slice):
        if found is not None:
            assert sum(found) == expected


@pytest.mark.parametrize("func", [find_max_sum_subarray_dc, find_max_sum_subarray_kadane])
def test_all_negative_and_empty_inputs(func):
    assert func([-1, -2, -3]) == MaxSubarray(None, 0)
    assert func([]) == (None, 0)


@pytest.mark.parametrize("func", [find_max_sum_subarray_dc, find_max_sum_subarray_kadane])
def test_returns_the_run(func):
    assert func([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == MaxSubarray([4, -1, 2, 1], 6)
    assert func([1, 2, 3, -2, 5]).subarray == [1, 2, 3, -2, 5]


def test_divide_and_conquer_prefers_longest_run():
    result = find_max_sum_subarray_dc([100, 0, 0, 0, 0, 0, 0, 0])
    assert result.subarray == [100, 0, 0, 0, 0, 0, 0, 0]
    assert result.total == 100


def test_zero_sum_runs():
    assert find_max_sum_subarray_kadane([-1, 0]) == ([0], 0)
    assert find_max_sum_subarray_dc([-1, 0]) == ([0], 0)


def test_cross_subarray():
    src = [13, -3, -25, 20, -3, -16, -23, 18, 20, -7, 12, -5, -22, 15, -4, 7]
    # CLRS figure 4.3, crossing the middle of the whole array
    assert find_max_sum_cross_subarray(src, 8) == MaxSubarray([18, 20, -7, 12], 43)
    assert find_max_sum_cross_subarray([1, -5, 3], 1) == MaxSubarray([1], 1)
    assert find_max_sum_subarray_dc(src) == MaxSubarray([18, 20, -7, 12], 43)
    assert find_max_sum_subarray_kadane(src) == MaxSubarray([18, 20, -7, 12], 43)


def test_cross_subarray_with_negative_sides():
    assert find_max_sum_cross_subarray([-1, -2, -3, -4], 2) == (None, 0)


def test_works_with_floats():
    result = find_max_sum_subarray_kadane([0.5, -1.0, 2.25, 0.25])
    assert result == MaxSubarray([2.25, 0.25], 2.5)


@settings(max_examples=150, deadline=None)
@given(values=st.lists(st.integers(-30, 30), max_size=40))
def test_methods_agree_with_brute_force(values):
    expected = brute_force(values)
    assert find_max_sum_subarray_kadane(values).total == expected
    assert find_max_sum_subarray_dc(values).total == expected
