import pytest

from algosolve.monotonic_stack import (
    daily_temperatures,
    next_greater_elements,
    sum_subarray_mins,
    sum_subarray_ranges,
    trap_rain_water,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([], 0),
        ([1], 0),
        ([1, 2, 3], 4),
        ([1, 3, 3], 4),
        ([4, -2, -3, 4, 1], 59),
    ],
)
def test_sum_subarray_ranges_source_cases(nums, expected):
    assert sum_subarray_ranges(nums) == expected


@pytest.mark.parametrize("nums", [[1, 2, 3], [4, -2, -3, 4, 1], [5, 5, 1, 9]])
def test_sum_subarray_ranges_reverse_invariant(nums):
    assert sum_subarray_ranges(nums) == sum_subarray_ranges(list(reversed(nums)))


def test_sum_subarray_ranges_constant_is_zero():
    assert sum_subarray_ranges([7, 7, 7, 7]) == 0


def test_next_greater_elements_source_cases():
    assert next_greater_elements([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]
    assert next_greater_elements([2, 4], [1, 2, 3, 4]) == [3, -1]


def test_next_greater_missing_value_gives_minus_one():
    assert next_greater_elements([99], [1, 2, 3]) == [-1]


@pytest.mark.parametrize(
    "temps, expected",
    [
        ([73, 74, 75, 71, 69, 72, 76, 73], [1, 1, 4, 2, 1, 1, 0, 0]),
        ([30, 40, 50, 60], [1, 1, 1, 0]),
        ([30, 60, 90], [1, 1, 0]),
        ([89, 62, 70, 58, 47, 47, 46, 76, 100, 70], [8, 1, 5, 4, 3, 2, 1, 1, 0, 0]),
    ],
)
def test_daily_temperatures_source_cases(temps, expected):
    assert daily_temperatures(temps) == expected


def test_daily_temperatures_points_to_warmer_day():
    temps = [89, 62, 70, 58, 47, 47, 46, 76, 100, 70]
    for i, wait in enumerate(daily_temperatures(temps)):
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1:i + wait])
        else:
            assert all(t <= temps[i] for t in temps[i + 1:])


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 1, 2, 4], 17),
        ([11, 81, 94, 43, 3], 444),
        ([71, 55, 82, 55], 593),
    ],
)
def test_sum_subarray_mins_source_cases(nums, expected):
    assert sum_subarray_mins(nums) == expected


def test_sum_subarray_mins_empty():
    assert sum_subarray_mins([]) == 0


def test_sum_subarray_mins_is_reduced_modulo():
    result = sum_subarray_mins([10**9] * 50)
    assert 0 <= result < 1_000_000_007


@pytest.mark.parametrize(
    "heights, expected",
    [
        ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6),
        ([4, 2, 0, 3, 2, 5], 9),
        ([1, 1, 1, 1], 0),
        ([1, 2, 1, 1], 0),
        ([2, 0, 2], 2),
    ],
)
def test_trap_rain_water_source_cases(heights, expected):
    assert trap_rain_water(heights) == expected


@pytest.mark.parametrize("heights", [[0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], [4, 2, 0, 3, 2, 5]])
def test_trap_rain_water_reverse_invariant(heights):
    assert trap_rain_water(heights) == trap_rain_water(list(reversed(heights)))


def test_trap_rain_water_monotone_holds_nothing():
    assert trap_rain_water([1, 2, 3, 4, 5]) == 0