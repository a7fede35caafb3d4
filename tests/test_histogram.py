import pytest

from algosolve.histogram import largest_rectangle, maximal_rectangle


@pytest.mark.parametrize(
    "heights, expected",
    [
        ([], 0),
        ([2], 2),
        ([2, 2], 4),
        ([2, 4], 4),
        ([4, 1], 4),
        ([2, 1, 5, 6, 2, 3], 10),
    ],
)
def test_largest_rectangle_source_cases(heights, expected):
    assert largest_rectangle(heights) == expected


@pytest.mark.parametrize("heights", [[2, 1, 5, 6, 2, 3], [3, 1, 4, 1, 5, 9, 2, 6]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area == largest_rectangle(list(reversed(heights)))


def test_maximal_rectangle_source_cases():
    grid = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    assert maximal_rectangle(grid) == 6
    assert maximal_rectangle([["0"]]) == 0
    assert maximal_rectangle([["1"]]) == 1


def test_maximal_rectangle_accepts_string_rows():
    assert maximal_rectangle(["10100", "10111", "11111", "10010"]) == 6


def test_maximal_rectangle_all_ones_covers_whole_grid():
    grid = ["111", "111"]
    assert maximal_rectangle(grid) == 2 * 3


def test_maximal_rectangle_empty_raises():
    with pytest.raises(ValueError):
        maximal_rectangle([])


def test_maximal_rectangle_ragged_raises():
    with pytest.raises(ValueError):
        maximal_rectangle(["11", "1"])