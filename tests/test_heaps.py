import pytest

from algoset.heaps import find_relative_ranks, furthest_building, max_kelements


@pytest.mark.parametrize(
    "heights, bricks, ladders, expected",
    [
        ([4, 2, 7, 6, 9, 14, 12], 5, 1, 4),
        ([4, 12, 2, 7, 3, 18, 20, 3, 19], 10, 2, 7),
        ([14, 3, 19, 3], 17, 0, 3),
    ],
)
def test_furthest_building(heights, bricks, ladders, expected):
    assert furthest_building(heights, bricks, ladders) == expected


def test_furthest_building_stuck_at_start():
    assert furthest_building([1, 5], 0, 0) == 0


def test_furthest_building_empty():
    with pytest.raises(ValueError):
        furthest_building([], 1, 1)


@pytest.mark.parametrize(
    "nums, k, expected",
    [([10, 10, 10, 10, 10], 5, 50), ([1, 10, 3, 3, 3], 3, 17)],
)
def test_max_kelements(nums, k, expected):
    assert max_kelements(nums, k) == expected


def test_max_kelements_empty():
    assert max_kelements([], 3) == 0


@pytest.mark.parametrize(
    "score, expected",
    [
        ([5, 4, 3, 2, 1], ["Gold Medal", "Silver Medal", "Bronze Medal", "4", "5"]),
        ([10, 3, 8, 9, 4], ["Gold Medal", "5", "Bronze Medal", "Silver Medal", "4"]),
        ([10, 3, 5, 7, 4], ["Gold Medal", "5", "Bronze Medal", "Silver Medal", "4"]),
        ([10], ["Gold Medal"]),
        ([1, 3, 10], ["Bronze Medal", "Silver Medal", "Gold Medal"]),
    ],
)
def test_find_relative_ranks(score, expected):
    assert find_relative_ranks(score) == expected