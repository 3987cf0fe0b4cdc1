import random

import pytest

from algoset.counting import (
    color_the_grid,
    column_transitions,
    sum_subseq_widths,
    sum_subseq_widths_exhaustive,
)


def _sample(seed, size, upper):
    rng = random.Random(seed)
    return [rng.randint(1, upper) for _ in range(size)]


@pytest.mark.parametrize(
    ("m", "n", "expected"),
    [
        (1, 1, 3),
        (1, 2, 6),
        (5, 5, 580986),
        (2, 1, 6),
        (2, 2, 18),
        (2, 5, 486),
        (1, 3, 12),
        (1, 4, 24),
        (5, 1, 48),
    ],
)
def test_color_the_grid(m, n, expected):
    assert color_the_grid(m, n) == expected


def test_color_the_grid_uses_five_row_table_beyond_five():
    assert color_the_grid(6, 1) == 48


@pytest.mark.parametrize("m", [1, 2, 3, 4, 5])
def test_two_columns_count_matches_transition_total(m):
    table = column_transitions(m)
    assert color_the_grid(m, 2) == sum(len(targets) for targets in table)


def test_column_transitions_for_one_row():
    assert column_transitions(1) == [[1, 2], [0, 2], [0, 1]]


def test_column_transitions_for_two_rows():
    table = column_transitions(2)
    assert len(table) == 6
    assert table[0] == [2, 3, 4]
    assert table[5] == [1, 2, 3]


def test_column_transitions_for_three_rows_size():
    assert len(column_transitions(3)) == 12


@pytest.mark.parametrize("m", [1, 2, 3, 4, 5])
def test_column_transitions_are_symmetric_without_self_loops(m):
    table = column_transitions(m)
    for source, targets in enumerate(table):
        assert source not in targets
        assert targets == sorted(targets)
        for target in targets:
            assert source in table[target]


def test_column_transitions_for_five_rows_size():
    assert len(column_transitions(5)) == 48


def test_column_transitions_rejects_negative():
    with pytest.raises(ValueError):
        column_transitions(-1)


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([2, 1, 3], 6),
        ([2], 0),
        ([2, 1, 3, 4], 1 * 3 + 2 * 4 + 3 * 4),
    ],
)
def test_sum_subseq_widths(nums, expected):
    assert sum_subseq_widths(nums) == expected


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([2, 1, 3], 6),
        ([2], 0),
        ([2, 1, 3, 4], 1 * 3 + 2 * 4 + 3 * 4),
    ],
)
def test_sum_subseq_widths_exhaustive(nums, expected):
    assert sum_subseq_widths_exhaustive(nums) == expected


@pytest.mark.parametrize(
    "nums",
    [
        [5, 5, 5],
        [1, 9],
        [3, 1, 4, 1, 5, 9, 2, 6],
        [7, 0, 7, 0, 2],
        _sample(7, 100, 200),
        _sample(11, 60, 50),
    ],
)
def test_both_width_sums_agree(nums):
    assert sum_subseq_widths(nums) == sum_subseq_widths_exhaustive(nums)


def test_sum_subseq_widths_ignores_order_of_input():
    nums = _sample(3, 500, 1000)
    expected = sum_subseq_widths(nums)
    assert sum_subseq_widths(list(reversed(nums))) == expected
    assert sum_subseq_widths(sorted(nums)) == expected
    assert 0 <= expected < 1_000_000_007


def test_sum_subseq_widths_of_equal_values_is_zero():
    assert sum_subseq_widths([4] * 50) == 0


def test_sum_subseq_widths_rejects_empty():
    with pytest.raises(ValueError):
        sum_subseq_widths([])


def test_exhaustive_rejects_negative_values():
    with pytest.raises(ValueError):
        sum_subseq_widths_exhaustive([1, -2])