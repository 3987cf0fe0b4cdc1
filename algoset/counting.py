"""Counting puzzles: grid colourings and sums of subsequence widths."""

from __future__ import annotations

from functools import lru_cache
from itertools import pairwise, product

ANSWER_MOD = 1_000_000_007


@lru_cache(maxsize=None)
def _transitions(m: int) -> tuple[tuple[int, ...], ...]:
    # Colour k of a column is digit k (least significant first) of its base-3 number.
    columns = [
        column
        for column in (tuple(reversed(digits)) for digits in product(range(3), repeat=m))
        if all(a != b for a, b in pairwise(column))
    ]
    return tuple(
        tuple(
            index
            for index, other in enumerate(columns)
            if all(a != b for a, b in zip(column, other))
        )
        for column in columns
    )


def column_transitions(m: int) -> list[list[int]]:
    """For each valid 3-colouring of an m-cell column, list the columns that may follow it."""
    if m < 0:
        raise ValueError(f"m must not be negative, got {m}")
    return [list(targets) for targets in _transitions(m)]


def color_the_grid(m: int, n: int) -> int:
    """Count 3-colourings of an m by n grid with no equal neighbours, modulo 1e9+7."""
    transitions = _transitions(m if 1 <= m <= 4 else 5)
    ways = [1] * len(transitions)
    for _ in range(n - 1):
        following = [0] * len(transitions)
        for count, targets in zip(ways, transitions):
            for target in targets:
                following[target] = (following[target] + count) % ANSWER_MOD
        ways = following
    return sum(ways) % ANSWER_MOD


def _truncated_rem(value: int) -> int:
    remainder = abs(value) % ANSWER_MOD
    return remainder if value >= 0 else -remainder


def sum_subseq_widths(nums: list[int]) -> int:
    """Sum max minus min over all non-empty subsequences, reduced by 1e9+7."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = sorted(nums)
    powers = [1]
    for _ in range(len(ordered) - 1):
        powers.append(powers[-1] * 2 % ANSWER_MOD)
    total = 0
    for value, as_max, as_min in zip(ordered, powers, reversed(powers)):
        total = _truncated_rem(total + (as_max - as_min) * value)
    return total


def sum_subseq_widths_exhaustive(nums: list[int]) -> int:
    """Sum subsequence widths by counting subsequences per (min, max) pair."""
    counts: dict[tuple[int, int], int] = {}
    for value in nums:
        if value < 0:
            raise ValueError(f"values must not be negative, got {value}")
        extended = dict(counts)
        for (low, high), count in counts.items():
            key = (min(low, value), max(high, value))
            extended[key] = (extended.get(key, 0) + count) % ANSWER_MOD
        extended[(value, value)] = extended.get((value, value), 0) + 1
        counts = extended
    total = 0
    for (low, high), count in counts.items():
        total = (total + (high - low) * count) % ANSWER_MOD
    return total