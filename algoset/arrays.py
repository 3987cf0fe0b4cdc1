"""Array puzzles over lists of integers."""

from __future__ import annotations

from itertools import islice, pairwise


def kids_with_candies(candies: list[int], extra_candies: int) -> list[bool]:
    """For each kid, tell whether the extra candies would give them the most."""
    if not candies:
        raise ValueError("candies must not be empty")
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def min_operations(nums: list[int]) -> int:
    """Count the increments needed to make ``nums`` strictly increasing."""
    if not nums:
        raise ValueError("nums must not be empty")
    total = 0
    prev = nums[0]
    for value in nums[1:]:
        if prev >= value:
            total += prev - value + 1
            prev += 1
        else:
            prev = value
    return total


def contains_duplicate(nums: list[int]) -> bool:
    """Tell whether any value appears more than once."""
    return len(set(nums)) < len(nums)


def minimum_operations_to_zero(nums: list[int]) -> int:
    """Count the subtraction steps that bring every element to zero."""
    return len({value for value in nums if value > 0})


def delete_greatest_value(grid: list[list[int]]) -> int:
    """Sum the greatest values removed from each row, round by round."""
    if not grid:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) < width for row in grid):
        raise ValueError("every row must be at least as long as the first")
    rows = [sorted(row)[:width] for row in grid]
    return sum(max(column) for column in zip(*rows))


def h_index(citations: list[int]) -> int:
    """Return the h-index of a list of citation counts."""
    ranked = sorted(citations, reverse=True)
    return max((min(rank, count) for rank, count in enumerate(ranked, 1)), default=0)


def find_peaks(mountain: list[int]) -> list[int]:
    """Return the indices of elements strictly greater than both neighbours."""
    peaks: list[int] = []
    i = 1
    while i < len(mountain) - 1:
        if mountain[i - 1] < mountain[i] > mountain[i + 1]:
            peaks.append(i)
            i += 2
        else:
            i += 1
    return peaks


def minimum_operations_to_distinct(nums: list[int]) -> int:
    """Count removals of the first three elements needed to leave distinct values."""
    seen: set[int] = set()
    for index in range(len(nums) - 1, -1, -1):
        value = nums[index]
        if value in seen:
            return index // 3 + 1
        seen.add(value)
    return 0


def count_partitions(nums: list[int]) -> int:
    """Count split points where the two sides' sums differ by an even amount."""
    if len(nums) < 2:
        return 0
    return 0 if sum(nums) % 2 else len(nums) - 1


def max_sub_array(nums: list[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    result = list(digits)
    for position in reversed(range(len(result))):
        total = result[position] + 1
        result[position] = total % 10
        if total // 10 != 1:
            return result
    return [1, *result]


def repeated_n_times(nums: list[int]) -> int:
    """Return the element repeated n times in a list of length 2n, or 0."""
    half = len(nums) // 2
    for left, right in islice(pairwise(sorted(nums)), half + 1):
        if left == right:
            return left
    return 0