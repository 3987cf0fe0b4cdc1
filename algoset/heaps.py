"""Greedy puzzles driven by priority queues."""

from __future__ import annotations

import heapq

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def furthest_building(heights: list[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable with the given bricks and ladders."""
    if not heights:
        raise ValueError("heights must not be empty")
    climbs: list[int] = []
    for index, (prev, cur) in enumerate(zip(heights, heights[1:]), start=1):
        delta = cur - prev
        if delta <= 0:
            continue
        heapq.heappush(climbs, -delta)
        bricks -= delta
        if bricks < 0:
            if ladders == 0:
                return index - 1
            ladders -= 1
            bricks += -heapq.heappop(climbs)
    return len(heights) - 1


def _shrink(value: int) -> int:
    quotient = abs(value) // 3
    if value < 0:
        quotient = -quotient
    return quotient + (1 if value % 3 else 0)


def max_kelements(nums: list[int], k: int) -> int:
    """Take the largest element ``k`` times, replacing it by a third rounded up."""
    heap = [-value for value in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        if not heap:
            break
        value = -heapq.heappop(heap)
        score += value
        heapq.heappush(heap, -_shrink(value))
    return score


def find_relative_ranks(score: list[int]) -> list[str]:
    """Name each athlete's placing: medals for the top three, then the rank number."""
    ranks = [""] * len(score)
    order = sorted(range(len(score)), key=lambda i: (score[i], i), reverse=True)
    for place, index in enumerate(order):
        ranks[index] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return ranks