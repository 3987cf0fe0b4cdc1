"""Graph puzzles: source vertices, shortest paths under added roads, cellular automata."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def _road(query: Sequence[int], n: int) -> tuple[int, int]:
    u, v = query
    if not (0 <= u < n and 0 <= v < n):
        raise IndexError(f"road {list(query)!r} leaves the cities 0..{n - 1}")
    return u, v


def find_smallest_set_of_vertices(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return, in increasing order, the vertices that no edge points to."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    reached: set[int] = set()
    for edge in edges:
        target = edge[1]
        if not 0 <= target < n:
            raise IndexError(f"edge {list(edge)!r} points outside 0..{n - 1}")
        reached.add(target)
    return [node for node in range(n) if node not in reached]


def shortest_distance_after_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """After each added one-way road, give the shortest distance from city 0 to city n-1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    # distance[i] is the length of the shortest path from i to the last city.
    distance = list(range(n - 1, -1, -1))
    predecessors = [[node - 1] if node else [] for node in range(n)]
    answers: list[int] = []
    for query in queries:
        u, v = _road(query, n)
        predecessors[v].append(u)
        if distance[v] + 1 < distance[u]:
            distance[u] = distance[v] + 1
            queue = deque([u])
            while queue:
                current = queue.popleft()
                for parent in predecessors[current]:
                    if distance[current] + 1 < distance[parent]:
                        distance[parent] = distance[current] + 1
                        queue.append(parent)
        answers.append(distance[0])
    return answers


def shortest_distance_after_non_crossing_queries(
    n: int, queries: Iterable[Sequence[int]]
) -> list[int]:
    """Like :func:`shortest_distance_after_queries`, relaxing forward with a priority queue."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    # distance[i] is the length of the shortest path from the first city to i.
    distance = list(range(n))
    successors = [[node + 1] if node != n - 1 else [] for node in range(n)]
    answers: list[int] = []
    for query in queries:
        u, v = _road(query, n)
        if v != u + 1 and distance[v] > distance[u] + 1:
            if v < u:
                raise ValueError(f"road {list(query)!r} must lead forward")
            successors[u].append(v)
            distance[v] = distance[u] + 1
            # Longest jumps first: entries are (-span, -distance, -node).
            heap = [(-(v - u), -distance[v], -v)]
            while heap:
                _, neg_dist, neg_node = heapq.heappop(heap)
                node = -neg_node
                if -neg_dist != distance[node]:
                    continue
                for nxt in successors[node]:
                    if distance[nxt] > distance[node] + 1:
                        distance[nxt] = distance[node] + 1
                        heapq.heappush(heap, (-(nxt - node), -distance[nxt], -nxt))
        answers.append(distance[n - 1])
    return answers


_NEIGHBOUR_OFFSETS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


def game_of_life(board: list[list[int]]) -> None:
    """Advance ``board`` one generation of Conway's Game of Life, in place."""
    if not board:
        raise ValueError("board must not be empty")
    previous = [list(row) for row in board]
    rows, cols = len(previous), len(previous[0])
    for i in range(rows):
        for j in range(cols):
            live = sum(
                previous[i + di][j + dj]
                for di, dj in _NEIGHBOUR_OFFSETS
                if 0 <= i + di < rows and 0 <= j + dj < cols
            )
            cell = previous[i][j]
            if cell == 1 and (live < 2 or live > 3):
                board[i][j] = 0
            elif cell == 0 and live == 3:
                board[i][j] = 1