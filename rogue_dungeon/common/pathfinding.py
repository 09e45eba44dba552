"""A* pathfinding over carved grids."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Grid


@dataclass(order=True)
class _Node:
    """A node in the pathfinding priority queue."""

    f_score: int
    position: tuple[int, int] = field(compare=False)
    g_score: int = field(compare=False)


def _heuristic(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Manhattan distance, since entities only move in the four cardinal directions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _get_neighbors(x: int, y: int) -> list[tuple[int, int]]:
    return [(x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)]


def is_walkable(grid: Grid, x: int, y: int) -> bool:
    """Check if an entity could stand on (x, y); off-grid cells are never walkable."""
    return grid.in_bounds(x, y) and not grid.is_blocked(x, y)


def find_path(
    start: tuple[int, int],
    goal: tuple[int, int],
    grid: Grid,
    max_iterations: int = 100000,
) -> list[tuple[int, int]] | None:
    """Find a path from start to goal using the A* algorithm.

    Args:
        start: Starting position (x, y).
        goal: Target position (x, y).
        grid: Grid used for walkability checks.
        max_iterations: Maximum iterations before giving up.

    Returns:
        List of positions from start to goal (inclusive), each one step apart,
        or None if no path was found.
    """
    if start == goal:
        return [start]

    if not is_walkable(grid, goal[0], goal[1]):
        return None

    open_set: list[_Node] = []
    heapq.heappush(open_set, _Node(_heuristic(start, goal), start, 0))

    came_from: dict[tuple[int, int], tuple[int, int]] = {}
    g_scores: dict[tuple[int, int], int] = {start: 0}
    open_positions: set[tuple[int, int]] = {start}

    iterations = 0
    while open_set and iterations < max_iterations:
        iterations += 1

        current_node = heapq.heappop(open_set)
        current = current_node.position
        open_positions.discard(current)

        if current == goal:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        current_g = g_scores[current]

        for neighbor in _get_neighbors(current[0], current[1]):
            if not is_walkable(grid, neighbor[0], neighbor[1]):
                continue

            tentative_g = current_g + 1

            if neighbor not in g_scores or tentative_g < g_scores[neighbor]:
                came_from[neighbor] = current
                g_scores[neighbor] = tentative_g
                f_score = tentative_g + _heuristic(neighbor, goal)

                if neighbor not in open_positions:
                    heapq.heappush(open_set, _Node(f_score, neighbor, tentative_g))
                    open_positions.add(neighbor)

    return None
