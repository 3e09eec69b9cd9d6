"""Passage-graph helpers.

Pure predicates over a finished :class:`Grid`, treating cells as nodes and
open walls as edges. Only east and south links are enumerated so each
passage is counted once.
"""

from collections import deque
from typing import List, Set, Tuple

from glyph_maze.grid import Grid
from glyph_maze.types import Coord, Direction

Passage = Tuple[Coord, Coord]


def passages(grid: Grid) -> List[Passage]:
    """Return every open passage as ``(cell, east-or-south neighbour)``."""
    edges: List[Passage] = []
    for pos, cell in grid.iter_cells():
        for direction in (Direction.EAST, Direction.SOUTH):
            other = grid.neighbor(pos, direction)
            if other is not None and cell.is_open(direction):
                edges.append((pos, other))
    return edges


def count_passages(grid: Grid) -> int:
    return len(passages(grid))


def is_symmetric(grid: Grid) -> bool:
    """Return True if every wall agrees on both sides and no passage leaves the grid."""
    for pos, cell in grid.iter_cells():
        for direction in Direction:
            other = grid.neighbor(pos, direction)
            if other is None:
                if cell.is_open(direction):
                    return False
            elif cell.is_open(direction) != grid[other].is_open(direction.opposite):
                return False
    return True


def is_connected(grid: Grid) -> bool:
    """Return True if every cell is reachable from ``(0, 0)`` through passages."""
    start: Coord = (0, 0)
    queue: deque[Coord] = deque([start])
    visited: Set[Coord] = {start}

    while queue:
        pos = queue.popleft()
        cell = grid[pos]
        for direction in Direction:
            if not cell.is_open(direction):
                continue
            other = grid.neighbor(pos, direction)
            if other is not None and other not in visited:
                visited.add(other)
                queue.append(other)

    return len(visited) == grid.rows * grid.cols


def is_perfect_maze(grid: Grid) -> bool:
    """Spanning tree check: symmetric, connected, and exactly ``n - 1`` passages."""
    return (
        is_symmetric(grid)
        and is_connected(grid)
        and count_passages(grid) == grid.rows * grid.cols - 1
    )
