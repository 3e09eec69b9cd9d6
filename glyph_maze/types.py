"""Common type aliases and enumerations.

``Direction`` doubles as the wall-junction bit value used by the renderer, so
a cell's walls and the glyph codes they produce share a single vocabulary.
"""

import random
from enum import IntEnum, StrEnum, auto
from typing import Callable, Dict, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from glyph_maze.grid import Grid

# Grid / buffer coordinate (row, col)
Coord = Tuple[int, int]

GeneratorFn = Callable[[int, int, random.Random], "Grid"]


class Direction(IntEnum):
    """Cardinal directions, valued by their wall-junction bit.

    Members:
        NORTH, EAST, SOUTH, WEST: Listed in clockwise screen order.
    """

    NORTH = 0b0001
    EAST = 0b0010
    SOUTH = 0b0100
    WEST = 0b1000

    @property
    def offset(self) -> Coord:
        """Unit step ``(drow, dcol)`` in screen space (rows grow downward)."""
        return DIRECTION_OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return CLOCKWISE[CLOCKWISE[self]]


DIRECTION_OFFSETS: Dict[Direction, Coord] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

CLOCKWISE: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

COUNTER_CLOCKWISE: Dict[Direction, Direction] = {
    after: before for before, after in CLOCKWISE.items()
}


class Algorithm(StrEnum):
    """Built-in maze generation strategies."""

    SIDEWINDER = auto()
    BTREE = auto()
