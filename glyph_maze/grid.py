"""Cell and grid model.

Two representations of the same maze live here:

* :class:`MazeBuilder` is the mutable, generation-time grid. Generators carve
  passages into it through :meth:`MazeBuilder.carve`, which always updates
  both sides of a wall so the symmetry invariant cannot be broken halfway.
* :class:`Grid` is the frozen result handed to renderers. Rows are stored as
  persistent vectors; every read accessor returns immutable ``Cell`` values.

Coordinates are ``(row, col)`` with row 0 at the top and col 0 at the left.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from glyph_maze.types import Coord, Direction


class InvalidDimensionError(ValueError):
    """Raised when a maze is requested with a non-positive or non-integer size."""


def validate_dimensions(rows: int, cols: int) -> None:
    """Fail fast on dimensions no generator can work with."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value < 1:
            raise InvalidDimensionError(f"{name} must be >= 1, got {value}")


@dataclass(frozen=True)
class Cell:
    """Passage flags of one maze cell.

    Attributes:
        north: Passage to the cell above.
        east: Passage to the cell on the right.
        south: Passage to the cell below.
        west: Passage to the cell on the left.
    """

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    def is_open(self, direction: Direction) -> bool:
        return getattr(self, direction.name.lower())

    def opened(self, direction: Direction) -> Cell:
        """Return a copy with the wall in ``direction`` removed."""
        return replace(self, **{direction.name.lower(): True})


@dataclass(frozen=True)
class Grid:
    """Immutable ``rows x cols`` maze.

    Attributes:
        rows: Number of cell rows.
        cols: Number of cell columns.
        cells: Row-major persistent vectors of :class:`Cell`.
    """

    rows: int
    cols: int
    cells: PVector[PVector[Cell]]

    def __getitem__(self, pos: Coord) -> Cell:
        row, col = pos
        self._check_bounds(row, col)
        return self.cells[row][col]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def iter_cells(self) -> Iterator[Tuple[Coord, Cell]]:
        """Yield ``((row, col), cell)`` in row-major order."""
        for row, cells in enumerate(self.cells):
            for col, cell in enumerate(cells):
                yield (row, col), cell

    def neighbor(self, pos: Coord, direction: Direction) -> Coord | None:
        """Return the adjacent coordinate in ``direction`` or ``None`` off-grid."""
        drow, dcol = direction.offset
        row, col = pos[0] + drow, pos[1] + dcol
        if not self.in_bounds(row, col):
            return None
        return (row, col)

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.rows}x{self.cols}"
            )


@dataclass
class MazeBuilder:
    """Generation-time grid.

    Starts fully walled. ``carve`` opens a wall on both sides; ``to_grid``
    freezes the current state into a :class:`Grid`.
    """

    rows: int
    cols: int

    cells: List[List[Cell]] = field(init=False)

    def __post_init__(self) -> None:
        validate_dimensions(self.rows, self.cols)
        self.cells = [[Cell() for _ in range(self.cols)] for _ in range(self.rows)]

    def carve(self, row: int, col: int, direction: Direction) -> None:
        """Open the passage between ``(row, col)`` and its neighbour in ``direction``."""
        self._check_bounds(row, col)
        drow, dcol = direction.offset
        other_row, other_col = row + drow, col + dcol
        if not (0 <= other_row < self.rows and 0 <= other_col < self.cols):
            raise IndexError(
                f"Cannot carve {direction.name} from {(row, col)}: "
                f"no neighbour in grid {self.rows}x{self.cols}"
            )
        self.cells[row][col] = self.cells[row][col].opened(direction)
        self.cells[other_row][other_col] = self.cells[other_row][other_col].opened(
            direction.opposite
        )

    def to_grid(self) -> Grid:
        return Grid(
            rows=self.rows,
            cols=self.cols,
            cells=pvector(pvector(row) for row in self.cells),
        )

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.rows}x{self.cols}"
            )
