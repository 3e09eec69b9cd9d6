"""Junction buffer assembly and text output.

A grid of ``rows x cols`` cells is drawn on a buffer of
``(2*rows + 1) x (2*cols + 1)`` points. Cell ``(i, j)`` sits at the odd
position ``(2i + 1, 2j + 1)``; the points straight next to it are its wall
edges and the diagonal points are corners shared with up to three other cells.

Every closed wall contributes to three points: the edge point it covers and
the two corners at its ends. A corner only learns in which direction the wall
leaves it, which is the wall direction rotated a quarter turn towards the other
corner. Contributions from neighbouring cells are OR'ed together, so each point
ends up with the full set of segments meeting there.
"""

import logging
from typing import IO, List, Tuple

import numpy as np
import numpy.typing as npt

from glyph_maze.grid import Grid
from glyph_maze.renderer.glyphs import glyph_for
from glyph_maze.types import CLOCKWISE, COUNTER_CLOCKWISE, Coord, Direction

logger = logging.getLogger(__name__)

JunctionBuffer = npt.NDArray[np.uint8]

# Printed width of even (corner / vertical wall) and odd (horizontal span) columns
NARROW_WIDTH = 1
WIDE_WIDTH = 3


def rotate_wall_bit(direction: Direction, clockwise: bool) -> int:
    """Return the bit of ``direction`` rotated a quarter turn on screen."""
    rotated = CLOCKWISE[direction] if clockwise else COUNTER_CLOCKWISE[direction]
    return int(rotated)


def wall_contributions(direction: Direction, center: Coord) -> List[Tuple[Coord, int]]:
    """Return the ``(position, bits)`` a closed wall adds around ``center``.

    The corner reached by stepping counter-clockwise from the wall sees the
    segment leave clockwise, and vice versa. The edge point between them gets
    both bits.
    """
    drow, dcol = direction.offset
    ccw_row, ccw_col = COUNTER_CLOCKWISE[direction].offset
    cw_row, cw_col = CLOCKWISE[direction].offset
    edge = (center[0] + drow, center[1] + dcol)

    towards_cw = rotate_wall_bit(direction, clockwise=True)
    towards_ccw = rotate_wall_bit(direction, clockwise=False)

    return [
        ((edge[0] + ccw_row, edge[1] + ccw_col), towards_cw),
        ((edge[0] + cw_row, edge[1] + cw_col), towards_ccw),
        (edge, towards_cw | towards_ccw),
    ]


def render(grid: Grid) -> JunctionBuffer:
    """Build the junction-code buffer for ``grid``.

    Returns a fresh ``uint8`` array of shape ``(2*rows + 1, 2*cols + 1)``.
    """
    buffer: JunctionBuffer = np.zeros(
        (grid.rows * 2 + 1, grid.cols * 2 + 1), dtype=np.uint8
    )

    for (row, col), cell in grid.iter_cells():
        center = (row * 2 + 1, col * 2 + 1)
        for direction in Direction:
            if cell.is_open(direction):
                continue
            for (brow, bcol), bits in wall_contributions(direction, center):
                buffer[brow, bcol] |= bits
        # Cell interiors are never shared
        buffer[center] = 0

    logger.debug(
        "Rendered %dx%d grid to %s buffer", grid.rows, grid.cols, buffer.shape
    )
    return buffer


def buffer_to_lines(buffer: JunctionBuffer) -> List[str]:
    """Format each buffer row as a line of glyphs.

    Even columns print once and odd columns three times, so corridors look
    roughly square in a monospaced font.
    """
    lines: List[str] = []
    for codes in buffer:
        parts: List[str] = []
        for col, code in enumerate(codes):
            width = WIDE_WIDTH if col % 2 == 1 else NARROW_WIDTH
            parts.append(glyph_for(int(code)) * width)
        lines.append("".join(parts))
    return lines


def render_text(grid: Grid) -> str:
    """Render ``grid`` as newline-terminated lines of box-drawing text."""
    return "".join(line + "\n" for line in buffer_to_lines(render(grid)))


def write_maze(grid: Grid, stream: IO[str]) -> None:
    stream.write(render_text(grid))
