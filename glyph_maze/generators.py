"""Built-in maze generators.

Each *generator* maps ``(rows, cols, rng)`` to a finished :class:`Grid` whose
passage graph is a spanning tree. Both algorithms here sweep rows from the
bottom up, scanning each row left to right, and share the same edge rules:

* The top row has nothing above it, so its cells always carve east.
* The last column has nothing to its right, so its cells always carve north.
* The top-right cell has neither option and is skipped.

Contract (``GeneratorFn``):

* Must draw randomness only from the ``rng`` argument, never from the global
  ``random`` module, so a seeded ``random.Random`` reproduces the maze.
* Must reject non-positive dimensions with ``InvalidDimensionError``.
"""

import logging
import random
from typing import Dict

from glyph_maze.config import MazeConfig
from glyph_maze.grid import Grid, MazeBuilder
from glyph_maze.types import Algorithm, Direction, GeneratorFn

logger = logging.getLogger(__name__)

# Coin flip outcomes
CARVE_NORTH = 0
CARVE_EAST = 1


def _choose_direction(row: int, col: int, cols: int, rng: random.Random) -> int:
    """Pick north or east for ``(row, col)``, honouring the forced edge rules."""
    if col == cols - 1:
        return CARVE_NORTH
    if row == 0:
        return CARVE_EAST
    return rng.randrange(2)


def generate_sidewinder(rows: int, cols: int, rng: random.Random) -> Grid:
    """Sidewinder: join cells into eastward runs, closing each run upward once.

    When a run closes, one cell chosen uniformly from the run carves north,
    so every run below the top row has exactly one link to the row above.
    """
    maze = MazeBuilder(rows, cols)

    for row in reversed(range(rows)):
        run_start = 0
        for col in range(cols):
            if row == 0 and col == cols - 1:
                continue

            if _choose_direction(row, col, cols, rng) == CARVE_NORTH:
                target_col = rng.randint(run_start, col)
                maze.carve(row, target_col, Direction.NORTH)
                run_start = col + 1
            else:
                maze.carve(row, col, Direction.EAST)

    logger.debug("Generated %dx%d sidewinder maze", rows, cols)
    return maze.to_grid()


def generate_btree(rows: int, cols: int, rng: random.Random) -> Grid:
    """Binary tree: every cell independently carves north or east.

    Produces long corridors along the top row and the right column.
    """
    maze = MazeBuilder(rows, cols)

    for row in reversed(range(rows)):
        for col in range(cols):
            if row == 0 and col == cols - 1:
                continue

            if _choose_direction(row, col, cols, rng) == CARVE_NORTH:
                maze.carve(row, col, Direction.NORTH)
            else:
                maze.carve(row, col, Direction.EAST)

    logger.debug("Generated %dx%d binary tree maze", rows, cols)
    return maze.to_grid()


GENERATOR_REGISTRY: Dict[str, GeneratorFn] = {
    Algorithm.SIDEWINDER: generate_sidewinder,
    Algorithm.BTREE: generate_btree,
}
"""Registry of built-in algorithm names to generator callables.

Used by :func:`generate` and the command line ``--algorithm`` choice.
"""


def generate(config: MazeConfig) -> Grid:
    """Generate a maze from ``config`` with a fresh ``random.Random(config.seed)``."""
    try:
        generator_fn = GENERATOR_REGISTRY[config.algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {config.algorithm!r} "
            f"(expected one of {sorted(GENERATOR_REGISTRY)})"
        ) from None
    rng = random.Random(config.seed)
    return generator_fn(config.rows, config.cols, rng)
