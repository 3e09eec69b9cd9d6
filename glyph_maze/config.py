from dataclasses import dataclass
from typing import Optional

from glyph_maze.types import Algorithm

DEFAULT_ROWS = 12
DEFAULT_COLS = 12


@dataclass(frozen=True)
class MazeConfig:
    """Parameters for a single maze.

    Attributes:
        rows: Number of cell rows.
        cols: Number of cell columns.
        algorithm: Generator name, a key of ``GENERATOR_REGISTRY``.
        seed: Seed for the ``random.Random`` source; ``None`` draws from the OS.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    algorithm: str = Algorithm.SIDEWINDER
    seed: Optional[int] = None
