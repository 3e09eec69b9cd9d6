"""glyph_maze
=================================

Perfect maze generation and box-drawing rendering.

Generators carve a spanning tree into a ``rows x cols`` grid, and the
renderer turns the finished grid into a buffer of wall-junction codes that
maps one-to-one onto box-drawing characters::

    import random
    from glyph_maze import generate_sidewinder, render_text

    grid = generate_sidewinder(12, 12, random.Random(7))
    print(render_text(grid), end="")

"""

from .config import MazeConfig
from .generators import GENERATOR_REGISTRY
from .generators import generate, generate_btree, generate_sidewinder
from .grid import Cell, Grid, InvalidDimensionError, MazeBuilder
from .renderer.glyphs import GLYPHS, glyph_for
from .renderer.text import buffer_to_lines, render, render_text, write_maze
from .types import Algorithm, Direction
