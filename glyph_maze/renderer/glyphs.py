"""Wall-junction glyph table.

A junction code is the OR of the ``Direction`` bits of every wall segment that
leaves a point of the render buffer. Codes with a single bit set are wall
stubs: the loose end of a segment that meets no other wall. They are drawn
with the full straight glyph of their axis.
"""

from typing import Tuple

from glyph_maze.types import Direction

GLYPHS: Tuple[str, ...] = (
    " ",  # 0: no walls
    "║",  # 1: N (stub)
    "═",  # 2: E (stub)
    "╚",  # 3: N E
    "║",  # 4: S (stub)
    "║",  # 5: N S
    "╔",  # 6: E S
    "╠",  # 7: N E S
    "═",  # 8: W (stub)
    "╝",  # 9: N W
    "═",  # 10: E W
    "╩",  # 11: N E W
    "╗",  # 12: S W
    "╣",  # 13: N S W
    "╦",  # 14: E S W
    "╬",  # 15: N E S W
)

STUB_CODES = frozenset(int(direction) for direction in Direction)


def glyph_for(code: int) -> str:
    """Return the box-drawing character for junction ``code``."""
    if not 0 <= code < len(GLYPHS):
        raise ValueError(f"Junction code out of range: {code}")
    return GLYPHS[code]


def is_stub(code: int) -> bool:
    return code in STUB_CODES
