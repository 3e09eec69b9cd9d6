import numpy as np
from PIL import Image, ImageDraw
from typing import Tuple

from glyph_maze.renderer.text import JunctionBuffer
from glyph_maze.types import Direction

DEFAULT_UNIT = 16
DEFAULT_LINE_WIDTH = 2
DEFAULT_MARGIN = 8

Color = Tuple[int, int, int, int]

BACKGROUND: Color = (255, 255, 255, 255)
WALL_COLOR: Color = (0, 0, 0, 255)


def render_image(
    buffer: JunctionBuffer,
    unit: int = DEFAULT_UNIT,
    line_width: int = DEFAULT_LINE_WIDTH,
    margin: int = DEFAULT_MARGIN,
) -> Image.Image:
    """
    Draw a junction buffer as wall lines on an RGBA image.
    Buffer points are laid out ``unit`` pixels apart; every set bit draws a
    half-unit segment from the point toward that direction, so segments from
    neighbouring points meet in the middle. Stubs draw a single half segment.
    """
    if unit <= 0:
        raise ValueError(f"unit must be positive, got {unit}")

    height, width = buffer.shape
    size = (
        (width - 1) * unit + 2 * margin + 1,
        (height - 1) * unit + 2 * margin + 1,
    )
    image = Image.new("RGBA", size, BACKGROUND)
    draw = ImageDraw.Draw(image)
    half = unit / 2.0

    for row, col in zip(*np.nonzero(buffer)):
        code = int(buffer[row, col])
        cx = margin + int(col) * unit
        cy = margin + int(row) * unit
        for direction in Direction:
            if not code & direction:
                continue
            drow, dcol = direction.offset
            end = (int(round(cx + dcol * half)), int(round(cy + drow * half)))
            draw.line([(cx, cy), end], fill=WALL_COLOR, width=line_width)

    return image
