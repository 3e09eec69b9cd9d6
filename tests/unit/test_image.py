# tests/unit/test_image.py

import random

import pytest
from PIL import Image

from glyph_maze.generators import generate_sidewinder
from glyph_maze.renderer.image import (
    BACKGROUND,
    DEFAULT_MARGIN,
    WALL_COLOR,
    render_image,
)
from glyph_maze.renderer.text import render
from tests.test_utils import make_grid, make_north_btree_2x2


def test_single_cell_image_geometry() -> None:
    image = render_image(render(make_grid(1, 1)), unit=10, line_width=1, margin=4)
    assert isinstance(image, Image.Image)
    assert image.mode == "RGBA"
    # 3x3 buffer points, 10px apart, plus margins
    assert image.size == (2 * 10 + 2 * 4 + 1, 2 * 10 + 2 * 4 + 1)
    assert image.getpixel((4, 4)) == WALL_COLOR
    assert image.getpixel((4 + 10, 4)) == WALL_COLOR
    assert image.getpixel((4, 4 + 10)) == WALL_COLOR
    assert image.getpixel((4 + 10, 4 + 10)) == BACKGROUND


def test_passage_is_not_drawn() -> None:
    # (0, 0) and (0, 1) are joined, so the wall point between them stays blank
    image = render_image(
        render(make_north_btree_2x2()), unit=10, line_width=1, margin=0
    )
    assert image.getpixel((20, 10)) == BACKGROUND
    assert image.getpixel((20, 30)) == WALL_COLOR
    assert image.getpixel((0, 20)) == WALL_COLOR


def test_default_image_size() -> None:
    buffer = render(generate_sidewinder(4, 6, random.Random(0)))
    image = render_image(buffer, unit=8)
    height, width = buffer.shape
    assert image.size == (
        (width - 1) * 8 + 2 * DEFAULT_MARGIN + 1,
        (height - 1) * 8 + 2 * DEFAULT_MARGIN + 1,
    )


@pytest.mark.parametrize("unit", [0, -4])
def test_non_positive_unit_rejected(unit: int) -> None:
    with pytest.raises(ValueError):
        render_image(render(make_grid(1, 1)), unit=unit)
