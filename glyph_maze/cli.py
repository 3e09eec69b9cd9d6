"""
Command line entry point: generate one maze and print it.
"""

import argparse
import logging
import sys
from typing import List, Optional

from glyph_maze.config import DEFAULT_COLS, DEFAULT_ROWS, MazeConfig
from glyph_maze.generators import GENERATOR_REGISTRY, generate
from glyph_maze.renderer.image import render_image
from glyph_maze.renderer.text import buffer_to_lines, render
from glyph_maze.utils.logging import setup_logging
from glyph_maze.utils.maze import count_passages

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyph-maze",
        description="Generate a perfect maze and draw it with box-drawing glyphs",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=DEFAULT_ROWS,
        help=f"Number of cell rows (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=DEFAULT_COLS,
        help=f"Number of cell columns (default: {DEFAULT_COLS})",
    )
    parser.add_argument(
        "--algorithm",
        choices=sorted(GENERATOR_REGISTRY),
        default="sidewinder",
        help="Generation algorithm",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible mazes",
    )
    parser.add_argument(
        "--image",
        type=str,
        default=None,
        help="Also save a PNG rendering to this path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    config = MazeConfig(
        rows=args.rows, cols=args.cols, algorithm=args.algorithm, seed=args.seed
    )
    logger.info("Generating maze: %s", config)

    try:
        grid = generate(config)
    except ValueError as e:
        logger.error("Maze generation failed: %s", e)
        parser.error(str(e))

    logger.debug("Maze has %d passages", count_passages(grid))

    buffer = render(grid)
    for line in buffer_to_lines(buffer):
        sys.stdout.write(line + "\n")

    if args.image is not None:
        render_image(buffer).save(args.image)
        logger.info("Saved image to %s", args.image)

    return 0


if __name__ == "__main__":
    sys.exit(main())
