import sys

from glyph_maze.cli import main

sys.exit(main())
