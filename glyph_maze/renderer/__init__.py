"""Rendering subpackage.

Turns a finished :class:`~glyph_maze.grid.Grid` into pictures. Both outputs
share one intermediate, the wall-junction buffer built by
:func:`glyph_maze.renderer.text.render`:

* Text: each junction code is looked up in the box-drawing glyph table
  (:mod:`glyph_maze.renderer.glyphs`).
* Raster: each code is drawn as line segments with Pillow
  (:mod:`glyph_maze.renderer.image`).
"""
