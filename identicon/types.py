"""Common type aliases for the identicon pipeline.

Every value produced by a pipeline stage is immutable: byte and index
sequences are persistent vectors (``pyrsistent.PVector``) and coordinates are
plain tuples. A stage never mutates its input; it returns a new value.
"""

from typing import Tuple
from pyrsistent.typing import PVector

Digest = PVector[int]
"""16 unsigned bytes produced by :func:`identicon.hasher.hash_input`."""

Color = Tuple[int, int, int]
"""``(red, green, blue)`` triple, each channel in ``[0, 255]``."""

Point = Tuple[int, int]
"""``(x, y)`` pixel coordinate on the canvas (0, 0 at top-left)."""

Rect = Tuple[Point, Point]
"""``(top_left, bottom_right)``; bottom-right is exclusive."""

GridIndex = int
"""Row-major cell index in the ``grid_size x grid_size`` grid."""

FilledCells = PVector[GridIndex]
PixelMap = PVector[Rect]
