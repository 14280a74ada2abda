"""Grid index to pixel rectangle mapping."""

import logging
from typing import Iterable

from pyrsistent import pvector

from identicon.config import CELL_SIZE, GRID_SIZE
from identicon.types import GridIndex, PixelMap, Rect

log = logging.getLogger("identicon.pixel_map")


def cell_rect(
    index: GridIndex, grid_size: int = GRID_SIZE, cell_size: int = CELL_SIZE
) -> Rect:
    """Return the ``(top_left, bottom_right)`` pixel rectangle of one cell.

    Indices are not range checked; callers pass indices from
    :func:`identicon.grid.build_grid`.
    """
    column, row = index % grid_size, index // grid_size
    x0, y0 = column * cell_size, row * cell_size
    return ((x0, y0), (x0 + cell_size, y0 + cell_size))


def build_pixel_map(
    cells: Iterable[GridIndex],
    grid_size: int = GRID_SIZE,
    cell_size: int = CELL_SIZE,
) -> PixelMap:
    """Map filled cell indices to canvas rectangles, preserving order.

    Example:
        >>> list(build_pixel_map([0, 12, 24]))
        [((0, 0), (50, 50)), ((100, 100), (150, 150)), ((200, 200), (250, 250))]
    """
    pixel_map: PixelMap = pvector(
        [cell_rect(index, grid_size, cell_size) for index in cells]
    )
    log.debug("Built pixel map with %d rectangles", len(pixel_map))
    return pixel_map
