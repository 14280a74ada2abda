"""Fixed rendering defaults.

The identicon is always a ``GRID_SIZE x GRID_SIZE`` grid of square cells of
``CELL_SIZE`` pixels on a white canvas. The values can be passed explicitly to
the individual stages, but nothing at runtime changes the module defaults.
"""

from dataclasses import dataclass

from identicon.types import Color

GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
BACKGROUND: Color = (255, 255, 255)


@dataclass(frozen=True)
class IdenticonConfig:
    """Geometry and background used when rasterizing.

    Attributes:
        grid_size: Number of cells per side.
        cell_size: Side length of one cell in pixels.
        background: Canvas color for unfilled cells.
    """

    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    background: Color = BACKGROUND

    @property
    def canvas_size(self) -> int:
        return self.grid_size * self.cell_size


DEFAULT_CONFIG = IdenticonConfig()
