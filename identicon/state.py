"""Immutable identicon aggregate.

An :class:`Identicon` is only constructed once every pure stage has run, so
no field is ever missing or partially populated. Stages that need a subset of
the data take plain values (digest, color, pixel map) rather than the
aggregate, which keeps each of them independently testable.
"""

from dataclasses import dataclass

from identicon.types import Color, Digest, FilledCells, PixelMap


@dataclass(frozen=True)
class Identicon:
    """Everything needed to draw one identicon.

    Attributes:
        hash (Digest): 16 digest bytes of the input.
        color (Color): Fill color taken from the first three digest bytes.
        cells_to_fill (FilledCells): Ascending indices of filled grid cells.
        pixel_map (PixelMap): Canvas rectangle for each filled cell, same order.
    """

    hash: Digest
    color: Color
    cells_to_fill: FilledCells
    pixel_map: PixelMap

    def __post_init__(self) -> None:
        if len(self.pixel_map) != len(self.cells_to_fill):
            raise ValueError(
                f"Pixel map has {len(self.pixel_map)} rectangles "
                f"for {len(self.cells_to_fill)} filled cells"
            )
