"""Symmetric grid construction.

The digest is read three bytes at a time; each chunk becomes one grid row by
mirroring it around its last element::

    +----+----+----+----+----+
    | b0 | b1 | b2 | b1 | b0 |
    +----+----+----+----+----+
    | b3 | b4 | b5 | b4 | b3 |
    +----+----+----+----+----+
    | .. | .. | .. | .. | .. |
    +----+----+----+----+----+
    | b12| b13| b14| b13| b12|
    +----+----+----+----+----+

Byte 15 of the MD5 digest is unused. A cell is filled when its value is even.
Functions here are pure and return persistent vectors.
"""

import logging
from typing import Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.config import GRID_SIZE
from identicon.types import FilledCells

log = logging.getLogger("identicon.grid")


def chunk(values: Sequence[int], size: int) -> PVector[PVector[int]]:
    """Split ``values`` into consecutive groups of ``size``.

    An incomplete trailing group is dropped.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return pvector(
        [
            pvector(values[start : start + size])
            for start in range(0, len(values) - size + 1, size)
        ]
    )


def mirror_row(values: Sequence[int]) -> PVector[int]:
    """Reflect ``values`` around its last element: ``[a, b, c] -> [a, b, c, b, a]``."""
    return pvector(list(values) + list(reversed(values[:-1])))


def build_rows(
    digest: Sequence[int], grid_size: int = GRID_SIZE
) -> PVector[PVector[int]]:
    """Return the ``grid_size`` mirrored rows of cell values for ``digest``.

    Only odd grid sizes have a middle column to mirror around.
    """
    if grid_size % 2 == 0:
        raise ValueError(f"Grid size must be odd, got {grid_size}")
    chunks = chunk(digest, (grid_size + 1) // 2)[:grid_size]
    if len(chunks) < grid_size:
        raise ValueError(
            f"Digest of {len(digest)} bytes cannot fill a {grid_size}x{grid_size} grid"
        )
    return pvector([mirror_row(c) for c in chunks])


def is_filled(value: int) -> bool:
    """Fill predicate: even values (including zero) are painted."""
    return value % 2 == 0


def build_grid(digest: Sequence[int], grid_size: int = GRID_SIZE) -> FilledCells:
    """Return the ascending row-major indices of filled cells.

    Example:
        >>> list(build_grid([172, 137, 160, 109, 74, 239, 183, 169,
        ...                  100, 217, 54, 149, 46, 248, 141, 45]))
        [0, 2, 4, 6, 8, 12, 16, 18, 20, 21, 23, 24]
    """
    flat = [value for row in build_rows(digest, grid_size) for value in row]
    cells: FilledCells = pvector(
        [index for index, value in enumerate(flat) if is_filled(value)]
    )
    log.debug("Filled %d of %d cells", len(cells), len(flat))
    return cells
