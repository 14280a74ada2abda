"""Identicon pipeline orchestration.

Composes the stages strictly left to right:

1. :func:`identicon.hasher.hash_input` derives the 16-byte digest.
2. :func:`identicon.color.pick_color` takes the color from bytes 0-2.
3. :func:`identicon.grid.build_grid` selects filled cells from bytes 0-14.
4. :func:`identicon.pixel_map.build_pixel_map` turns cells into rectangles.
5. :func:`identicon.renderer.raster.render` draws and encodes the PNG.
6. :func:`identicon.writer.save_image` writes ``<input>.png``.

Stages 1-5 are pure; only the last one touches the file system and it is the
only one that can fail (with ``OSError``).
"""

import logging
from pathlib import Path
from typing import Optional

from identicon.color import pick_color
from identicon.config import DEFAULT_CONFIG, IdenticonConfig
from identicon.grid import build_grid
from identicon.hasher import hash_input
from identicon.pixel_map import build_pixel_map
from identicon.renderer.raster import RasterRenderer
from identicon.state import Identicon
from identicon.writer import PathLike, save_image

log = logging.getLogger("identicon.pipeline")


def build_identicon(data: str, config: IdenticonConfig = DEFAULT_CONFIG) -> Identicon:
    """Run the pure stages and return the complete :class:`Identicon`."""
    digest = hash_input(data)
    color = pick_color(digest)
    cells = build_grid(digest, config.grid_size)
    pixel_map = build_pixel_map(cells, config.grid_size, config.cell_size)
    return Identicon(hash=digest, color=color, cells_to_fill=cells, pixel_map=pixel_map)


def render_identicon(data: str, config: IdenticonConfig = DEFAULT_CONFIG) -> bytes:
    """Return the PNG bytes of the identicon for ``data`` without writing them."""
    identicon = build_identicon(data, config)
    return RasterRenderer(config).render(identicon.color, identicon.pixel_map)


def generate_identicon(
    data: str,
    directory: Optional[PathLike] = None,
    config: IdenticonConfig = DEFAULT_CONFIG,
) -> Path:
    """Generate the identicon for ``data`` and save it as ``<data>.png``.

    Args:
        data: Arbitrary input string; also used verbatim as the file stem.
        directory: Destination directory. Defaults to the current directory.
        config: Grid geometry and background.

    Returns:
        Path: The written file.

    Raises:
        OSError: Propagated unchanged from the write.
    """
    image_bytes = render_identicon(data, config)
    log.debug("Rendered identicon for %r", data)
    return save_image(image_bytes, data, directory)
