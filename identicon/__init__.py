"""Deterministic 5x5 symmetric identicons rendered to PNG.

Typical use::

    from identicon import generate_identicon

    generate_identicon("hey ho")  # writes ./hey ho.png

The pipeline stages are importable individually from their modules; see
:mod:`identicon.pipeline` for how they are composed.
"""

from identicon.color import pick_color
from identicon.config import DEFAULT_CONFIG, IdenticonConfig
from identicon.grid import build_grid
from identicon.hasher import hash_input
from identicon.pipeline import build_identicon, generate_identicon, render_identicon
from identicon.pixel_map import build_pixel_map
from identicon.renderer.raster import render
from identicon.state import Identicon
from identicon.writer import save_image

__all__ = [
    "DEFAULT_CONFIG",
    "Identicon",
    "IdenticonConfig",
    "build_grid",
    "build_identicon",
    "build_pixel_map",
    "generate_identicon",
    "hash_input",
    "pick_color",
    "render",
    "render_identicon",
    "save_image",
]
