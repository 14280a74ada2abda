import io
import logging
from typing import Iterable

from PIL import Image, ImageDraw

from identicon.config import BACKGROUND, CANVAS_SIZE, DEFAULT_CONFIG, IdenticonConfig
from identicon.types import Color, Rect

log = logging.getLogger("identicon.renderer.raster")


def draw_image(
    color: Color,
    pixel_map: Iterable[Rect],
    canvas_size: int = CANVAS_SIZE,
    background: Color = BACKGROUND,
) -> Image.Image:
    """Paint each rectangle of ``pixel_map`` in ``color`` on a blank square canvas.

    Rectangles cover ``[x0, x1) x [y0, y1)``.
    """
    img = Image.new("RGB", (canvas_size, canvas_size), background)
    draw = ImageDraw.Draw(img)
    for (x0, y0), (x1, y1) in pixel_map:
        # PIL rectangles include their bottom-right corner.
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=color)
    return img


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render(
    color: Color,
    pixel_map: Iterable[Rect],
    canvas_size: int = CANVAS_SIZE,
    background: Color = BACKGROUND,
) -> bytes:
    """Rasterize the identicon and return the PNG-encoded bytes."""
    data = encode_png(draw_image(color, pixel_map, canvas_size, background))
    log.debug("Encoded %dx%d PNG (%d bytes)", canvas_size, canvas_size, len(data))
    return data


class RasterRenderer:
    config: IdenticonConfig

    def __init__(self, config: IdenticonConfig = DEFAULT_CONFIG):
        self.config = config

    def render(self, color: Color, pixel_map: Iterable[Rect]) -> bytes:
        return render(
            color,
            pixel_map,
            canvas_size=self.config.canvas_size,
            background=self.config.background,
        )
