import io
from typing import List, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image
from pyrsistent import pvector

from identicon.types import Digest

HEY_HO_DIGEST: List[int] = [
    172, 137, 160, 109, 74, 239, 183, 169, 100, 217, 54, 149, 46, 248, 141, 45,
]
HEY_HO_CELLS: List[int] = [0, 2, 4, 6, 8, 12, 16, 18, 20, 21, 23, 24]

WHITE: Tuple[int, int, int] = (255, 255, 255)

UInt8Array = npt.NDArray[np.uint8]


def make_digest(values: List[int]) -> Digest:
    """Pad ``values`` with odd bytes up to the 16-byte digest length."""
    return pvector(values + [1] * (16 - len(values)))


def all_odd_digest() -> Digest:
    """Digest whose first fifteen bytes are odd, so no cell is filled."""
    return pvector([1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 30])


def cell_pixels(pixels: UInt8Array, index: int, cell_size: int = 50) -> UInt8Array:
    """Return the pixel block of grid cell ``index`` (5x5 grid)."""
    row, column = divmod(index, 5)
    return pixels[
        row * cell_size : (row + 1) * cell_size,
        column * cell_size : (column + 1) * cell_size,
    ]


def is_solid(block: UInt8Array, color: Tuple[int, int, int]) -> bool:
    return bool(np.all(block == np.array(color, dtype=np.uint8)))


def image_to_array(image: Image.Image) -> UInt8Array:
    """Return an ``(H, W, 3)`` uint8 array of the image's RGB pixels."""
    return np.array(image.convert("RGB"), dtype=np.uint8)


def decode_png(data: bytes) -> UInt8Array:
    """Decode rendered PNG bytes into an RGB pixel array."""
    with Image.open(io.BytesIO(data)) as image:
        assert image.format == "PNG"
        return image_to_array(image)
