"""Color selection from the digest."""

from typing import Sequence

from identicon.types import Color


def pick_color(digest: Sequence[int]) -> Color:
    """Return the first three digest bytes as an ``(r, g, b)`` triple."""
    if len(digest) < 3:
        raise ValueError(f"Digest too short to pick a color: {list(digest)}")
    r, g, b = digest[0], digest[1], digest[2]
    return (r, g, b)
