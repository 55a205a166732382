"""Conversion of an RGGB Bayer mosaic into interleaved RGB bytes."""

from __future__ import annotations

from collections.abc import Iterable


def bayer_to_rgb(bayer: bytes | Iterable[int], width: int, height: int) -> bytes:
    """Turn a ``width`` x ``height`` RGGB mosaic into RGB triples, row by row.

    Each pixel takes its colours from its own 2x2 cell; the two greens of a
    cell are averaged for the red and blue sites. Both dimensions must be
    even and every sample must fit in a byte.
    """
    if isinstance(bayer, int):
        raise TypeError("bayer data must be a sequence of byte values")
    if width <= 0 or height <= 0 or width % 2 or height % 2:
        raise ValueError(
            f"width and height must be positive and even, got {width}x{height}"
        )
    data = bytes(bayer)
    if len(data) != width * height:
        raise ValueError(
            f"expected {width * height} samples for {width}x{height}, got {len(data)}"
        )

    def at(x: int, y: int) -> int:
        return data[y * width + x]

    rgb = bytearray()
    for y in range(height):
        for x in range(width):
            if y % 2 == 0 and x % 2 == 0:
                pixel = (at(x, y), (at(x + 1, y) + at(x, y + 1)) // 2, at(x + 1, y + 1))
            elif y % 2 == 0:
                pixel = (at(x - 1, y), at(x, y), at(x, y + 1))
            elif x % 2 == 0:
                pixel = (at(x, y), at(x + 1, y), at(x, y - 1))
            else:
                pixel = (at(x - 1, y - 1), (at(x, y - 1) + at(x - 1, y)) // 2, at(x, y))
            rgb.extend(pixel)
    return bytes(rgb)