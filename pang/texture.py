"""Loading of raw BGR texture files."""

from __future__ import annotations

from os import PathLike


def load_raw_texture(width: int, height: int, path: str | PathLike) -> bytes:
    """Read a raw ``width`` x ``height`` BGR image and return its pixels as RGB.

    Only the first ``width * height * 3`` bytes of the file are used.
    Raises ``OSError`` if the file cannot be opened and ``ValueError`` if
    the dimensions are negative or the file holds too few bytes.
    """
    if width < 0 or height < 0:
        raise ValueError("texture dimensions must not be negative")
    expected = width * height * 3
    with open(path, "rb") as handle:
        raw = handle.read(expected)
    if len(raw) < expected:
        raise ValueError(
            f"texture file {path!s} holds {len(raw)} bytes, expected {expected}"
        )
    pixels = bytearray(raw)
    pixels[0::3] = raw[2::3]
    pixels[2::3] = raw[0::3]
    return bytes(pixels)