"""Reading farbfeld images for use as a terminal background."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

MAGIC = b"farbfeld"
_HEADER = struct.Struct(">8sII")
_PIXEL = struct.Struct("<Q")


class FarbfeldError(Exception):
    """Raised when a farbfeld image cannot be read."""


@dataclass(frozen=True)
class FarbfeldImage:
    """A decoded image whose pixels are 32-bit 0xAARRGGBB values."""

    width: int
    height: int
    pixels: tuple[int, ...]


def convert_pixel(value: int) -> int:
    """Convert one raw pixel to 0xAARRGGBB.

    ``value`` is the pixel's eight bytes read as a little-endian integer; each
    big-endian 16-bit channel contributes its high byte.
    """
    return (
        (value & 0x00000000000000FF) << 16
        | (value & 0x0000000000FF0000) >> 8
        | (value & 0x000000FF00000000) >> 32
        | (value & 0x00FF000000000000) >> 24
    )


def read_farbfeld(stream: BinaryIO) -> FarbfeldImage:
    """Decode a farbfeld image from a binary stream."""
    header = stream.read(_HEADER.size)
    if len(header) != _HEADER.size:
        raise FarbfeldError("Unexpected end of file reading header")
    magic, width, height = _HEADER.unpack(header)
    if magic != MAGIC:
        raise FarbfeldError("Invalid magic value")

    size = width * height
    data = stream.read(size * _PIXEL.size)
    if len(data) != size * _PIXEL.size:
        raise FarbfeldError("Unexpected end of file reading data")

    pixels = tuple(convert_pixel(raw) for (raw,) in _PIXEL.iter_unpack(data))
    return FarbfeldImage(width, height, pixels)


def load_farbfeld(path: str | PathLike[str]) -> FarbfeldImage:
    """Load a farbfeld image from a file."""
    try:
        with open(path, "rb") as stream:
            return read_farbfeld(stream)
    except OSError as exc:
        raise FarbfeldError("could not load background image") from exc