"""Greyscale and colour images in the binary PBM, PGM and PPM formats."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike

DEPTH = 255
GRAY = 1
RGB = 3
BUFFER_SIZE = 16

_OPEN_FAILURE = "could not open supplied file."
_MISSING_FORMAT = "could not read image format from supplied file."
_INVALID_FORMAT = "invalid image format found in supplied file."
_INVALID_SIZE = "supplied file does not contain valid image sizes."
_INVALID_DEPTH = "supplied file contains an invalid depth."
_READ_FAILURE = "could not read pixel data from supplied file."
_WRITE_FAILURE = "could not write pixel data from supplied file."

_INT = re.compile(rb"\s*([+-]?\d+)")


class ImageFormat(Enum):
    """The binary image formats, by their magic number."""

    PBM = "P4"
    PPM = "P6"
    PGM = "P5"


class ImageError(Exception):
    """An image could not be read or written."""


@dataclass
class Image:
    """A width by height grid of pixels, each made of ``channels`` bytes."""

    width: int
    height: int
    channels: int = GRAY
    depth: int = DEPTH
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image sizes must not be negative")
        if self.channels < 1:
            raise ValueError("an image needs at least one channel")
        self.pixels = bytearray(self.width_step * self.height)

    @property
    def width_step(self) -> int:
        """Number of bytes in one row."""
        return self.channels * self.width

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.width_step + x * self.channels

    def set_pixel(self, x: int, y: int, value: int) -> None:
        """Write value to the first channel of pixel (x, y)."""
        if not 0 <= value <= 255:
            raise ValueError("pixel values lie between 0 and 255")
        self.pixels[self._offset(x, y)] = value

    def get_pixel(self, x: int, y: int) -> int:
        """Read the first channel of pixel (x, y)."""
        return self.pixels[self._offset(x, y)]

    def write(self, filename: str | PathLike[str], image_format: ImageFormat) -> None:
        """Save the image in the given format; raises ImageError on failure."""
        header = f"{image_format.value}\n{self.width} {self.height}\n"
        if image_format is not ImageFormat.PBM:
            header += f"{self.depth}\n"
        if not self.pixels:
            raise ImageError(_WRITE_FAILURE)
        try:
            with open(filename, "wb") as handle:
                handle.write(header.encode("ascii"))
                handle.write(self.pixels)
        except OSError as error:
            raise ImageError(_OPEN_FAILURE) from error


def _scan_int(data: bytes, pos: int) -> tuple[int, int] | None:
    match = _INT.match(data, pos)
    if match is None:
        return None
    return int(match.group(1)), match.end()


def read_image(filename: str | PathLike[str]) -> Image:
    """Load a P4, P5 or P6 image; raises ImageError if it cannot be read."""
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError as error:
        raise ImageError(_OPEN_FAILURE) from error

    if not data:
        raise ImageError(_MISSING_FORMAT)
    newline = data.find(b"\n", 0, BUFFER_SIZE - 1)
    end = newline + 1 if newline >= 0 else min(len(data), BUFFER_SIZE - 1)
    magic = data[:end]
    if magic[:1] != b"P":
        raise ImageError(_INVALID_FORMAT)

    kind = magic[1:2]
    if kind == b"4":
        image_format, channels = ImageFormat.PBM, GRAY
    elif kind == b"5":
        image_format, channels = ImageFormat.PGM, GRAY
    else:
        image_format, channels = ImageFormat.PPM, RGB

    pos = end
    while data[pos : pos + 1] == b"#":
        line_end = data.find(b"\n", pos)
        pos = len(data) if line_end < 0 else line_end + 1

    sizes = []
    for _ in range(2):
        scanned = _scan_int(data, pos)
        if scanned is None:
            raise ImageError(_INVALID_SIZE)
        value, pos = scanned
        sizes.append(value)
    width, height = sizes
    if width < 0 or height < 0:
        raise ImageError(_INVALID_SIZE)

    depth = DEPTH
    if image_format is ImageFormat.PPM:
        scanned = _scan_int(data, pos)
        if scanned is None or scanned[0] != DEPTH:
            raise ImageError(_INVALID_DEPTH)
        depth, pos = scanned
    elif image_format is ImageFormat.PGM:
        scanned = _scan_int(data, pos)
        if scanned is not None:
            pos = scanned[1]

    line_end = data.find(b"\n", pos)
    if line_end < 0:
        raise ImageError(_READ_FAILURE)
    pos = line_end + 1

    image = Image(width, height, channels, depth)
    size = len(image.pixels)
    body = data[pos : pos + size]
    if len(body) < size:
        raise ImageError(_READ_FAILURE)
    image.pixels[:] = body
    return image