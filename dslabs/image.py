"""A simple in-memory RGBA image that reads and writes PNG files."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from os import PathLike
from typing import Iterator, Union

from PIL import Image

PathType = Union[str, "PathLike[str]"]


@dataclass
class RGBAPixel:
    """A pixel with 8-bit red, green and blue channels and alpha in [0, 1].

    A default pixel is opaque white.
    """

    r: int = 255
    g: int = 255
    b: int = 255
    a: float = 1.0


class PNG:
    """A width x height grid of RGBAPixels; (0, 0) is the upper left corner."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = [RGBAPixel() for _ in range(width * height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __repr__(self) -> str:
        return f"PNG(width={self._width}, height={self._height})"

    def get_pixel(self, x: int, y: int) -> RGBAPixel:
        """Return the pixel at (x, y); changing it changes the image.

        Coordinates past the edge are clamped to the last row or column
        with a warning.
        """
        if self._width == 0 or self._height == 0:
            raise IndexError("get_pixel() called on an image with no pixels")
        if x >= self._width:
            warnings.warn(
                f"get_pixel({x},{y}) is outside the image (width {self._width}); "
                f"truncating x to {self._width - 1}",
                RuntimeWarning,
                stacklevel=2,
            )
            x = self._width - 1
        if y >= self._height:
            warnings.warn(
                f"get_pixel({x},{y}) is outside the image (height {self._height}); "
                f"truncating y to {self._height - 1}",
                RuntimeWarning,
                stacklevel=2,
            )
            y = self._height - 1
        return self._pixels[x + y * self._width]

    def pixels(self) -> Iterator[tuple[int, int, RGBAPixel]]:
        """Yield (x, y, pixel) for every pixel, column by column."""
        for x in range(self._width):
            for y in range(self._height):
                yield x, y, self._pixels[x + y * self._width]

    def read_from_file(self, path: PathType) -> None:
        """Replace the contents of this image with the PNG stored at path."""
        with Image.open(path) as source:
            rgba = source.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
        channels = iter(data)
        self._pixels = [
            RGBAPixel(r, g, b, a / 255.0) for r, g, b, a in zip(channels, channels, channels, channels)
        ]
        self._width = width
        self._height = height

    def write_to_file(self, path: PathType) -> None:
        """Write this image to path as a PNG file."""
        if self._width == 0 or self._height == 0:
            raise ValueError("cannot write an image with no pixels")
        data = bytes(
            channel
            for pixel in self._pixels
            for channel in (pixel.r, pixel.g, pixel.b, _alpha_byte(pixel.a))
        )
        Image.frombytes("RGBA", (self._width, self._height), data).save(path, format="PNG")

    def resize(self, new_width: int, new_height: int) -> None:
        """Resize in place, keeping pixels that still fit and cropping the rest.

        New area is filled with default pixels; no interpolation is done.
        """
        if new_width < 0 or new_height < 0:
            raise ValueError(
                f"image dimensions must be non-negative, got {new_width}x{new_height}"
            )
        new_pixels = [RGBAPixel() for _ in range(new_width * new_height)]
        for x in range(min(self._width, new_width)):
            for y in range(min(self._height, new_height)):
                new_pixels[x + y * new_width] = replace(self._pixels[x + y * self._width])
        self._pixels = new_pixels
        self._width = new_width
        self._height = new_height

    def copy(self) -> "PNG":
        """Return an independent copy of this image."""
        duplicate = PNG()
        duplicate._width = self._width
        duplicate._height = self._height
        duplicate._pixels = [replace(pixel) for pixel in self._pixels]
        return duplicate


def _alpha_byte(alpha: float) -> int:
    return max(0, min(255, int(alpha * 255)))