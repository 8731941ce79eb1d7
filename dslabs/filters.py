"""Image filters: grayscale, spotlight, UBC colours and watermark."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Sequence

from dslabs.image import PNG, RGBAPixel

UBC_BLUE = RGBAPixel(12, 35, 68, 1.0)
UBC_YELLOW = RGBAPixel(247, 184, 0, 1.0)

WATERMARK_WIDTH = 1024
WATERMARK_HEIGHT = 768
WATERMARK_BOOST = 40


def grayscale(image: PNG) -> PNG:
    """Return a copy of image with every pixel set to its weighted luminosity."""
    result = image.copy()
    for _, _, pixel in result.pixels():
        gray = int(0.229 * pixel.r + 0.587 * pixel.g + 0.114 * pixel.b)
        pixel.r = pixel.g = pixel.b = gray
    return result


def create_spotlight(image: PNG, center_x: int, center_y: int) -> PNG:
    """Return a copy of image darkened by 0.5% per pixel of distance from the centre.

    Pixels more than 200 pixels away become black.
    """
    result = image.copy()
    for x, y, pixel in result.pixels():
        distance = math.sqrt((x - center_x) ** 2 + (y - center_y) ** 2)
        factor = 0.0 if distance > 200 else (100 - distance * 0.5) / 100
        pixel.r = int(pixel.r * factor)
        pixel.g = int(pixel.g * factor)
        pixel.b = int(pixel.b * factor)
    return result


def ubcify(image: PNG) -> PNG:
    """Return a copy of image with every pixel set to UBC yellow or UBC blue.

    Each pixel takes whichever colour is closer; ties go to yellow.
    """
    result = image.copy()
    for _, _, pixel in result.pixels():
        target = UBC_YELLOW if colordist(pixel, UBC_YELLOW) <= colordist(pixel, UBC_BLUE) else UBC_BLUE
        pixel.r, pixel.g, pixel.b = target.r, target.g, target.b
    return result


def watermark(first_image: PNG, second_image: PNG) -> PNG:
    """Brighten first_image by 40 per channel wherever second_image is pure white.

    Both images are first resized to 1024x768; the result has that size.
    """
    result = first_image.copy()
    overlay = second_image.copy()
    result.resize(WATERMARK_WIDTH, WATERMARK_HEIGHT)
    overlay.resize(WATERMARK_WIDTH, WATERMARK_HEIGHT)
    for x, y, mark in overlay.pixels():
        if (mark.r, mark.g, mark.b) == (255, 255, 255):
            pixel = result.get_pixel(x, y)
            pixel.r = min(pixel.r + WATERMARK_BOOST, 255)
            pixel.g = min(pixel.g + WATERMARK_BOOST, 255)
            pixel.b = min(pixel.b + WATERMARK_BOOST, 255)
    return result


def colordist(px1: RGBAPixel, px2: RGBAPixel) -> float:
    """Colour distance between two pixels, alpha pre-multiplied.

    Each channel contributes the larger squared difference of the two
    blends, on black and on white.
    """
    delta_a = px1.a - px2.a
    total = 0.0
    for c1, c2 in ((px1.r, px2.r), (px1.g, px2.g), (px1.b, px2.b)):
        black = c1 / 255.0 * px1.a - c2 / 255.0 * px2.a
        white = black + delta_a
        total += max(black * black, white * white)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Apply every filter to an image and write the results as PNG files."""
    parser = argparse.ArgumentParser(description="Apply image filters to a PNG.")
    parser.add_argument("--image", default="rosegarden.png", help="input image")
    parser.add_argument("--overlay", default="overlay.png", help="watermark overlay image")
    parser.add_argument("--output-dir", default=".", help="directory for the results")
    args = parser.parse_args(argv)

    out_dir = Path(args.output_dir)
    png = PNG()
    png.read_from_file(args.image)

    grayscale(png).write_to_file(out_dir / "out-grayscale.png")
    create_spotlight(png, 300, 300).write_to_file(out_dir / "out-spotlight.png")
    ubcify(png).write_to_file(out_dir / "out-ubcify.png")

    overlay = PNG()
    overlay.read_from_file(args.overlay)
    watermark(png, overlay).write_to_file(out_dir / "out-watermark.png")
    return 0