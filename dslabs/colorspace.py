"""Conversions between RGBA and HSLA colour representations."""

from __future__ import annotations

import math
from dataclasses import dataclass

_GRAY_EPSILON = 0.0001
_SATURATION_EPSILON = 0.001


@dataclass
class RgbaColor:
    """An RGBA colour with every channel in [0, 255]."""

    r: int
    g: int
    b: int
    a: int


@dataclass
class HslaColor:
    """An HSLA colour: hue in degrees [0, 360], the rest in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741
    a: float


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def rgb_to_hsl(rgb: RgbaColor) -> HslaColor:
    """Convert an RGBA colour to HSLA."""
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    low = min(r, g, b)
    high = max(r, g, b)
    chroma = high - low

    alpha = rgb.a / 255.0
    lightness = 0.5 * (high + low)

    # Shades of gray have an undefined hue and no saturation.
    if chroma < _GRAY_EPSILON or high < _GRAY_EPSILON:
        return HslaColor(0.0, 0.0, lightness, alpha)

    saturation = chroma / (1 - abs(2 * lightness - 1))

    if high == r:
        hue = math.fmod((g - b) / chroma, 6)
    elif high == g:
        hue = (b - r) / chroma + 2
    else:
        hue = (r - g) / chroma + 4

    hue *= 60
    if hue < 0:
        hue += 360

    return HslaColor(hue, saturation, lightness, alpha)


def hsl_to_rgb(hsl: HslaColor) -> RgbaColor:
    """Convert an HSLA colour to RGBA."""
    alpha = _round_half_away(hsl.a * 255)

    if hsl.s <= _SATURATION_EPSILON:
        gray = _round_half_away(hsl.l * 255)
        return RgbaColor(gray, gray, gray, alpha)

    c = (1 - abs(2 * hsl.l - 1)) * hsl.s
    hh = hsl.h / 60
    x = c * (1 - abs(math.fmod(hh, 2) - 1))

    if hh <= 1:
        r, g, b = c, x, 0.0
    elif hh <= 2:
        r, g, b = x, c, 0.0
    elif hh <= 3:
        r, g, b = 0.0, c, x
    elif hh <= 4:
        r, g, b = 0.0, x, c
    elif hh <= 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    m = hsl.l - 0.5 * c
    return RgbaColor(
        _round_half_away((r + m) * 255),
        _round_half_away((g + m) * 255),
        _round_half_away((b + m) * 255),
        alpha,
    )