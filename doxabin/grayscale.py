"""Colour to grayscale conversions and gamma helpers.

The integer forms of the formulas behave like 8-bit pixel arithmetic:
divisions are integral and fractional results are truncated.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

Number = Union[int, float]


def _all_int(*values: Number) -> bool:
    return all(isinstance(v, int) for v in values)


def _to_pixel8(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


def gamma(channel: float, gamma: float = 2.2) -> float:
    """Raise ``channel`` to ``1 / gamma``; negative channels give NaN."""
    if channel < 0:
        return math.nan
    return math.pow(channel, 1 / gamma)


def linear_to_srgb(y: float) -> float:
    """Apply sRGB gamma correction to a linear value."""
    return y * 12.92 if y <= 0.0031308 else gamma((1.055 * y - 0.055) / 1.055, 2.4)


def linear_to_709(y: float) -> float:
    """Apply Rec. 709 gamma correction to a linear value."""
    return y * 4.5 if y <= 0.0018 else gamma((1.099 * y - 0.099) / 1.055, 2.2)


def srgb_to_linear(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Turn gamma corrected sRGB channels (0 to 1) into linear ones."""

    def to_linear(channel: float) -> float:
        if channel <= 0.04045:
            return channel / 12.92
        return math.pow((channel + 0.055) / 1.055, 2.4)

    return to_linear(r), to_linear(g), to_linear(b)


def qt(r: Number, g: Number, b: Number) -> Number:
    """The weighting used by the Qt framework."""
    total = r * 11 + g * 16 + b * 5
    return total // 32 if _all_int(r, g, b) else total / 32


def mean(r: Number, g: Number, b: Number) -> Number:
    """Intensity for linear input, Gleam for gamma corrected input."""
    total = r + g + b
    return total // 3 if _all_int(r, g, b) else total / 3


def _weighted(r: Number, g: Number, b: Number, wr: float, wg: float, wb: float) -> Number:
    result = wr * r + wg * g + wb * b
    return _to_pixel8(result) if _all_int(r, g, b) else result


def bt601(r: Number, g: Number, b: Number) -> Number:
    """Rec. 601 luma."""
    return _weighted(r, g, b, 0.2989, 0.5865, 0.1144)


def bt709(r: Number, g: Number, b: Number) -> Number:
    """Rec. 709 luma."""
    return _weighted(r, g, b, 0.2126, 0.7152, 0.0722)


def bt2100(r: Number, g: Number, b: Number) -> Number:
    """Rec. 2100 luma."""
    return _weighted(r, g, b, 0.2627, 0.6780, 0.0593)


def value(r: Number, g: Number, b: Number) -> Number:
    """HSV value: the largest channel."""
    return max(r, g, b)


def luster(r: Number, g: Number, b: Number) -> Number:
    """HLS lightness: the midpoint of the largest and smallest channel."""
    total = max(r, g, b) + min(r, g, b)
    return total // 2 if _all_int(r, g, b) else total / 2


def min_avg(r: Number, g: Number, b: Number) -> Number:
    """The average of the mean and the smallest channel."""
    total = mean(r, g, b) + min(r, g, b)
    return total // 2 if _all_int(r, g, b) else total / 2


def lightness(r: float, g: float, b: float) -> float:
    """CIE L* of linear RGB channels (0 to 1), scaled to 0 to 1."""
    y = bt709(float(r), float(g), float(b))
    corrected = gamma(y, 3) if y > 0.00885 else 7.78703 * y + 0.13793
    return (1.0 / 100) * (116 * corrected - 16)


def lightness8(r: int, g: int, b: int) -> int:
    """CIE L* of linear 8-bit channels, as an 8-bit value."""
    return _to_pixel8(lightness(r / 255, g / 255, b / 255) * 255)


def srgb_to_lightness(r: int, g: int, b: int) -> int:
    """CIE L* of gamma corrected 8-bit sRGB channels, as an 8-bit value."""
    red, green, blue = srgb_to_linear(r / 255, g / 255, b / 255)
    return _to_pixel8(lightness(red, green, blue) * 255)