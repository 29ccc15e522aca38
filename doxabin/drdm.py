"""Distance-Reciprocal Distortion Measure.

Lu, Wang, Kot and Shi, "An Objective Distortion Measure for Binary Document
Images Based on Human Visual Perception", 2002.
"""

from __future__ import annotations

import math

from .image import Image

# Normalized weight matrix, scaled by 1,000,000 to keep the sums integral.
_WEIGHTS = (
    (25582, 32359, 36179, 32359, 25582),
    (32359, 51164, 72357, 51164, 32359),
    (36179, 72357, 0, 72357, 36179),
    (32359, 51164, 72357, 51164, 32359),
    (25582, 32359, 36179, 32359, 25582),
)
_SCALE = 1_000_000


def drdk(x: int, y: int, control: Image, g: int) -> int:
    """Scaled distortion of flipping the pixel at (x, y) to ``g``.

    Sums the weights of the 5x5 neighbours in ``control`` that differ from
    ``g``; neighbours outside the image count as equal to ``g``.
    """
    pad = len(_WEIGHTS) // 2
    total = 0
    for dx, column in enumerate(_WEIGHTS):
        for dy, weight in enumerate(column):
            if control.pixel(x - pad + dx, y - pad + dy, g) != g:
                total += weight
    return total


def sum_drdk(control: Image, experiment: Image) -> int:
    """Sum the scaled distortion of every pixel that differs between the images."""
    if (control.width, control.height) != (experiment.width, experiment.height):
        raise ValueError("images must have the same dimensions")
    width = control.width
    return sum(
        drdk(index % width, index // width, control, found)
        for index, (expected, found) in enumerate(zip(control.data, experiment.data))
        if expected != found
    )


def non_uniform_block(control: Image, left: int, top: int, block_size: int) -> int:
    """Return 1 when the block holds more than one pixel value, else 0."""
    first = control.pixel(left, top)
    for y in range(top, top + block_size):
        for x in range(left, left + block_size):
            if control.pixel(x, y, first) != first:
                return 1
    return 0


def nubn(control: Image, block_size: int = 8) -> int:
    """Count the non-uniform blocks; partial blocks at the edges are ignored."""
    columns = control.width // block_size
    rows = control.height // block_size
    return sum(
        non_uniform_block(control, column * block_size, row * block_size, block_size)
        for column in range(columns)
        for row in range(rows)
    )


def calculate_drdm(control: Image, experiment: Image) -> float:
    """DRDM of ``experiment`` measured against the ground truth ``control``."""
    total = sum_drdk(control, experiment)
    blocks = nubn(control)
    if blocks == 0:
        return math.inf if total else math.nan
    return total / (blocks * _SCALE)