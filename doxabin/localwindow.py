"""Square windows around every pixel of an image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

from .image import BLACK, WHITE, Image


@dataclass(frozen=True)
class Window:
    """An inclusive rectangle of pixel coordinates."""

    left: int
    top: int
    right: int
    bottom: int

    def area(self) -> int:
        return (self.right - self.left + 1) * (self.bottom - self.top + 1)


def iterate(width: int, height: int, window_size: int) -> Iterator[Tuple[Window, int]]:
    """Yield the window clipped to the image around each pixel with its position."""
    half = window_size // 2
    position = 0
    for y in range(height):
        top = max(0, y - half)
        bottom = min(height - 1, y + half)
        for x in range(width):
            yield Window(max(0, x - half), top, min(width - 1, x + half), bottom), position
            position += 1


def window_positions(width: int, window: Window) -> Iterator[int]:
    """Yield the data positions inside ``window``, row by row."""
    for y in range(window.top, window.bottom + 1):
        row = y * width
        yield from range(row + window.left, row + window.right + 1)


def process(
    image: Image, window_size: int, calculator: Callable[[Window, int], float]
) -> Image:
    """Binarize: pixels at or below the calculated threshold become black."""
    binary = Image.blank(image.width, image.height)
    data = image.data
    for window, position in iterate(image.width, image.height, window_size):
        binary.data[position] = BLACK if data[position] <= calculator(window, position) else WHITE
    return binary