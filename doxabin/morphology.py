"""Grayscale erosion and dilation over square windows."""

from __future__ import annotations

from typing import Callable, List, Sequence

from sortedcontainers import SortedList

from .image import Image
from .localwindow import iterate, window_positions

# Below this window size scanning each window directly is faster.
_MORPH_THRESHOLD = 17

Pick = Callable[[SortedList], int]


def _pick_min(window: SortedList) -> int:
    return window[0]


def _pick_max(window: SortedList) -> int:
    return window[-1]


def erode(image: Image, window_size: int = 3) -> Image:
    """Return an image holding the minimum of the window around each pixel."""
    if window_size < _MORPH_THRESHOLD:
        return iteratively_erode(image, window_size)
    return morph(image, window_size, _pick_min)


def dilate(image: Image, window_size: int = 3) -> Image:
    """Return an image holding the maximum of the window around each pixel."""
    if window_size < _MORPH_THRESHOLD:
        return iteratively_dilate(image, window_size)
    return morph(image, window_size, _pick_max)


def open_image(image: Image, window_size: int = 3) -> Image:
    """Erode followed by dilate; reduces background noise."""
    return dilate(erode(image, window_size), window_size)


def close_image(image: Image, window_size: int = 3) -> Image:
    """Dilate followed by erode; fills holes in the foreground."""
    return erode(dilate(image, window_size), window_size)


def _slide(values: Sequence[int], half: int, pick: Pick) -> List[int]:
    """Apply ``pick`` to a 1-D window of radius ``half`` sliding over ``values``."""
    count = len(values)
    window = SortedList(values[: half + 1])
    result = []
    for x in range(count):
        if x:
            incoming = x + half
            if incoming < count:
                window.add(values[incoming])
            outgoing = x - half - 1
            if outgoing >= 0:
                window.remove(values[outgoing])
        result.append(pick(window))
    return result


def morph(image: Image, window_size: int, pick: Pick) -> Image:
    """Separable morphology: a sliding ordered window over rows, then columns.

    ``pick`` receives the sorted window contents and returns the chosen value.
    """
    half = max(0, (window_size - 1) // 2)
    width, height = image.width, image.height

    temp = bytearray(image.size)
    for row in range(0, image.size, width):
        temp[row:row + width] = bytes(_slide(image.data[row:row + width], half, pick))

    result = Image.blank(width, height)
    for x in range(width):
        result.data[x::width] = bytes(_slide(temp[x::width], half, pick))
    return result


def _iterative(image: Image, window_size: int, reduce: Callable) -> Image:
    result = Image.blank(image.width, image.height)
    data = image.data
    for window, target in iterate(image.width, image.height, window_size):
        result.data[target] = reduce(data[p] for p in window_positions(image.width, window))
    return result


def iteratively_erode(image: Image, window_size: int) -> Image:
    """Erode by scanning every window in full."""
    return _iterative(image, window_size, min)


def iteratively_dilate(image: Image, window_size: int) -> Image:
    """Dilate by scanning every window in full."""
    return _iterative(image, window_size, max)