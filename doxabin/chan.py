"""Sliding-window mean and variance over column sums.

Only one row of running column totals is kept, so large windows cost no
more than small ones and memory stays proportional to the image width.
"""

from __future__ import annotations

from typing import Callable, Iterator, Tuple

from .image import BLACK, WHITE, Image


def _window_sums(image: Image, window_size: int) -> Iterator[Tuple[int, int, int, int]]:
    """Yield (sum, sum of squares, pixel count, position) for every pixel."""
    if window_size < 1:
        raise ValueError("window size must be at least 1")

    width, height = image.width, image.height
    data = image.data
    left = (window_size + 1) // 2
    right = window_size - left
    split = width - right + 1

    columns = [0] * (width + 1)
    squares = [0] * (width + 1)

    def add_row(y: int, sign: int) -> None:
        for x, pixel in enumerate(data[y * width:(y + 1) * width], 1):
            columns[x] += sign * pixel
            squares[x] += sign * pixel * pixel

    for y in range(min(right, height)):
        add_row(y, 1)

    position = 0
    for y in range(height):
        top = max(y - left, -1)
        bottom = min(height - 1, y + right)

        if y >= left:
            add_row(top, -1)
        if y + right < height:
            add_row(bottom, 1)

        rows = bottom - top
        total = sum(columns[1:right + 1])
        total_sq = sum(squares[1:right + 1])

        for x in range(1, split):
            win_left = max(x - left, 0)
            win_right = x + right
            total += columns[win_right] - columns[win_left]
            total_sq += squares[win_right] - squares[win_left]
            yield total, total_sq, rows * (win_right - win_left), position
            position += 1

        for x in range(max(split, 1), width + 1):
            win_left = max(x - left, 0)
            total -= columns[win_left]
            total_sq -= squares[win_left]
            yield total, total_sq, rows * (width - win_left), position
            position += 1


def iterate_mean(image: Image, window_size: int) -> Iterator[Tuple[float, int]]:
    """Yield the local mean around each pixel with its position."""
    for total, _, count, position in _window_sums(image, window_size):
        yield total / count, position


def iterate_mean_variance(
    image: Image, window_size: int
) -> Iterator[Tuple[float, float, int]]:
    """Yield the local mean and variance around each pixel with its position."""
    for total, total_sq, count, position in _window_sums(image, window_size):
        mean = total / count
        yield mean, total_sq / count - mean * mean, position


def process_mean(
    image: Image, window_size: int, algorithm: Callable[[float, int], float]
) -> Image:
    """Binarize with a threshold computed from the local mean."""
    binary = Image.blank(image.width, image.height)
    data = image.data
    for mean, position in iterate_mean(image, window_size):
        binary.data[position] = BLACK if data[position] <= algorithm(mean, position) else WHITE
    return binary


def process_mean_variance(
    image: Image, window_size: int, algorithm: Callable[[float, float, int], float]
) -> Image:
    """Binarize with a threshold computed from the local mean and variance."""
    binary = Image.blank(image.width, image.height)
    data = image.data
    for mean, variance, position in iterate_mean_variance(image, window_size):
        threshold = algorithm(mean, variance, position)
        binary.data[position] = BLACK if data[position] <= threshold else WHITE
    return binary