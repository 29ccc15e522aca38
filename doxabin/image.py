"""Eight-bit grayscale images and the PAM tuple types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

BLACK = 0
WHITE = 255

Key = Union[int, Tuple[int, int]]


class TupleType(str, Enum):
    """Tuple types known to the PAM format."""

    BLACK_WHITE = "BLACKANDWHITE"
    GRAYSCALE = "GRAYSCALE"
    RGB = "RGB"
    RGBA = "RGB_ALPHA"


@dataclass
class Image:
    """A row-major, 8-bit grayscale image."""

    width: int
    height: int
    data: bytearray = field(default_factory=bytearray)
    max_val: int = 255
    depth: int = 1
    tuple_type: str = TupleType.GRAYSCALE.value

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        expected = self.width * self.height
        if not self.data and expected:
            self.data = bytearray(expected)
        else:
            self.data = bytearray(self.data)
        if len(self.data) != expected:
            raise ValueError(
                f"expected {expected} pixels for a {self.width}x{self.height} image, "
                f"got {len(self.data)}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "Image":
        """Return an image of the given size with every pixel set to zero."""
        return cls(width, height, bytearray(width * height))

    @property
    def size(self) -> int:
        """Number of pixels in the image."""
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int, default: Optional[int] = None) -> int:
        """Return the pixel at (x, y), or ``default`` when it lies outside the image."""
        if not self.in_bounds(x, y):
            if default is None:
                raise IndexError(f"pixel ({x}, {y}) is outside the image")
            return default
        return self.data[y * self.width + x]

    def _index(self, key: Key) -> int:
        if isinstance(key, tuple):
            x, y = key
            if not self.in_bounds(x, y):
                raise IndexError(f"pixel ({x}, {y}) is outside the image")
            return y * self.width + x
        if not 0 <= key < self.size:
            raise IndexError(f"pixel index {key} is outside the image")
        return key

    def __getitem__(self, key: Key) -> int:
        return self.data[self._index(key)]

    def __setitem__(self, key: Key, value: int) -> None:
        self.data[self._index(key)] = value

    def fill(self, value: int) -> None:
        """Set every pixel to ``value``."""
        self.data[:] = bytes([value]) * self.size

    def copy(self) -> "Image":
        """Return a deep copy of the image."""
        return Image(
            self.width,
            self.height,
            bytearray(self.data),
            self.max_val,
            self.depth,
            self.tuple_type,
        )

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[int]) -> "Image":
        return cls(width, height, bytearray(pixels))