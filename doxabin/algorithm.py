"""Base classes for binarization algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, TypeVar

from .image import BLACK, WHITE, Image

Parameters = Optional[Mapping[str, Any]]
T = TypeVar("T", int, float)


class Algorithm(ABC):
    """A binarization algorithm bound to one grayscale image."""

    def __init__(self, image: Image) -> None:
        self.image = image

    @staticmethod
    def _get(parameters: Parameters, name: str, default: T) -> T:
        """Read a parameter, cast to the type of its default."""
        if not parameters or name not in parameters:
            return default
        return type(default)(parameters[name])

    @abstractmethod
    def to_binary(self, parameters: Parameters = None) -> Image:
        """Return the binary image for the bound grayscale image."""

    @classmethod
    def to_binary_image(cls, image: Image, parameters: Parameters = None) -> Image:
        """Binarize ``image`` in one call."""
        return cls(image).to_binary(parameters)

    @classmethod
    def update_to_binary(cls, image: Image, parameters: Parameters = None) -> None:
        """Replace the pixels of ``image`` with its binarized form."""
        image.data[:] = cls(image).to_binary(parameters).data


class GlobalThreshold(Algorithm):
    """An algorithm that binarizes with a single threshold for the whole image."""

    @abstractmethod
    def threshold(self, image: Image, parameters: Parameters = None) -> int:
        """Return the global threshold of ``image``."""

    def to_binary(self, parameters: Parameters = None) -> Image:
        threshold = self.threshold(self.image, parameters)
        binary = Image.blank(self.image.width, self.image.height)
        binary.data[:] = bytes(BLACK if p <= threshold else WHITE for p in self.image.data)
        return binary