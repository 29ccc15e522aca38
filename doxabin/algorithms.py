"""Local adaptive binarization algorithms: Bernsen, Wan and Wolf."""

from __future__ import annotations

import math
import sys

from .algorithm import Algorithm, Parameters
from .chan import iterate_mean_variance, process_mean_variance
from .image import Image
from .localwindow import process
from .morphology import dilate, erode


def _stddev(variance: float) -> float:
    return math.sqrt(variance) if variance >= 0 else math.nan


class Bernsen(Algorithm):
    """Bernsen, "Dynamic thresholding of gray-level images", 1986."""

    def to_binary(self, parameters: Parameters = None) -> Image:
        window_size = self._get(parameters, "window", 75)
        global_threshold = self._get(parameters, "threshold", 100)
        contrast_limit = self._get(parameters, "contrast-limit", 25)

        minimum = erode(self.image, window_size).data
        maximum = dilate(self.image, window_size).data

        def calculator(window, position):
            low, high = minimum[position], maximum[position]
            return (high + low) // 2 if high - low > contrast_limit else global_threshold

        return process(self.image, window_size, calculator)


class Wan(Algorithm):
    """Mustafa and Abdul Kader, "Binarization of Document Image Using Optimum
    Threshold Modification", 2018."""

    def to_binary(self, parameters: Parameters = None) -> Image:
        window_size = self._get(parameters, "window", 75)
        k = self._get(parameters, "k", 0.2)

        maximum = dilate(self.image, window_size).data

        def algorithm(mean, variance, position):
            stddev = _stddev(variance)
            return ((maximum[position] + mean) / 2) * (1 + k * ((stddev / 128) - 1))

        return process_mean_variance(self.image, window_size, algorithm)


class Wolf(Algorithm):
    """Wolf and Jolion, "Extraction and Recognition of Artificial Text in
    Multimedia Documents", 2003."""

    def to_binary(self, parameters: Parameters = None) -> Image:
        window_size = self._get(parameters, "window", 75)
        k = self._get(parameters, "k", 0.2)

        minimum = sys.float_info.max
        max_variance = sys.float_info.min
        data = self.image.data
        for _, variance, position in iterate_mean_variance(self.image, window_size):
            if variance > max_variance:
                max_variance = variance
            if data[position] < minimum:
                minimum = data[position]

        max_stddev = math.sqrt(max_variance)

        def algorithm(mean, variance, position):
            stddev = _stddev(variance)
            return mean - k * (1 - stddev / max_stddev) * (mean - minimum)

        return process_mean_variance(self.image, window_size, algorithm)