"""The edge detection filter."""

from __future__ import annotations

import re
from collections.abc import Sequence

from image_processor.color import Color
from image_processor.convolution import MatrixFilter
from image_processor.filter import FilterArgumentError, register_filter
from image_processor.grayscale import grayscale
from image_processor.matrix import Matrix

CENTER_WEIGHT = 4.0
EDGE_KERNEL = (0.0, -1.0, 0.0, -1.0, CENTER_WEIGHT, -1.0, 0.0, -1.0, 0.0)

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_float(text: str) -> float:
    """Read a leading number from ``text``; text without one counts as 0."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


class EdgeDetection(MatrixFilter):
    """Marks pixels whose Laplacian response exceeds a threshold as white."""

    def __init__(self, threshold: float) -> None:
        super().__init__(EDGE_KERNEL)
        self.threshold = threshold

    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        return self.run_matrix(grayscale(image))

    def correct_pixel(self, image: Matrix[Color], row: int, col: int) -> Color:
        response = self._convolve(image, row, col)
        value = 1.0 if response.r > self.threshold else 0.0
        return Color(value, value, value)


@register_filter("edge")
def make_edge(parameters: Sequence[str]) -> EdgeDetection:
    """Build the filter from ``[threshold]``, a number in [0, 1]."""
    if len(parameters) != 1:
        raise FilterArgumentError("USAGE: -edge threshold")
    threshold = _parse_float(parameters[0])
    if threshold < 0 or threshold > 1:
        raise FilterArgumentError("USAGE: -edge 1>threshold>0")
    return EdgeDetection(threshold)