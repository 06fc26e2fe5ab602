"""The grayscale filter."""

from __future__ import annotations

from collections.abc import Sequence

from image_processor.color import Color
from image_processor.filter import Filter, FilterArgumentError, register_filter
from image_processor.matrix import Matrix, new_image

RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114


def grayscale(image: Matrix[Color]) -> Matrix[Color]:
    """Return a copy of ``image`` with each pixel replaced by its luma."""
    result = new_image(image.width, image.height)
    for row_index, row in enumerate(image):
        for col, pixel in enumerate(row):
            value = BLUE_WEIGHT * pixel.b + RED_WEIGHT * pixel.r + GREEN_WEIGHT * pixel.g
            result[row_index, col] = Color(value, value, value)
    return result


class Grayscale(Filter):
    """Converts an image to shades of gray."""

    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        return grayscale(image)


@register_filter("gs")
def make_grayscale(parameters: Sequence[str]) -> Grayscale:
    """Build the filter; it takes no parameters."""
    if parameters:
        raise FilterArgumentError("USAGE: -gs")
    return Grayscale()