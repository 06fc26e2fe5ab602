"""The crop filter."""

from __future__ import annotations

import re
from collections.abc import Sequence

from image_processor.color import Color
from image_processor.filter import Filter, FilterArgumentError, register_filter
from image_processor.matrix import Matrix, new_image

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_size(text: str) -> int:
    """Read a leading integer from ``text``; text without one counts as 0."""
    match = _INT_PREFIX.match(text)
    value = int(match.group()) if match else 0
    value = min(max(value, _INT_MIN), _INT_MAX)
    if value < 0:
        raise FilterArgumentError("USAGE: -crop width>0 height>0")
    return value


class Crop(Filter):
    """Keeps the top-left ``width`` x ``height`` region of an image.

    Rows are stored bottom-up, so the top of the picture is the last rows.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        if image.height <= self.height and image.width <= self.width:
            return image
        height = min(self.height, image.height)
        width = min(self.width, image.width)
        first_row = image.height - height
        result = new_image(width, height)
        for row in range(height):
            for col in range(width):
                result[row, col] = image[first_row + row, col]
        return result


@register_filter("crop")
def make_crop(parameters: Sequence[str]) -> Crop:
    """Build the filter from ``[width, height]``."""
    if len(parameters) != 2:
        raise FilterArgumentError("USAGE: -crop width height")
    width, height = (_parse_size(value) for value in parameters)
    return Crop(width, height)