"""The negative filter."""

from __future__ import annotations

from collections.abc import Sequence

from image_processor.color import Color
from image_processor.filter import Filter, FilterArgumentError, register_filter
from image_processor.matrix import Matrix, new_image


class Negative(Filter):
    """Inverts every colour channel."""

    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        result = new_image(image.width, image.height)
        for row_index, row in enumerate(image):
            for col, pixel in enumerate(row):
                result[row_index, col] = Color(1 - pixel.r, 1 - pixel.g, 1 - pixel.b)
        return result


@register_filter("neg")
def make_negative(parameters: Sequence[str]) -> Negative:
    """Build the filter; it takes no parameters."""
    if parameters:
        raise FilterArgumentError("USAGE: -neg")
    return Negative()