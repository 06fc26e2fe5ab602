"""The sharpening filter."""

from __future__ import annotations

from collections.abc import Sequence

from image_processor.convolution import MatrixFilter
from image_processor.filter import FilterArgumentError, register_filter

CENTER_WEIGHT = 5.0
SHARPEN_KERNEL = (0.0, -1.0, 0.0, -1.0, CENTER_WEIGHT, -1.0, 0.0, -1.0, 0.0)


class Sharpening(MatrixFilter):
    """Sharpens an image with a 3x3 kernel."""

    def __init__(self) -> None:
        super().__init__(SHARPEN_KERNEL)


@register_filter("sharp")
def make_sharpening(parameters: Sequence[str]) -> Sharpening:
    """Build the filter; it takes no parameters."""
    if parameters:
        raise FilterArgumentError("USAGE: -sharp")
    return Sharpening()