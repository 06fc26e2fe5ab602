"""Filters that convolve an image with a 3x3 kernel."""

from __future__ import annotations

from collections.abc import Sequence

from image_processor.color import Color
from image_processor.filter import Filter
from image_processor.matrix import Matrix, new_image

KERNEL_SIZE = 9


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class MatrixFilter(Filter):
    """Applies a 3x3 kernel to every pixel, repeating edge pixels at borders.

    The kernel is given row by row; its first row weighs the pixel row
    after the current one and its last row the pixel row before it.
    """

    def __init__(self, kernel: Sequence[float]) -> None:
        kernel = tuple(float(value) for value in kernel)
        if len(kernel) != KERNEL_SIZE:
            raise ValueError(f"kernel must have {KERNEL_SIZE} elements, got {len(kernel)}")
        self.kernel = kernel

    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        return self.run_matrix(image)

    def run_matrix(self, image: Matrix[Color]) -> Matrix[Color]:
        """Return a new image with ``correct_pixel`` computed for each position."""
        result = new_image(image.width, image.height)
        for row in range(image.height):
            for col in range(image.width):
                result[row, col] = self.correct_pixel(image, row, col)
        return result

    def _convolve(self, image: Matrix[Color], row: int, col: int) -> Color:
        last_row = image.height - 1
        last_col = image.width - 1
        total = Color()
        for index, weight in enumerate(self.kernel):
            dy, dx = divmod(index, 3)
            y = int(_clamp(row + 1 - dy, 0, last_row))
            x = int(_clamp(col - 1 + dx, 0, last_col))
            total = total + weight * image[y, x]
        return total

    def correct_pixel(self, image: Matrix[Color], row: int, col: int) -> Color:
        """Return the kernel response at ``(row, col)``, clamped to [0, 1]."""
        total = self._convolve(image, row, col)
        return Color(
            _clamp(total.r, 0.0, 1.0),
            _clamp(total.g, 0.0, 1.0),
            _clamp(total.b, 0.0, 1.0),
        )