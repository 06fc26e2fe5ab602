"""A dense two-dimensional grid, and images built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from image_processor.color import Color

T = TypeVar("T")


class Matrix(Generic[T]):
    """A row-major grid of ``height`` rows by ``width`` columns."""

    def __init__(self, width: int, height: int, fill_value: T | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._data: list[T | None] = [fill_value] * (width * height)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Matrix[T]:
        """Build a matrix from a sequence of equally long rows."""
        materialised = [list(row) for row in rows]
        width = len(materialised[0]) if materialised else 0
        if any(len(row) != width for row in materialised):
            raise ValueError("all rows must have the same length")
        matrix = cls(width, len(materialised))
        matrix._data = [value for row in materialised for value in row]
        return matrix

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"position ({row}, {col}) outside {self._width}x{self._height} matrix"
            )
        return row * self._width + col

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._data[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._data[self._index(key)] = value

    def __iter__(self) -> Iterator[list[T]]:
        """Yield the rows, top to bottom, as fresh lists."""
        width = self._width
        for row in range(self._height):
            yield self._data[row * width:(row + 1) * width]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(width={self._width}, height={self._height})"


def new_image(width: int, height: int) -> Matrix[Color]:
    """Return a black image of the given size."""
    return Matrix(width, height, Color())