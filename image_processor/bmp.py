"""Loading and saving uncompressed 24-bit BMP images."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from typing import Union

from image_processor.binio import Reader, Writer
from image_processor.color import Color
from image_processor.matrix import Matrix, new_image

PathType = Union[str, "PathLike[str]"]

DEFAULT_OFFSET = 54
DEFAULT_HEADER_SIZE = 40
DEFAULT_BITS_PER_PIXEL = 24
DEFAULT_RESOLUTION = 11811  # 300 DPI
BYTES_PER_PIXEL = 3
CHANNEL_MAX = 255


class ImageFormat(ABC):
    """An image file format that can load and save images."""

    @abstractmethod
    def load(self, filename: PathType) -> Matrix[Color]:
        """Read an image from ``filename``."""

    @abstractmethod
    def save(self, image: Matrix[Color], filename: PathType) -> None:
        """Write ``image`` to ``filename``."""


@dataclass
class _FileHeader:
    signature: bytes = b"BM"
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    offset: int = DEFAULT_OFFSET


_FILE_HEADER_LAYOUT = (
    ("signature", "2s"),
    ("file_size", "I"),
    ("reserved1", "H"),
    ("reserved2", "H"),
    ("offset", "I"),
)


@dataclass
class _InfoHeader:
    header_size: int = DEFAULT_HEADER_SIZE
    width: int = 0
    height: int = 0
    color_planes: int = 1
    bits_per_pixel: int = DEFAULT_BITS_PER_PIXEL
    compression: int = 0
    data_size: int = 0
    horizontal_resolution: int = DEFAULT_RESOLUTION
    vertical_resolution: int = DEFAULT_RESOLUTION
    colors_total: int = 0
    colors_important: int = 0


_INFO_HEADER_LAYOUT = (
    ("header_size", "I"),
    ("width", "i"),
    ("height", "i"),
    ("color_planes", "H"),
    ("bits_per_pixel", "H"),
    ("compression", "I"),
    ("data_size", "I"),
    ("horizontal_resolution", "i"),
    ("vertical_resolution", "i"),
    ("colors_total", "I"),
    ("colors_important", "I"),
)


def _read_header(reader, header_type, layout):
    return header_type(**{name: reader.read(fmt) for name, fmt in layout})


def _write_header(writer, header, layout):
    for name, fmt in layout:
        writer.write(fmt, getattr(header, name))


def row_size(width: int) -> int:
    """Bytes taken by one pixel row of ``width`` pixels, padded to 4 bytes."""
    return (BYTES_PER_PIXEL * width + 3) // 4 * 4


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(CHANNEL_MAX)))


class BMP(ImageFormat):
    """The 24-bit uncompressed BMP format."""

    def load(self, filename: PathType) -> Matrix[Color]:
        with open(filename, "rb") as stream:
            reader = Reader(stream)
            _read_header(reader, _FileHeader, _FILE_HEADER_LAYOUT)
            info = _read_header(reader, _InfoHeader, _INFO_HEADER_LAYOUT)
            if info.width < 0:
                raise ValueError(f"invalid BMP width {info.width}")
            width = info.width
            height = abs(info.height)
            stride = row_size(width)
            image = new_image(width, height)
            for row in range(height):
                pixels = reader.read(f"{stride}s")[: BYTES_PER_PIXEL * width]
                triples = zip(pixels[0::3], pixels[1::3], pixels[2::3])
                for col, (b, g, r) in enumerate(triples):
                    image[row, col] = Color(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)
        return image

    def save(self, image: Matrix[Color], filename: PathType) -> None:
        stride = row_size(image.width)
        info = _InfoHeader(
            width=image.width,
            height=image.height,
            data_size=stride * image.height,
        )
        file_header = _FileHeader(file_size=info.data_size + DEFAULT_OFFSET)
        padding = bytes(stride - BYTES_PER_PIXEL * image.width)
        with open(filename, "wb") as stream:
            writer = Writer(stream)
            _write_header(writer, file_header, _FILE_HEADER_LAYOUT)
            _write_header(writer, info, _INFO_HEADER_LAYOUT)
            for row in image:
                data = bytearray()
                for pixel in row:
                    scaled = pixel * CHANNEL_MAX
                    data.extend(_to_byte(channel) for channel in (scaled.b, scaled.g, scaled.r))
                writer.write(f"{stride}s", bytes(data) + padding)