"""Little-endian reading and writing of fixed-size binary values."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO


class Reader:
    """Reads single little-endian values from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self, fmt: str) -> Any:
        """Read one value described by a ``struct`` format code."""
        layout = struct.Struct("<" + fmt)
        data = self._stream.read(layout.size)
        if len(data) < layout.size:
            raise EOFError(f"expected {layout.size} bytes, got {len(data)}")
        (value,) = layout.unpack(data)
        return value


class Writer:
    """Writes single little-endian values to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, fmt: str, value: Any) -> None:
        """Write one value described by a ``struct`` format code."""
        self._stream.write(struct.pack("<" + fmt, value))