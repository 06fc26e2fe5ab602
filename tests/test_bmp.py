import struct

import pytest

from image_processor.bmp import BMP, ImageFormat, row_size
from image_processor.color import Color
from image_processor.matrix import Matrix

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
MAGENTA = Color(1.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0)


@pytest.fixture
def sample_image():
    return Matrix.from_rows([[WHITE, BLACK, MAGENTA], [GREEN, MAGENTA, WHITE]])


@pytest.fixture
def saved(tmp_path, sample_image):
    path = tmp_path / "image.bmp"
    BMP().save(sample_image, path)
    return path


def test_row_size_padding():
    assert row_size(1) == 4
    assert row_size(4) == 12
    assert all(row_size(width) % 4 == 0 for width in range(20))
    assert all(row_size(width) >= 3 * width for width in range(20))


def test_round_trip(saved, sample_image):
    assert BMP().load(saved) == sample_image


def test_file_header(saved):
    raw = saved.read_bytes()
    assert struct.unpack_from("<2sIHHI", raw, 0) == (b"BM", len(raw), 0, 0, 54)


def test_info_header(saved):
    raw = saved.read_bytes()
    assert struct.unpack_from("<IiiHHIIiiII", raw, 14) == (
        40, 3, 2, 1, 24, 0, row_size(3) * 2, 11811, 11811, 0, 0,
    )


def test_file_length(saved):
    assert len(saved.read_bytes()) == 54 + row_size(3) * 2


def test_pixels_stored_bgr_with_padding(saved):
    raw = saved.read_bytes()
    first_row = raw[54:54 + row_size(3)]
    assert first_row[:3] == b"\xff\xff\xff"
    assert first_row[6:9] == b"\xff\x00\xff"
    assert first_row[9:] == bytes(row_size(3) - 9)


def test_out_of_range_channels_are_clamped(tmp_path):
    path = tmp_path / "clamp.bmp"
    BMP().save(Matrix.from_rows([[Color(2.0, -1.0, 1.0)]]), path)
    assert BMP().load(path)[0, 0] == MAGENTA


def test_top_down_height_is_accepted(saved, sample_image):
    raw = bytearray(saved.read_bytes())
    struct.pack_into("<i", raw, 22, -2)
    saved.write_bytes(bytes(raw))
    assert BMP().load(saved) == sample_image


def test_negative_width_raises(saved):
    raw = bytearray(saved.read_bytes())
    struct.pack_into("<i", raw, 18, -3)
    saved.write_bytes(bytes(raw))
    with pytest.raises(ValueError):
        BMP().load(saved)


def test_truncated_file_raises(saved):
    saved.write_bytes(saved.read_bytes()[:60])
    with pytest.raises(EOFError):
        BMP().load(saved)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        BMP().load(tmp_path / "missing.bmp")


def test_empty_image_round_trip(tmp_path):
    path = tmp_path / "empty.bmp"
    empty = Matrix(0, 0)
    BMP().save(empty, path)
    assert len(path.read_bytes()) == 54
    assert BMP().load(path) == empty


def test_image_format_is_abstract():
    with pytest.raises(TypeError):
        ImageFormat()