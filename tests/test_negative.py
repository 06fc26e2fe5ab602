import pytest

from image_processor.color import Color
from image_processor.filter import FilterArgumentError, Registry
from image_processor.matrix import Matrix
from image_processor.negative import Negative, make_negative


def _sample():
    return Matrix.from_rows(
        [
            [Color(0.25, 0.5, 1.0), Color(0.0, 0.0, 0.0)],
            [Color(1.0, 1.0, 1.0), Color(0.125, 0.75, 0.375)],
        ]
    )


def test_inverts_channels():
    result = Negative().apply(_sample())
    assert result[0, 0] == Color(0.75, 0.5, 0.0)
    assert result[0, 1] == Color(1.0, 1.0, 1.0)
    assert result[1, 0] == Color(0.0, 0.0, 0.0)


def test_double_negative_is_identity():
    image = _sample()
    assert Negative().apply(Negative().apply(image)) == image


def test_shape_preserved_and_input_untouched():
    image = _sample()
    result = Negative().apply(image)
    assert (result.width, result.height) == (2, 2)
    assert image == _sample()


def test_factory_rejects_parameters():
    with pytest.raises(FilterArgumentError, match="USAGE: -neg"):
        make_negative(["x"])


def test_factory_builds_negative():
    image = _sample()
    assert make_negative([]).apply(image) == Negative().apply(image)


def test_registered_as_neg():
    assert Registry.instance().get("neg") is make_negative