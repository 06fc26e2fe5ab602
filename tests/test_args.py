import pytest

from image_processor.args import (
    USAGE,
    Args,
    ArgsError,
    FilterSpec,
    is_valid_filter_name,
)


@pytest.mark.parametrize("name", ["-gs", "-crop", "-edge", "-sharp", "-neg"])
def test_known_filter_names_are_valid(name):
    assert is_valid_filter_name(name) is True


@pytest.mark.parametrize("name", ["gs", "-", "-g", "-blur", "--gs", "", "-1", "crop"])
def test_other_names_are_invalid(name):
    assert is_valid_filter_name(name) is False


def test_input_and_output_files():
    args = Args(["in.bmp", "out.bmp"])
    assert args.input_file == "in.bmp"
    assert args.output_file == "out.bmp"
    assert args.filters == []


def test_filters_with_parameters():
    args = Args(["in.bmp", "out.bmp", "-crop", "10", "20", "-gs", "-edge", "0.5"])
    assert args.filters == [
        FilterSpec("crop", ("10", "20")),
        FilterSpec("gs", ()),
        FilterSpec("edge", ("0.5",)),
    ]


def test_filter_names_drop_the_dash():
    args = Args(["a", "b", "-neg", "-sharp"])
    assert [spec.name for spec in args.filters] == ["neg", "sharp"]


def test_unknown_options_after_a_filter_are_parameters():
    args = Args(["a", "b", "-crop", "-1", "-blur"])
    assert args.filters == [FilterSpec("crop", ("-1", "-blur"))]


def test_same_filter_may_repeat():
    args = Args(["a", "b", "-neg", "-neg"])
    assert args.filters == [FilterSpec("neg"), FilterSpec("neg")]


@pytest.mark.parametrize("argv", [[], ["only.bmp"]])
def test_too_few_arguments(argv):
    with pytest.raises(ArgsError) as excinfo:
        Args(argv)
    assert str(excinfo.value) == USAGE


def test_first_token_after_files_must_be_filter():
    with pytest.raises(ArgsError) as excinfo:
        Args(["a", "b", "-blur", "-gs"])
    assert str(excinfo.value) == "not valid filter name [-blur]"


def test_parameter_without_filter_rejected():
    with pytest.raises(ArgsError, match=r"not valid filter name \[10\]"):
        Args(["a", "b", "10"])


def test_args_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        Args(["a"])