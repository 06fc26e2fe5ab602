"""Command-line argument parsing for the image processor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

FILTER_NAMES = frozenset({"-gs", "-crop", "-edge", "-sharp", "-neg"})

USAGE = "USAGE: image_processor [INPUT_FILE] [OUTPUT_FILE] [[FILTER] [FILTER_PARAMS]...]..."


class ArgsError(RuntimeError):
    """Raised when the command line cannot be parsed."""


def is_valid_filter_name(name: str) -> bool:
    """Return whether ``name`` is a known filter option such as ``-gs``."""
    return len(name) > 2 and name.startswith("-") and name in FILTER_NAMES


@dataclass(frozen=True)
class FilterSpec:
    """A filter requested on the command line, with its raw parameters."""

    name: str
    parameters: tuple[str, ...] = ()


def _parse_filters(tokens: Iterable[str]) -> Iterator[FilterSpec]:
    name: str | None = None
    parameters: list[str] = []
    for token in tokens:
        if is_valid_filter_name(token):
            if name is not None:
                yield FilterSpec(name, tuple(parameters))
            name, parameters = token[1:], []
        elif name is None:
            raise ArgsError(f"not valid filter name [{token}]")
        else:
            parameters.append(token)
    if name is not None:
        yield FilterSpec(name, tuple(parameters))


class Args:
    """Parsed arguments: input file, output file and the filters to apply.

    ``argv`` holds the arguments without the program name.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        argv = list(argv)
        if len(argv) < 2:
            raise ArgsError(USAGE)
        self.input_file: str = argv[0]
        self.output_file: str = argv[1]
        self.filters: list[FilterSpec] = list(_parse_filters(argv[2:]))

    def __repr__(self) -> str:
        return (
            f"Args(input_file={self.input_file!r}, output_file={self.output_file!r}, "
            f"filters={self.filters!r})"
        )