"""Command-line entry point: load a BMP, apply filters, save the result."""

from __future__ import annotations

import sys
from collections.abc import Sequence

# Importing the filter modules registers them in the global registry.
from image_processor import crop, edge, grayscale, negative, sharpening  # noqa: F401
from image_processor.args import Args, ArgsError
from image_processor.bmp import BMP
from image_processor.filter import FilterArgumentError, Registry


def run(argv: Sequence[str]) -> None:
    """Process the image described by ``argv`` (without the program name)."""
    args = Args(argv)
    bmp = BMP()
    image = bmp.load(args.input_file)
    registry = Registry.instance()
    for spec in args.filters:
        factory = registry.get(spec.name)
        image = factory(spec.parameters).apply(image)
    bmp.save(image, args.output_file)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program, reporting errors on stderr; always returns 0."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        run(argv)
    except FilterArgumentError as error:
        print(f"Error argument filter: {error}", file=sys.stderr)
    except (ArgsError, OSError, EOFError, ValueError) as error:
        print(f"Error filter: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())