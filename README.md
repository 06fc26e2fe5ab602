# image_processor

A small command-line tool and library. It reads an uncompressed 24-bit BMP image, runs it through a chain of filters and writes the result as a BMP.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
image_processor INPUT_FILE OUTPUT_FILE [FILTER [FILTER_PARAMS...]]...
```

You can also start it with `python -m image_processor.cli`.

Filters are applied in the order given. Every word after a filter name, up to the next filter name, is a parameter of that filter. The available filters are:

| Filter | Parameters | Effect |
|---|---|---|
| `-gs` | none | Grayscale, using the weights 0.299 R + 0.587 G + 0.114 B |
| `-neg` | none | Negative: each channel becomes `1 - value` |
| `-crop` | `width height` | Keeps the top-left `width` × `height` region. Sizes larger than the image are reduced to fit. Negative sizes are rejected. |
| `-sharp` | none | Sharpens with a 3×3 kernel (centre 5, edges −1). The result is clamped to [0, 1]. |
| `-edge` | `threshold` | Converts to grayscale, then applies a 3×3 kernel (centre 4, edges −1). Pixels whose response is above `threshold` become white and all others black. The threshold must lie between 0 and 1. |

Numeric parameters are read from their leading digits. A parameter that does not start with a number counts as 0.

Example:

```
image_processor photo.bmp result.bmp -crop 800 600 -gs -edge 0.1
```

Errors are reported on standard error and no output file is written:

- too few arguments, or a first filter word that is not a known filter, gives `Error filter: ...`
- a filter given the wrong number of parameters, or parameters out of range, gives `Error argument filter: ...`
- an input file that cannot be read gives `Error filter: ...`

The command exits with status 0 in every case.

## Library use

Filters register themselves under their command-line names (without the dash) when their modules are imported:

```python
from image_processor import crop, grayscale  # registers "crop" and "gs"
from image_processor.bmp import BMP
from image_processor.filter import Registry

bmp = BMP()
image = bmp.load("photo.bmp")

registry = Registry.instance()
for name, params in [("crop", ["800", "600"]), ("gs", [])]:
    image = registry.get(name)(params).apply(image)

bmp.save(image, "result.bmp")
```

You can also build the filters directly:

- `crop.Crop(width, height)`
- `grayscale.Grayscale()`
- `negative.Negative()`
- `sharpening.Sharpening()`
- `edge.EdgeDetection(threshold)`

`cli.run(argv)` runs the whole pipeline for a list of arguments, without the program name. It raises exceptions instead of printing them.

Images are `Matrix` objects (from `image_processor.matrix`) of `Color` values (from `image_processor.color`). Each `Color` is immutable. Its `r`, `g` and `b` channels are floats, nominally between 0 and 1, and colours support `+`, `-`, `*` and `/`.

Pixels are indexed as `image[row, col]`. Iterating over a matrix yields its rows. `new_image(width, height)` creates a black image, and `Matrix.from_rows(rows)` builds one from nested lists.

Rows are kept in the order they appear in the file. For an ordinary bottom-up BMP, row 0 is the bottom of the picture.

To add a filter of your own:

1. Subclass `Filter` and define `apply(image)`.
2. Write a factory that takes the sequence of string parameters and raises `FilterArgumentError` for bad ones.
3. Register the factory with the `register_filter(name)` decorator.

For a 3×3 convolution, subclass `convolution.MatrixFilter` with a nine-element kernel.

The command line only accepts the five built-in filter names.

## Limitations

- Only BMP is supported, and only uncompressed 24 bits per pixel. The header's bit depth and compression fields are not checked, so other BMP variants load as garbage.
- Images are always saved bottom-up with a 300 DPI resolution.
- Channel values outside [0, 1] are clamped when saved.
- Processing is pure Python, pixel by pixel, so large images are slow.