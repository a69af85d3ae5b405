# imgconv

Convert raster images between three formats:

- binary PPM (`P6`) with a maximum channel value of 255,
- uncompressed 24-bit BMP,
- JPEG. Pillow reads and writes this format.

## Installation

```
pip install .
```

## Command line

```
imgconv <in_file> <out_file>
```

The command picks the format of each file from its extension: `.ppm`, `.bmp`,
`.jpg` or `.jpeg`. The match is case-sensitive, so `.JPG` is not recognised.
On success it prints `Successfully converted` and exits with 0. Otherwise it
prints a message to standard error and exits with one of these codes:

| Code | Meaning                              |
|------|--------------------------------------|
| 1    | wrong number of arguments            |
| 2    | unknown format of the input file     |
| 3    | unknown format of the output file    |
| 4    | the input file could not be loaded   |
| 5    | the output file could not be saved   |

A second command converts a JPEG file straight to PPM. It uses the same messages
and exit codes 1, 4 and 5:

```
jpeg2ppm photo.jpg photo.ppm
```

## Library use

```python
from imgconv.image import Color, Image, ImageError
from imgconv.ppm import save_ppm, load_ppm
from imgconv.bmp import save_bmp, load_bmp
from imgconv.jpeg import save_jpeg, load_jpeg

image = Image(4, 3, Color.black())
image.set_pixel(1, 2, Color(255, 0, 0))
save_bmp("red_dot.bmp", image)

loaded = load_bmp("red_dot.bmp")
print(loaded.width, loaded.height, loaded.get_pixel(1, 2))
```

### `imgconv.image`

- `Color(r, g, b, a=255)` is a frozen dataclass with 8-bit channels. A channel
  outside 0..255 raises `ValueError`. `Color.black()` returns opaque black.
- `Image(width=0, height=0, fill=None)` is a grid of colours stored row by row
  from the top. If you give no fill, it is filled with black. A negative size
  raises `ValueError`.
  - `width`, `height` and `step` are read-only properties. `step` is equal to
    the width.
  - `get_pixel(x, y)` and `set_pixel(x, y, color)` read and write one pixel.
  - `line(y)` returns the list of pixels in row `y`. Changing that list changes
    the image.
  - `rows()` yields the rows from top to bottom.
  - Coordinates out of range raise `IndexError`.
  - An image is false when it has no pixels.
  - Two images are equal when they have the same size and the same pixels.
- `ImageError` is raised when an image cannot be read or written.

### Loading and saving

The `load_*` functions take a path and return an `Image`. Each `save_*` function
takes a path and an image and returns nothing. Any failure raises `ImageError`:
a file that cannot be opened, a wrong signature, a malformed or truncated header
or pixel data, or an error from the encoder. Alpha is ignored on saving, and
loaded pixels are opaque.

- `imgconv.ppm`: `load_ppm` accepts only `P6` with a maximum value of 255. It
  expects a single newline after the header.
- `imgconv.bmp`:
  - `save_bmp` writes a bottom-up 24-bit BMP with rows padded to 4 bytes.
  - `load_bmp` reads pixel rows from the data offset in the file header.
  - `bmp_stride(width)` gives the padded row size in bytes.
- `imgconv.jpeg`:
  - `load_jpeg` rejects files that Pillow does not identify as JPEG and converts
    the pixels to RGB.
  - `save_jpeg` writes with Pillow's default settings and refuses an empty image.

### `imgconv.cli`

- `format_by_extension(path)` returns a `Format` member: `JPEG`, `PPM`, `BMP`
  or `UNKNOWN`.
- `format_for_path(path)` returns the matching handler, or `None` if the
  extension is not known. The handlers are `PPMFormat`, `BMPFormat` and
  `JPEGFormat`, which are subclasses of `ImageFormat`, and each provides
  `load_image(path)` and `save_image(path, image)`.
- `main(argv=None)` runs the `imgconv` command and returns its exit code.
  `imgconv.jpeg2ppm.main(argv=None)` does the same for `jpeg2ppm`.

## Limitations

- PPM support covers only binary `P6` files with a maximum value of 255. ASCII
  PPM, PGM and PBM files are not supported.
- BMP support covers only uncompressed 24-bit images. `load_bmp` does not check
  the bit depth or the compression fields. Top-down BMPs, which have a negative
  height, are rejected.
- JPEG quality and other encoder options cannot be set.
- The commands convert only between file formats. They do not resize, crop or
  otherwise edit images.