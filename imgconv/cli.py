"""Command that converts an image between PPM, JPEG and BMP by file extension."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from .bmp import load_bmp, save_bmp
from .image import Image, ImageError
from .jpeg import load_jpeg, save_jpeg
from .ppm import load_ppm, save_ppm


class Format(Enum):
    JPEG = "jpeg"
    PPM = "ppm"
    BMP = "bmp"
    UNKNOWN = "unknown"


class ImageFormat(ABC):
    """Loads and saves images of one file format."""

    @abstractmethod
    def load_image(self, path: str | os.PathLike) -> Image:
        """Read an image; raise ImageError on failure."""

    @abstractmethod
    def save_image(self, path: str | os.PathLike, image: Image) -> None:
        """Write an image; raise ImageError on failure."""


class PPMFormat(ImageFormat):
    def load_image(self, path: str | os.PathLike) -> Image:
        return load_ppm(path)

    def save_image(self, path: str | os.PathLike, image: Image) -> None:
        save_ppm(path, image)


class JPEGFormat(ImageFormat):
    def load_image(self, path: str | os.PathLike) -> Image:
        return load_jpeg(path)

    def save_image(self, path: str | os.PathLike, image: Image) -> None:
        save_jpeg(path, image)


class BMPFormat(ImageFormat):
    def load_image(self, path: str | os.PathLike) -> Image:
        return load_bmp(path)

    def save_image(self, path: str | os.PathLike, image: Image) -> None:
        save_bmp(path, image)


_EXTENSIONS = {
    ".jpg": Format.JPEG,
    ".jpeg": Format.JPEG,
    ".ppm": Format.PPM,
    ".bmp": Format.BMP,
}

_HANDLERS: dict[Format, ImageFormat] = {
    Format.PPM: PPMFormat(),
    Format.JPEG: JPEGFormat(),
    Format.BMP: BMPFormat(),
}


def format_by_extension(path: str | os.PathLike) -> Format:
    """The format named by the file's extension (case-sensitive)."""
    return _EXTENSIONS.get(Path(path).suffix, Format.UNKNOWN)


def format_for_path(path: str | os.PathLike) -> ImageFormat | None:
    """The handler for the file's format, or None if it is unknown."""
    return _HANDLERS.get(format_by_extension(path))


def main(argv: Sequence[str] | None = None) -> int:
    """Convert ``<in_file>`` to ``<out_file>``; return the exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "imgconv"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {prog} <in_file> <out_file>", file=sys.stderr)
        return 1

    in_path, out_path = Path(args[0]), Path(args[1])

    input_format = format_for_path(in_path)
    if input_format is None:
        print("Unknown format of the input file.", file=sys.stderr)
        return 2
    try:
        image = input_format.load_image(in_path)
    except ImageError:
        image = Image()
    if not image:
        print("Loading failed", file=sys.stderr)
        return 4

    output_format = format_for_path(out_path)
    if output_format is None:
        print("Unknown format of the output file.", file=sys.stderr)
        return 3
    try:
        output_format.save_image(out_path, image)
    except ImageError:
        print("Saving failed", file=sys.stderr)
        return 5

    print("Successfully converted")
    return 0


if __name__ == "__main__":
    sys.exit(main())