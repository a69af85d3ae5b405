"""Reading and writing binary PPM (P6) images."""

from __future__ import annotations

import os
import re

from .image import Color, Image, ImageError

PPM_SIGNATURE = "P6"
PPM_MAX = 255

_HEADER_FIELD = re.compile(rb"\s*(\S+)")


def _pack_rgb(row: list[Color]) -> bytes:
    return bytes(channel for px in row for channel in (px.r, px.g, px.b))


def save_ppm(path: str | os.PathLike, image: Image) -> None:
    """Write ``image`` to ``path`` as a binary PPM file."""
    header = f"{PPM_SIGNATURE}\n{image.width} {image.height}\n{PPM_MAX}\n".encode("ascii")
    try:
        with open(path, "wb") as out:
            out.write(header)
            for row in image.rows():
                out.write(_pack_rgb(row))
    except OSError as exc:
        raise ImageError(f"cannot write {os.fspath(path)}: {exc}") from exc


def load_ppm(path: str | os.PathLike) -> Image:
    """Read a binary PPM file with a maximum value of 255."""
    try:
        with open(path, "rb") as src:
            data = src.read()
    except OSError as exc:
        raise ImageError(f"cannot read {os.fspath(path)}: {exc}") from exc

    fields = []
    pos = 0
    for _ in range(4):
        match = _HEADER_FIELD.match(data, pos)
        if match is None:
            raise ImageError("truncated PPM header")
        fields.append(match.group(1))
        pos = match.end()

    signature, *numbers = fields
    if signature != PPM_SIGNATURE.encode("ascii"):
        raise ImageError("not a binary PPM file")
    try:
        width, height, color_max = (int(field) for field in numbers)
    except ValueError as exc:
        raise ImageError("malformed PPM header") from exc
    if color_max != PPM_MAX:
        raise ImageError(f"unsupported PPM maximum value {color_max}")
    if data[pos:pos + 1] != b"\n":
        raise ImageError("PPM header must end with a newline")
    pos += 1

    try:
        image = Image(width, height, Color.black())
    except ValueError as exc:
        raise ImageError(str(exc)) from exc

    row_size = width * 3
    for y, row in enumerate(image.rows()):
        chunk = data[pos + y * row_size:pos + (y + 1) * row_size]
        if len(chunk) != row_size:
            raise ImageError("truncated PPM pixel data")
        row[:] = [Color(r, g, b) for r, g, b in zip(chunk[0::3], chunk[1::3], chunk[2::3])]
    return image