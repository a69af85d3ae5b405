"""Reading and writing JPEG images."""

from __future__ import annotations

import os

from PIL import Image as PILImage

from .image import Color, Image, ImageError

_DECODE_ERRORS = (OSError, ValueError, SyntaxError, PILImage.DecompressionBombError)


def load_jpeg(path: str | os.PathLike) -> Image:
    """Read a JPEG file and return its pixels as opaque RGB colours."""
    try:
        with PILImage.open(path) as src:
            if src.format != "JPEG":
                raise ImageError(f"{os.fspath(path)} is not a JPEG file")
            rgb = src.convert("RGB")
            width, height = rgb.size
            data = rgb.tobytes()
    except _DECODE_ERRORS as exc:
        raise ImageError(f"cannot read {os.fspath(path)}: {exc}") from exc

    image = Image(width, height, Color.black())
    row_size = width * 3
    for y, row in enumerate(image.rows()):
        chunk = data[y * row_size:(y + 1) * row_size]
        row[:] = [Color(r, g, b) for r, g, b in zip(chunk[0::3], chunk[1::3], chunk[2::3])]
    return image


def save_jpeg(path: str | os.PathLike, image: Image) -> None:
    """Write ``image`` to ``path`` as a JPEG file with default settings."""
    if not image:
        raise ImageError(
            f"cannot write an empty image ({image.width}x{image.height}) as JPEG"
        )
    data = b"".join(
        bytes(channel for px in row for channel in (px.r, px.g, px.b))
        for row in image.rows()
    )
    try:
        picture = PILImage.frombytes("RGB", (image.width, image.height), data)
        picture.save(path, "JPEG")
    except (OSError, ValueError) as exc:
        raise ImageError(f"cannot write {os.fspath(path)}: {exc}") from exc