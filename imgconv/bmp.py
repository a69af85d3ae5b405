"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct

from .image import Color, Image, ImageError

BMP_BYTES_PER_PIXEL = 3
BMP_ROW_ALIGNMENT = 4
BMP_SIGNATURE = b"BM"

_FILE_HEADER = struct.Struct("<2sIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


def bmp_stride(width: int) -> int:
    """Size in bytes of one padded BMP row of ``width`` pixels."""
    return BMP_ROW_ALIGNMENT * (
        (width * BMP_BYTES_PER_PIXEL + BMP_ROW_ALIGNMENT - 1) // BMP_ROW_ALIGNMENT
    )


def save_bmp(path: str | os.PathLike, image: Image) -> None:
    """Write ``image`` to ``path`` as a bottom-up 24-bit BMP file."""
    stride = bmp_stride(image.width)
    data_size = stride * image.height
    off_bits = _FILE_HEADER.size + _INFO_HEADER.size

    file_header = _FILE_HEADER.pack(BMP_SIGNATURE, off_bits + data_size, 0, off_bits)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        image.width,
        image.height,
        1,
        24,
        0,
        data_size,
        11811,
        11811,
        0,
        0x1000000,
    )
    padding = bytes(stride - image.width * BMP_BYTES_PER_PIXEL)

    try:
        with open(path, "wb") as out:
            out.write(file_header)
            out.write(info_header)
            for row in reversed(list(image.rows())):
                out.write(bytes(c for px in row for c in (px.b, px.g, px.r)))
                out.write(padding)
    except OSError as exc:
        raise ImageError(f"cannot write {os.fspath(path)}: {exc}") from exc


def load_bmp(path: str | os.PathLike) -> Image:
    """Read an uncompressed 24-bit BMP file."""
    try:
        with open(path, "rb") as src:
            data = src.read()
    except OSError as exc:
        raise ImageError(f"cannot read {os.fspath(path)}: {exc}") from exc

    if len(data) < _FILE_HEADER.size:
        raise ImageError("truncated BMP file header")
    signature, _size, _reserved, off_bits = _FILE_HEADER.unpack_from(data)
    if signature != BMP_SIGNATURE:
        raise ImageError("not a BMP file")

    if len(data) < _FILE_HEADER.size + _INFO_HEADER.size:
        raise ImageError("truncated BMP info header")
    info = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    width, height = info[1], info[2]

    try:
        image = Image(width, height, Color.black())
    except ValueError as exc:
        raise ImageError(str(exc)) from exc

    stride = bmp_stride(width)
    row_size = width * BMP_BYTES_PER_PIXEL
    for y in range(height):
        start = off_bits + y * stride
        chunk = data[start:start + row_size]
        if len(chunk) != row_size:
            raise ImageError("truncated BMP pixel data")
        image.line(height - y - 1)[:] = [
            Color(r, g, b) for b, g, r in zip(chunk[0::3], chunk[1::3], chunk[2::3])
        ]
    return image