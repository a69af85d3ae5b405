"""In-memory raster images made of RGBA pixels."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_CHANNEL_MAX = 255


class ImageError(Exception):
    """Raised when an image cannot be read or written."""


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= _CHANNEL_MAX:
                raise ValueError(f"channel {name}={value} is outside 0..{_CHANNEL_MAX}")

    @staticmethod
    def black() -> Color:
        """Opaque black."""
        return Color(0, 0, 0, _CHANNEL_MAX)


class Image:
    """A rectangular grid of colours, stored row by row from the top."""

    __slots__ = ("_width", "_height", "_rows")

    def __init__(self, width: int = 0, height: int = 0, fill: Color | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative: {width}x{height}")
        if fill is None:
            fill = Color.black()
        self._width = width
        self._height = height
        self._rows: list[list[Color]] = [[fill] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def step(self) -> int:
        """Number of pixels between the starts of consecutive rows."""
        return self._width

    def _check_row(self, y: int) -> None:
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside 0..{self._height - 1}")

    def _check_pixel(self, x: int, y: int) -> None:
        self._check_row(y)
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} is outside 0..{self._width - 1}")

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_pixel(x, y)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_pixel(x, y)
        self._rows[y][x] = color

    def line(self, y: int) -> list[Color]:
        """The live list of pixels in row ``y``; changes to it change the image."""
        self._check_row(y)
        return self._rows[y]

    def rows(self) -> Iterator[list[Color]]:
        """Yield the rows from top to bottom."""
        yield from self._rows

    def __bool__(self) -> bool:
        return self._width > 0 and self._height > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"