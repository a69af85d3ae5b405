"""Command that converts a JPEG file to a binary PPM file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .image import ImageError
from .jpeg import load_jpeg
from .ppm import save_ppm


def main(argv: Sequence[str] | None = None) -> int:
    """Convert JPEG ``<in_file>`` to PPM ``<out_file>``; return the exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "jpeg2ppm"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {prog} <in_file> <out_file>", file=sys.stderr)
        return 1

    in_path, out_path = Path(args[0]), Path(args[1])

    try:
        image = load_jpeg(in_path)
    except ImageError:
        print("Loading failed", file=sys.stderr)
        return 4
    if not image:
        print("Loading failed", file=sys.stderr)
        return 4

    try:
        save_ppm(out_path, image)
    except ImageError:
        print("Saving failed", file=sys.stderr)
        return 5

    print("Successfully converted")
    return 0


if __name__ == "__main__":
    sys.exit(main())