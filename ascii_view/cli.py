"""Command-line entry point: show an image file as ASCII art."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .image import ImageError, load_image, resize
from .options import OptionsError, parse_args
from .render import print_image

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the given arguments; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(list(argv))
    except OptionsError as exc:
        print(f"Error: {exc}!", file=sys.stderr)
        return 1
    if options.file_path is None:
        return 1

    try:
        original = load_image(options.file_path)
    except ImageError as exc:
        print(f"Error: {exc}!", file=sys.stderr)
        return 1

    try:
        resized = resize(
            original, options.max_width, options.max_height, options.character_ratio
        )
    except (ZeroDivisionError, ValueError) as exc:
        print(f"Error: Failed to resize image: {exc}!", file=sys.stderr)
        return 1

    print_image(resized, options.edge_threshold)
    return 0


if __name__ == "__main__":
    sys.exit(main())