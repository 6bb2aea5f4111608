"""Command-line options: defaults, terminal size detection and argument parsing."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

__all__ = [
    "Options",
    "OptionsError",
    "help_text",
    "terminal_size",
    "parse_args",
    "PROG",
    "DEFAULT_MAX_WIDTH",
    "DEFAULT_MAX_HEIGHT",
    "DEFAULT_CHARACTER_RATIO",
    "DEFAULT_EDGE_THRESHOLD",
]

PROG = "ascii-view"

DEFAULT_MAX_WIDTH = 64
DEFAULT_MAX_HEIGHT = 48
DEFAULT_CHARACTER_RATIO = 2.0
DEFAULT_EDGE_THRESHOLD = 4.0

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class OptionsError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class Options:
    """Settings for one run: the image to show and how to fit and shade it."""

    file_path: str | None = None
    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT
    character_ratio: float = DEFAULT_CHARACTER_RATIO
    edge_threshold: float = DEFAULT_EDGE_THRESHOLD


def help_text(prog: str) -> str:
    """Return the usage message for the given program name."""
    return (
        "USAGE:\n"
        f"\t{prog} <path/to/image> [OPTIONS]\n\n"
        "ARGUMENTS:\n"
        "\t<path/to/image>\t\tPath to image file\n\n"
        "OPTIONS:\n"
        "\t-mw <width>\t\tMaximum width in characters "
        f"(default: terminal width OR {DEFAULT_MAX_WIDTH})\n"
        "\t-mh <height>\t\tMaximum height in characters "
        f"(default: terminal height OR {DEFAULT_MAX_HEIGHT})\n"
        "\t-et <threshold>\t\tEdge detection threshold, range: 0.0 - 4.0 "
        f"(default: {DEFAULT_EDGE_THRESHOLD:.1f}, disabled)\n"
        "\t-cr <ratio>\t\tHeight-to-width ratio for characters "
        f"(default: {DEFAULT_CHARACTER_RATIO:.1f})\n"
    )


def terminal_size() -> tuple[int, int] | None:
    """Return (columns, rows) of the terminal on standard input, or None if there is none."""
    if not os.isatty(0):
        return None
    try:
        size = os.get_terminal_size(0)
    except OSError:
        return None
    return size.columns, size.lines


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _size(text: str) -> int:
    value = _leading_int(text)
    if value < 0:
        raise OptionsError(f"size must not be negative, got {text!r}")
    return value


_SETTERS: dict[str, tuple[str, Callable[[str], object]]] = {
    "-mw": ("max_width", _size),
    "-mh": ("max_height", _size),
    "-et": ("edge_threshold", _leading_float),
    "-cr": ("character_ratio", _leading_float),
}


def parse_args(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name) into Options.

    With no arguments or ``-h`` first, the usage message is printed and the
    returned options carry no file path. Unknown options are ignored.
    """
    options = Options()
    size = terminal_size()
    if size is not None:
        options = replace(options, max_width=size[0], max_height=size[1])

    if not argv or argv[0] == "-h":
        print(help_text(PROG), end="")
        return options

    overrides: dict[str, object] = {"file_path": argv[0]}
    remaining = iter(argv[1:])
    for flag in remaining:
        if flag not in _SETTERS:
            continue
        value = next(remaining, None)
        if value is None:
            raise OptionsError(f"option {flag} requires a value")
        name, convert = _SETTERS[flag]
        overrides[name] = convert(value)

    return replace(options, **overrides)