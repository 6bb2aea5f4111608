"""Turning images into coloured ASCII art for the terminal."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import TextIO

from .image import Image, grayscale, sobel

__all__ = [
    "HSV",
    "rgb_to_hsv",
    "color_code",
    "ascii_char",
    "edge_char",
    "render",
    "print_image",
    "VALUE_CHARS",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "RESET",
]

VALUE_CHARS = " .-=+*x#$&X@"

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
RESET = "\x1b[0m"

# Edge detection is off at or above this threshold.
_EDGES_OFF = 4.0

_HUE_BANDS = (
    (30.0, 90.0, YELLOW),
    (90.0, 150.0, GREEN),
    (150.0, 210.0, CYAN),
    (210.0, 270.0, BLUE),
    (270.0, 330.0, MAGENTA),
)


@dataclass(frozen=True)
class HSV:
    """A colour as hue in degrees, saturation and value in [0, 1]."""

    hue: float
    saturation: float
    value: float


def rgb_to_hsv(red: float, green: float, blue: float) -> HSV:
    """Convert RGB components in [0, 1] to HSV."""
    if red >= green and red >= blue:
        largest = "red"
        value = red
    elif green >= blue:
        largest = "green"
        value = green
    else:
        largest = "blue"
        value = blue

    chroma = value - min(red, green, blue)
    saturation = 0.0 if abs(value) < 1e-4 else chroma / value

    if chroma < 1e-4:
        hue = 0.0
    elif largest == "red":
        hue = 60.0 * math.fmod((green - blue) / chroma, 6.0)
        if hue < 0.0:
            hue += 360.0
    elif largest == "green":
        hue = 60.0 * (2.0 + (blue - red) / chroma)
    else:
        hue = 60.0 * (4.0 + (red - green) / chroma)

    return HSV(hue, saturation, value)


def color_code(hsv: HSV) -> str:
    """Return the ANSI colour escape that best matches the colour."""
    if hsv.saturation < 0.25:
        return WHITE
    for low, high, code in _HUE_BANDS:
        if low <= hsv.hue < high:
            return code
    return RED


def ascii_char(gray: float) -> str:
    """Return the shading character for a brightness in [0, 1]."""
    count = len(VALUE_CHARS)
    scaled = gray * count
    if not scaled >= 0:
        return VALUE_CHARS[0]
    if scaled >= count:
        return VALUE_CHARS[-1]
    return VALUE_CHARS[int(scaled)]


def edge_char(angle: float) -> str:
    """Return the line character drawn for an edge with the given gradient angle in degrees."""
    if 22.5 <= angle <= 67.5 or -157.5 <= angle <= -112.5:
        return "\\"
    if 67.5 <= angle <= 112.5 or -112.5 <= angle <= -67.5:
        return "_"
    if 112.5 <= angle <= 157.5 or -67.5 <= angle <= -22.5:
        return "/"
    return "|"


def _shade(pixel: tuple[float, ...]) -> tuple[float, str]:
    if len(pixel) <= 2:
        return pixel[0], WHITE
    hsv = rgb_to_hsv(pixel[0], pixel[1], pixel[2])
    return hsv.value * hsv.value, color_code(hsv)


def render(image: Image, edge_threshold: float) -> str:
    """Return the image as coloured ASCII art, one line per row, ending with a colour reset."""
    size = image.width * image.height
    if edge_threshold < _EDGES_OFF:
        sobel_x, sobel_y = sobel(grayscale(image))
    else:
        sobel_x = sobel_y = [0.0] * size
    threshold_squared = edge_threshold * edge_threshold

    parts: list[str] = []
    for y in range(image.height):
        for x in range(image.width):
            index = y * image.width + x
            sx, sy = sobel_x[index], sobel_y[index]
            gray, color = _shade(image.pixel(x, y))
            char = ascii_char(gray)
            if sx * sx + sy * sy >= threshold_squared:
                char = edge_char(math.degrees(math.atan2(sy, sx)))
            parts.append(color)
            parts.append(char)
        parts.append("\n")
    parts.append(RESET)
    return "".join(parts)


def print_image(image: Image, edge_threshold: float, file: TextIO | None = None) -> None:
    """Write the rendered image to ``file``, standard output by default."""
    stream = sys.stdout if file is None else file
    stream.write(render(image, edge_threshold))