"""Floating-point raster images: loading, box resizing, grayscale and 3x3 convolution."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from operator import add
from pathlib import Path

from PIL import Image as _PILImage
from PIL import UnidentifiedImageError

__all__ = [
    "Image",
    "ImageError",
    "load_image",
    "resize",
    "grayscale",
    "convolve",
    "sobel",
    "SOBEL_X",
    "SOBEL_Y",
]

SOBEL_X = (-1.0, 0.0, 1.0, -2.0, 0.0, 2.0, -1.0, 0.0, 1.0)
SOBEL_Y = (1.0, 2.0, 1.0, 0.0, 0.0, 0.0, -1.0, -2.0, -1.0)

_LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Modes Pillow can hand over byte-for-byte, with their channel counts.
_NATIVE_MODES = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class ImageError(Exception):
    """Raised when an image cannot be loaded."""


@dataclass
class Image:
    """An image of ``channels`` interleaved values per pixel, stored row by row in [0, 1]."""

    width: int
    height: int
    channels: int
    data: list[float] = field(repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.channels < 1:
            raise ValueError("image dimensions must be non-negative with at least one channel")
        self.data = [float(v) for v in self.data]
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(f"expected {expected} values, got {len(self.data)}")

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return (y * self.width + x) * self.channels

    def pixel(self, x: int, y: int) -> tuple[float, ...]:
        """Return the channel values of the pixel at (x, y)."""
        start = self._offset(x, y)
        return tuple(self.data[start:start + self.channels])

    def set_pixel(self, x: int, y: int, value: float | Iterable[float]) -> None:
        """Replace the channel values of the pixel at (x, y)."""
        values = [float(value)] if isinstance(value, (int, float)) else [float(v) for v in value]
        if len(values) != self.channels:
            raise ValueError(f"expected {self.channels} channel values, got {len(values)}")
        start = self._offset(x, y)
        self.data[start:start + self.channels] = values


def _normalise_mode(img: _PILImage.Image) -> _PILImage.Image:
    mode = img.mode
    if mode in _NATIVE_MODES:
        return img
    if mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    if mode in ("PA", "RGBa"):
        return img.convert("RGBA")
    if mode == "La":
        return img.convert("LA")
    if mode == "1" or mode.startswith("I") or mode == "F":
        return img.convert("L")
    return img.convert("RGB")


def load_image(path: str | Path) -> Image:
    """Load an image file, keeping its channel count, with values scaled to [0, 1]."""
    try:
        with _PILImage.open(path) as img:
            img.load()
            img = _normalise_mode(img)
            raw = img.tobytes()
            width, height = img.size
            channels = _NATIVE_MODES[img.mode]
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise ImageError(f"Failed to load image '{path}': {exc}") from exc
    return Image(width, height, channels, [b / 255.0 for b in raw])


def resize(image: Image, max_width: int, max_height: int, character_ratio: float) -> Image:
    """Box-average the image to fit within the limits, squashing height by ``character_ratio``.

    Output pixels whose box holds no source pixels (when enlarging) come out as NaN.
    """
    proposed_height = int((image.height * max_width) / (character_ratio * image.width))
    if proposed_height <= max_height:
        width, height = max_width, proposed_height
    else:
        width = int((character_ratio * image.width * max_height) / image.height)
        height = max_height

    channels = image.channels
    stride = image.width * channels
    data: list[float] = []

    for j in range(height):
        y1 = (j * image.height) // height
        y2 = ((j + 1) * image.height) // height
        column_sums = [0.0] * stride
        for y in range(y1, y2):
            column_sums = list(map(add, column_sums, image.data[y * stride:(y + 1) * stride]))
        rows = y2 - y1

        for i in range(width):
            x1 = (i * image.width) // width
            x2 = ((i + 1) * image.width) // width
            n_pixels = (x2 - x1) * rows
            for c in range(channels):
                total = sum(column_sums[x1 * channels + c:x2 * channels:channels])
                data.append(total / n_pixels if n_pixels else math.nan)

    return Image(width, height, channels, data)


def grayscale(image: Image) -> Image:
    """Return a one-channel, luminance-weighted copy; images with fewer than three channels keep their first."""
    channels = image.channels
    values = image.data
    if channels >= 3:
        wr, wg, wb = _LUMA_WEIGHTS
        data = [
            wr * values[i] + wg * values[i + 1] + wb * values[i + 2]
            for i in range(0, len(values), channels)
        ]
    else:
        data = values[::channels]
    return Image(image.width, image.height, 1, data)


def convolve(image: Image, kernel: Sequence[float]) -> list[float]:
    """Convolve every channel with a row-major 3x3 kernel; border values are left at zero."""
    weights = tuple(float(k) for k in kernel)
    if len(weights) != 9:
        raise ValueError(f"kernel must hold 9 values, got {len(weights)}")

    width, channels = image.width, image.channels
    values = image.data
    out = [0.0] * len(values)
    offsets = [
        (weights[(i + 1) + (j + 1) * 3], (i + j * width) * channels)
        for j in (-1, 0, 1)
        for i in (-1, 0, 1)
    ]

    for y in range(1, image.height - 1):
        for x in range(1, width - 1):
            base = (x + y * width) * channels
            for c in range(channels):
                index = base + c
                out[index] = sum(w * values[index + off] for w, off in offsets)
    return out


def sobel(image: Image) -> tuple[list[float], list[float]]:
    """Return the horizontal and vertical Sobel responses of the image."""
    return convolve(image, SOBEL_X), convolve(image, SOBEL_Y)