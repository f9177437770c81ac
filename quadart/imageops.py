"""Rectangles and per-region colour statistics of images."""

from __future__ import annotations

import math
from dataclasses import dataclass

from PIL import Image, ImageStat

_SQRT2 = math.sqrt(2)
_WEIGHTS = (0.299, 0.587, 0.114)
_SCALE = 257  # 8-bit to 16-bit channel scale


@dataclass(frozen=True)
class Rect:
    """Integer rectangle; ``(x0, y0)`` inclusive, ``(x1, y1)`` exclusive."""

    x0: int
    y0: int
    x1: int
    y1: int

    def width(self) -> int:
        return self.x1 - self.x0

    def height(self) -> int:
        return self.y1 - self.y0

    def is_empty(self) -> bool:
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap, or the zero rectangle when there is none."""
        result = Rect(
            max(self.x0, other.x0),
            max(self.y0, other.y0),
            min(self.x1, other.x1),
            min(self.y1, other.y1),
        )
        return Rect(0, 0, 0, 0) if result.is_empty() else result


def _rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def average_color(image: Image.Image) -> tuple[int, int, int, int]:
    """Mean colour of all pixels. Raises ``ValueError`` for an empty image."""
    area = image.width * image.height
    if area == 0:
        raise ValueError("cannot average the colour of an empty image")
    sums = ImageStat.Stat(_rgba(image)).sum
    red, green, blue, alpha = ((int(total) * _SCALE // area) >> 8 for total in sums)
    return (red, green, blue, alpha)


def color_mse(image: Image.Image, color: tuple[int, ...]) -> float:
    """Luma-weighted error of *image* against *color*, on the 16-bit scale.

    The mean squared error is weighted by the area, so larger regions with
    the same per-pixel deviation score higher.
    """
    area = image.width * image.height
    if area == 0:
        return 0.0
    stat = ImageStat.Stat(_rgba(image))
    total = 0.0
    for weight, channel_sum, channel_sum2, value in zip(
        _WEIGHTS, stat.sum, stat.sum2, color[:3]
    ):
        target = value * _SCALE
        squared = (
            _SCALE * _SCALE * channel_sum2
            - 2 * _SCALE * target * channel_sum
            + area * target * target
        )
        total += weight * max(squared, 0.0)
    return math.sqrt(total)


def extract_sub_image(image: Image.Image, rect: Rect) -> Image.Image:
    """Copy of the part of *image* inside *rect*; empty when they do not meet."""
    clipped = rect.intersect(Rect(0, 0, image.width, image.height))
    return image.crop((clipped.x0, clipped.y0, clipped.x1, clipped.y1))


def inscribed_square(center: tuple[int, int], radius: float) -> Rect:
    """The square inscribed in the circle of *radius* around *center*."""
    x, y = center
    half = radius * _SQRT2 / 2.0
    return Rect(int(x - half), int(y - half), int(x + half), int(y + half))