"""RGBA drawing surface with alpha-blended shape fills."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Iterable, Sequence

from PIL import Image, ImageDraw

from .imageops import Rect

Point = tuple[float, float]


def _rgba(color: Sequence[int]) -> tuple[int, int, int, int]:
    channels = tuple(int(value) for value in color)
    if len(channels) == 3:
        return channels + (255,)
    red, green, blue, alpha = channels
    return (red, green, blue, alpha)


def _pixel_width(width: float) -> int:
    return max(1, round(width))


def regular_polygon(
    sides: int, x: float, y: float, radius: float, rotation: float
) -> list[Point]:
    """Vertices of a regular polygon; rotation 0 puts a vertex (or a flat top edge
    for even *sides*) at the top."""
    angle = 2 * math.pi / sides
    start = rotation - math.pi / 2
    if sides % 2 == 0:
        start += angle / 2
    return [
        (x + radius * math.cos(start + angle * i), y + radius * math.sin(start + angle * i))
        for i in range(sides)
    ]


class Canvas:
    """A drawing surface; every fill is composited over what is already there."""

    def __init__(
        self, width: int, height: int, background: Sequence[int] = (0, 0, 0, 0)
    ) -> None:
        self.image = Image.new("RGBA", (width, height), _rgba(background))

    @classmethod
    def from_image(cls, image: Image.Image) -> Canvas:
        """A canvas holding a copy of *image*."""
        canvas = cls(image.width, image.height)
        canvas.image = image.convert("RGBA")
        return canvas

    def copy(self) -> Canvas:
        return Canvas.from_image(self.image)

    def _paint(
        self,
        bounds: tuple[float, float, float, float],
        paint: Callable[[ImageDraw.ImageDraw, int, int], None],
    ) -> None:
        left = max(0, math.floor(bounds[0]))
        top = max(0, math.floor(bounds[1]))
        right = min(self.image.width, math.ceil(bounds[2]) + 1)
        bottom = min(self.image.height, math.ceil(bounds[3]) + 1)
        if right <= left or bottom <= top:
            return
        overlay = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
        paint(ImageDraw.Draw(overlay), left, top)
        self.image.alpha_composite(overlay, dest=(left, top))

    def fill_polygon(
        self, points: Iterable[Point], color: Sequence[int], stroke_width: float = 0.0
    ) -> None:
        """Fill a closed polygon, optionally outlined in the same colour."""
        vertices = [(float(px), float(py)) for px, py in points]
        if len(vertices) < 2:
            return
        fill = _rgba(color)
        margin = stroke_width + 1
        xs = [px for px, _ in vertices]
        ys = [py for _, py in vertices]
        bounds = (min(xs) - margin, min(ys) - margin, max(xs) + margin, max(ys) + margin)

        def paint(draw: ImageDraw.ImageDraw, left: int, top: int) -> None:
            shifted = [(px - left, py - top) for px, py in vertices]
            draw.polygon(shifted, fill=fill)
            if stroke_width > 0:
                draw.line(
                    shifted + [shifted[0]],
                    fill=fill,
                    width=_pixel_width(stroke_width),
                    joint="curve",
                )

        self._paint(bounds, paint)

    def fill_circle(self, x: float, y: float, radius: float, color: Sequence[int]) -> None:
        if radius <= 0:
            return
        fill = _rgba(color)

        def paint(draw: ImageDraw.ImageDraw, left: int, top: int) -> None:
            draw.ellipse(
                [x - radius - left, y - radius - top, x + radius - left, y + radius - top],
                fill=fill,
            )

        self._paint((x - radius, y - radius, x + radius, y + radius), paint)

    def fill_rounded_rectangle(
        self, rect: Rect, color: Sequence[int], radius: float = 0.0
    ) -> None:
        """Fill exactly the pixels of *rect*, with corners rounded by *radius*."""
        if rect.is_empty():
            return
        fill = _rgba(color)
        corner = int(round(radius))

        def paint(draw: ImageDraw.ImageDraw, left: int, top: int) -> None:
            box = [rect.x0 - left, rect.y0 - top, rect.x1 - 1 - left, rect.y1 - 1 - top]
            if corner > 0:
                draw.rounded_rectangle(box, radius=corner, fill=fill)
            else:
                draw.rectangle(box, fill=fill)

        self._paint((rect.x0, rect.y0, rect.x1 - 1, rect.y1 - 1), paint)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: Sequence[int],
        width: float = 1.0,
    ) -> None:
        fill = _rgba(color)
        margin = width + 1

        def paint(draw: ImageDraw.ImageDraw, left: int, top: int) -> None:
            draw.line(
                [(x1 - left, y1 - top), (x2 - left, y2 - top)],
                fill=fill,
                width=_pixel_width(width),
            )

        bounds = (
            min(x1, x2) - margin,
            min(y1, y2) - margin,
            max(x1, x2) + margin,
            max(y1, y2) + margin,
        )
        self._paint(bounds, paint)

    def save_png(self, path: str | Path) -> None:
        self.image.save(path, format="PNG")