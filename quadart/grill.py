"""Grill tiles: rectangles laid out in rows or columns with gaps, optionally sheared."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from PIL import Image

from .canvas import Canvas
from .imageops import Rect, average_color, color_mse, extract_sub_image

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Grill:
    """A filled rectangle centred on ``(x, y)``."""

    x: float
    y: float
    color: Color
    width: float
    height: float
    avg_error: float

    def draw(self, canvas: Canvas) -> None:
        half_w, half_h = self.width / 2.0, self.height / 2.0
        points = [
            (self.x + half_w, self.y + half_h),
            (self.x - half_w, self.y + half_h),
            (self.x - half_w, self.y - half_h),
            (self.x + half_w, self.y - half_h),
        ]
        canvas.fill_polygon(points, self.color)


@dataclass(frozen=True)
class _Layout:
    width: float
    height: float
    shift_ratio: float
    stretch: float
    gap_ratio: float
    min_gap: float

    def row(self, x: int, y: int) -> float:
        if self.width < self.height:
            pitch = self.height * self.stretch
            return y * pitch + math.fmod(self.shift_ratio * pitch * x, pitch)
        return y * (self.height + max(self.gap_ratio * self.height, self.min_gap))

    def column(self, x: int, y: int) -> float:
        if self.width > self.height:
            pitch = self.width * self.stretch
            return x * pitch + math.fmod(self.shift_ratio * pitch * y, pitch)
        return x * (self.width + max(self.gap_ratio * self.width, self.min_gap))

    def positions(self, image_width: int, image_height: int) -> Iterator[tuple[float, float]]:
        """Centres of every grill, starting one step before the image origin."""
        # The row test sees the column index left over from the previous row.
        x = 0
        y = -1
        while self.row(x, y) <= image_height + self.height:
            x = -1
            while self.column(x, y) <= image_width + self.width:
                yield self.column(x, y), self.row(x, y)
                x += 1
            y += 1


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")


def _centered_rect(px: float, py: float, width: float, height: float) -> Rect:
    return Rect(
        int(px - width / 2.0),
        int(py - height / 2.0),
        int(px + width / 2.0),
        int(py + height / 2.0),
    )


def tile_with_grill(
    image: Image.Image, width: float, height: float, shift_ratio: float
) -> list[Grill]:
    """Cover *image* with grills coloured by the average of the area under each."""
    _require_positive(width=width, height=height)
    image_color = average_color(image)
    layout = _Layout(width, height, shift_ratio, stretch=1.1, gap_ratio=0.15, min_gap=1.0)
    tiles: list[Grill] = []
    for px, py in layout.positions(image.width, image.height):
        region = extract_sub_image(image, _centered_rect(px, py, width, height))
        if region.width == 0 or region.height == 0:
            continue
        tiles.append(
            Grill(
                x=px,
                y=py,
                color=average_color(region),
                width=width,
                height=height,
                avg_error=color_mse(region, image_color),
            )
        )
    return tiles


def tile_with_negative_grill(
    image: Image.Image,
    width: float,
    height: float,
    shift_ratio: float,
    negative_color: Color,
) -> list[Grill]:
    """Grills of a single colour over *image*, leaving wider gaps between them."""
    _require_positive(width=width, height=height)
    layout = _Layout(width, height, shift_ratio, stretch=1.15, gap_ratio=0.4, min_gap=4.0)
    return [
        Grill(x=px, y=py, color=negative_color, width=width, height=height, avg_error=0.0)
        for px, py in layout.positions(image.width, image.height)
    ]