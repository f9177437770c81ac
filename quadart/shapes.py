"""Mosaic tiles and the tilings that cover an image with them."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator

from PIL import Image

from .canvas import Canvas, regular_polygon
from .color import set_alpha
from .imageops import Rect, average_color, color_mse, extract_sub_image, inscribed_square

Color = tuple[int, int, int, int]


class Shape(ABC):
    """Something that can paint itself onto a canvas."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Paint this shape onto *canvas*."""


@dataclass(frozen=True)
class Hexagon(Shape):
    x: float
    y: float
    color: Color
    radius: float
    avg_error: float

    def draw(self, canvas: Canvas) -> None:
        points = regular_polygon(6, self.x, self.y, self.radius, 0.0)
        canvas.fill_polygon(points, self.color, 0.5)


@dataclass(frozen=True)
class Triangle(Shape):
    x: float
    y: float
    color: Color
    radius: float
    pointing_up: bool
    avg_error: float

    def draw(self, canvas: Canvas) -> None:
        rotation = 0.0 if self.pointing_up else math.pi
        points = regular_polygon(3, self.x, self.y, self.radius, rotation)
        canvas.fill_polygon(points, self.color, 0.5)


@dataclass(frozen=True)
class Square(Shape):
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
        canvas.fill_polygon(points, self.color, 0.5)


@dataclass(frozen=True)
class Diamond(Shape):
    x: float
    y: float
    color: Color
    width: float
    height: float
    avg_error: float

    def draw(self, canvas: Canvas) -> None:
        half_w, half_h = self.width / 2.0, self.height / 2.0
        points = [
            (self.x + half_w, self.y),
            (self.x, self.y + half_h),
            (self.x - half_w, self.y),
            (self.x, self.y - half_h),
        ]
        canvas.fill_polygon(points, self.color, 0.2)


@dataclass(frozen=True)
class OverlappingCircle(Shape):
    x: float
    y: float
    color: Color
    alpha: float
    radius: float
    avg_error: float

    def draw(self, canvas: Canvas) -> None:
        canvas.fill_circle(self.x, self.y, self.radius, set_alpha(self.color, self.alpha))


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")


def _indices(within: Callable[[int], bool]) -> Iterator[int]:
    return itertools.takewhile(within, itertools.count())


def _sample(
    image: Image.Image, rect: Rect, image_color: Color
) -> tuple[Color, float] | None:
    """Average colour of the region and its error against the whole-image colour,
    or ``None`` when the region lies outside the image."""
    region = extract_sub_image(image, rect)
    if region.width == 0 or region.height == 0:
        return None
    return average_color(region), color_mse(region, image_color)


def _centered_rect(px: float, py: float, width: float, height: float) -> Rect:
    return Rect(
        int(px - width / 2.0),
        int(py - height / 2.0),
        int(px + width / 2.0),
        int(py + height / 2.0),
    )


def tile_with_hexagon(image: Image.Image, radius: float) -> list[Hexagon]:
    """Cover *image* with flat-topped hexagons in offset columns."""
    _require_positive(radius=radius)
    image_color = average_color(image)
    hex_height = radius * math.sqrt(3)
    tiles: list[Hexagon] = []
    for y in _indices(lambda j: j * hex_height < image.height + radius):
        for x in _indices(lambda i: i * 1.5 * radius < image.width + radius):
            py = y * hex_height + (hex_height / 2 if x % 2 == 1 else 0.0)
            px = x * 1.5 * radius
            sample = _sample(image, inscribed_square((int(px), int(py)), radius), image_color)
            if sample is None:
                continue
            color, error = sample
            tiles.append(Hexagon(x=px, y=py, color=color, radius=radius, avg_error=error))
    return tiles


def tile_with_triangle(image: Image.Image, radius: float) -> list[Triangle]:
    """Cover *image* with alternating up- and down-pointing triangles."""
    _require_positive(radius=radius)
    image_color = average_color(image)
    tri_height = radius * 1.5
    tri_width = radius * math.sqrt(3)
    tiles: list[Triangle] = []
    for y in _indices(lambda j: j * tri_height < image.height + radius):
        for x in _indices(lambda i: i * tri_width / 2.0 < image.width + radius):
            pointing_up = (x % 2 == 0) != (y % 2 == 1)
            if x % 2 == y % 2:
                py = y * tri_height
            else:
                py = y * tri_height - tri_height / 3.0
            px = x * tri_width / 2.0
            sample = _sample(image, inscribed_square((int(px), int(py)), radius), image_color)
            if sample is None:
                continue
            color, error = sample
            tiles.append(
                Triangle(
                    x=px,
                    y=py,
                    color=color,
                    radius=radius,
                    pointing_up=pointing_up,
                    avg_error=error,
                )
            )
    return tiles


def tile_with_square(image: Image.Image, width: float, height: float) -> list[Square]:
    """Cover *image* with a regular grid of rectangles."""
    _require_positive(width=width, height=height)
    image_color = average_color(image)
    tiles: list[Square] = []
    for y in _indices(lambda j: j * height <= image.height):
        for x in _indices(lambda i: i * width <= image.width):
            px, py = x * width, y * height
            sample = _sample(image, _centered_rect(px, py, width, height), image_color)
            if sample is None:
                continue
            color, error = sample
            tiles.append(
                Square(x=px, y=py, color=color, width=width, height=height, avg_error=error)
            )
    return tiles


def tile_with_diamond(image: Image.Image, width: float, height: float) -> list[Diamond]:
    """Cover *image* with interlocking diamonds in offset columns."""
    _require_positive(width=width, height=height)
    image_color = average_color(image)
    tiles: list[Diamond] = []
    for y in _indices(lambda j: j * height <= image.height):
        for x in _indices(lambda i: i * width / 2.0 <= image.width):
            py = y * height + (height / 2.0 if x % 2 == 1 else 0.0)
            px = x * width / 2.0
            sample = _sample(image, _centered_rect(px, py, width, height), image_color)
            if sample is None:
                continue
            color, error = sample
            tiles.append(
                Diamond(x=px, y=py, color=color, width=width, height=height, avg_error=error)
            )
    return tiles


def tile_with_overlapping_circle(
    image: Image.Image, radius: float, alpha: float, space_multiplier: float
) -> list[OverlappingCircle]:
    """Cover *image* with translucent circles spaced ``radius * space_multiplier`` apart."""
    _require_positive(radius=radius)
    image_color = average_color(image)
    tiles: list[OverlappingCircle] = []
    for y in _indices(lambda j: j * radius <= image.height + radius):
        for x in _indices(lambda i: i * radius <= image.width + radius):
            py = y * radius * space_multiplier
            px = x * radius * space_multiplier
            sample = _sample(image, inscribed_square((int(px), int(py)), radius), image_color)
            if sample is None:
                continue
            color, error = sample
            tiles.append(
                OverlappingCircle(
                    x=px, y=py, color=color, alpha=alpha, radius=radius, avg_error=error
                )
            )
    return tiles