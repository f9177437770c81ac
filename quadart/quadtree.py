"""Regions of an image ranked by how poorly their average colour fits them."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from .heap import MaxHeap
from .imageops import Rect, average_color, color_mse, extract_sub_image


@dataclass(frozen=True)
class ImgRect:
    """A region of an image with its average colour and error against it."""

    rect: Rect
    avg_color: tuple[int, int, int, int]
    avg_error: float


def extract_image_rect(image: Image.Image, rect: Rect) -> ImgRect:
    """Measure the part of *image* inside *rect*.

    Raises ``ValueError`` when *rect* does not overlap the image.
    """
    region = extract_sub_image(image, rect)
    avg = average_color(region)
    return ImgRect(rect=rect, avg_color=avg, avg_error=color_mse(region, avg))


class ImgQuadTree:
    """Queue of image regions, worst-fitting first, seeded with the whole image."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image
        self._heap = MaxHeap()
        self._heap.push(extract_image_rect(image, Rect(0, 0, image.width, image.height)))

    def extract_and_push(self, rect: Rect) -> ImgRect:
        region = extract_image_rect(self._image, rect)
        self._heap.push(region)
        return region

    def pop_img_rect(self) -> ImgRect:
        return self._heap.pop()