"""Command that paints an image as a quadtree of average-colour blocks."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from PIL import Image

from .canvas import Canvas
from .color import hex_to_color
from .imageops import Rect
from .quadtree import ImgQuadTree

logger = logging.getLogger(__name__)

_CROSS_LINE_WIDTH = 0.5


@dataclass
class RunParameters:
    input_filepath: str
    output_folder: str = "out/quadtree"
    final_output_filename: str = "final"
    background_color: str = "ffffff"
    err_threshold: float = 1000.0
    radius: float = 0.0
    alpha: float = 0.6
    draw_iteration: int = 10


def parse_args(argv: Sequence[str] | None = None) -> RunParameters:
    parser = argparse.ArgumentParser(
        description="Split an image into quadrants until each fits its average colour."
    )
    parser.add_argument("-i", "--input", default="", help="Input Filepath")
    parser.add_argument("-o", "--outputFolder", default="out/quadtree", help="Output Folder")
    parser.add_argument(
        "-f", "--finalOutputFilename", default="final", help="Final Output Filename"
    )
    parser.add_argument(
        "-b", "--backgroundColor", default="ffffff", help="Background Color in Hex"
    )
    parser.add_argument(
        "-t", "--threshold", type=float, default=1000.0, help="Error Threshold before stopping"
    )
    parser.add_argument(
        "-r", "--radius", type=float, default=0.0, help="Radius for rounded rectangle"
    )
    parser.add_argument("-a", "--alpha", type=float, default=0.6, help="Alpha channel 0-1")
    parser.add_argument(
        "-d", "--drawIteration", type=int, default=10, help="Save image every drawIteration-th"
    )
    args = parser.parse_args(argv)
    if not args.input:
        parser.error("Input filepath cannot be empty")
    return RunParameters(
        input_filepath=args.input,
        output_folder=args.outputFolder,
        final_output_filename=args.finalOutputFilename,
        background_color=args.backgroundColor,
        err_threshold=args.threshold,
        radius=args.radius,
        alpha=args.alpha,
        draw_iteration=args.drawIteration,
    )


def split_into_quadrants(rect: Rect) -> list[Rect]:
    """Top-left, top-right, bottom-left and bottom-right quarters of *rect*."""
    mid_x = rect.x0 + rect.width() // 2
    mid_y = rect.y0 + rect.height() // 2
    return [
        Rect(rect.x0, rect.y0, mid_x, mid_y),
        Rect(mid_x, rect.y0, rect.x1, mid_y),
        Rect(rect.x0, mid_y, mid_x, rect.y1),
        Rect(mid_x, mid_y, rect.x1, rect.y1),
    ]


def draw_cross_lines(canvas: Canvas, cross_lines: Iterable[Rect], alpha: float) -> Canvas:
    """Copy of *canvas* with a cross through each rectangle, stroked once in
    black at *alpha* so overlapping lines do not darken each other."""
    export = canvas.copy()
    width, height = canvas.image.size
    lines = Canvas(width, height)
    opaque_black = (0, 0, 0, 255)
    for rect in cross_lines:
        mid_x = rect.x0 + rect.width() // 2
        mid_y = rect.y0 + rect.height() // 2
        lines.draw_line(mid_x, rect.y0, mid_x, rect.y1, opaque_black, _CROSS_LINE_WIDTH)
        lines.draw_line(rect.x0, mid_y, rect.x1, mid_y, opaque_black, _CROSS_LINE_WIDTH)
    level = min(255, max(0, round(alpha * 255)))
    mask = lines.image.getchannel("A").point([value * level // 255 for value in range(256)])
    stroke = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    stroke.putalpha(mask)
    export.image.alpha_composite(stroke)
    return export


def run(params: RunParameters) -> Path:
    """Render the quadtree picture and return the path of the final PNG."""
    if params.draw_iteration == 0:
        raise ValueError("drawIteration must not be zero")
    background = hex_to_color(params.background_color)
    with Image.open(params.input_filepath) as source:
        image = source.convert("RGBA")

    output_folder = Path(params.output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)

    canvas = Canvas(image.width, image.height, background)
    tree = ImgQuadTree(image)
    cross_lines: list[Rect] = []
    count = 0
    current = tree.pop_img_rect()
    while current.avg_error > params.err_threshold:
        for quadrant in split_into_quadrants(current.rect):
            piece = tree.extract_and_push(quadrant)
            canvas.fill_rounded_rectangle(piece.rect, piece.avg_color, params.radius)
        cross_lines.append(current.rect)

        if count % params.draw_iteration == 0:
            logger.info("Loop: %d\tAvgError: %f", count, current.avg_error)
            draw_cross_lines(canvas, cross_lines, params.alpha).save_png(
                output_folder / f"{count}.png"
            )
        count += 1
        current = tree.pop_img_rect()

    final_path = output_folder / f"{params.final_output_filename}.png"
    draw_cross_lines(canvas, cross_lines, params.alpha).save_png(final_path)
    return final_path


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    params = parse_args(argv)
    try:
        run(params)
    except (OSError, ValueError) as error:
        logger.error("%s", error)
        return 1
    return 0