"""Command that redraws an image as a mosaic of tiles."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from PIL import Image

from .canvas import Canvas
from .color import hex_to_color
from .grill import tile_with_grill, tile_with_negative_grill
from .heap import MaxHeap
from .shapes import (
    Shape,
    tile_with_diamond,
    tile_with_hexagon,
    tile_with_overlapping_circle,
    tile_with_square,
    tile_with_triangle,
)

logger = logging.getLogger(__name__)


@dataclass
class RunParameters:
    input_filepath: str
    output_folder: str = "out/mosaic"
    final_output_filename: str = "final"
    color: str = "ffffff"
    shape: str = "hexagon"
    err_threshold: float = 1000.0
    radius: float = 10.0
    width: float = 10.0
    height: float = 10.0
    alpha: float = 0.6
    space_multiplier: float = 1.05
    shift_ratio: float = 0.5


def parse_args(argv: Sequence[str] | None = None) -> RunParameters:
    parser = argparse.ArgumentParser(
        description="Redraw an image as a mosaic of shapes.", add_help=False
    )
    parser.add_argument("--help", action="help", help="Show this help and exit")
    parser.add_argument("-i", "--input", default="", help="Input Filepath")
    parser.add_argument("-o", "--outputFolder", default="out/mosaic", help="Output Folder")
    parser.add_argument(
        "-f", "--finalOutputFilename", default="final", help="Final Output Filename"
    )
    parser.add_argument(
        "-c",
        "--color",
        default="ffffff",
        help="Background Color in normal, negative color if negative shape",
    )
    parser.add_argument("-s", "--shape", default="hexagon", help="Shape for tiling")
    parser.add_argument(
        "-t", "--threshold", type=float, default=1000.0, help="Error Threshold before stopping"
    )
    parser.add_argument(
        "-r",
        "--radius",
        type=float,
        default=10.0,
        help="Radius for calculating length of edges and error finding",
    )
    parser.add_argument("-w", "--width", type=float, default=10.0, help="Width of shape")
    parser.add_argument("-h", "--height", type=float, default=10.0, help="Height of shape")
    parser.add_argument("-a", "--alpha", type=float, default=0.6, help="Alpha channel 0-1")
    parser.add_argument(
        "--spaceMultiplier",
        type=float,
        default=1.05,
        help="Space multiplier for overlapping shapes",
    )
    parser.add_argument(
        "--shiftRatio", type=float, default=0.5, help="Shift Ratio for Grills"
    )
    args = parser.parse_args(argv)
    if not args.input:
        parser.error("Input filepath cannot be empty")
    return RunParameters(
        input_filepath=args.input,
        output_folder=args.outputFolder,
        final_output_filename=args.finalOutputFilename,
        color=args.color,
        shape=args.shape,
        err_threshold=args.threshold,
        radius=args.radius,
        width=args.width,
        height=args.height,
        alpha=args.alpha,
        space_multiplier=args.spaceMultiplier,
        shift_ratio=args.shiftRatio,
    )


def heap_tiling(canvas: Canvas, tiles: Iterable[Shape], err_threshold: float) -> int:
    """Draw tiles worst-fitting first until one's error falls below the threshold.

    Returns the number of tiles drawn.
    """
    heap = MaxHeap(tiles)
    width, height = canvas.image.size
    logger.info("x: %d, y: %d, heapLen: %d", width, height, len(heap))
    drawn = 0
    loop = 0
    while len(heap):
        tile = heap.pop()
        if loop % 10 == 0:
            logger.info(
                "loop: %d,\tx: %f,\ty: %f,\terr: %f,\tcolor: %s,\t len:%d",
                loop, tile.x, tile.y, tile.avg_error, tile.color, len(heap),
            )
        if tile.avg_error < err_threshold:
            break
        tile.draw(canvas)
        drawn += 1
        loop += 1
    return drawn


def exhaustive_tiling(canvas: Canvas, shapes: Iterable[Shape]) -> int:
    """Draw every shape in order; returns how many were drawn."""
    shapes = list(shapes)
    width, height = canvas.image.size
    logger.info("x: %d, y: %d, len: %d", width, height, len(shapes))
    for shape in shapes:
        shape.draw(canvas)
    return len(shapes)


def run(params: RunParameters) -> Path:
    """Render the mosaic and return the path of the written PNG."""
    color = hex_to_color(params.color)
    with Image.open(params.input_filepath) as source:
        image = source.convert("RGBA")

    canvas = Canvas(image.width, image.height, color)
    shape = params.shape
    if shape == "hexagon":
        heap_tiling(canvas, tile_with_hexagon(image, params.radius), params.err_threshold)
    elif shape == "triangle":
        exhaustive_tiling(canvas, tile_with_triangle(image, params.radius))
    elif shape == "square":
        exhaustive_tiling(canvas, tile_with_square(image, params.width, params.height))
    elif shape == "diamond":
        exhaustive_tiling(canvas, tile_with_diamond(image, params.width, params.height))
    elif shape == "oCircle":
        exhaustive_tiling(
            canvas,
            tile_with_overlapping_circle(
                image, params.radius, params.alpha, params.space_multiplier
            ),
        )
    elif shape == "grill":
        exhaustive_tiling(
            canvas, tile_with_grill(image, params.width, params.height, params.shift_ratio)
        )
    elif shape == "negativeGrill":
        canvas = Canvas.from_image(image)
        exhaustive_tiling(
            canvas,
            tile_with_negative_grill(
                image, params.width, params.height, params.shift_ratio, color
            ),
        )
    else:
        raise ValueError(f"Unsupported shape: {shape}")

    output_folder = Path(params.output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)
    path = output_folder / f"{params.final_output_filename}.png"
    canvas.save_png(path)
    return path


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    params = parse_args(argv)
    try:
        run(params)
    except (OSError, ValueError) as error:
        logger.error("%s", error)
        return 1
    return 0