# quadart

Turn a picture into generative art. Two commands are included:

- `quadart-quadtree` splits the image again and again into quadrants,
  always refining the region with the highest colour error first, and
  paints each region with its average colour.
- `quadart-mosaic` covers the image with tiles (hexagons, triangles,
  squares, diamonds, overlapping circles or grills), each filled with the
  average colour of the pixels beneath it.

Both commands read any image Pillow can open and write PNG files. The
output folder is created if it does not exist. On a missing or unreadable
file, a bad colour or an unsupported shape, the error is logged and the
command exits with status 1.

## Installation

```
pip install .
```

## Quadtree art

```
quadart-quadtree -i photo.jpg -o out/quadtree -t 1000 -d 10
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | (required) | image to read |
| `-o`, `--outputFolder` | `out/quadtree` | folder for the PNG files |
| `-f`, `--finalOutputFilename` | `final` | name of the final image, without `.png` |
| `-b`, `--backgroundColor` | `ffffff` | background colour in hex (`RRGGBB` or `RRGGBBAA`, `#` optional) |
| `-t`, `--threshold` | `1000` | keep splitting while the worst region's error is above this |
| `-r`, `--radius` | `0` | corner radius of the painted rectangles |
| `-a`, `--alpha` | `0.6` | opacity of the dividing lines, 0 to 1 |
| `-d`, `--drawIteration` | `10` | save an intermediate image every n-th step (must not be 0) |

Intermediate images are saved as `<step>.png` next to the final image,
starting with step 0, so the folder shows how the picture builds up. Each
split region gets a black cross through its middle; all crosses are stroked
together at the chosen opacity, so overlapping lines do not darken.

## Mosaics

```
quadart-mosaic -i photo.jpg -s hexagon -r 12
quadart-mosaic -i photo.jpg -s diamond -w 16 -h 10
quadart-mosaic -i photo.jpg -s negativeGrill -w 4 -h 30 -c 000000
```

Shapes: `hexagon`, `triangle`, `square`, `diamond`, `oCircle`, `grill`,
`negativeGrill`.

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | (required) | image to read |
| `-o`, `--outputFolder` | `out/mosaic` | folder for the result |
| `-f`, `--finalOutputFilename` | `final` | name of the output, without `.png` |
| `-c`, `--color` | `ffffff` | background colour, or the bar colour for `negativeGrill` |
| `-s`, `--shape` | `hexagon` | tile shape |
| `-t`, `--threshold` | `1000` | hexagons only: tiles are drawn worst-fitting first, stopping at the first whose error is below this |
| `-r`, `--radius` | `10` | size of hexagons, triangles and circles |
| `-w`, `--width` | `10` | width of squares, diamonds and grills |
| `-h`, `--height` | `10` | height of squares, diamonds and grills |
| `-a`, `--alpha` | `0.6` | opacity of overlapping circles |
| `--spaceMultiplier` | `1.05` | spacing of overlapping circles |
| `--shiftRatio` | `0.5` | stagger of grill bars |

Because `-h` sets the height, help is available only as `--help`.
`negativeGrill` paints bars of the given colour straight over the
original picture rather than onto a blank background. The mosaic command
writes only the final image.

## Using it from Python

The modules can be used directly:

- `quadart.color`: `hex_to_color`, `set_alpha`
- `quadart.imageops`: `Rect`, `average_color`, `color_mse`,
  `extract_sub_image`, `inscribed_square`
- `quadart.heap`: `MaxHeap`, ordered by each item's `avg_error`
- `quadart.canvas`: `Canvas` and `regular_polygon`
- `quadart.quadtree`: `ImgRect`, `extract_image_rect`, `ImgQuadTree`
- `quadart.shapes`: `Hexagon`, `Triangle`, `Square`, `Diamond`,
  `OverlappingCircle` and the matching `tile_with_*` functions
- `quadart.grill`: `Grill`, `tile_with_grill`, `tile_with_negative_grill`
- `quadart.quadtree_cli` and `quadart.mosaic_cli`: `RunParameters`,
  `parse_args`, `run` and `main` for each command

```python
from PIL import Image

from quadart.canvas import Canvas
from quadart.shapes import tile_with_hexagon
from quadart.mosaic_cli import heap_tiling

image = Image.open("photo.jpg").convert("RGBA")
canvas = Canvas(image.width, image.height, (255, 255, 255, 255))
heap_tiling(canvas, tile_with_hexagon(image, 10), 1000)
canvas.save_png("hexagons.png")
```