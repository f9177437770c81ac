import pytest
from PIL import Image

from quadart.canvas import Canvas
from quadart.grill import Grill, tile_with_grill, tile_with_negative_grill
from quadart.imageops import Rect


def _uniform(color, size=(40, 30)):
    return Image.new("RGBA", size, color)


def test_uniform_image_gives_exact_colour_and_zero_error():
    color = (10, 20, 30, 255)
    tiles = tile_with_grill(_uniform(color), 10, 10, 0.5)
    assert tiles
    assert all(tile.color == color for tile in tiles)
    assert all(tile.avg_error == 0.0 for tile in tiles)


def test_every_grill_overlaps_the_image():
    image = _uniform((1, 2, 3, 255))
    bounds = Rect(0, 0, image.width, image.height)
    for tile in tile_with_grill(image, 6, 4, 0.5):
        rect = Rect(
            int(tile.x - tile.width / 2),
            int(tile.y - tile.height / 2),
            int(tile.x + tile.width / 2),
            int(tile.y + tile.height / 2),
        )
        assert not rect.intersect(bounds).is_empty()


def test_square_grill_has_even_column_spacing():
    tiles = tile_with_grill(_uniform((0, 0, 0, 255), (60, 60)), 10, 10, 0.5)
    xs = sorted({tile.x for tile in tiles})
    steps = {round(b - a, 9) for a, b in zip(xs, xs[1:])}
    assert len(steps) == 1
    assert steps.pop() > 10


def test_wide_grill_rows_are_shifted():
    tiles = tile_with_grill(_uniform((0, 0, 0, 255), (80, 80)), 12, 4, 0.5)
    rows: dict[float, set[float]] = {}
    for tile in tiles:
        rows.setdefault(tile.y, set()).add(round(tile.x, 6))
    ys = sorted(rows)
    assert len(ys) >= 2
    assert rows[ys[0]] != rows[ys[1]]


def test_error_grows_with_contrast():
    image = Image.new("RGBA", (20, 20), (0, 0, 0, 255))
    image.paste((255, 255, 255, 255), (10, 0, 20, 20))
    tiles = tile_with_grill(image, 4, 4, 0.5)
    assert max(tile.avg_error for tile in tiles) > 0


def test_negative_grill_uses_given_colour_and_extends_past_origin():
    negative = (255, 0, 0, 255)
    tiles = tile_with_negative_grill(_uniform((0, 0, 0, 255)), 10, 10, 0.5, negative)
    assert tiles
    assert all(tile.color == negative and tile.avg_error == 0.0 for tile in tiles)
    assert min(tile.x for tile in tiles) < 0
    assert min(tile.y for tile in tiles) < 0


def test_negative_grill_is_sparser_than_grill():
    image = _uniform((0, 0, 0, 255), (100, 100))
    dense = tile_with_grill(image, 10, 10, 0.5)
    sparse = tile_with_negative_grill(image, 10, 10, 0.5, (0, 0, 0, 255))
    dense_xs = sorted({t.x for t in dense})
    sparse_xs = sorted({t.x for t in sparse})
    assert sparse_xs[1] - sparse_xs[0] > dense_xs[1] - dense_xs[0]


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5)])
def test_non_positive_size_is_rejected(width, height):
    with pytest.raises(ValueError):
        tile_with_grill(_uniform((0, 0, 0, 255)), width, height, 0.5)
    with pytest.raises(ValueError):
        tile_with_negative_grill(_uniform((0, 0, 0, 255)), width, height, 0.5, (0, 0, 0, 255))


def test_draw_fills_rectangle_only():
    canvas = Canvas(10, 10, (0, 0, 0, 255))
    Grill(x=5, y=5, color=(255, 0, 0, 255), width=4, height=4, avg_error=0.0).draw(canvas)
    assert canvas.image.getpixel((5, 5)) == (255, 0, 0, 255)
    assert canvas.image.getpixel((0, 0)) == (0, 0, 0, 255)