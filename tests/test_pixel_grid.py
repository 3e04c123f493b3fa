import pytest
from PIL import Image

from pixtext.pixel_grid import TRANSPARENT, PixelGrid

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def test_default_fill():
    grid = PixelGrid(2, 3)
    assert grid.size == (2, 3)
    assert grid.pixels == [TRANSPARENT] * 6


def test_get_and_set_pixel():
    grid = PixelGrid(2, 2)
    grid.set_pixel(1, 0, RED)
    assert grid.get_pixel(1, 0) == RED
    assert grid.pixels[1] == RED


@pytest.mark.parametrize("x,y", [(-1, 0), (2, 0), (0, 2), (0, -1)])
def test_out_of_bounds_access(x, y):
    with pytest.raises(IndexError):
        PixelGrid(2, 2).get_pixel(x, y)


def test_pixel_count_must_match():
    with pytest.raises(ValueError):
        PixelGrid(2, 2, [RED])
    with pytest.raises(ValueError):
        PixelGrid(-1, 2)


def test_from_rows_and_rows():
    grid = PixelGrid.from_rows([[RED, BLUE], [BLUE, RED]])
    assert list(grid.rows()) == [[RED, BLUE], [BLUE, RED]]
    with pytest.raises(ValueError):
        PixelGrid.from_rows([[RED, BLUE], [RED]])


def test_copy_is_independent():
    grid = PixelGrid(1, 1, [RED])
    clone = grid.copy()
    clone.set_pixel(0, 0, BLUE)
    assert grid.get_pixel(0, 0) == RED
    assert grid != clone


def test_from_image_converts_to_rgba():
    img = Image.new("RGB", (2, 1), (255, 0, 0))
    img.putpixel((1, 0), (0, 0, 255))
    grid = PixelGrid.from_image(img)
    assert grid.size == (2, 1)
    assert grid.pixels == [RED, BLUE]


def test_from_image_grayscale():
    grid = PixelGrid.from_image(Image.new("L", (1, 1), 128))
    assert grid.get_pixel(0, 0) == (128, 128, 128, 255)


def test_image_round_trip():
    grid = PixelGrid.from_rows([[RED, (10, 20, 30, 40)], [BLUE, TRANSPARENT]])
    img = grid.to_image()
    assert img.mode == "RGBA"
    assert img.size == (2, 2)
    assert img.getpixel((1, 0)) == (10, 20, 30, 40)
    assert PixelGrid.from_image(img) == grid


def test_from_bytes_wraps_buffer():
    grid = PixelGrid.from_bytes(2, 1, bytes([1, 2, 3, 4, 5, 6, 7, 8]))
    assert grid.pixels == [(1, 2, 3, 4), (5, 6, 7, 8)]
    assert grid.get_pixel(1, 0) == (5, 6, 7, 8)


def test_from_bytes_length_must_match():
    with pytest.raises(ValueError):
        PixelGrid.from_bytes(2, 2, bytes(12))


def test_gather_picks_pixels_by_index():
    grid = PixelGrid(3, 1, [(10, 0, 0, 255), (20, 0, 0, 255), (30, 0, 0, 255)])
    result = grid.gather(2, 2, [2, 0, 0, 1])
    assert result.size == (2, 2)
    assert [p[0] for p in result.pixels] == [30, 10, 10, 20]
    assert grid.get_pixel(0, 0) == (10, 0, 0, 255)
