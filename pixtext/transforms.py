# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pixel transforms

Nearest-neighbour resize, the three fixed-angle rotations and the four
mirror transforms used by EXIF orientations 2, 4, 5 and 7. Every function
returns a new PixelGrid and copies colors verbatim.

Each transform is described by a source map: for a destination (x, y)
it gives the source pixel to copy. resize_through() composes a source
map with nearest-neighbour sampling, so a large image can be oriented
and downsampled while touching only the sampled pixels.

Copyright 2025 DNAi inc.
"""

from typing import Callable, Dict, List, Tuple

from pixtext.pixel_grid import PixelGrid

SourceMap = Callable[[int, int], Tuple[int, int]]
SourceMapFactory = Callable[[int, int], SourceMap]


def source_coordinate(dst: int, src_size: int, dst_size: int) -> int:
    """
    Map a destination coordinate to its nearest-neighbour source coordinate.

    Computes floor(dst * src_size / dst_size) clamped to [0, src_size - 1].
    """
    src = dst * src_size // dst_size
    if src >= src_size:
        src = src_size - 1
    return max(src, 0)


def _identity_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (x, y)


def _rotate90_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (y, h - 1 - x)


def _rotate180_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (w - 1 - x, h - 1 - y)


def _rotate270_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (w - 1 - y, x)


def _flip_horizontal_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (w - 1 - x, y)


def _flip_vertical_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (x, h - 1 - y)


def _transpose_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (y, x)


def _transverse_source(w: int, h: int) -> SourceMap:
    return lambda x, y: (w - 1 - y, h - 1 - x)


def _remap(grid: PixelGrid, swap_dims: bool, factory: SourceMapFactory) -> PixelGrid:
    width, height = grid.size
    dst_width, dst_height = (height, width) if swap_dims else (width, height)
    source_of = factory(width, height)
    indices: List[int] = []
    for y in range(dst_height):
        for x in range(dst_width):
            src_x, src_y = source_of(x, y)
            indices.append(src_y * width + src_x)
    return grid.gather(dst_width, dst_height, indices)


def resize_through(grid: PixelGrid, new_width: int, new_height: int,
                   swap_dims: bool = False,
                   factory: SourceMapFactory = _identity_source) -> PixelGrid:
    """
    Resize the transformed view of a grid without building it.

    Equal to resize(transform(grid), new_width, new_height) where the
    transform is described by swap_dims and factory.

    Args:
        grid: Source grid
        new_width: Destination width, must be positive
        new_height: Destination height, must be positive
        swap_dims: True when the transform exchanges width and height
        factory: Builds the transform's source map from the grid size

    Raises:
        ValueError: If a target dimension is not positive or the source is empty
    """
    if new_width <= 0 or new_height <= 0:
        raise ValueError(f"Invalid target size {new_width}x{new_height}")
    if grid.width == 0 or grid.height == 0:
        raise ValueError(f"Cannot resize an empty {grid.width}x{grid.height} grid")

    view_width, view_height = (grid.height, grid.width) if swap_dims else grid.size
    source_of = factory(grid.width, grid.height)
    xs = [source_coordinate(x, view_width, new_width) for x in range(new_width)]
    ys = [source_coordinate(y, view_height, new_height) for y in range(new_height)]

    indices: List[int] = []
    for view_y in ys:
        for view_x in xs:
            src_x, src_y = source_of(view_x, view_y)
            indices.append(src_y * grid.width + src_x)
    return grid.gather(new_width, new_height, indices)


def resize(grid: PixelGrid, new_width: int, new_height: int) -> PixelGrid:
    """
    Resize a grid with nearest-neighbour sampling.

    Args:
        grid: Source grid
        new_width: Destination width, must be positive
        new_height: Destination height, must be positive

    Returns:
        New grid of size new_width x new_height

    Raises:
        ValueError: If a target dimension is not positive or the source is empty
    """
    return resize_through(grid, new_width, new_height)


def rotate90(grid: PixelGrid) -> PixelGrid:
    """Rotate 90 degrees clockwise: (x, y) -> (H-1-y, x), result is HxW."""
    return _remap(grid, True, _rotate90_source)


def rotate180(grid: PixelGrid) -> PixelGrid:
    """Rotate 180 degrees: (x, y) -> (W-1-x, H-1-y)."""
    return _remap(grid, False, _rotate180_source)


def rotate270(grid: PixelGrid) -> PixelGrid:
    """Rotate 270 degrees clockwise: (x, y) -> (y, W-1-x), result is HxW."""
    return _remap(grid, True, _rotate270_source)


def flip_horizontal(grid: PixelGrid) -> PixelGrid:
    return _remap(grid, False, _flip_horizontal_source)


def flip_vertical(grid: PixelGrid) -> PixelGrid:
    return _remap(grid, False, _flip_vertical_source)


def transpose(grid: PixelGrid) -> PixelGrid:
    """Mirror across the main diagonal: (x, y) -> (y, x)."""
    return _remap(grid, True, _transpose_source)


def transverse(grid: PixelGrid) -> PixelGrid:
    """Mirror across the anti-diagonal: (x, y) -> (H-1-y, W-1-x)."""
    return _remap(grid, True, _transverse_source)


# transform -> (swaps width and height, source map factory)
SOURCE_MAPS: Dict[Callable[[PixelGrid], PixelGrid], Tuple[bool, SourceMapFactory]] = {
    rotate90: (True, _rotate90_source),
    rotate180: (False, _rotate180_source),
    rotate270: (True, _rotate270_source),
    flip_horizontal: (False, _flip_horizontal_source),
    flip_vertical: (False, _flip_vertical_source),
    transpose: (True, _transpose_source),
    transverse: (True, _transverse_source),
}
