# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF orientation codes and transform dispatch

Orientations 3, 6 and 8 are rotations and are always applied. The
mirrored orientations 2, 4, 5 and 7 are only applied when mirroring is
enabled; otherwise the grid is returned unchanged, as it is for any
value outside 1-8.

Copyright 2025 DNAi inc.
"""

from enum import IntEnum
from typing import Callable, Dict, Optional

from pixtext.pixel_grid import PixelGrid
from pixtext import transforms


class Orientation(IntEnum):
    """EXIF orientation tag values"""
    NORMAL = 1
    MIRROR_HORIZONTAL = 2
    ROTATE_180 = 3
    MIRROR_VERTICAL = 4
    TRANSPOSE = 5
    ROTATE_90_CW = 6
    TRANSVERSE = 7
    ROTATE_270_CW = 8


DEFAULT_ORIENTATION = int(Orientation.NORMAL)

ORIENTATION_NAMES: Dict[int, str] = {
    1: 'Horizontal (normal)',
    2: 'Mirror horizontal',
    3: 'Rotate 180',
    4: 'Mirror vertical',
    5: 'Mirror horizontal and rotate 270 CW',
    6: 'Rotate 90 CW',
    7: 'Mirror horizontal and rotate 90 CW',
    8: 'Rotate 270 CW',
}

ROTATIONS: Dict[int, Callable[[PixelGrid], PixelGrid]] = {
    Orientation.ROTATE_180: transforms.rotate180,
    Orientation.ROTATE_90_CW: transforms.rotate90,
    Orientation.ROTATE_270_CW: transforms.rotate270,
}

MIRRORS: Dict[int, Callable[[PixelGrid], PixelGrid]] = {
    Orientation.MIRROR_HORIZONTAL: transforms.flip_horizontal,
    Orientation.MIRROR_VERTICAL: transforms.flip_vertical,
    Orientation.TRANSPOSE: transforms.transpose,
    Orientation.TRANSVERSE: transforms.transverse,
}


def describe_orientation(value: int) -> str:
    """
    Get the display name of an orientation value.

    Args:
        value: Raw orientation tag value

    Returns:
        Name such as 'Rotate 90 CW', or 'Unknown (N)' outside 1-8
    """
    return ORIENTATION_NAMES.get(value, f'Unknown ({value})')


def transform_for(orientation: int,
                  apply_mirroring: bool = False) -> Optional[Callable[[PixelGrid], PixelGrid]]:
    """Return the transform for an orientation value, or None when none applies."""
    transform = ROTATIONS.get(orientation)
    if transform is None and apply_mirroring:
        transform = MIRRORS.get(orientation)
    return transform


def apply_orientation(grid: PixelGrid, orientation: int,
                      apply_mirroring: bool = False) -> PixelGrid:
    """
    Transform a grid so it displays upright.

    Args:
        grid: Decoded pixel grid
        orientation: EXIF orientation value
        apply_mirroring: Also handle the mirrored orientations 2, 4, 5 and 7

    Returns:
        The transformed grid, or the input grid itself when no transform applies
    """
    transform = transform_for(orientation, apply_mirroring)
    if transform is None:
        return grid
    return transform(grid)


def oriented_resize(grid: PixelGrid, orientation: int, new_width: int, new_height: int,
                    apply_mirroring: bool = False) -> PixelGrid:
    """
    Orient and downsample a grid in one pass.

    Produces the same pixels as
    resize(apply_orientation(grid, orientation, apply_mirroring), new_width, new_height)
    but reads only new_width * new_height source pixels and never builds
    the full-size upright grid.

    Args:
        grid: Decoded pixel grid
        orientation: EXIF orientation value
        new_width: Destination width, must be positive
        new_height: Destination height, must be positive
        apply_mirroring: Also handle the mirrored orientations 2, 4, 5 and 7

    Raises:
        ValueError: If a target dimension is not positive or the source is empty
    """
    transform = transform_for(orientation, apply_mirroring)
    if transform is None:
        return transforms.resize(grid, new_width, new_height)
    swap_dims, factory = transforms.SOURCE_MAPS[transform]
    return transforms.resize_through(grid, new_width, new_height, swap_dims, factory)
