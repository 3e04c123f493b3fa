# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
In-memory pixel grid

A PixelGrid is a width x height array of RGBA samples (8 bits per
channel) stored row-major with (0, 0) at the top left, backed by one
flat byte buffer of 4 bytes per pixel. Transforms never modify a grid
in place; they build a new one.

Copyright 2025 DNAi inc.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

Pixel = Tuple[int, int, int, int]

TRANSPARENT: Pixel = (0, 0, 0, 0)

BYTES_PER_PIXEL = 4


class PixelGrid:
    """
    RGBA pixel grid.

    Example:
        >>> grid = PixelGrid(2, 1, [(255, 0, 0, 255), (0, 0, 255, 255)])
        >>> grid.get_pixel(1, 0)
        (0, 0, 255, 255)
    """

    def __init__(self, width: int, height: int, pixels: Optional[Sequence[Pixel]] = None,
                 fill: Pixel = TRANSPARENT):
        """
        Initialize a grid.

        Args:
            width: Number of columns
            height: Number of rows
            pixels: Row-major pixel list of length width * height
            fill: Pixel used for every position when pixels is None
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid size {width}x{height}")
        if pixels is None:
            data = bytearray(bytes(fill) * (width * height))
        elif len(pixels) != width * height:
            raise ValueError(
                f"Expected {width * height} pixels for a {width}x{height} grid, got {len(pixels)}"
            )
        else:
            data = bytearray(channel for pixel in pixels for channel in pixel)
        self.width = width
        self.height = height
        self.data = data

    @classmethod
    def from_bytes(cls, width: int, height: int,
                   data: Union[bytes, bytearray]) -> 'PixelGrid':
        """
        Wrap a flat RGBA buffer without converting it pixel by pixel.

        Args:
            width: Number of columns
            height: Number of rows
            data: width * height * 4 bytes, row-major RGBA
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid size {width}x{height}")
        if len(data) != width * height * BYTES_PER_PIXEL:
            raise ValueError(
                f"Expected {width * height * BYTES_PER_PIXEL} bytes for a "
                f"{width}x{height} grid, got {len(data)}"
            )
        grid = cls.__new__(cls)
        grid.width = width
        grid.height = height
        grid.data = bytearray(data)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Pixel]]) -> 'PixelGrid':
        height = len(rows)
        width = len(rows[0]) if rows else 0
        pixels: List[Pixel] = []
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            pixels.extend(tuple(p) for p in row)
        return cls(width, height, pixels)

    @classmethod
    def from_image(cls, image) -> 'PixelGrid':
        """
        Build a grid from a Pillow image.

        Args:
            image: PIL.Image.Image in any mode

        Returns:
            PixelGrid with the image converted to RGBA
        """
        rgba = image if image.mode == 'RGBA' else image.convert('RGBA')
        width, height = rgba.size
        return cls.from_bytes(width, height, rgba.tobytes())

    def to_image(self):
        """Convert to a Pillow RGBA image."""
        from PIL import Image

        return Image.frombytes('RGBA', (self.width, self.height), bytes(self.data))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixels(self) -> List[Pixel]:
        """Row-major list of pixel tuples, built on each access."""
        return self._unpack(range(self.width * self.height))

    def _unpack(self, indices: Iterable[int]) -> List[Pixel]:
        data = self.data
        return [tuple(data[i * 4:i * 4 + 4]) for i in indices]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> Pixel:
        offset = self._index(x, y) * BYTES_PER_PIXEL
        return tuple(self.data[offset:offset + BYTES_PER_PIXEL])

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        offset = self._index(x, y) * BYTES_PER_PIXEL
        self.data[offset:offset + BYTES_PER_PIXEL] = bytes(pixel)

    def gather(self, width: int, height: int, indices: Sequence[int]) -> 'PixelGrid':
        """
        Build a new width x height grid from source pixel indices.

        Args:
            width: Destination width
            height: Destination height
            indices: Row-major source pixel index for every destination pixel
        """
        data = self.data
        out = bytearray(len(indices) * BYTES_PER_PIXEL)
        for n, i in enumerate(indices):
            out[n * 4:n * 4 + 4] = data[i * 4:i * 4 + 4]
        return PixelGrid.from_bytes(width, height, out)

    def rows(self) -> Iterator[List[Pixel]]:
        for y in range(self.height):
            start = y * self.width
            yield self._unpack(range(start, start + self.width))

    def copy(self) -> 'PixelGrid':
        return PixelGrid.from_bytes(self.width, self.height, self.data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.size == other.size and self.data == other.data

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height})"
