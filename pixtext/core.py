# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Core PixText class

This module provides the main API for turning an image file into text
art. It combines the JPEG orientation reader, the image decoder, the
pixel transforms and the renderer.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import List, Optional, Union

from pixtext.config import RenderConfig
from pixtext.exceptions import MetadataReadError, NotAJpegError
from pixtext.format_detector import FormatDetector
from pixtext.image_loader import load_image
from pixtext.jpeg_segments import read_exif_orientation
from pixtext.orientation import DEFAULT_ORIENTATION, oriented_resize
from pixtext.pixel_grid import PixelGrid
from pixtext.renderer import render


class PixText:
    """
    Image to text-art converter.

    Metadata problems never stop a conversion: they are collected in
    ``warnings`` and the image is treated as correctly oriented. Failing
    to open or decode the image raises.

    Example:
        >>> with PixText('photo.jpg', RenderConfig(width=60, height=30)) as converter:
        ...     print(converter.render(), end='')
        ...     for warning in converter.warnings:
        ...         print(warning)
    """

    def __init__(self, file_path: Union[str, Path], config: Optional[RenderConfig] = None):
        """
        Initialize the converter.

        Args:
            file_path: Path to the image file
            config: Render options, defaults to RenderConfig()
        """
        self.file_path = Path(file_path)
        self.config = config or RenderConfig()
        self.warnings: List[str] = []
        self._orientation: Optional[int] = None
        self._source: Optional[PixelGrid] = None

    def read_orientation(self) -> int:
        """
        Read the EXIF orientation of the file.

        Returns:
            The orientation value, 1 if the file has none or it cannot be read

        Raises:
            FileOpenError: If the file cannot be opened
        """
        if self._orientation is not None:
            return self._orientation

        try:
            orientation = read_exif_orientation(self.file_path)
        except NotAJpegError as e:
            detected = FormatDetector.detect_file_format(self.file_path)
            suffix = f" (detected {detected})" if detected else ""
            self.warnings.append(f"could not read EXIF orientation: {e}{suffix}")
            orientation = DEFAULT_ORIENTATION
        except MetadataReadError as e:
            self.warnings.append(f"could not read EXIF orientation: {e}")
            orientation = DEFAULT_ORIENTATION

        self._orientation = orientation
        return orientation

    def load_grid(self) -> PixelGrid:
        """
        Decode, orient and downsample the image.

        The decoded full-size image is kept until close() so repeated
        renders do not decode the file again.

        Returns:
            PixelGrid of size config.width x config.height

        Raises:
            FileOpenError: If the file cannot be opened
            ImageDecodeError: If the image cannot be decoded
        """
        orientation = self.read_orientation()
        if self._source is None:
            self._source = load_image(self.file_path)
        return oriented_resize(self._source, orientation, self.config.width,
                               self.config.height, self.config.apply_mirroring)

    def render(self) -> str:
        """Render the image as text using the configured ramp and color mode."""
        return render(self.load_grid(), self.config.ramp, self.config.color)

    def close(self) -> None:
        """Release the decoded source image."""
        self._source = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def image_to_text(file_path: Union[str, Path], config: Optional[RenderConfig] = None) -> str:
    """
    Convert an image file to text art in one call.

    Metadata warnings are discarded; use PixText directly to inspect them.
    """
    return PixText(file_path, config).render()
