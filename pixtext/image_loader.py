# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image decoding

Decodes image files with Pillow into a PixelGrid. The EXIF orientation
is deliberately not applied here; the pipeline reads it from the raw
file bytes and applies it itself.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from pixtext.exceptions import FileOpenError, ImageDecodeError
from pixtext.format_detector import FormatDetector
from pixtext.pixel_grid import PixelGrid


def load_image(file_path: Union[str, Path]) -> PixelGrid:
    """
    Decode an image file.

    Args:
        file_path: Path to a JPEG, PNG or any other Pillow-readable image

    Returns:
        PixelGrid of the decoded image in RGBA

    Raises:
        FileOpenError: If the file cannot be opened
        ImageDecodeError: If the file cannot be decoded
    """
    try:
        f = open(file_path, 'rb')
    except OSError as e:
        raise FileOpenError(f"Failed to open image {file_path}: {e.strerror or e}")

    with f:
        header = f.read(FormatDetector.HEADER_SIZE)
        f.seek(0)
        try:
            with Image.open(f) as img:
                img.load()
                return PixelGrid.from_image(img)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError,
                SyntaxError, ValueError) as e:
            detected = FormatDetector.detect_format(header) or 'unknown format'
            raise ImageDecodeError(f"Failed to decode image {file_path} ({detected}): {e}")
