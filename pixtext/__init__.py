# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
PixText - Image to text-art renderer

Renders raster images as density-character text, optionally in 24-bit
terminal color. The EXIF orientation of JPEG files is read by a pure
Python segment scanner and TIFF directory decoder, so photos taken on
their side render upright.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from pixtext.core import PixText, image_to_text
from pixtext.config import RenderConfig, load_config_file
from pixtext.exceptions import (
    PixTextError,
    FileOpenError,
    ImageDecodeError,
    ConfigError,
    MetadataReadError,
    NotAJpegError,
    MalformedMarkerError,
    TruncatedSegmentError,
    InvalidTiffHeaderError,
    InvalidByteOrderError,
    InvalidIfdOffsetError,
)
from pixtext.jpeg_segments import (
    JPEGSegmentScanner,
    read_exif_orientation,
    read_exif_orientation_from_bytes,
)
from pixtext.orientation import (
    Orientation,
    apply_orientation,
    describe_orientation,
    oriented_resize,
)
from pixtext.pixel_grid import PixelGrid
from pixtext.renderer import CharacterRamp, render
from pixtext.tiff_structure import TIFFStructure, read_orientation_from_tiff
from pixtext.transforms import resize, rotate90, rotate180, rotate270

__all__ = [
    "PixText",
    "image_to_text",
    "RenderConfig",
    "load_config_file",
    "PixTextError",
    "FileOpenError",
    "ImageDecodeError",
    "ConfigError",
    "MetadataReadError",
    "NotAJpegError",
    "MalformedMarkerError",
    "TruncatedSegmentError",
    "InvalidTiffHeaderError",
    "InvalidByteOrderError",
    "InvalidIfdOffsetError",
    "JPEGSegmentScanner",
    "read_exif_orientation",
    "read_exif_orientation_from_bytes",
    "Orientation",
    "apply_orientation",
    "describe_orientation",
    "oriented_resize",
    "PixelGrid",
    "CharacterRamp",
    "render",
    "TIFFStructure",
    "read_orientation_from_tiff",
    "resize",
    "rotate90",
    "rotate180",
    "rotate270",
]
