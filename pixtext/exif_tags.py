# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF tag definitions

Tag ids and data types that can appear in IFD0 of a JPEG's EXIF segment.
Only the orientation tag drives behaviour; the other names are used when
listing directory entries.

Copyright 2025 DNAi inc.
"""

from enum import IntEnum


class ExifTagType(IntEnum):
    """EXIF tag data types"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    UNDEFINED = 7
    SLONG = 9
    SRATIONAL = 10


# EXIF tag sizes in bytes
TAG_SIZES = {
    ExifTagType.BYTE: 1,
    ExifTagType.ASCII: 1,
    ExifTagType.SHORT: 2,
    ExifTagType.LONG: 4,
    ExifTagType.RATIONAL: 8,
    ExifTagType.UNDEFINED: 1,
    ExifTagType.SLONG: 4,
    ExifTagType.SRATIONAL: 8,
}

ORIENTATION_TAG = 0x0112

EXIF_TAG_NAMES = {
    0x00FE: "SubfileType",
    0x0100: "ImageWidth",
    0x0101: "ImageLength",
    0x0102: "BitsPerSample",
    0x0103: "Compression",
    0x0106: "PhotometricInterpretation",
    0x010E: "ImageDescription",
    0x010F: "Make",
    0x0110: "Model",
    0x0111: "StripOffsets",
    0x0112: "Orientation",
    0x0115: "SamplesPerPixel",
    0x011A: "XResolution",
    0x011B: "YResolution",
    0x0128: "ResolutionUnit",
    0x0131: "Software",
    0x0132: "DateTime",
    0x013B: "Artist",
    0x0201: "ThumbnailOffset",
    0x0202: "ThumbnailLength",
    0x0213: "YCbCrPositioning",
    0x8298: "Copyright",
    0x8769: "ExifOffset",
    0x8825: "GPSInfo",
}


def tag_name(tag_id: int) -> str:
    """
    Get the display name for a tag id.

    Unknown tags are named by their hex id, e.g. "Tag0x9999".
    """
    return EXIF_TAG_NAMES.get(tag_id, f"Tag0x{tag_id:04X}")


def value_size(tag_type: int, count: int) -> int:
    """Total size in bytes of a tag's value, 0 for unknown types."""
    try:
        return TAG_SIZES[ExifTagType(tag_type)] * count
    except ValueError:
        return 0
