# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
JPEG segment scanner

This module walks the marker/segment structure of a JPEG byte stream and
extracts the EXIF orientation from its APP1 segment. It reads the stream
sequentially and only keeps the payload of APP1 segments; every other
segment is skipped.

Copyright 2025 DNAi inc.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from pixtext.byte_order import read_u16_be
from pixtext.exceptions import (
    FileOpenError,
    MalformedMarkerError,
    NotAJpegError,
    TruncatedSegmentError,
)
from pixtext.orientation import DEFAULT_ORIENTATION
from pixtext.tiff_structure import read_orientation_from_tiff

SOI = b'\xff\xd8'
MARKER_PREFIX = 0xFF
APP1 = 0xE1
SOS = 0xDA
EOI = 0xD9
EXIF_SIGNATURE = b'Exif\x00\x00'


@dataclass
class Segment:
    """A JPEG segment. payload is only read for APP1 segments."""
    marker: int
    offset: int
    length: int
    payload: Optional[bytes] = None

    @property
    def is_exif(self) -> bool:
        return (
            self.marker == APP1
            and self.payload is not None
            and self.payload[:len(EXIF_SIGNATURE)] == EXIF_SIGNATURE
        )

    @property
    def tiff_data(self) -> bytes:
        """The TIFF structure following the Exif signature."""
        return (self.payload or b'')[len(EXIF_SIGNATURE):]


class JPEGSegmentScanner:
    """
    Sequential scanner over a JPEG byte stream.

    The stream must be positioned at the start of the file. Scanning
    stops at the end of the stream, at start-of-scan (entropy-coded data
    follows it) or at end-of-image.

    Example:
        >>> with open('photo.jpg', 'rb') as f:
        ...     orientation = JPEGSegmentScanner(f).find_orientation()
    """

    def __init__(self, stream: BinaryIO):
        """
        Initialize the scanner.

        Args:
            stream: Readable binary stream
        """
        self.stream = stream
        self.position = 0

    def _read(self, size: int) -> bytes:
        data = self.stream.read(size)
        self.position += len(data)
        return data

    def _skip(self, size: int) -> None:
        if self.stream.seekable():
            self.stream.seek(size, io.SEEK_CUR)
            self.position += size
        else:
            self._read(size)

    def _read_length(self, marker: int) -> Optional[int]:
        """
        Read a segment length field.

        Returns:
            The length, or None if the stream ends first

        Raises:
            TruncatedSegmentError: If the length cannot cover its own two bytes
        """
        raw = self._read(2)
        if len(raw) < 2:
            return None
        length = read_u16_be(raw)
        if length < 2:
            raise TruncatedSegmentError(
                f"Invalid length {length} for segment 0xFF{marker:02X} "
                f"at offset {self.position - 4}"
            )
        return length

    def iter_segments(self) -> Iterator[Segment]:
        """
        Yield segments in stream order.

        Raises:
            NotAJpegError: If the stream does not start with FF D8
            MalformedMarkerError: If a marker does not start with 0xFF
            TruncatedSegmentError: If an APP1 segment is cut short or any
                segment declares a length below 2
        """
        if self._read(2) != SOI:
            raise NotAJpegError("Not a JPEG file: missing start-of-image marker")

        while True:
            marker_offset = self.position
            marker_bytes = self._read(2)
            if len(marker_bytes) < 2:
                return
            if marker_bytes[0] != MARKER_PREFIX:
                raise MalformedMarkerError(
                    f"Invalid marker 0x{marker_bytes.hex().upper()} at offset {marker_offset}"
                )

            marker = marker_bytes[1]
            if marker in (SOS, EOI):
                return

            if marker == APP1:
                length = self._read_length(marker)
                if length is None:
                    raise TruncatedSegmentError(
                        f"APP1 segment at offset {marker_offset} has no length field"
                    )
                payload = self._read(length - 2)
                if len(payload) < length - 2:
                    raise TruncatedSegmentError(
                        f"APP1 segment at offset {marker_offset} is truncated: "
                        f"expected {length - 2} bytes, got {len(payload)}"
                    )
                yield Segment(marker, marker_offset, length, payload)
            else:
                length = self._read_length(marker)
                if length is None:
                    return
                self._skip(length - 2)
                yield Segment(marker, marker_offset, length)

    def find_exif_segment(self) -> Optional[Segment]:
        """Return the first APP1 segment carrying an Exif signature."""
        for segment in self.iter_segments():
            if segment.is_exif:
                return segment
        return None

    def find_orientation(self) -> int:
        """
        Find the orientation stored in the first EXIF segment that has one.

        Returns:
            The orientation value, or 1 if no EXIF segment carries the tag

        Raises:
            MetadataReadError: If the stream or a TIFF directory is malformed
        """
        for segment in self.iter_segments():
            if not segment.is_exif:
                continue
            orientation = read_orientation_from_tiff(segment.tiff_data)
            if orientation is not None:
                return orientation
        return DEFAULT_ORIENTATION


def read_exif_orientation(file_path: Union[str, Path]) -> int:
    """
    Read the EXIF orientation of a JPEG file.

    Args:
        file_path: Path to the image file

    Returns:
        The orientation value, 1 if the file has none

    Raises:
        FileOpenError: If the file cannot be opened
        MetadataReadError: If the file is not a JPEG or its metadata is malformed
    """
    try:
        f = open(file_path, 'rb')
    except OSError as e:
        raise FileOpenError(f"Cannot open {file_path}: {e.strerror or e}")
    with f:
        return JPEGSegmentScanner(f).find_orientation()


def read_exif_orientation_from_bytes(data: bytes) -> int:
    """Read the EXIF orientation from an in-memory JPEG."""
    return JPEGSegmentScanner(io.BytesIO(data)).find_orientation()
