# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF directory decoder

This module decodes the TIFF structure carried inside a JPEG EXIF segment:
the 8-byte header and the first Image File Directory (IFD0). It is used
to look up single tags, most importantly the orientation tag.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from typing import Dict, Any, Iterator, List, Optional

from pixtext.byte_order import ByteOrder
from pixtext.exceptions import InvalidIfdOffsetError, InvalidTiffHeaderError
from pixtext.exif_tags import ORIENTATION_TAG, tag_name, value_size

TIFF_HEADER_SIZE = 8
TIFF_MAGIC = 42
IFD_ENTRY_SIZE = 12


@dataclass
class IFDEntry:
    """One 12-byte IFD record. The value field is kept as raw bytes."""
    tag_id: int
    tag_type: int
    count: int
    value_bytes: bytes
    offset: int

    @property
    def name(self) -> str:
        return tag_name(self.tag_id)

    @property
    def value_is_inline(self) -> bool:
        """True when the value fits in the 4-byte field instead of an offset."""
        return 0 < value_size(self.tag_type, self.count) <= 4

    def short_value(self, byte_order: ByteOrder) -> int:
        """First two bytes of the value field read as a SHORT."""
        return byte_order.read_u16(self.value_bytes, 0)


class TIFFStructure:
    """
    TIFF header and IFD0 decoder.

    All offsets are relative to the start of tiff_data, which is the
    EXIF payload with its 6-byte "Exif\\0\\0" signature removed.
    """

    def __init__(self, tiff_data: bytes):
        """
        Initialize TIFF structure decoder.

        Args:
            tiff_data: TIFF header and everything after it
        """
        self.tiff_data = tiff_data
        self.byte_order: Optional[ByteOrder] = None
        self.ifd0_offset: int = 0

    def parse_header(self) -> ByteOrder:
        """
        Validate the TIFF header and locate IFD0.

        Returns:
            The byte order selected by the header

        Raises:
            InvalidTiffHeaderError: If the data is too short or the magic is not 42
            InvalidByteOrderError: If the order marker is not II or MM
            InvalidIfdOffsetError: If IFD0 does not fit in the data
        """
        if self.byte_order is not None:
            return self.byte_order

        data = self.tiff_data
        if len(data) < TIFF_HEADER_SIZE:
            raise InvalidTiffHeaderError(
                f"Invalid TIFF header: need {TIFF_HEADER_SIZE} bytes, got {len(data)}"
            )

        byte_order = ByteOrder.from_marker(data[:2])

        magic = byte_order.read_u16(data, 2)
        if magic != TIFF_MAGIC:
            raise InvalidTiffHeaderError(f"Invalid TIFF header: bad magic number {magic}")

        ifd0_offset = byte_order.read_u32(data, 4)
        if ifd0_offset + 2 > len(data):
            raise InvalidIfdOffsetError(
                f"Invalid IFD offset {ifd0_offset} for {len(data)} bytes of TIFF data"
            )

        self.byte_order = byte_order
        self.ifd0_offset = ifd0_offset
        return byte_order

    def iter_entries(self) -> Iterator[IFDEntry]:
        """
        Yield the entries of IFD0 in file order.

        A directory that claims more entries than the data holds is
        truncated silently at the last complete entry.
        """
        byte_order = self.parse_header()
        data = self.tiff_data
        num_entries = byte_order.read_u16(data, self.ifd0_offset)

        for i in range(num_entries):
            entry_offset = self.ifd0_offset + 2 + i * IFD_ENTRY_SIZE
            if entry_offset + IFD_ENTRY_SIZE > len(data):
                break
            yield IFDEntry(
                tag_id=byte_order.read_u16(data, entry_offset),
                tag_type=byte_order.read_u16(data, entry_offset + 2),
                count=byte_order.read_u32(data, entry_offset + 4),
                value_bytes=bytes(data[entry_offset + 8:entry_offset + 12]),
                offset=entry_offset,
            )

    def find_tag(self, tag_id: int) -> Optional[int]:
        """
        Look up a SHORT tag in IFD0.

        Args:
            tag_id: Tag id to search for

        Returns:
            The 16-bit value of the first matching entry, or None if
            no entry carries the tag
        """
        byte_order = self.parse_header()
        for entry in self.iter_entries():
            if entry.tag_id == tag_id:
                return entry.short_value(byte_order)
        return None

    def parse(self) -> Dict[str, Any]:
        """
        Decode IFD0 into a summary dictionary.

        Returns:
            Dictionary with byte_order, ifd0_offset, entries and next_ifd
        """
        byte_order = self.parse_header()
        entries: List[IFDEntry] = list(self.iter_entries())

        # The next-IFD link follows the last declared entry
        num_entries = byte_order.read_u16(self.tiff_data, self.ifd0_offset)
        link_offset = self.ifd0_offset + 2 + num_entries * IFD_ENTRY_SIZE
        next_ifd = 0
        if link_offset + 4 <= len(self.tiff_data):
            next_ifd = byte_order.read_u32(self.tiff_data, link_offset)

        return {
            'byte_order': byte_order,
            'ifd0_offset': self.ifd0_offset,
            'entries': entries,
            'next_ifd': next_ifd,
        }


def read_orientation_from_tiff(tiff_data: bytes) -> Optional[int]:
    """
    Read the orientation tag from a TIFF structure.

    Args:
        tiff_data: EXIF payload without its 6-byte signature

    Returns:
        The stored orientation value, or None if IFD0 has no orientation entry

    Raises:
        MetadataReadError: If the header or IFD0 offset is invalid
    """
    return TIFFStructure(tiff_data).find_tag(ORIENTATION_TAG)
