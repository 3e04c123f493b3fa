# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte order aware integer reader

TIFF data carries its own byte order ("II" little-endian, "MM" big-endian).
The order is selected once per directory and every later read goes through
the selected ByteOrder member. Reads are bounds-checked and raise
TruncatedSegmentError instead of reading past the end of the buffer.

Copyright 2025 DNAi inc.
"""

import struct
from enum import Enum

from pixtext.exceptions import InvalidByteOrderError, TruncatedSegmentError


class ByteOrder(Enum):
    """Byte order of a TIFF structure, valued by its struct prefix."""
    LITTLE = '<'
    BIG = '>'

    @classmethod
    def from_marker(cls, marker: bytes) -> 'ByteOrder':
        """
        Select the byte order from a TIFF byte-order marker.

        Args:
            marker: The first two bytes of a TIFF header

        Returns:
            ByteOrder.LITTLE for b'II', ByteOrder.BIG for b'MM'

        Raises:
            InvalidByteOrderError: If the marker is anything else
        """
        if marker == b'II':
            return cls.LITTLE
        if marker == b'MM':
            return cls.BIG
        raise InvalidByteOrderError(f"Invalid byte order marker: {bytes(marker)!r}")

    @property
    def marker(self) -> bytes:
        """The two-byte TIFF marker for this order."""
        return b'II' if self is ByteOrder.LITTLE else b'MM'

    def read_u16(self, data: bytes, offset: int) -> int:
        """Read an unsigned 16-bit integer at offset."""
        return self._unpack('H', 2, data, offset)

    def read_u32(self, data: bytes, offset: int) -> int:
        """Read an unsigned 32-bit integer at offset."""
        return self._unpack('I', 4, data, offset)

    def pack_u16(self, value: int) -> bytes:
        return struct.pack(f'{self.value}H', value)

    def pack_u32(self, value: int) -> bytes:
        return struct.pack(f'{self.value}I', value)

    def _unpack(self, fmt: str, size: int, data: bytes, offset: int) -> int:
        if offset < 0 or offset + size > len(data):
            raise TruncatedSegmentError(
                f"Cannot read {size} bytes at offset {offset}: "
                f"only {len(data)} bytes available"
            )
        return struct.unpack_from(f'{self.value}{fmt}', data, offset)[0]


def read_u16_be(data: bytes, offset: int = 0) -> int:
    """Read a big-endian 16-bit integer, as used by JPEG segment lengths."""
    return ByteOrder.BIG.read_u16(data, offset)
