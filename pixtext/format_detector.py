# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
File format detector

Identifies image formats from their leading bytes so that decode and
metadata errors can name what the file actually is.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import Dict, Optional, Union


class FormatDetector:
    """
    Detects image formats from file signatures.
    """

    # Format signatures (magic numbers)
    FORMAT_SIGNATURES: Dict[bytes, str] = {
        b'\xff\xd8\xff': 'JPEG',
        b'\x89PNG\r\n\x1a\n': 'PNG',
        b'GIF87a': 'GIF',
        b'GIF89a': 'GIF',
        b'II*\x00': 'TIFF',
        b'MM\x00*': 'TIFF',
        b'BM': 'BMP',
    }

    # Bytes needed to recognise every signature above
    HEADER_SIZE = 12

    @classmethod
    def detect_format(cls, file_data: bytes) -> Optional[str]:
        """
        Detect the format of file data.

        Args:
            file_data: File data (at least the first HEADER_SIZE bytes)

        Returns:
            Format name or None if not detected
        """
        for signature, format_name in cls.FORMAT_SIGNATURES.items():
            if file_data.startswith(signature):
                return format_name
        if file_data[:4] == b'RIFF' and file_data[8:12] == b'WEBP':
            return 'WEBP'
        return None

    @classmethod
    def detect_file_format(cls, file_path: Union[str, Path]) -> Optional[str]:
        """Detect the format of a file from its header, None if unreadable."""
        try:
            with open(file_path, 'rb') as f:
                return cls.detect_format(f.read(cls.HEADER_SIZE))
        except OSError:
            return None
