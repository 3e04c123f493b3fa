# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for PixText

Errors fall in two groups. Fatal errors (the file cannot be opened or the
image cannot be decoded) stop the conversion. Metadata errors are recoverable:
the pipeline records a warning and treats the image as correctly oriented.

Copyright 2025 DNAi inc.
"""


class PixTextError(Exception):
    """
    Base exception for all PixText errors.

    All PixText exceptions inherit from this class, allowing
    catch-all error handling for any PixText-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class FileOpenError(PixTextError):
    """Raised when the source file cannot be opened for reading."""
    pass


class ImageDecodeError(PixTextError):
    """
    Raised when the image codec cannot decode the source file.

    This exception is raised when:
    - The file signature is not an image format the codec knows
    - The image data is truncated or corrupted
    """
    pass


class ConfigError(PixTextError):
    """Raised when a configuration file or option value is invalid."""
    pass


class MetadataReadError(PixTextError):
    """
    Raised when orientation metadata cannot be read from a file.

    Every error produced while walking JPEG segments or decoding the
    TIFF directory is a subclass of this one. Callers catch it, report
    a warning and fall back to orientation 1.
    """
    pass


class NotAJpegError(MetadataReadError):
    """Raised when the stream does not start with the SOI marker (FF D8)."""
    pass


class MalformedMarkerError(MetadataReadError):
    """Raised when a segment marker does not start with 0xFF."""
    pass


class TruncatedSegmentError(MetadataReadError):
    """
    Raised when a segment or directory is shorter than its header claims.

    This exception is raised when:
    - A segment length is smaller than its own two length bytes
    - The stream ends inside a metadata segment
    - A read would run past the end of the available bytes
    """
    pass


class InvalidTiffHeaderError(MetadataReadError):
    """Raised when the TIFF header is too short or its magic number is not 42."""
    pass


class InvalidByteOrderError(MetadataReadError):
    """Raised when the TIFF byte-order marker is neither II nor MM."""
    pass


class InvalidIfdOffsetError(MetadataReadError):
    """Raised when the IFD0 offset points past the end of the TIFF data."""
    pass
