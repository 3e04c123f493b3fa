# tests/conftest.py
import struct

import pytest
from PIL import Image


def _tiff(order="<", entries=(), ifd_offset=8, next_ifd=0, declared_count=None):
    marker = b"II" if order == "<" else b"MM"
    data = marker + struct.pack(f"{order}HI", 42, ifd_offset)
    data += b"\x00" * (ifd_offset - len(data))
    count = len(entries) if declared_count is None else declared_count
    data += struct.pack(f"{order}H", count)
    for tag, tag_type, tag_count, value in entries:
        if isinstance(value, int):
            # SHORT values are left-justified in the 4-byte field
            value = struct.pack(f"{order}H", value) + b"\x00\x00"
        data += struct.pack(f"{order}HHI", tag, tag_type, tag_count) + value
    data += struct.pack(f"{order}I", next_ifd)
    return data


def _jpeg(*segments, tail=b"\xff\xd9"):
    data = b"\xff\xd8"
    for marker, payload in segments:
        data += bytes([0xFF, marker]) + struct.pack(">H", len(payload) + 2) + payload
    return data + tail


@pytest.fixture
def make_tiff():
    """Factory for TIFF structures: make_tiff('<', [(tag, type, count, value), ...])."""
    return _tiff


@pytest.fixture
def make_jpeg():
    """Factory for segment-only JPEG streams: make_jpeg((0xE1, payload), ...)."""
    return _jpeg


@pytest.fixture
def exif_payload(make_tiff):
    def build(orientation=6, order="<", tag=0x0112):
        return b"Exif\x00\x00" + make_tiff(order, [(tag, 3, 1, orientation)])
    return build


@pytest.fixture
def two_tone_image():
    """16x8 RGB image, left half black, right half white."""
    img = Image.new("RGB", (16, 8), (0, 0, 0))
    img.paste((255, 255, 255), (8, 0, 16, 8))
    return img


@pytest.fixture
def jpeg_file(tmp_path, two_tone_image):
    def build(orientation=None, name="photo.jpg"):
        path = tmp_path / name
        if orientation is None:
            two_tone_image.save(path, "JPEG", quality=95)
        else:
            exif = Image.Exif()
            exif[0x0112] = orientation
            two_tone_image.save(path, "JPEG", quality=95, exif=exif)
        return path
    return build


@pytest.fixture
def png_file(tmp_path, two_tone_image):
    path = tmp_path / "picture.png"
    two_tone_image.save(path, "PNG")
    return path
