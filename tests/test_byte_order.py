import pytest

from pixtext.byte_order import ByteOrder, read_u16_be
from pixtext.exceptions import InvalidByteOrderError, TruncatedSegmentError


def test_from_marker_selects_order():
    assert ByteOrder.from_marker(b"II") is ByteOrder.LITTLE
    assert ByteOrder.from_marker(b"MM") is ByteOrder.BIG
    assert ByteOrder.LITTLE.marker == b"II"
    assert ByteOrder.BIG.marker == b"MM"


@pytest.mark.parametrize("marker", [b"IM", b"mm", b"\x00\x00", b"I"])
def test_from_marker_rejects_unknown(marker):
    with pytest.raises(InvalidByteOrderError):
        ByteOrder.from_marker(marker)


def test_reads_little_and_big_endian():
    data = b"\x01\x02\x03\x04\x05"
    assert ByteOrder.LITTLE.read_u16(data, 0) == 0x0201
    assert ByteOrder.BIG.read_u16(data, 0) == 0x0102
    assert ByteOrder.LITTLE.read_u32(data, 1) == 0x05040302
    assert ByteOrder.BIG.read_u32(data, 1) == 0x02030405
    assert read_u16_be(b"\xff\xe1", 0) == 0xFFE1


def test_reads_are_unsigned():
    assert ByteOrder.BIG.read_u16(b"\xff\xff", 0) == 65535
    assert ByteOrder.LITTLE.read_u32(b"\xff\xff\xff\xff", 0) == 0xFFFFFFFF


@pytest.mark.parametrize("offset", [-1, 3, 4, 100])
def test_out_of_range_read_raises(offset):
    with pytest.raises(TruncatedSegmentError):
        ByteOrder.LITTLE.read_u16(b"\x00\x01\x02\x03", offset)


def test_u32_read_at_exact_end_is_allowed():
    assert ByteOrder.BIG.read_u32(b"\x00\x00\x00\x2a", 0) == 42
    with pytest.raises(TruncatedSegmentError):
        ByteOrder.BIG.read_u32(b"\x00\x00\x2a", 0)


def test_pack_matches_read():
    assert ByteOrder.LITTLE.pack_u16(0x0112) == b"\x12\x01"
    assert ByteOrder.BIG.pack_u32(8) == b"\x00\x00\x00\x08"
