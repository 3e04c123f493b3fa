import pytest

from pixtext.byte_order import ByteOrder
from pixtext.exceptions import (
    InvalidByteOrderError,
    InvalidIfdOffsetError,
    InvalidTiffHeaderError,
    MetadataReadError,
)
from pixtext.tiff_structure import TIFFStructure, read_orientation_from_tiff


@pytest.mark.parametrize("order", ["<", ">"])
@pytest.mark.parametrize("value", [1, 3, 6, 8, 2, 0xABCD])
def test_orientation_value_decoded_in_both_orders(make_tiff, order, value):
    data = make_tiff(order, [(0x0112, 3, 1, value)])
    assert read_orientation_from_tiff(data) == value


def test_orientation_found_after_other_entries(make_tiff):
    data = make_tiff(">", [
        (0x010F, 2, 6, b"\x00\x00\x00\x40"),
        (0x0110, 2, 8, b"\x00\x00\x00\x48"),
        (0x0112, 3, 1, 8),
    ])
    assert read_orientation_from_tiff(data) == 8


def test_first_matching_entry_wins(make_tiff):
    data = make_tiff("<", [(0x0112, 3, 1, 3), (0x0112, 3, 1, 6)])
    assert read_orientation_from_tiff(data) == 3


def test_missing_tag_returns_none(make_tiff):
    data = make_tiff("<", [(0x0110, 3, 1, 6)])
    assert read_orientation_from_tiff(data) is None


def test_empty_directory_returns_none(make_tiff):
    assert read_orientation_from_tiff(make_tiff("<", [])) is None


def test_truncated_directory_is_not_fatal(make_tiff):
    # Directory claims 5 entries; only the first is present
    data = make_tiff("<", [(0x0110, 3, 1, 1)], declared_count=5)[:-4]
    assert read_orientation_from_tiff(data) is None


def test_entry_past_truncation_is_not_read(make_tiff):
    data = make_tiff("<", [(0x0110, 3, 1, 1), (0x0112, 3, 1, 6)])
    # Cut inside the second entry
    assert read_orientation_from_tiff(data[:8 + 2 + 12 + 11]) is None


def test_ifd_at_non_default_offset(make_tiff):
    data = make_tiff(">", [(0x0112, 3, 1, 6)], ifd_offset=20)
    assert read_orientation_from_tiff(data) == 6


def test_short_header_rejected():
    with pytest.raises(InvalidTiffHeaderError):
        read_orientation_from_tiff(b"II*\x00\x08\x00\x00")


def test_bad_byte_order_rejected(make_tiff):
    data = b"XX" + make_tiff("<", [(0x0112, 3, 1, 6)])[2:]
    with pytest.raises(InvalidByteOrderError):
        read_orientation_from_tiff(data)


def test_bad_magic_rejected(make_tiff):
    data = make_tiff("<", [(0x0112, 3, 1, 6)])
    data = data[:2] + b"\x2b\x00" + data[4:]
    with pytest.raises(InvalidTiffHeaderError):
        read_orientation_from_tiff(data)


def test_magic_read_in_selected_order():
    # 42 stored little-endian but marked big-endian reads as 0x2A00
    with pytest.raises(InvalidTiffHeaderError):
        read_orientation_from_tiff(b"MM\x2a\x00\x00\x00\x00\x08\x00\x00")


@pytest.mark.parametrize("ifd_offset", [9, 10, 0xFFFFFFFF])
def test_ifd_offset_past_end_rejected(ifd_offset):
    data = b"II\x2a\x00" + ifd_offset.to_bytes(4, "little") + b"\x00\x00"
    with pytest.raises(InvalidIfdOffsetError):
        read_orientation_from_tiff(data)


def test_ifd_offset_with_room_for_count_only():
    data = b"II\x2a\x00\x08\x00\x00\x00\x00\x00"
    assert read_orientation_from_tiff(data) is None


def test_errors_are_metadata_read_errors():
    with pytest.raises(MetadataReadError):
        read_orientation_from_tiff(b"")


def test_parse_lists_entries(make_tiff):
    data = make_tiff(">", [(0x0110, 2, 4, b"abc\x00"), (0x0112, 3, 1, 6)], next_ifd=0x1234)
    structure = TIFFStructure(data)
    summary = structure.parse()

    assert summary["byte_order"] is ByteOrder.BIG
    assert summary["ifd0_offset"] == 8
    assert summary["next_ifd"] == 0x1234
    model, orientation = summary["entries"]
    assert model.name == "Model"
    assert model.value_bytes == b"abc\x00"
    assert model.value_is_inline
    assert orientation.name == "Orientation"
    assert orientation.offset == 8 + 2 + 12
    assert orientation.short_value(ByteOrder.BIG) == 6


def test_unknown_tag_name_and_offset_value(make_tiff):
    data = make_tiff("<", [(0x9999, 5, 1, b"\x40\x00\x00\x00")])
    entry = next(TIFFStructure(data).iter_entries())
    assert entry.name == "Tag0x9999"
    assert not entry.value_is_inline
