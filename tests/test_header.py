import pytest

from ilda_core.records import FormatVersion
from ilda_decode.errors import TruncatedHeader, UnsupportedVersion
from ilda_decode.header import read_header

from conftest import header


def test_read_fields():
    buf = b"\xff" * 5 + header(4, count=513, number=2, total=258, name=b"frame", company=b"acme", head=3)
    h = read_header(buf, 5)
    assert h.offset == 5
    assert h.version is FormatVersion.FRAME_3D_TRUE_COLOR
    assert h.name == b"frame\x00\x00\x00"
    assert h.name_text == "frame"
    assert h.company_text == "acme"
    assert h.entry_count == 513
    assert h.record_number == 2
    assert h.total_records == 258
    assert h.scanner_head == 3


def test_palette_numbering_ignored():
    h = read_header(header(2, count=64, number=7, total=9), 0)
    assert h.version is FormatVersion.PALETTE_TABLE
    assert h.entry_count == 64
    assert h.record_number is None
    assert h.total_records is None


@pytest.mark.parametrize("tag", [3, 6, 9, 255])
def test_unsupported_version(tag):
    with pytest.raises(UnsupportedVersion) as exc:
        read_header(header(tag), 0)
    assert exc.value.tag == tag
    assert exc.value.to_diagnostic(0)["version"] == tag


def test_truncated_header():
    buf = header(0)
    with pytest.raises(TruncatedHeader):
        read_header(buf[:31], 0)
    with pytest.raises(TruncatedHeader):
        read_header(buf + b"ILDA\x00\x00", 32)


def test_label_strips_padding():
    h = read_header(header(0, name=b"ab  ", company=b"\x00"), 0)
    assert h.name_text == "ab"
    assert h.company_text == ""
