import pytest

from ilda_core.records import Color, RecordSpan
from ilda_decode.header import read_header
from ilda_decode.points import decode_points

from conftest import frame, header, point


def _decode(buf, span=None):
    span = span or RecordSpan(0, len(buf))
    return decode_points(buf, span, read_header(buf, span.start))


def test_3d_palette_points_in_order():
    pts = [(1, -2, 3, 0x80, 5), (-32768, 32767, 0, 0x00, 255), (100, 200, -300, 0x40, 7)]
    points, leftover = _decode(frame(0, pts))
    assert leftover == 0
    assert [(p.x, p.y, p.z) for p in points] == [(1, -2, 3), (-32768, 32767, 0), (100, 200, -300)]
    assert [p.blanked for p in points] == [True, False, False]
    assert [p.last_point for p in points] == [False, False, True]
    assert [p.color_index for p in points] == [5, 255, 7]
    assert all(p.color is None for p in points)


def test_2d_palette_points():
    points, _ = _decode(frame(1, [(-5, 6, 0, 0xC0, 12)]))
    p = points[0]
    assert (p.x, p.y, p.z) == (-5, 6, 0)
    assert p.blanked and p.last_point
    assert p.color_index == 12


@pytest.mark.parametrize("version", [4, 5])
def test_true_color_stored_as_rgb(version):
    buf = header(version, count=1) + point(version, 10, 20, 30, 0, (0x30, 0x20, 0x10))
    # Wire order is B, G, R.
    assert buf[-3:] == b"\x10\x20\x30"
    points, _ = _decode(buf)
    assert points[0].color == Color(r=0x30, g=0x20, b=0x10)
    assert points[0].color_index is None
    assert points[0].z == (30 if version == 4 else 0)


def test_blank_uses_top_bit_only():
    points, _ = _decode(frame(5, [(0, 0, 0, 0x7F, (1, 2, 3)), (0, 0, 0, 0x80, (1, 2, 3))]))
    assert [p.blanked for p in points] == [False, True]


def test_partial_trailing_point_dropped():
    buf = frame(0, [(1, 1, 1, 0, 0), (2, 2, 2, 0, 0)]) + b"\x01\x02\x03"
    points, leftover = _decode(buf)
    assert len(points) == 2
    assert leftover == 3


def test_declared_count_not_trusted():
    buf = header(1, count=50) + point(1, 1, 2, 0, 0, 3)
    points, leftover = _decode(buf)
    assert len(points) == 1
    assert leftover == 0


def test_points_stop_at_span_end():
    buf = frame(1, [(1, 1, 0, 0, 0), (2, 2, 0, 0, 0)]) + header(1)
    points, leftover = _decode(buf, RecordSpan(0, 44))
    assert [p.x for p in points] == [1, 2]
    assert leftover == 0


def test_empty_payload():
    points, leftover = _decode(header(4))
    assert points == []
    assert leftover == 0
