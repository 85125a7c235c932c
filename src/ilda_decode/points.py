"""Frame payload decoding for ILDA versions 0, 1, 4 and 5.

One table-driven loop covers all four layouts. ``POINT_FORMATS`` in
``ilda_core.protocol`` is the only place strides and field order live.
"""
from __future__ import annotations

import struct

from ilda_core.protocol import HEADER_LEN, POINT_FORMATS, STATUS_BLANK_MASK, STATUS_LAST_POINT_MASK
from ilda_core.records import Color, FormatVersion, Point, RecordHeader, RecordSpan


def _point(version: FormatVersion, fields: tuple) -> Point:
    if version.is_3d:
        x, y, z, status, *rest = fields
    else:
        x, y, status, *rest = fields
        z = 0

    blanked = (status & STATUS_BLANK_MASK) != 0
    last_point = (status & STATUS_LAST_POINT_MASK) != 0
    if version.uses_palette:
        return Point(x, y, z, blanked, last_point, color_index=rest[0])
    # Wire order is B, G, R.
    b, g, r = rest
    return Point(x, y, z, blanked, last_point, color=Color(r, g, b))


def decode_points(buffer: bytes, span: RecordSpan, header: RecordHeader) -> tuple[list[Point], int]:
    """Decode every whole point in the span's payload.

    Returns the points and the number of trailing bytes too short to form a
    point. A point is only decoded when all of its bytes lie inside the span.
    """
    layout = struct.Struct(POINT_FORMATS[header.version])
    stride = layout.size
    end = min(span.end, len(buffer))
    pos = span.start + HEADER_LEN

    points: list[Point] = []
    while pos + stride <= end:
        points.append(_point(header.version, layout.unpack_from(buffer, pos)))
        pos += stride

    return points, max(0, end - pos)
