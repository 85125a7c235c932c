"""ILDA Core - Decoded record types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .protocol import (
    V_FRAME_2D_PALETTE,
    V_FRAME_2D_TRUE_COLOR,
    V_FRAME_3D_PALETTE,
    V_FRAME_3D_TRUE_COLOR,
    V_PALETTE_TABLE,
)


class FormatVersion(IntEnum):
    FRAME_3D_PALETTE = V_FRAME_3D_PALETTE
    FRAME_2D_PALETTE = V_FRAME_2D_PALETTE
    PALETTE_TABLE = V_PALETTE_TABLE
    FRAME_3D_TRUE_COLOR = V_FRAME_3D_TRUE_COLOR
    FRAME_2D_TRUE_COLOR = V_FRAME_2D_TRUE_COLOR

    @property
    def is_frame(self) -> bool:
        return self is not FormatVersion.PALETTE_TABLE

    @property
    def is_3d(self) -> bool:
        return self in (FormatVersion.FRAME_3D_PALETTE, FormatVersion.FRAME_3D_TRUE_COLOR)

    @property
    def uses_palette(self) -> bool:
        return self in (FormatVersion.FRAME_3D_PALETTE, FormatVersion.FRAME_2D_PALETTE)


@dataclass(frozen=True)
class RecordSpan:
    """Byte range [start, end) holding one record's header and payload."""

    start: int
    end: int


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


# A palette entry's index is its position in DecodedPalette.colors.
PaletteEntry = Color


@dataclass(frozen=True)
class RecordHeader:
    """Fields of the fixed 32-byte header.

    ``name`` and ``company`` are the raw 8-byte fields; use :meth:`label` for
    a trimmed string. ``record_number`` and ``total_records`` are ``None`` for
    palette headers, where the format leaves them undefined.
    """

    offset: int
    version: FormatVersion
    name: bytes
    company: bytes
    entry_count: int
    record_number: int | None
    total_records: int | None
    scanner_head: int

    @staticmethod
    def label(field: bytes) -> str:
        """Decode a fixed-width text field, dropping NUL and space padding."""
        return field.decode("latin-1").rstrip("\x00 ").strip()

    @property
    def name_text(self) -> str:
        return self.label(self.name)

    @property
    def company_text(self) -> str:
        return self.label(self.company)


@dataclass(frozen=True)
class Point:
    """One frame point.

    Palette frames set ``color_index``; true-colour frames set ``color``.
    ``z`` is 0 for 2D frames.
    """

    x: int
    y: int
    z: int
    blanked: bool
    last_point: bool = False
    color_index: int | None = None
    color: Color | None = None


@dataclass(frozen=True)
class DecodedFrame:
    header: RecordHeader
    points: tuple[Point, ...]

    @property
    def version(self) -> FormatVersion:
        return self.header.version

    @property
    def uses_external_palette(self) -> bool:
        return self.header.version.uses_palette

    @property
    def name(self) -> str:
        return self.header.name_text

    @property
    def company(self) -> str:
        return self.header.company_text

    @property
    def record_number(self) -> int:
        return self.header.record_number

    @property
    def total_records(self) -> int:
        return self.header.total_records

    @property
    def scanner_head(self) -> int:
        return self.header.scanner_head

    def to_dict(self, include_points: bool = False) -> dict:
        out = {
            "kind": "frame",
            "offset": self.header.offset,
            "version": int(self.header.version),
            "name": self.name,
            "company": self.company,
            "entry_count": self.header.entry_count,
            "record_number": self.header.record_number,
            "total_records": self.header.total_records,
            "scanner_head": self.header.scanner_head,
            "point_count": len(self.points),
        }
        if include_points:
            out["points"] = [_point_dict(p) for p in self.points]
        return out


@dataclass(frozen=True)
class DecodedPalette:
    header: RecordHeader
    colors: tuple[PaletteEntry, ...]

    @property
    def name(self) -> str:
        return self.header.name_text

    @property
    def company(self) -> str:
        return self.header.company_text

    @property
    def scanner_head(self) -> int:
        return self.header.scanner_head

    def to_dict(self, include_points: bool = False) -> dict:
        out = {
            "kind": "palette",
            "offset": self.header.offset,
            "version": int(self.header.version),
            "name": self.name,
            "company": self.company,
            "entry_count": self.header.entry_count,
            "scanner_head": self.header.scanner_head,
            "color_count": len(self.colors),
        }
        if include_points:
            out["colors"] = [list(c.as_tuple()) for c in self.colors]
        return out


def _point_dict(p: Point) -> dict:
    d = {"x": p.x, "y": p.y, "z": p.z, "blanked": p.blanked, "last_point": p.last_point}
    if p.color is not None:
        d["rgb"] = list(p.color.as_tuple())
    else:
        d["color_index"] = p.color_index
    return d
