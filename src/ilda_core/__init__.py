"""ILDA Core - Shared protocol constants and record types."""
from .records import (
    Color,
    DecodedFrame,
    DecodedPalette,
    FormatVersion,
    PaletteEntry,
    Point,
    RecordHeader,
    RecordSpan,
)
from .colors import DEFAULT_PALETTE, paint, resolve

__all__ = [
    "Color",
    "DecodedFrame",
    "DecodedPalette",
    "FormatVersion",
    "PaletteEntry",
    "Point",
    "RecordHeader",
    "RecordSpan",
    "DEFAULT_PALETTE",
    "paint",
    "resolve",
]
