"""Palette colour resolution for decoded frames.

Decoding never applies a palette. Callers that need concrete colours pass a
frame (and optionally a palette record) through :func:`resolve`, or walk a
whole decode result with :func:`paint`.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from .records import Color, DecodedFrame, DecodedPalette

BLACK = Color(0, 0, 0)

# Standard 64-colour ILDA palette, used when a file carries no palette record.
DEFAULT_PALETTE: tuple[Color, ...] = tuple(
    Color(r, g, b)
    for r, g, b in (
        (255, 0, 0), (255, 16, 0), (255, 32, 0), (255, 48, 0),
        (255, 64, 0), (255, 80, 0), (255, 96, 0), (255, 112, 0),
        (255, 128, 0), (255, 144, 0), (255, 160, 0), (255, 176, 0),
        (255, 192, 0), (255, 208, 0), (255, 224, 0), (255, 240, 0),
        (255, 255, 0), (224, 255, 0), (192, 255, 0), (160, 255, 0),
        (128, 255, 0), (96, 255, 0), (64, 255, 0), (32, 255, 0),
        (0, 255, 0), (0, 255, 32), (0, 255, 64), (0, 255, 96),
        (0, 255, 128), (0, 255, 160), (0, 255, 192), (0, 255, 224),
        (0, 130, 255), (0, 114, 255), (0, 104, 255), (10, 96, 255),
        (0, 82, 255), (0, 74, 255), (0, 64, 255), (0, 32, 255),
        (0, 0, 255), (32, 0, 255), (64, 0, 255), (96, 0, 255),
        (128, 0, 255), (160, 0, 255), (192, 0, 255), (224, 0, 255),
        (255, 0, 255), (255, 32, 255), (255, 64, 255), (255, 96, 255),
        (255, 128, 255), (255, 160, 255), (255, 192, 255), (255, 224, 255),
        (255, 255, 255), (255, 224, 224), (255, 192, 192), (255, 160, 160),
        (255, 128, 128), (255, 96, 96), (255, 64, 64), (255, 32, 32),
    )
)


def resolve(frame: DecodedFrame, palette: DecodedPalette | None = None) -> list[Color]:
    """Return one concrete colour per point of ``frame``."""
    if not frame.uses_external_palette:
        return [p.color for p in frame.points]

    table: Sequence[Color] = palette.colors if palette is not None else DEFAULT_PALETTE
    # Out-of-range indexes render black rather than failing the whole frame.
    return [table[p.color_index] if p.color_index < len(table) else BLACK for p in frame.points]


def paint(records: Iterable[DecodedFrame | DecodedPalette]) -> list[tuple[DecodedFrame, list[Color]]]:
    """Resolve every frame against the most recent palette record before it."""
    current: DecodedPalette | None = None
    painted: list[tuple[DecodedFrame, list[Color]]] = []
    for rec in records:
        if isinstance(rec, DecodedPalette):
            current = rec
            continue
        painted.append((rec, resolve(rec, current)))
    return painted
