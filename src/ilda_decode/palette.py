from __future__ import annotations

from ilda_core.protocol import HEADER_LEN, PALETTE_STRIDE
from ilda_core.records import DecodedPalette, PaletteEntry, RecordHeader, RecordSpan


def decode_palette(buffer: bytes, span: RecordSpan, header: RecordHeader) -> tuple[DecodedPalette, int]:
    """Decode R,G,B triplets up to the end of the span.

    ``header.entry_count`` is not consulted: declared counts are often wrong
    and must never drive a read.
    """
    end = min(span.end, len(buffer))
    pos = span.start + HEADER_LEN

    colors: list[PaletteEntry] = []
    while pos + PALETTE_STRIDE <= end:
        r, g, b = buffer[pos : pos + PALETTE_STRIDE]
        colors.append(PaletteEntry(r, g, b))
        pos += PALETTE_STRIDE

    return DecodedPalette(header=header, colors=tuple(colors)), max(0, end - pos)
