from __future__ import annotations

import struct

from ilda_core.protocol import (
    COMPANY_SLICE,
    COUNTS_OFFSET,
    HEADER_COUNTS_FMT,
    HEADER_LEN,
    NAME_SLICE,
    SCANNER_HEAD_OFFSET,
    SUPPORTED_VERSIONS,
    V_PALETTE_TABLE,
    VERSION_OFFSET,
)
from ilda_core.records import FormatVersion, RecordHeader

from .errors import TruncatedHeader, UnsupportedVersion


def read_header(buffer: bytes, span_start: int) -> RecordHeader:
    """Parse the 32-byte header that starts at ``span_start``."""
    available = len(buffer) - span_start
    if available < HEADER_LEN:
        raise TruncatedHeader(f"{available} of {HEADER_LEN} bytes at offset {span_start}")

    hdr = buffer[span_start : span_start + HEADER_LEN]
    tag = hdr[VERSION_OFFSET]
    if tag not in SUPPORTED_VERSIONS:
        raise UnsupportedVersion(tag)

    entry_count, record_number, total_records = struct.unpack_from(HEADER_COUNTS_FMT, hdr, COUNTS_OFFSET)

    # Palette headers leave the numbering fields undefined.
    if tag == V_PALETTE_TABLE:
        record_number = total_records = None

    return RecordHeader(
        offset=span_start,
        version=FormatVersion(tag),
        name=bytes(hdr[NAME_SLICE]),
        company=bytes(hdr[COMPANY_SLICE]),
        entry_count=entry_count,
        record_number=record_number,
        total_records=total_records,
        scanner_head=hdr[SCANNER_HEAD_OFFSET],
    )
