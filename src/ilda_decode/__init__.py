"""ILDA Decode - Buffer to frame and palette records."""
from .decoder import DecodeResult, IldaDecoder, decode_all
from .errors import (
    EmptyBuffer,
    IldaError,
    NotAnIldaFile,
    ReadFailed,
    TruncatedHeader,
    UnsupportedVersion,
)
from .header import read_header
from .palette import decode_palette
from .points import decode_points
from .scanner import build_spans, scan_markers

__all__ = [
    "DecodeResult",
    "IldaDecoder",
    "decode_all",
    "EmptyBuffer",
    "IldaError",
    "NotAnIldaFile",
    "ReadFailed",
    "TruncatedHeader",
    "UnsupportedVersion",
    "read_header",
    "decode_palette",
    "decode_points",
    "build_spans",
    "scan_markers",
]
