from __future__ import annotations

from dataclasses import dataclass, field
from warnings import warn

from ilda_core.protocol import HEADER_LEN, MAGIC
from ilda_core.records import DecodedFrame, DecodedPalette, RecordSpan

from .const import ERRORS
from .errors import EmptyBuffer, NotAnIldaFile, TruncatedHeader, UnsupportedVersion
from .header import read_header
from .palette import decode_palette
from .points import decode_points
from .scanner import build_spans, scan_markers


@dataclass
class DecodeResult:
    records: list[DecodedFrame | DecodedPalette] = field(default_factory=list)
    diagnostics: list[dict] = field(default_factory=list)
    scan_stats: dict = field(default_factory=dict)

    @property
    def frames(self) -> list[DecodedFrame]:
        return [r for r in self.records if isinstance(r, DecodedFrame)]

    @property
    def palettes(self) -> list[DecodedPalette]:
        return [r for r in self.records if isinstance(r, DecodedPalette)]

    def to_dict(self, include_points: bool = False) -> dict:
        return {
            "status": "PASS",
            "records": [r.to_dict(include_points) for r in self.records],
            "diagnostics": list(self.diagnostics),
            "scan_stats": dict(self.scan_stats),
        }


class IldaDecoder:
    """Decode a whole ILDA buffer into frame and palette records.

    - Records are discovered by scanning for header signatures.
    - A bad record is skipped with a diagnostic; only an empty or
      non-ILDA buffer aborts the decode.

    The decoder keeps no per-call state, so one instance may serve
    concurrent calls.
    """

    @staticmethod
    def _diagnose(result: DecodeResult, diag: dict) -> None:
        warn(f"{diag['code']} at offset {diag.get('offset')}: {diag['message']}")
        result.diagnostics.append(diag)

    def decode_all(self, buffer: bytes | bytearray | memoryview) -> DecodeResult:
        buf = bytes(buffer)

        if len(buf) < HEADER_LEN:
            raise EmptyBuffer(f"{len(buf)} bytes")
        if buf[: len(MAGIC)] != MAGIC:
            raise NotAnIldaFile(f"expected {MAGIC!r}, found {buf[:len(MAGIC)]!r}")

        result = DecodeResult(
            scan_stats={
                "markers": 0,
                "spans": 0,
                "records": 0,
                "skipped": 0,
                "truncated": 0,
            }
        )

        markers = scan_markers(buf)
        result.scan_stats["markers"] = len(markers)
        spans = build_spans(markers, len(buf))
        result.scan_stats["spans"] = len(spans)

        for span in spans:
            rec = self._decode_span(result, buf, span)
            if rec is not None:
                result.records.append(rec)
                result.scan_stats["records"] += 1

        return result

    def _decode_span(self, result: DecodeResult, buf: bytes, span: RecordSpan) -> DecodedFrame | DecodedPalette | None:
        try:
            header = read_header(buf, span.start)
        except (UnsupportedVersion, TruncatedHeader) as e:
            result.scan_stats["skipped"] += 1
            self._diagnose(result, e.to_diagnostic(span.start))
            return None

        if header.version.is_frame:
            points, leftover = decode_points(buf, span, header)
            rec: DecodedFrame | DecodedPalette = DecodedFrame(header=header, points=tuple(points))
        else:
            rec, leftover = decode_palette(buf, span, header)

        if leftover:
            result.scan_stats["truncated"] += 1
            self._diagnose(
                result,
                {
                    "code": "E_TRUNCATED_PAYLOAD",
                    "message": ERRORS["E_TRUNCATED_PAYLOAD"],
                    "offset": span.start,
                    "dropped_bytes": leftover,
                },
            )
        return rec


def decode_all(buffer: bytes | bytearray | memoryview) -> DecodeResult:
    """Decode ``buffer`` with a fresh :class:`IldaDecoder`."""
    return IldaDecoder().decode_all(buffer)
