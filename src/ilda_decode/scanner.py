"""Header marker discovery and record partitioning.

ILDA records carry no length prefix that can be trusted, so the buffer is
cut at every occurrence of the header signature. The signature can also
occur by accident inside a header's name fields; :func:`build_spans` owns
the policy for discarding such matches.
"""
from __future__ import annotations

from typing import Sequence

from ilda_core.protocol import ADJACENCY_WINDOW, SIGNATURE
from ilda_core.records import RecordSpan

from .errors import NotAnIldaFile


def scan_markers(buffer: bytes) -> list[int]:
    """Return every offset where the header signature starts, in order."""
    positions: list[int] = []
    pos = buffer.find(SIGNATURE)
    while pos != -1:
        positions.append(pos)
        # Step one byte so overlapping candidates are still seen.
        pos = buffer.find(SIGNATURE, pos + 1)
    return positions


def build_spans(markers: Sequence[int], buffer_len: int) -> list[RecordSpan]:
    """Partition the buffer into one span per believed-real record.

    A marker within ``ADJACENCY_WINDOW`` bytes of the previous one is treated
    as a match inside that record, as long as a further marker exists to end
    the merged span. With no further marker the close pair is kept as two
    spans.
    """
    if not markers:
        raise NotAnIldaFile("no header signature found")

    spans: list[RecordSpan] = []
    start = markers[0]
    i = 1
    while i < len(markers):
        if markers[i] - start <= ADJACENCY_WINDOW and i + 1 < len(markers):
            spans.append(RecordSpan(start, markers[i + 1]))
            start = markers[i + 1]
            i += 2
            continue
        spans.append(RecordSpan(start, markers[i]))
        start = markers[i]
        i += 1

    # The last real marker's record runs to the end of the buffer.
    spans.append(RecordSpan(start, buffer_len))
    return spans
