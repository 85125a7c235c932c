from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ilda_core.colors import paint
from ilda_decode.decoder import DecodeResult

RECORDS_SCHEMA = pa.schema(
    [
        ("record", pa.int32()),
        ("offset", pa.int64()),
        ("kind", pa.string()),
        ("version", pa.int8()),
        ("name", pa.string()),
        ("company", pa.string()),
        ("entry_count", pa.int32()),
        ("decoded_count", pa.int32()),
        ("record_number", pa.int32()),
        ("total_records", pa.int32()),
        ("scanner_head", pa.int16()),
    ]
)

POINTS_SCHEMA = pa.schema(
    [
        ("record", pa.int32()),
        ("point", pa.int32()),
        ("x", pa.int16()),
        ("y", pa.int16()),
        ("z", pa.int16()),
        ("blanked", pa.bool_()),
        ("last_point", pa.bool_()),
        ("color_index", pa.int16()),
        ("r", pa.uint8()),
        ("g", pa.uint8()),
        ("b", pa.uint8()),
    ]
)

PALETTES_SCHEMA = pa.schema(
    [
        ("record", pa.int32()),
        ("index", pa.int32()),
        ("r", pa.uint8()),
        ("g", pa.uint8()),
        ("b", pa.uint8()),
    ]
)


def build_tables(result: DecodeResult) -> dict[str, pa.Table]:
    """Flatten a decode result into records, points and palettes tables.

    Point colours are resolved: palette frames are painted with the most
    recent preceding palette record (or the default palette), and keep their
    raw ``color_index`` alongside.
    """
    index_of = {id(rec): i for i, rec in enumerate(result.records)}

    records: list[dict] = []
    for i, rec in enumerate(result.records):
        d = rec.to_dict()
        records.append(
            {
                "record": i,
                "offset": d["offset"],
                "kind": d["kind"],
                "version": d["version"],
                "name": d["name"],
                "company": d["company"],
                "entry_count": d["entry_count"],
                "decoded_count": d.get("point_count", d.get("color_count")),
                "record_number": d.get("record_number"),
                "total_records": d.get("total_records"),
                "scanner_head": d["scanner_head"],
            }
        )

    points: list[dict] = []
    for frame, colors in paint(result.records):
        rec_idx = index_of[id(frame)]
        for j, (p, c) in enumerate(zip(frame.points, colors)):
            points.append(
                {
                    "record": rec_idx,
                    "point": j,
                    "x": p.x,
                    "y": p.y,
                    "z": p.z,
                    "blanked": p.blanked,
                    "last_point": p.last_point,
                    "color_index": p.color_index,
                    "r": c.r,
                    "g": c.g,
                    "b": c.b,
                }
            )

    palettes: list[dict] = []
    for pal in result.palettes:
        rec_idx = index_of[id(pal)]
        for j, c in enumerate(pal.colors):
            palettes.append({"record": rec_idx, "index": j, "r": c.r, "g": c.g, "b": c.b})

    def to_table(rows: list[dict], schema: pa.Schema) -> pa.Table:
        if not rows:
            return schema.empty_table()
        df = pd.DataFrame(rows, columns=schema.names)
        return pa.Table.from_pandas(df, schema=schema, preserve_index=False)

    return {
        "records": to_table(records, RECORDS_SCHEMA),
        "points": to_table(points, POINTS_SCHEMA),
        "palettes": to_table(palettes, PALETTES_SCHEMA),
    }


def write_tables(result: DecodeResult, out_path: Path) -> list[str]:
    """Write each table as ``<name>.parquet`` under ``out_path``."""
    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for name, table in build_tables(result).items():
        filename = f"{name}.parquet"
        pq.write_table(table, out_path / filename)
        written.append(filename)
    return written
