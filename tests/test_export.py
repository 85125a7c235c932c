import json

import pyarrow.parquet as pq

from ilda_decode.decoder import decode_all
from ilda_export.cli import export_file
from ilda_export.tables import build_tables

from conftest import frame, header, palette


def _show():
    return (
        palette([(10, 20, 30), (40, 50, 60)])
        + frame(0, [(1, -1, 5, 0x80, 1), (2, -2, 6, 0, 0)], name=b"a")
        + frame(5, [(3, 3, 0, 0x40, (7, 8, 9))], name=b"b")
        + header(5)
    )


def test_build_tables():
    tables = build_tables(decode_all(_show()))
    assert tables["records"].num_rows == 4
    assert tables["palettes"].num_rows == 2

    pts = tables["points"].to_pydict()
    assert pts["record"] == [1, 1, 2]
    assert pts["x"] == [1, 2, 3]
    assert pts["blanked"] == [True, False, False]
    assert pts["color_index"] == [1, 0, None]
    assert (pts["r"][0], pts["g"][0], pts["b"][0]) == (40, 50, 60)
    assert (pts["r"][2], pts["g"][2], pts["b"][2]) == (7, 8, 9)

    recs = tables["records"].to_pydict()
    assert recs["kind"] == ["palette", "frame", "frame", "frame"]
    assert recs["record_number"][0] is None


def test_export_writes_tables_and_manifest(tmp_path):
    src = tmp_path / "show.ild"
    src.write_bytes(_show())
    out = tmp_path / "out"

    manifest = export_file(src, out)
    assert manifest["counts"] == {"frames": 3, "palettes": 1, "points": 3}

    on_disk = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
    assert on_disk["files"] == ["palettes.parquet", "points.parquet", "records.parquet"]
    assert pq.read_table(out / "points.parquet").num_rows == 3


def test_export_empty_tables(tmp_path):
    src = tmp_path / "empty.ild"
    src.write_bytes(header(1))
    export_file(src, tmp_path / "out")
    assert pq.read_table(tmp_path / "out" / "points.parquet").num_rows == 0
