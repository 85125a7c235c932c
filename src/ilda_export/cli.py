from __future__ import annotations

import hashlib
import json
from pathlib import Path

import click

from ilda_decode.cli import load_bytes
from ilda_decode.decoder import decode_all
from ilda_export.tables import write_tables


def export_file(source: Path, out_path: Path) -> dict:
    """Decode ``source`` and write its tables plus ``manifest.json``."""
    print(f"Decoding: {source}")

    # 1. Read Byte Authority
    raw_bytes = load_bytes(source)
    source_hash = hashlib.sha256(raw_bytes).hexdigest()

    # 2. Decode
    result = decode_all(raw_bytes)

    # 3. Write Output Structure
    files = write_tables(result, out_path)

    # 4. Manifest
    manifest = {
        "source": Path(source).name,
        "source_hash": source_hash,
        "source_length": len(raw_bytes),
        "files": sorted(files),
        "counts": {
            "frames": len(result.frames),
            "palettes": len(result.palettes),
            "points": sum(len(f.points) for f in result.frames),
        },
        "scan_stats": result.scan_stats,
        "diagnostics": result.diagnostics,
    }
    man_bytes = json.dumps(
        manifest, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")
    (Path(out_path) / "manifest.json").write_bytes(man_bytes)

    print(f"PASS: Tables written to {out_path}")
    print(f"  Frames: {manifest['counts']['frames']}")
    print(f"  Palettes: {manifest['counts']['palettes']}")
    print(f"  Points: {manifest['counts']['points']}")
    if result.diagnostics:
        print(f"  Diagnostics: {len(result.diagnostics)}")
    return manifest


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
def main(source: Path, out: Path) -> None:
    """Decode an ILDA file into Parquet tables."""
    try:
        export_file(source, out)
    except Exception as e:
        # Fail closed with a single-line reason.
        print(f"FATAL: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
