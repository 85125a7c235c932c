"""Query exported ILDA tables - per-frame point statistics."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <export_path> [min_visible]")
        print("Example: python query.py export/ 10")
        sys.exit(1)

    export = Path(sys.argv[1])
    min_visible = int(sys.argv[2]) if len(sys.argv) > 2 else 0

    con = duckdb.connect(":memory:")

    # Load export tables
    con.execute(f"CREATE VIEW records AS SELECT * FROM '{export}/records.parquet'")
    con.execute(f"CREATE VIEW points AS SELECT * FROM '{export}/points.parquet'")

    # Visible (unblanked) points and extents per frame
    sql = f"""
    SELECT
        r.record,
        r.name,
        r.version,
        COUNT(p.point) AS points,
        COUNT(p.point) FILTER (WHERE NOT p.blanked) AS visible,
        MIN(p.x) AS min_x,
        MAX(p.x) AS max_x,
        MIN(p.y) AS min_y,
        MAX(p.y) AS max_y
    FROM records r
    LEFT JOIN points p ON p.record = r.record
    WHERE r.kind = 'frame'
    GROUP BY r.record, r.name, r.version
    HAVING COUNT(p.point) FILTER (WHERE NOT p.blanked) >= {min_visible}
    ORDER BY r.record
    """

    print(f"--- Frames in {export} ---")
    print(f"--- Visible points >= {min_visible} ---\n")

    df = con.execute(sql).fetchdf()
    if df.empty:
        print("No frames found.")
    else:
        for _, row in df.iterrows():
            print(f"FRAME {row['record']}: {row['name'] or '(unnamed)'} (v{row['version']})")
            print(f"  Points: {row['points']} ({row['visible']} visible)")
            print(f"  Extent: x[{row['min_x']}, {row['max_x']}] y[{row['min_y']}, {row['max_y']}]")
            print()


if __name__ == "__main__":
    main()
