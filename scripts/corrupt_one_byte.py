import sys
from pathlib import Path

from ilda_core.protocol import VERSION_OFFSET
from ilda_decode.scanner import scan_markers

def main():
    if len(sys.argv) not in (3, 4):
        print("Usage: corrupt_one_byte.py <file> <record-index> [version-tag]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    record = int(sys.argv[2])
    tag = int(sys.argv[3]) if len(sys.argv) == 4 else 9

    b = bytearray(p.read_bytes())
    positions = scan_markers(bytes(b))
    if record >= len(positions):
        print(f"Only {len(positions)} headers found.")
        raise SystemExit(2)

    # Overwrite the version byte so the record decodes as unsupported.
    idx = positions[record] + VERSION_OFFSET
    b[idx] = tag
    p.write_bytes(bytes(b))
    print(f"Set version byte at offset {idx} to {tag} in {p}")

if __name__ == "__main__":
    main()
