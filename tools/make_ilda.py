import math
import struct
from pathlib import Path

from ilda_core.colors import DEFAULT_PALETTE
from ilda_core.protocol import (
    HEADER_COUNTS_FMT,
    MAGIC,
    POINT_FORMATS,
    STATUS_BLANK_MASK,
    STATUS_LAST_POINT_MASK,
    V_FRAME_2D_PALETTE,
    V_FRAME_2D_TRUE_COLOR,
    V_FRAME_3D_PALETTE,
    V_FRAME_3D_TRUE_COLOR,
    V_PALETTE_TABLE,
)

# --- CONFIGURATION ---
FRAME_VERSIONS = (V_FRAME_3D_PALETTE, V_FRAME_2D_PALETTE, V_FRAME_3D_TRUE_COLOR, V_FRAME_2D_TRUE_COLOR)
RADIUS = 30000
COMPANY = b"ildatool"


def header(version: int, name: bytes, count: int, number: int, total: int, head: int = 0) -> bytes:
    out = MAGIC + b"\x00\x00\x00" + bytes([version])
    out += name.ljust(8, b"\x00")[:8] + COMPANY
    out += struct.pack(HEADER_COUNTS_FMT, count, number, total)
    return out + bytes([head, 0])


def rainbow(i: float) -> tuple[int, int, int]:
    def color(c):
        return int(c * 255 + 0.5)
    i *= 3.0
    if i < 1:
        return color(i), 0, color(1 - i)
    elif i < 2:
        return color(2 - i), color(i - 1), 0
    else:
        return 0, color(3 - i), color(i - 2)


def circle_frame(version: int, npts: int, number: int, total: int) -> bytes:
    """One circle, first point blanked, last point flagged."""
    fmt = POINT_FORMATS[version]
    body = b""
    for k in range(npts):
        t = k / npts
        x = int(math.sin(t * 2 * math.pi) * RADIUS)
        y = int(math.cos(t * 2 * math.pi) * RADIUS)
        status = 0
        if k == 0:
            status |= STATUS_BLANK_MASK
        if k == npts - 1:
            status |= STATUS_LAST_POINT_MASK
        xyz = (x, y, 0) if version in (V_FRAME_3D_PALETTE, V_FRAME_3D_TRUE_COLOR) else (x, y)
        if version in (V_FRAME_3D_PALETTE, V_FRAME_2D_PALETTE):
            body += struct.pack(fmt, *xyz, status, k % len(DEFAULT_PALETTE))
        else:
            r, g, b = rainbow(t)
            body += struct.pack(fmt, *xyz, status, b, g, r)
    return header(version, f"circle{number}".encode("ascii"), npts, number, total) + body


def palette_record(colors) -> bytes:
    body = b"".join(bytes(c.as_tuple()) for c in colors)
    return header(V_PALETTE_TABLE, b"default", len(colors), 0, 0) + body


def generate_show(out_file, npts: int = 48, with_palette: bool = False) -> Path:
    total = len(FRAME_VERSIONS)
    blob = palette_record(DEFAULT_PALETTE) if with_palette else b""
    for number, version in enumerate(FRAME_VERSIONS):
        blob += circle_frame(version, npts, number, total)
    # End-of-file marker: an empty frame header.
    blob += header(V_FRAME_2D_TRUE_COLOR, b"", 0, 0, 0)

    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(blob)
    print(f"GENERATED: {out} ({len(blob)} bytes)")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_ilda.py OUT_FILE [--points N] [--palette]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    with_palette, args = pop_flag(args, "--palette")

    npts = 48
    if "--points" in args:
        i = args.index("--points")
        if i + 1 >= len(args):
            raise SystemExit("--points requires a value")
        npts = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "show.ild"
    generate_show(out, npts=npts, with_palette=with_palette)
