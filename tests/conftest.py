import struct

POINT_FMTS = {0: ">hhhBB", 1: ">hhBB", 4: ">hhhBBBB", 5: ">hhBBBB"}


def header(version, count=0, number=0, total=1, name=b"", company=b"", head=0):
    """Build a 32-byte ILDA header."""
    return (
        b"ILDA\x00\x00\x00"
        + bytes([version])
        + name.ljust(8, b"\x00")
        + company.ljust(8, b"\x00")
        + struct.pack(">HHH", count, number, total)
        + bytes([head, 0])
    )


def point(version, x, y, z=0, status=0, color=0):
    """Pack one point; ``color`` is an index or an (r, g, b) tuple."""
    xyz = (x, y, z) if version in (0, 4) else (x, y)
    if version in (0, 1):
        return struct.pack(POINT_FMTS[version], *xyz, status, color)
    r, g, b = color
    return struct.pack(POINT_FMTS[version], *xyz, status, b, g, r)


def frame(version, points, **kw):
    return header(version, count=len(points), **kw) + b"".join(point(version, *p) for p in points)


def palette(colors, **kw):
    return header(2, count=len(colors), **kw) + b"".join(bytes(c) for c in colors)
