"""ILDA interchange format protocol constants.

Single source of truth for on-disk magic values and record layouts.
Every decoder module reads offsets and strides from here.
"""

# Header magic
MAGIC = b"ILDA"
SIGNATURE = MAGIC + b"\x00\x00"  # Marker the scanner looks for

# Header: [Magic(4) | Reserved(3) | Version(1) | Name(8) | Company(8) |
#          EntryCount(2) | RecordNumber(2) | TotalRecords(2) | Head(1) | Reserved(1)] = 32 bytes
HEADER_LEN = 32
VERSION_OFFSET = 7
NAME_SLICE = slice(8, 16)
COMPANY_SLICE = slice(16, 24)
COUNTS_OFFSET = 24
HEADER_COUNTS_FMT = ">HHH"
SCANNER_HEAD_OFFSET = 30

# Format version tags
V_FRAME_3D_PALETTE = 0
V_FRAME_2D_PALETTE = 1
V_PALETTE_TABLE = 2
V_FRAME_3D_TRUE_COLOR = 4
V_FRAME_2D_TRUE_COLOR = 5
SUPPORTED_VERSIONS = frozenset({0, 1, 2, 4, 5})

# Point records: x, y[, z] are signed big-endian shorts, then status byte,
# then either a palette index or B, G, R.
POINT_FORMATS = {
    V_FRAME_3D_PALETTE: ">hhhBB",
    V_FRAME_2D_PALETTE: ">hhBB",
    V_FRAME_3D_TRUE_COLOR: ">hhhBBBB",
    V_FRAME_2D_TRUE_COLOR: ">hhBBBB",
}

# Palette records: R, G, B
PALETTE_STRIDE = 3

# Status byte bits
STATUS_BLANK_MASK = 0x80
STATUS_LAST_POINT_MASK = 0x40

# Markers closer than this to the previous one are taken as a match inside
# the previous record's header, provided another marker follows.
ADJACENCY_WINDOW = 32
