"""Font metadata I/O for ttfmesh.

This module reads descriptive font data (names, format, UPM) using
fonttools. Geometry always goes through the native engine; this layer
exists for reporting.

Key classes:
- FontInfo: Family, style, format, glyph count and UPM of a font file
"""

from ttfmesh.io.reader import FontInfo, read_font_info

__all__ = [
    "FontInfo",
    "read_font_info",
]
