"""Font metadata reading via fontTools.

The native engine exposes glyph geometry but little of the naming and header
data a user wants to see when picking a font. This module reads those with
fontTools, independently of any engine handle.
"""

import io
import struct
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from ttfmesh.exceptions import FontFileNotFoundError, FontParseError

NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2


@dataclass(frozen=True)
class FontInfo:
    """Descriptive metadata of a font file.

    Attributes:
        family: Family name (name ID 1), or None if absent
        style: Subfamily name (name ID 2), or None if absent
        format: 'TrueType' or 'OpenType'
        glyph_count: Number of glyphs according to 'maxp'
        units_per_em: Design units per em according to 'head'
    """

    family: str | None
    style: str | None
    format: str
    glyph_count: int
    units_per_em: int

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.family, self.style) if p]
        return " ".join(parts) if parts else "(unnamed)"


def read_font_info(source: Path | bytes) -> FontInfo:
    """Read font metadata from a path or raw bytes.

    Args:
        source: Font file path or its contents

    Returns:
        FontInfo for the font

    Raises:
        FontFileNotFoundError: If a path is given and does not exist
        FontParseError: If fontTools cannot parse the font
    """
    if isinstance(source, (bytes, bytearray)):
        label = "<buffer>"
        stream: Path | io.BytesIO = io.BytesIO(bytes(source))
    else:
        label = str(source)
        if not Path(source).exists():
            raise FontFileNotFoundError(label)
        stream = Path(source)

    try:
        font = TTFont(stream, lazy=True)
    except (TTLibError, OSError, AssertionError, KeyError, ValueError, struct.error) as e:
        raise FontParseError(label, str(e) or type(e).__name__) from e

    try:
        name_table = font["name"] if "name" in font else None
        family = _name(name_table, NAME_ID_FAMILY)
        style = _name(name_table, NAME_ID_SUBFAMILY)
        font_format = "OpenType" if ("CFF " in font or "CFF2" in font) else "TrueType"
        return FontInfo(
            family=family,
            style=style,
            format=font_format,
            glyph_count=font["maxp"].numGlyphs,
            units_per_em=font["head"].unitsPerEm,  # type: ignore[attr-defined]
        )
    except (TTLibError, KeyError, AssertionError, ValueError, struct.error) as e:
        raise FontParseError(label, str(e) or type(e).__name__) from e
    finally:
        font.close()


def _name(name_table: object, name_id: int) -> str | None:
    if name_table is None:
        return None
    record = name_table.getDebugName(name_id)  # type: ignore[attr-defined]
    return str(record) if record else None
