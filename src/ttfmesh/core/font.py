"""Owning handle for a font loaded by the engine.

This module provides the Font class, the entry point of the handle layer.
A Font owns one ``ttf_t*`` and frees it with ``ttf_free`` exactly once. The
glyph table pointer and glyph count it reports are read at load time and do
not change for the life of the handle.
"""

import ctypes as ct
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ttfmesh.core.glyph import Glyph
from ttfmesh.core.lifetime import ResourceGuard
from ttfmesh.domain.quality import Quality
from ttfmesh.domain.status import is_success, translate
from ttfmesh.engine.loader import get_default_engine
from ttfmesh.engine.native import Engine
from ttfmesh.exceptions import (
    FontFileNotFoundError,
    FontLoadError,
    GlyphNotFoundError,
    ObjExportError,
)

BUFFER_SOURCE = "<buffer>"
_BMP_MAX = 0xFFFF


class Font:
    """A TrueType font loaded by ttf2mesh.

    Example:
        with Font.from_path(Path("FiraMono-Medium.ttf")) as font:
            print(font.glyph_count)
            mesh = font.glyph_by_char("A").to_2d_mesh(Quality.high())
            font.export_to_obj(Path("font.obj"), Quality.low())
    """

    def __init__(
        self,
        engine: Engine,
        pointer: Any,
        source: str,
        buffer: ct.Array | None = None,
    ) -> None:
        """Take ownership of a loaded font.

        Use ``from_buffer`` or ``from_path``; both only get here after the
        engine reported success.

        Args:
            engine: Engine that allocated the font
            pointer: Non-NULL ttf_t*
            source: Path or ``"<buffer>"``, for messages
            buffer: Private copy of the font bytes, kept alive with the font
        """
        self._engine = engine
        self._guard = ResourceGuard(self, "Font", pointer, engine.free, keepalive=buffer)
        self._source = source
        self._glyph_count = int(pointer.contents.nglyphs)

    @classmethod
    def from_buffer(
        cls,
        data: bytes | bytearray | memoryview,
        engine: Engine | None = None,
    ) -> "Font":
        """Load a font from bytes.

        The bytes are copied into a buffer only the engine sees, since
        ttf2mesh may rewrite it while parsing.

        Args:
            data: Raw TTF file contents
            engine: Engine to use (default: process-wide engine)

        Returns:
            Loaded font

        Raises:
            FontLoadError: If the engine rejects the data
        """
        engine = engine or get_default_engine()
        raw = bytes(data)
        buffer = (ct.c_uint8 * len(raw)).from_buffer_copy(raw)
        pointer, status = engine.load_from_mem(buffer)
        if not is_success(status):
            raise FontLoadError(BUFFER_SOURCE, translate(status))
        return cls(engine, pointer, BUFFER_SOURCE, buffer)

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        engine: Engine | None = None,
    ) -> "Font":
        """Load a font from a file.

        Args:
            path: Path to a .ttf file
            engine: Engine to use (default: process-wide engine)

        Returns:
            Loaded font

        Raises:
            FontFileNotFoundError: If path does not exist (checked before the engine is called)
            FontLoadError: If the engine rejects the file
        """
        path = Path(path)
        if not path.exists():
            raise FontFileNotFoundError(str(path))

        engine = engine or get_default_engine()
        pointer, status = engine.load_from_file(os.fsencode(path), False)
        if not is_success(status):
            raise FontLoadError(str(path), translate(status))
        return cls(engine, pointer, str(path))

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def source(self) -> str:
        return self._source

    @property
    def closed(self) -> bool:
        return not self._guard.alive

    @property
    def glyph_count(self) -> int:
        """Number of entries in the font's glyph table."""
        self._guard.get()
        return self._glyph_count

    def glyph_by_index(self, index: int) -> Glyph:
        """Return the glyph at ``index`` in the glyph table.

        Raises:
            GlyphNotFoundError: If index is outside 0..glyph_count-1
            HandleClosedError: If the font is closed
        """
        borrow = self._guard.borrow()
        if not 0 <= index < self._glyph_count:
            raise GlyphNotFoundError(f"#{index}")
        return Glyph(self, borrow, index)

    def glyph_by_char(self, char: str | int) -> Glyph:
        """Return the glyph mapped to a character.

        Only characters in the Basic Multilingual Plane can be resolved; the
        engine looks glyphs up by a single UTF-16 code unit.

        Args:
            char: One-character string or integer code point

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
            ValueError: If a string of length other than 1 is given
            HandleClosedError: If the font is closed
        """
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError(f"expected a single character, got {char!r}")
            code_point = ord(char)
        else:
            code_point = int(char)

        pointer = self._guard.get()
        if not 0 <= code_point <= _BMP_MAX or 0xD800 <= code_point <= 0xDFFF:
            raise GlyphNotFoundError(f"U+{code_point:04X}")

        index = self._engine.find_glyph(pointer, code_point)
        if index < 0:
            raise GlyphNotFoundError(f"U+{code_point:04X}")
        return self.glyph_by_index(index)

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Yield every glyph in table order."""
        for index in range(self.glyph_count):
            yield self.glyph_by_index(index)

    def export_to_obj(
        self,
        path: str | os.PathLike[str],
        quality: Quality | None = None,
    ) -> None:
        """Write every glyph as a 2D mesh to a Wavefront .obj file.

        Args:
            path: Output .obj path
            quality: Mesh density (default: medium)

        Raises:
            ObjExportError: If the engine fails to mesh or write
            HandleClosedError: If the font is closed
        """
        quality = quality or Quality.medium()
        pointer = self._guard.get()
        status = self._engine.export_to_obj(
            pointer, os.fsencode(os.fspath(path)), quality.to_numeric()
        )
        if not is_success(status):
            raise ObjExportError(os.fspath(path), translate(status))

    def close(self) -> None:
        """Free the font. Glyphs taken from it become stale; meshes do not."""
        self._guard.release()

    def __enter__(self) -> "Font":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"glyphs={self._glyph_count}"
        return f"<Font {self._source!r} {state}>"
