"""Exception hierarchy for ttfmesh."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ttfmesh.domain.status import ErrorReason


class TTFMeshError(Exception):
    """Base exception for all ttfmesh errors."""

    pass


class EngineError(TTFMeshError):
    """Errors related to locating or binding the native engine."""

    pass


class EngineNotFoundError(EngineError):
    """The ttf2mesh shared library could not be loaded."""

    def __init__(self, searched: list[str], details: str | None = None) -> None:
        self.searched = searched
        self.details = details
        message = "ttf2mesh library not found"
        if searched:
            message += f" (searched: {', '.join(searched)})"
        if details:
            message += f": {details}"
        super().__init__(message)


class FontError(TTFMeshError):
    """Errors related to font loading or exporting."""

    pass


class FontFileNotFoundError(FontError):
    """Font path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Font file not found: '{path}'")


class FontLoadError(FontError):
    """The engine refused to parse a font."""

    def __init__(self, source: str, reason: ErrorReason) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load font '{source}': {reason}")


class FontParseError(FontError):
    """fontTools could not read a font's metadata."""

    def __init__(self, source: str, details: str) -> None:
        self.source = source
        self.details = details
        super().__init__(f"Failed to read font metadata from '{source}': {details}")


class ObjExportError(FontError):
    """The engine failed to export a font to .obj."""

    def __init__(self, path: str, reason: ErrorReason) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export '{path}': {reason}")


class GlyphError(TTFMeshError):
    """Errors related to glyph lookup or meshing."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph is not in the font."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Glyph {key} not found in font")


class GlyphMeshError(GlyphError):
    """The engine failed to triangulate a glyph."""

    def __init__(self, glyph_index: int, reason: ErrorReason) -> None:
        self.glyph_index = glyph_index
        self.reason = reason
        super().__init__(f"Could not mesh glyph #{glyph_index}: {reason}")


class MeshIntegrityError(TTFMeshError):
    """A face references a vertex outside the mesh."""

    def __init__(self, face_index: int, vertex_index: int, vertex_count: int) -> None:
        self.face_index = face_index
        self.vertex_index = vertex_index
        self.vertex_count = vertex_count
        super().__init__(
            f"Face {face_index} references vertex {vertex_index} "
            f"but mesh has {vertex_count} vertices"
        )


class QualityParseError(TTFMeshError):
    """Quality text is neither a keyword nor an integer in range."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid quality '{text}'")


class HandleError(TTFMeshError):
    """Errors related to handle lifetimes."""

    pass


class HandleClosedError(HandleError):
    """An owning handle was used after it was closed."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} is closed")


class StaleHandleError(HandleError):
    """A borrowed handle outlived the resource it borrows from."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} was released; borrowed handle is no longer valid")
