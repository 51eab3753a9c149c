"""Borrowed handle to one glyph record of a loaded font."""

from __future__ import annotations

import ctypes as ct
from enum import IntFlag
from typing import TYPE_CHECKING, Any

from ttfmesh.core.lifetime import Borrow
from ttfmesh.core.mesh import Mesh2D, Mesh3D
from ttfmesh.domain.quality import Quality
from ttfmesh.domain.status import is_success, translate
from ttfmesh.engine.constants import TTF_FEATURE_IGN_ERR, TTF_FEATURES_DFLT
from ttfmesh.exceptions import GlyphMeshError

if TYPE_CHECKING:
    from ttfmesh.core.font import Font

DEFAULT_DEPTH = 0.5


class MeshFeatures(IntFlag):
    """Feature flags passed to the engine's meshing routines."""

    DEFAULT = TTF_FEATURES_DFLT
    IGNORE_ERRORS = TTF_FEATURE_IGN_ERR


class Glyph:
    """A glyph of a Font, convertible to 2D or 3D meshes.

    A Glyph does not own memory: it points into the font's glyph table. It
    keeps the Font alive while referenced, and raises ``StaleHandleError``
    if the Font is closed explicitly.

    Example:
        with Font.from_path("FiraMono-Medium.ttf") as font:
            glyph = font.glyph_by_char("€")
            mesh = glyph.to_3d_mesh(Quality.low(), depth=0.5)
        # mesh is still usable here
    """

    __slots__ = ("_font", "_borrow", "_index")

    def __init__(self, font: Font, borrow: Borrow, index: int) -> None:
        self._font = font
        self._borrow = borrow
        self._index = index

    def _record(self) -> Any:
        return self._borrow.get().contents.glyphs[self._index]

    def _pointer(self) -> Any:
        return ct.pointer(self._record())

    @property
    def font(self) -> Font:
        return self._font

    @property
    def index(self) -> int:
        """Position of this glyph in the font's glyph table."""
        return self._index

    @property
    def symbol(self) -> int:
        """UTF-16 code unit the engine associates with the glyph (0 if none)."""
        return int(self._record().symbol)

    @property
    def point_count(self) -> int:
        return int(self._record().npoints)

    @property
    def contour_count(self) -> int:
        return int(self._record().ncontours)

    @property
    def is_composite(self) -> bool:
        return bool(self._record().composite)

    @property
    def has_outline(self) -> bool:
        """Whether the glyph has contours to triangulate (False for space)."""
        record = self._record()
        return bool(record.outline) and record.ncontours > 0

    @property
    def advance(self) -> float:
        return float(self._record().advance)

    @property
    def left_bearing(self) -> float:
        return float(self._record().lbearing)

    @property
    def right_bearing(self) -> float:
        return float(self._record().rbearing)

    @property
    def x_bounds(self) -> tuple[float, float]:
        bounds = self._record().xbounds
        return float(bounds[0]), float(bounds[1])

    @property
    def y_bounds(self) -> tuple[float, float]:
        bounds = self._record().ybounds
        return float(bounds[0]), float(bounds[1])

    def to_2d_mesh(
        self,
        quality: Quality | None = None,
        features: MeshFeatures = MeshFeatures.DEFAULT,
    ) -> Mesh2D:
        """Triangulate the glyph outline.

        Args:
            quality: Mesh density (default: medium)
            features: Engine feature flags

        Returns:
            Owning 2D mesh handle

        Raises:
            GlyphMeshError: If the engine cannot mesh the glyph
            StaleHandleError: If the font has been closed
        """
        quality = quality or Quality.medium()
        engine = self._font.engine
        mesh, status = engine.glyph_to_mesh_2d(
            self._pointer(), quality.to_numeric(), int(features)
        )
        if not is_success(status):
            raise GlyphMeshError(self._index, translate(status))
        return Mesh2D(engine, mesh)

    def to_3d_mesh(
        self,
        quality: Quality | None = None,
        depth: float = DEFAULT_DEPTH,
        features: MeshFeatures = MeshFeatures.DEFAULT,
    ) -> Mesh3D:
        """Triangulate and extrude the glyph outline.

        Args:
            quality: Mesh density (default: medium)
            depth: Extrusion depth in the glyph's normalized units
            features: Engine feature flags

        Returns:
            Owning 3D mesh handle

        Raises:
            GlyphMeshError: If the engine cannot mesh the glyph
            StaleHandleError: If the font has been closed
        """
        quality = quality or Quality.medium()
        engine = self._font.engine
        mesh, status = engine.glyph_to_mesh_3d(
            self._pointer(), quality.to_numeric(), int(features), float(depth)
        )
        if not is_success(status):
            raise GlyphMeshError(self._index, translate(status))
        return Mesh3D(engine, mesh)

    def __repr__(self) -> str:
        if not self._borrow.valid:
            return f"<Glyph #{self._index} stale>"
        return f"<Glyph #{self._index} symbol={self.symbol:#06x}>"
