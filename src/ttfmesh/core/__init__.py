"""Resource-safe handles over the ttf2mesh engine.

This module contains the handle layer:

- Font owns a loaded ttf_t and hands out Glyph borrows
- Glyph points into the font's glyph table and produces meshes
- Mesh2D / Mesh3D own engine-allocated meshes, each freed by its own routine
- ForeignArrayView reads mesh arrays in place, bounds-checked and borrow-checked

Ownership rules:
- Each owning handle releases its resource exactly once (close(), with-block exit,
  or garbage collection)
- Borrowed objects keep their owner alive and raise StaleHandleError once the
  owner is closed explicitly
- Meshes do not depend on the font they were made from

Key classes:
- Font: Loaded font
- Glyph: Glyph borrowed from a Font
- Mesh2D, Mesh3D: Owned meshes
- ForeignArrayView: Zero-copy typed sequence over a mesh array
- ResourceGuard, Borrow: Lifetime tracking primitives
"""

from ttfmesh.core.font import Font
from ttfmesh.core.glyph import Glyph, MeshFeatures
from ttfmesh.core.lifetime import Borrow, ResourceGuard
from ttfmesh.core.mesh import Mesh, Mesh2D, Mesh3D
from ttfmesh.core.views import (
    FACE,
    NORMAL,
    VERTEX_2D,
    VERTEX_3D,
    ElementShape,
    ForeignArrayView,
)

__all__ = [
    # Element shapes
    "FACE",
    "NORMAL",
    "VERTEX_2D",
    "VERTEX_3D",
    # Lifetime
    "Borrow",
    "ElementShape",
    # Handles
    "Font",
    "ForeignArrayView",
    "Glyph",
    "Mesh",
    "Mesh2D",
    "Mesh3D",
    "MeshFeatures",
    "ResourceGuard",
]
