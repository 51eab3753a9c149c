"""ttfmesh - Memory-safe Python handles for the ttf2mesh engine.

ttfmesh loads TrueType fonts through the native ttf2mesh library and turns
glyphs into 2D or extruded 3D triangle meshes, with every foreign pointer
owned by exactly one handle and every array read bounds-checked.

Example:
    >>> from ttfmesh import Font, Quality
    >>> with Font.from_path("FiraMono-Medium.ttf") as font:
    ...     mesh = font.glyph_by_char("€").to_3d_mesh(Quality.low(), depth=0.5)
    >>> mesh.vertex_count, mesh.face_count
    (246, 160)
"""

__version__ = "0.1.0"

from ttfmesh.core import Font, Glyph, Mesh, Mesh2D, Mesh3D, MeshFeatures
from ttfmesh.domain import ErrorKind, ErrorReason, Quality, QualityLevel, translate

__all__ = [
    "ErrorKind",
    "ErrorReason",
    "Font",
    "Glyph",
    "Mesh",
    "Mesh2D",
    "Mesh3D",
    "MeshFeatures",
    "Quality",
    "QualityLevel",
    "__version__",
    "translate",
]
