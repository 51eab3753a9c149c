"""Owning handles for engine-generated meshes.

ttf2mesh allocates 2D and 3D meshes with different layouts and frees them
with different routines (``ttf_free_mesh`` / ``ttf_free_mesh3d``). The two
are kept apart by type: ``Mesh2D`` and ``Mesh3D`` each name their own release
routine as a class attribute, and nothing outside the class picks it.

A mesh owns its buffers independently of the font it came from and stays
usable after that font is closed.
"""

from typing import Any, ClassVar, Generic, TypeVar

from ttfmesh.core.lifetime import ResourceGuard
from ttfmesh.core.views import (
    FACE,
    NORMAL,
    VERTEX_2D,
    VERTEX_3D,
    ElementShape,
    ForeignArrayView,
    Point2,
    Point3,
    Triangle,
)
from ttfmesh.engine.native import Engine
from ttfmesh.exceptions import MeshIntegrityError

V = TypeVar("V", Point2, Point3)


class Mesh(Generic[V]):
    """Common behaviour of 2D and 3D meshes.

    Subclasses set ``dimensions``, the vertex element shape, whether normals
    exist, and the name of the engine routine that frees them.
    """

    dimensions: ClassVar[int]
    has_normals: ClassVar[bool]
    _vertex_shape: ClassVar[ElementShape[Any]]
    _release_routine: ClassVar[str]

    def __init__(self, engine: Engine, pointer: Any) -> None:
        """Take ownership of ``pointer``.

        Only ``Glyph.to_2d_mesh`` / ``Glyph.to_3d_mesh`` construct meshes, and
        only after the engine reported success.

        Args:
            engine: Engine that allocated the mesh
            pointer: Non-NULL ttf_mesh_t* or ttf_mesh3d_t*
        """
        release = getattr(engine, self._release_routine)
        self._guard = ResourceGuard(self, type(self).__name__, pointer, release)
        mesh = pointer.contents
        self._vertex_count = int(mesh.nvert)
        self._face_count = int(mesh.nfaces)

    @property
    def vertex_count(self) -> int:
        self._guard.get()
        return self._vertex_count

    @property
    def face_count(self) -> int:
        self._guard.get()
        return self._face_count

    @property
    def normal_count(self) -> int:
        self._guard.get()
        return self._vertex_count if self.has_normals else 0

    @property
    def closed(self) -> bool:
        return not self._guard.alive

    def iter_vertices(self) -> ForeignArrayView[V]:
        """Return a view of vertex coordinates in the glyph's design space."""
        return ForeignArrayView(
            self, self._guard.borrow(), "vert", self._vertex_count, self._vertex_shape
        )

    def iter_faces(self) -> ForeignArrayView[Triangle]:
        """Return a view of triangles as vertex index triples.

        Winding follows whatever the engine's triangulator produced.
        """
        return ForeignArrayView(self, self._guard.borrow(), "faces", self._face_count, FACE)

    def iter_normals(self) -> ForeignArrayView[Point3] | None:
        """Return a view of per-vertex normals, or None if the mesh has none."""
        self._guard.get()
        return None

    def validate(self) -> None:
        """Check that every face index refers to an existing vertex.

        Raises:
            MeshIntegrityError: On the first out-of-range index
        """
        for face_index, face in enumerate(self.iter_faces()):
            for vertex_index in face:
                if not 0 <= vertex_index < self._vertex_count:
                    raise MeshIntegrityError(face_index, vertex_index, self._vertex_count)

    def close(self) -> None:
        """Free the mesh buffers. Safe to call more than once."""
        self._guard.release()

    def __enter__(self) -> "Mesh[V]":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        if self.closed:
            return f"<{type(self).__name__} closed>"
        return (
            f"<{type(self).__name__} vertices={self._vertex_count} "
            f"faces={self._face_count}>"
        )


class Mesh2D(Mesh[Point2]):
    """Flat triangulated glyph: (x, y) vertices and triangles."""

    dimensions = 2
    has_normals = False
    _vertex_shape = VERTEX_2D
    _release_routine = "free_mesh_2d"


class Mesh3D(Mesh[Point3]):
    """Extruded glyph: (x, y, z) vertices, triangles and one normal per vertex."""

    dimensions = 3
    has_normals = True
    _vertex_shape = VERTEX_3D
    _release_routine = "free_mesh_3d"

    def iter_normals(self) -> ForeignArrayView[Point3]:
        return ForeignArrayView(
            self, self._guard.borrow(), "normals", self._vertex_count, NORMAL
        )
