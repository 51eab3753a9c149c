"""Shared fixtures: an in-process stand-in for the ttf2mesh library.

FakeEngine implements the Engine call surface on top of real ctypes memory,
so the handle layer reads structs and arrays exactly as it would from the
native library. Every allocation is kept reachable for the whole test, which
means a use-after-release bug shows up as a wrong answer or a recorded
double free, never as a crash.
"""

import ctypes as ct
from pathlib import Path
from typing import Any

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from ttfmesh.core import Font
from ttfmesh.engine import constants as c
from ttfmesh.engine import set_default_engine
from ttfmesh.engine.structs import (
    Face,
    Normal,
    TTFFile,
    TTFFilePtr,
    TTFGlyph,
    TTFMesh,
    TTFMesh3D,
    TTFMesh3DPtr,
    TTFMeshPtr,
    Vertex2D,
    Vertex3D,
)

TRUETYPE_HEADER = b"\x00\x01\x00\x00"

# (character, contour count); index 0 is .notdef
FAKE_GLYPHS: list[tuple[str | None, int]] = [
    (None, 1),
    ("A", 2),
    ("B", 3),
    (" ", 0),
    ("€", 1),
]


def fake_vertex_count(contours: int, quality: int) -> int:
    """Vertex count of a FakeEngine 2D mesh."""
    return contours * 2 + min(max(quality, c.TTF_QUALITY_MIN), c.TTF_QUALITY_MAX) // 4


class FakeEngine:
    """Deterministic Engine over ctypes-allocated structs.

    2D meshes are triangle fans over ``fake_vertex_count`` vertices. 3D meshes
    have a front and a back fan with +z / -z normals.
    """

    def __init__(self) -> None:
        self._storage: dict[int, tuple[Any, ...]] = {}
        self.live: set[int] = set()
        self.released: list[tuple[str, str, int]] = []
        self.loaded_buffers: list[ct.Array] = []
        self.mesh_calls: list[dict[str, Any]] = []
        self.corrupt_faces = False

    # Font loading

    def _new_font(self) -> Any:
        outline = ct.c_int(1)
        glyphs = (TTFGlyph * len(FAKE_GLYPHS))()
        for i, (char, contours) in enumerate(FAKE_GLYPHS):
            record = glyphs[i]
            record.index = i
            record.symbol = ord(char) if char else 0
            record.npoints = contours * 4
            record.ncontours = contours
            record.composite = 1 if char == "B" else 0
            record.xbounds[0], record.xbounds[1] = 0.05, 0.55
            record.ybounds[0], record.ybounds[1] = -0.01, 0.7
            record.advance = 0.6
            record.lbearing = 0.05
            record.rbearing = 0.05
            record.outline = ct.addressof(outline) if contours else None

        font = TTFFile()
        font.nchars = len(FAKE_GLYPHS) - 1
        font.nglyphs = len(FAKE_GLYPHS)
        font.glyphs = ct.cast(glyphs, ct.POINTER(TTFGlyph))
        address = ct.addressof(font)
        self._storage[address] = (font, glyphs, outline)
        self.live.add(address)
        return ct.pointer(font)

    def load_from_mem(self, data: ct.Array) -> tuple[Any, int]:
        self.loaded_buffers.append(data)
        if bytes(data[:4]) != TRUETYPE_HEADER:
            return None, c.TTF_ERR_FMT
        return self._new_font(), c.TTF_DONE

    def load_from_file(self, path: bytes, headers_only: bool = False) -> tuple[Any, int]:
        try:
            with open(path, "rb") as f:
                header = f.read(4)
        except OSError:
            return None, c.TTF_ERR_OPEN
        if header != TRUETYPE_HEADER:
            return None, c.TTF_ERR_FMT
        return self._new_font(), c.TTF_DONE

    def free(self, font: Any) -> None:
        self._release("free", font, TTFFilePtr)

    def find_glyph(self, font: Any, code_unit: int) -> int:
        assert ct.addressof(font.contents) in self.live, "find_glyph on a freed font"
        for i, (char, _) in enumerate(FAKE_GLYPHS):
            if char is not None and ord(char) == code_unit:
                return i
        return -1

    # Meshing

    def glyph_to_mesh_2d(self, glyph: Any, quality: int, features: int) -> tuple[Any, int]:
        record = glyph.contents
        self.mesh_calls.append({"dims": 2, "index": record.index, "quality": quality,
                                "features": features})
        if record.ncontours == 0:
            return None, c.TTF_ERR_NO_OUTLINE

        n = fake_vertex_count(record.ncontours, quality)
        vert = (Vertex2D * n)(*[(float(i), i * 0.5) for i in range(n)])
        faces = (Face * (n - 2))(*[(0, i, i + 1) for i in range(1, n - 1)])
        if self.corrupt_faces:
            faces[n - 3].v3 = n

        mesh = TTFMesh(n, n - 2, ct.cast(vert, ct.POINTER(Vertex2D)),
                       ct.cast(faces, ct.POINTER(Face)), None)
        return self._keep(mesh, vert, faces), c.TTF_DONE

    def glyph_to_mesh_3d(
        self, glyph: Any, quality: int, features: int, depth: float
    ) -> tuple[Any, int]:
        record = glyph.contents
        self.mesh_calls.append({"dims": 3, "index": record.index, "quality": quality,
                                "features": features, "depth": depth})
        if record.ncontours == 0:
            return None, c.TTF_ERR_NO_OUTLINE

        n = fake_vertex_count(record.ncontours, quality)
        points = [(float(i), i * 0.5, 0.0) for i in range(n)]
        points += [(float(i), i * 0.5, -depth) for i in range(n)]
        triangles = [(0, i, i + 1) for i in range(1, n - 1)]
        triangles += [(n, n + i + 1, n + i) for i in range(1, n - 1)]
        vert = (Vertex3D * (2 * n))(*points)
        faces = (Face * len(triangles))(*triangles)
        normals = (Normal * (2 * n))(*([(0.0, 0.0, 1.0)] * n + [(0.0, 0.0, -1.0)] * n))

        mesh = TTFMesh3D(2 * n, len(triangles), ct.cast(vert, ct.POINTER(Vertex3D)),
                         ct.cast(faces, ct.POINTER(Face)), ct.cast(normals, ct.POINTER(Normal)))
        return self._keep(mesh, vert, faces, normals), c.TTF_DONE

    def free_mesh_2d(self, mesh: Any) -> None:
        self._release("free_mesh_2d", mesh, TTFMeshPtr)

    def free_mesh_3d(self, mesh: Any) -> None:
        self._release("free_mesh_3d", mesh, TTFMesh3DPtr)

    def export_to_obj(self, font: Any, path: bytes, quality: int) -> int:
        assert ct.addressof(font.contents) in self.live, "export on a freed font"
        try:
            with open(path, "w", encoding="ascii") as f:
                f.write(f"# fake export, quality {quality}\n")
                for i in range(font.contents.nglyphs):
                    f.write(f"o glyph{i}\n")
        except OSError:
            return c.TTF_ERR_WRITING
        return c.TTF_DONE

    # Bookkeeping

    def _keep(self, mesh: Any, *arrays: Any) -> Any:
        address = ct.addressof(mesh)
        self._storage[address] = (mesh, *arrays)
        self.live.add(address)
        return ct.pointer(mesh)

    def _release(self, routine: str, pointer: Any, expected: type) -> None:
        address = ct.addressof(pointer.contents)
        self.released.append((routine, type(pointer.contents).__name__, address))
        if not isinstance(pointer, expected):
            raise TypeError(f"{routine} got {type(pointer).__name__}")
        self.live.discard(address)

    def release_count(self, routine: str) -> int:
        return sum(1 for name, _, _ in self.released if name == routine)


def build_test_font(path: Path, family: str = "Mesh Test") -> Path:
    """Write a minimal TrueType font with glyphs for 'A' and 'B'."""
    glyph_order = [".notdef", "A", "B"]

    def square(size: int) -> Any:
        pen = TTGlyphPen(None)
        pen.moveTo((0, 0))
        pen.lineTo((0, size))
        pen.lineTo((size, size))
        pen.lineTo((size, 0))
        pen.closePath()
        return pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("B"): "B"})
    fb.setupGlyf({name: square(500) for name in glyph_order})
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def make_font_file(tmp_path: Path):
    def _make(name: str = "Other-Regular.ttf", family: str = "Mesh Test") -> Path:
        return build_test_font(tmp_path / name, family=family)

    return _make


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    return build_test_font(tmp_path / "MeshTest-Regular.ttf")


@pytest.fixture
def font(engine: FakeEngine, font_file: Path):
    loaded = Font.from_path(font_file, engine=engine)
    yield loaded
    loaded.close()


@pytest.fixture(autouse=True)
def _reset_default_engine():
    yield
    set_default_engine(None)
