"""Binding to the ttf2mesh shared library.

``NativeEngine`` is the only place that calls into foreign code. It fixes
``argtypes``/``restype`` for every entry point so ctypes rejects a pointer of
the wrong struct type (e.g. a 3D mesh handed to ``ttf_free_mesh``) before the
call is made. Each method returns the engine status unchanged; interpreting
it is the handle layer's job.
"""

import ctypes as ct
import ctypes.util
import os
from pathlib import Path
from typing import Any, Protocol

from ttfmesh.engine.structs import (
    TTFFilePtr,
    TTFGlyphPtr,
    TTFMesh3DPtr,
    TTFMeshPtr,
)
from ttfmesh.exceptions import EngineNotFoundError

LIBRARY_ENV_VAR = "TTFMESH_LIBRARY"
DEFAULT_LIBRARY_NAMES = ("ttf2mesh",)

_PROTOTYPES: dict[str, tuple[Any, list[Any]]] = {
    "ttf_load_from_mem": (
        ct.c_int,
        [ct.POINTER(ct.c_uint8), ct.c_int, ct.POINTER(TTFFilePtr), ct.c_bool],
    ),
    "ttf_load_from_file": (
        ct.c_int,
        [ct.c_char_p, ct.POINTER(TTFFilePtr), ct.c_bool],
    ),
    "ttf_free": (None, [TTFFilePtr]),
    "ttf_find_glyph": (ct.c_int, [TTFFilePtr, ct.c_uint16]),
    "ttf_glyph2mesh": (
        ct.c_int,
        [TTFGlyphPtr, ct.POINTER(TTFMeshPtr), ct.c_uint8, ct.c_int],
    ),
    "ttf_glyph2mesh3d": (
        ct.c_int,
        [TTFGlyphPtr, ct.POINTER(TTFMesh3DPtr), ct.c_uint8, ct.c_int, ct.c_float],
    ),
    "ttf_free_mesh": (None, [TTFMeshPtr]),
    "ttf_free_mesh3d": (None, [TTFMesh3DPtr]),
    "ttf_export_to_obj": (ct.c_int, [TTFFilePtr, ct.c_char_p, ct.c_uint8]),
}


class Engine(Protocol):
    """Call surface the handle layer needs from a ttf2mesh implementation.

    Pointers are ctypes pointer instances; ``None`` stands for NULL.
    """

    def load_from_mem(self, data: ct.Array) -> tuple[Any, int]: ...

    def load_from_file(self, path: bytes, headers_only: bool = False) -> tuple[Any, int]: ...

    def free(self, font: Any) -> None: ...

    def find_glyph(self, font: Any, code_unit: int) -> int: ...

    def glyph_to_mesh_2d(self, glyph: Any, quality: int, features: int) -> tuple[Any, int]: ...

    def glyph_to_mesh_3d(
        self, glyph: Any, quality: int, features: int, depth: float
    ) -> tuple[Any, int]: ...

    def free_mesh_2d(self, mesh: Any) -> None: ...

    def free_mesh_3d(self, mesh: Any) -> None: ...

    def export_to_obj(self, font: Any, path: bytes, quality: int) -> int: ...


class NativeEngine:
    """ttf2mesh loaded through ctypes.

    Example:
        engine = NativeEngine.open("/usr/local/lib/libttf2mesh.so")
        font_ptr, status = engine.load_from_file(b"font.ttf")
    """

    def __init__(self, lib: ct.CDLL, path: str) -> None:
        self._lib = lib
        self.path = path
        for name, (restype, argtypes) in _PROTOTYPES.items():
            func = getattr(lib, name)
            func.restype = restype
            func.argtypes = argtypes

    @classmethod
    def open(cls, path: str) -> "NativeEngine":
        """Load the shared library at ``path`` and bind its entry points.

        Raises:
            EngineNotFoundError: If the library cannot be loaded or lacks a symbol
        """
        try:
            lib = ct.CDLL(path)
            return cls(lib, path)
        except (OSError, AttributeError) as e:
            raise EngineNotFoundError([path], details=str(e)) from e

    def load_from_mem(self, data: ct.Array) -> tuple[Any, int]:
        output = TTFFilePtr()
        status = self._lib.ttf_load_from_mem(data, len(data), ct.byref(output), False)
        return (output if output else None), status

    def load_from_file(self, path: bytes, headers_only: bool = False) -> tuple[Any, int]:
        output = TTFFilePtr()
        status = self._lib.ttf_load_from_file(path, ct.byref(output), headers_only)
        return (output if output else None), status

    def free(self, font: Any) -> None:
        self._lib.ttf_free(font)

    def find_glyph(self, font: Any, code_unit: int) -> int:
        return self._lib.ttf_find_glyph(font, code_unit)

    def glyph_to_mesh_2d(self, glyph: Any, quality: int, features: int) -> tuple[Any, int]:
        output = TTFMeshPtr()
        status = self._lib.ttf_glyph2mesh(glyph, ct.byref(output), quality, features)
        return (output if output else None), status

    def glyph_to_mesh_3d(
        self, glyph: Any, quality: int, features: int, depth: float
    ) -> tuple[Any, int]:
        output = TTFMesh3DPtr()
        status = self._lib.ttf_glyph2mesh3d(glyph, ct.byref(output), quality, features, depth)
        return (output if output else None), status

    def free_mesh_2d(self, mesh: Any) -> None:
        self._lib.ttf_free_mesh(mesh)

    def free_mesh_3d(self, mesh: Any) -> None:
        self._lib.ttf_free_mesh3d(mesh)

    def export_to_obj(self, font: Any, path: bytes, quality: int) -> int:
        return self._lib.ttf_export_to_obj(font, path, quality)

    def __repr__(self) -> str:
        return f"NativeEngine({self.path!r})"


def find_library_path(
    library_path: Path | None = None,
    library_names: tuple[str, ...] | list[str] = DEFAULT_LIBRARY_NAMES,
) -> tuple[str | None, list[str]]:
    """Resolve the ttf2mesh shared library location.

    Lookup order: explicit path, ``$TTFMESH_LIBRARY``, then
    ``ctypes.util.find_library`` for each name.

    Returns:
        (resolved path or None, list of locations tried)
    """
    searched: list[str] = []

    if library_path is not None:
        searched.append(str(library_path))
        return str(library_path), searched

    env_path = os.environ.get(LIBRARY_ENV_VAR)
    if env_path:
        searched.append(f"${LIBRARY_ENV_VAR}={env_path}")
        if Path(env_path).exists():
            return env_path, searched

    for name in library_names:
        searched.append(f"find_library({name!r})")
        found = ctypes.util.find_library(name)
        if found:
            return found, searched

    return None, searched
