"""Native engine boundary for ttfmesh.

This package is the only code that knows the ttf2mesh ABI:

- constants: status codes, feature flags and quality presets from ttf2mesh.h
- structs: ctypes mirrors of ttf_t, ttf_glyph_t, ttf_mesh_t and ttf_mesh3d_t
- native: NativeEngine, the ctypes binding with fixed prototypes
- loader: library discovery and the process-wide default engine

Key classes:
- Engine: Protocol describing the call surface handles rely on
- NativeEngine: ctypes implementation of Engine
"""

from ttfmesh.engine.loader import get_default_engine, load_engine, set_default_engine
from ttfmesh.engine.native import Engine, NativeEngine, find_library_path

__all__ = [
    "Engine",
    "NativeEngine",
    "find_library_path",
    "get_default_engine",
    "load_engine",
    "set_default_engine",
]
