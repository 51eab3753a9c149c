"""Locating and caching the native engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ttfmesh.engine.native import Engine, NativeEngine, find_library_path
from ttfmesh.exceptions import EngineNotFoundError

if TYPE_CHECKING:
    from ttfmesh.config.settings import EngineConfig

_default_engine: Engine | None = None


def load_engine(config: EngineConfig | None = None) -> NativeEngine:
    """Find and bind the ttf2mesh shared library.

    Args:
        config: Engine settings (explicit path and library names)

    Returns:
        Bound NativeEngine

    Raises:
        EngineNotFoundError: If no usable library is found
    """
    if config is None:
        from ttfmesh.config.settings import EngineConfig

        config = EngineConfig()

    path, searched = find_library_path(config.library_path, config.library_names)
    if path is None:
        raise EngineNotFoundError(searched)
    return NativeEngine.open(path)


def get_default_engine() -> Engine:
    """Return the process-wide engine, loading it on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = load_engine()
    return _default_engine


def set_default_engine(engine: Engine | None) -> None:
    """Replace the process-wide engine (None resets to lazy loading)."""
    global _default_engine
    _default_engine = engine
