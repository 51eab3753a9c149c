"""Configuration management for ttfmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- EngineConfig: Native library discovery settings
- MeshConfig: Default quality and extrusion depth
- LoggingConfig: Logging settings
- TTFMeshSettings: Main application settings
"""

from ttfmesh.config.settings import (
    EngineConfig,
    LoggingConfig,
    MeshConfig,
    TTFMeshSettings,
    get_default_settings,
)

__all__ = [
    "EngineConfig",
    "LoggingConfig",
    "MeshConfig",
    "TTFMeshSettings",
    "get_default_settings",
]
