"""Configuration settings for ttfmesh."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ttfmesh.domain.quality import Quality
from ttfmesh.engine.native import DEFAULT_LIBRARY_NAMES
from ttfmesh.exceptions import QualityParseError


class EngineConfig(BaseModel):
    """Where to find the native ttf2mesh library."""

    library_path: Path | None = Field(
        default=None,
        description="Explicit path to libttf2mesh (overrides $TTFMESH_LIBRARY and system lookup)",
    )
    library_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LIBRARY_NAMES),
        min_length=1,
        description="Library names tried with ctypes.util.find_library",
    )


class MeshConfig(BaseModel):
    """Default mesh generation parameters."""

    quality: str = Field(
        default="medium",
        description="Mesh quality: low, medium, high or an integer 0-255",
    )
    depth: float = Field(
        default=0.5,
        gt=0.0,
        description="Extrusion depth for 3D meshes",
    )

    @field_validator("quality")
    @classmethod
    def _check_quality(cls, value: str) -> str:
        try:
            Quality.parse(value)
        except QualityParseError as e:
            raise ValueError(str(e)) from e
        return value

    def get_quality(self) -> Quality:
        """Return the configured quality as a Quality value."""
        return Quality.parse(self.quality)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TTFMeshSettings(BaseModel):
    """Main application settings."""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    mesh: MeshConfig = Field(default_factory=MeshConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TTFMeshSettings:
    """Get default application settings."""
    return TTFMeshSettings()
