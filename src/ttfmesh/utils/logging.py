"""Logging utilities for ttfmesh."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from ttfmesh.domain.status import ErrorReason

_FILE_HANDLER = "ttfmesh-file"
_CONSOLE_HANDLER = "ttfmesh-console"
_HANDLER_NAMES = (_FILE_HANDLER, _CONSOLE_HANDLER)


@dataclass
class ConversionStats:
    """Statistics from a per-character conversion run."""

    converted_count: int = 0
    missing_count: int = 0
    error_count: int = 0
    vertices_total: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # reconfiguring replaces our handlers rather than stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("ttfmesh")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking per-character mesh conversion and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def start(self, font_source: str, text: str) -> None:
        """Log start of a run over ``text``."""
        self._stats.start_time = time.time()
        self._logger.info("Conversion started", font=font_source, chars=len(text))

    def finish(self) -> None:
        """Log end of the run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Conversion finished",
            converted=self._stats.converted_count,
            missing=self._stats.missing_count,
            errors=self._stats.error_count,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    def log_converted(self, char: str, glyph_index: int, vertices: int, faces: int) -> None:
        """Log a successful mesh conversion."""
        self._logger.debug(
            "Glyph meshed",
            char=char,
            glyph=glyph_index,
            vertices=vertices,
            faces=faces,
        )
        self._stats.converted_count += 1
        self._stats.vertices_total += vertices

    def log_missing(self, char: str) -> None:
        """Log a character with no glyph in the font."""
        self._logger.warning("Glyph not found", char=char, code_point=f"U+{ord(char):04X}")
        self._stats.missing_count += 1

    def log_mesh_error(self, char: str, glyph_index: int, reason: ErrorReason) -> None:
        """Log an engine meshing failure."""
        self._logger.error(
            "Glyph meshing failed",
            char=char,
            glyph=glyph_index,
            reason=reason.kind.name,
            status=reason.code,
        )
        self._stats.error_count += 1
        self._stats.errors.append((char, str(reason)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
