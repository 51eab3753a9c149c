"""Utility functions for ttfmesh.

This module provides logging setup and per-run conversion statistics.
"""

from ttfmesh.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
