"""Value types for ttfmesh.

This module contains the plain value types that sit below the handle layer.
None of them touch foreign memory:

- Quality: mesh density parameter with parsing and numeric conversion
- ErrorKind / ErrorReason: classified engine failure
- translate: maps an engine status code onto an ErrorReason
"""

from ttfmesh.domain.quality import Quality, QualityLevel
from ttfmesh.domain.status import ErrorKind, ErrorReason, is_success, translate

__all__: list[str] = [
    # Enums
    "ErrorKind",
    "QualityLevel",
    # Value types
    "ErrorReason",
    "Quality",
    # Functions
    "is_success",
    "translate",
]
