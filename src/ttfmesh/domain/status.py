"""Translation of engine status codes into error reasons.

Every call into ttf2mesh that can fail returns an ``int`` status. Zero means
success; anything else is mapped here onto a closed set of kinds. Codes the
engine may add in the future are kept verbatim as ``ErrorKind.UNKNOWN`` so no
diagnostic is lost.
"""

from dataclasses import dataclass
from enum import Enum

from ttfmesh.engine import constants as c


class ErrorKind(str, Enum):
    """Semantic category of an engine failure."""

    NO_MEMORY = "no_memory"
    FILE_TOO_LARGE = "file_too_large"
    OPEN_FAILED = "open_failed"
    UNSUPPORTED_VERSION = "unsupported_version"
    INVALID_FORMAT = "invalid_format"
    MISSING_TABLE = "missing_table"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    UNSUPPORTED_TABLE = "unsupported_table"
    MESHER_FAILURE = "mesher_failure"
    NO_OUTLINE = "no_outline"
    WRITE_FAILURE = "write_failure"
    UNKNOWN = "unknown"


_KIND_BY_CODE: dict[int, ErrorKind] = {
    c.TTF_ERR_NOMEM: ErrorKind.NO_MEMORY,
    c.TTF_ERR_SIZE: ErrorKind.FILE_TOO_LARGE,
    c.TTF_ERR_OPEN: ErrorKind.OPEN_FAILED,
    c.TTF_ERR_VER: ErrorKind.UNSUPPORTED_VERSION,
    c.TTF_ERR_FMT: ErrorKind.INVALID_FORMAT,
    c.TTF_ERR_NO_TAB: ErrorKind.MISSING_TABLE,
    c.TTF_ERR_CSUM: ErrorKind.CHECKSUM_MISMATCH,
    c.TTF_ERR_UTAB: ErrorKind.UNSUPPORTED_TABLE,
    c.TTF_ERR_MESHER: ErrorKind.MESHER_FAILURE,
    c.TTF_ERR_NO_OUTLINE: ErrorKind.NO_OUTLINE,
    c.TTF_ERR_WRITING: ErrorKind.WRITE_FAILURE,
}

# wording follows ttf_error_str[] in ttf2mesh.c
_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NO_MEMORY: "not enough memory",
    ErrorKind.FILE_TOO_LARGE: "file size too large",
    ErrorKind.OPEN_FAILED: "error opening file",
    ErrorKind.UNSUPPORTED_VERSION: "unsupported file version",
    ErrorKind.INVALID_FORMAT: "invalid file structure",
    ErrorKind.MISSING_TABLE: "no required tables in file",
    ErrorKind.CHECKSUM_MISMATCH: "checksum error",
    ErrorKind.UNSUPPORTED_TABLE: "unsupported table format",
    ErrorKind.MESHER_FAILURE: "unable to create mesh",
    ErrorKind.NO_OUTLINE: "glyph has no outline",
    ErrorKind.WRITE_FAILURE: "error writing file",
}


@dataclass(frozen=True)
class ErrorReason:
    """A failed engine status, classified.

    Attributes:
        kind: Semantic error category
        code: Raw status code as returned by the engine
    """

    kind: ErrorKind
    code: int

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        if self.kind is ErrorKind.UNKNOWN:
            return f"unknown engine status {self.code}"
        return _MESSAGES[self.kind]

    def __str__(self) -> str:
        return f"{self.message} ({self.kind.name}, status {self.code})"


def translate(code: int) -> ErrorReason:
    """Map a non-zero engine status onto an ErrorReason.

    Args:
        code: Status returned by a ttf2mesh call

    Returns:
        Classified reason; unrecognised codes become ``ErrorKind.UNKNOWN``

    Raises:
        ValueError: If ``code`` is ``TTF_DONE``, which is not a failure
    """
    code = int(code)
    if code == c.TTF_DONE:
        raise ValueError("status 0 (TTF_DONE) is success, not an error")
    return ErrorReason(kind=_KIND_BY_CODE.get(code, ErrorKind.UNKNOWN), code=code)


def is_success(code: int) -> bool:
    """Return True if ``code`` is the engine's done sentinel."""
    return int(code) == c.TTF_DONE
