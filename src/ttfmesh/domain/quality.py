"""Mesh quality parameter.

Quality controls how finely curved outline segments are subdivided before
triangulation. The engine takes it as a single ``uint8_t`` and clamps it into
[8, 128] on its side; this module passes the value through unchanged.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import cast

from ttfmesh.engine.constants import (
    TTF_QUALITY_HIGH,
    TTF_QUALITY_LOW,
    TTF_QUALITY_NORMAL,
)
from ttfmesh.exceptions import QualityParseError

_UINT8_MAX = 255
_DECIMAL = re.compile(r"\+?[0-9]+")


class QualityLevel(str, Enum):
    """Named quality levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CUSTOM = "custom"


_PRESETS: dict[QualityLevel, int] = {
    QualityLevel.LOW: TTF_QUALITY_LOW,
    QualityLevel.MEDIUM: TTF_QUALITY_NORMAL,
    QualityLevel.HIGH: TTF_QUALITY_HIGH,
}


@dataclass(frozen=True)
class Quality:
    """Mesh density: Low, Medium, High or Custom(n).

    Use the constructors rather than instantiating directly:

        Quality.low()        # 10
        Quality.medium()     # 20
        Quality.high()       # 50
        Quality.custom(255)  # passed through; engine clamps to 128

    Attributes:
        level: Which preset, or CUSTOM
        value: Raw value for CUSTOM, None for presets
    """

    level: QualityLevel
    value: int | None = None

    def __post_init__(self) -> None:
        if self.level is QualityLevel.CUSTOM:
            if self.value is None:
                raise ValueError("custom quality requires a value")
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(f"custom quality must be an int, got {self.value!r}")
            if not 0 <= self.value <= _UINT8_MAX:
                raise ValueError(
                    f"custom quality must be within 0..{_UINT8_MAX}, got {self.value}"
                )
        elif self.value is not None:
            raise ValueError(f"{self.level.value} quality takes no value")

    @classmethod
    def low(cls) -> "Quality":
        return cls(QualityLevel.LOW)

    @classmethod
    def medium(cls) -> "Quality":
        return cls(QualityLevel.MEDIUM)

    @classmethod
    def high(cls) -> "Quality":
        return cls(QualityLevel.HIGH)

    @classmethod
    def custom(cls, value: int) -> "Quality":
        return cls(QualityLevel.CUSTOM, value)

    @classmethod
    def parse(cls, text: str) -> "Quality":
        """Parse a quality keyword or integer.

        Keywords are case-sensitive. Integers 10, 20 and 50 normalize to the
        matching preset; any other integer in 0..255 becomes Custom.

        Args:
            text: "low", "medium", "high" or a decimal integer, optionally signed with "+"

        Returns:
            Parsed Quality

        Raises:
            QualityParseError: If text is not a keyword or a valid integer
        """
        if _DECIMAL.fullmatch(text):
            number = int(text)
            if number > _UINT8_MAX:
                raise QualityParseError(text)
            for level, preset in _PRESETS.items():
                if number == preset:
                    return cls(level)
            return cls.custom(number)

        try:
            level = QualityLevel(text)
        except ValueError:
            raise QualityParseError(text) from None
        if level is QualityLevel.CUSTOM:
            raise QualityParseError(text)
        return cls(level)

    def to_numeric(self) -> int:
        """Return the value handed to the engine."""
        if self.level is QualityLevel.CUSTOM:
            return cast(int, self.value)
        return _PRESETS[self.level]

    def __str__(self) -> str:
        if self.level is QualityLevel.CUSTOM:
            return f"custom({self.value})"
        return self.level.value
