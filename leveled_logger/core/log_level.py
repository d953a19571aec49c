"""
Log level enumeration

Levels ascend from most severe to most verbose, so a logger configured
at DEBUG lets every recognized level through.
"""

from enum import IntEnum
from typing import Dict, Tuple

from leveled_logger.core import color as _color


class LogLevel(IntEnum):
    """
    Log level enumeration.

    UNRECOGNIZED is the parse result for unknown names. An entry at
    UNRECOGNIZED falls back to its logger's configured level.
    """

    UNRECOGNIZED = 0
    PANIC = 1
    FATAL = 2
    ERROR = 3
    WARN = 4
    INFO = 5
    DEBUG = 6

    @classmethod
    def _missing_(cls, value):
        # Unknown integers are unrecognized levels, not errors
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.UNRECOGNIZED
        return None

    def __str__(self) -> str:
        """Lowercase level name."""
        return LEVEL_NAMES.get(self, "unrecognized")

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value, UNRECOGNIZED for unknown names
        """
        return LEVEL_FROM_NAME.get(str(level_str).lower(), cls.UNRECOGNIZED)

    def color(self) -> _color.Renderer:
        """
        Get the color renderer for this level.

        Returns:
            Renderer called as ``fn(stream, *args)``
        """
        return _LEVEL_COLORS.get(self, _color.white)


LEVELS: Tuple[LogLevel, ...] = (
    LogLevel.PANIC,
    LogLevel.FATAL,
    LogLevel.ERROR,
    LogLevel.WARN,
    LogLevel.INFO,
    LogLevel.DEBUG,
)

# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.PANIC: "panic",
    LogLevel.FATAL: "fatal",
    LogLevel.ERROR: "error",
    LogLevel.WARN: "warn",
    LogLevel.INFO: "info",
    LogLevel.DEBUG: "debug",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

_LEVEL_COLORS = {
    LogLevel.PANIC: _color.red,
    LogLevel.FATAL: _color.magenta,
    LogLevel.ERROR: _color.cyan,
    LogLevel.WARN: _color.yellow,
    LogLevel.INFO: _color.green,
    LogLevel.DEBUG: _color.blue,
}
