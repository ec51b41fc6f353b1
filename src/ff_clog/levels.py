"""
Severity levels and the constants shared by every backend.
"""

from enum import IntEnum

TRACE_ID = "traceId"
LOG_DEFAULT_SKIP = 5

CONSOLE = "console"

SOURCE_AUTO = "auto"

LEVEL_DEBUG = "debug"
LEVEL_INFO = "info"
LEVEL_WARN = "warn"
LEVEL_FATAL = "fatal"
LEVEL_NONE = "none"


class Level(IntEnum):
    """
    Ordered severity levels.

    A backend configured at ``NONE`` emits nothing.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    FATAL = 3
    NONE = 4

    @property
    def text(self) -> str:
        """Upper-case label printed in log lines."""
        return self.name


_LEVELS_BY_NAME = {
    LEVEL_DEBUG: Level.DEBUG,
    LEVEL_INFO: Level.INFO,
    LEVEL_WARN: Level.WARN,
    LEVEL_FATAL: Level.FATAL,
    LEVEL_NONE: Level.NONE,
}


def level_from_str(level: "str | Level") -> Level:
    """
    Resolve a level name case-insensitively.

    Unknown names fall back to ``Level.INFO``; this never raises.

    Args:
        level: Level name such as "debug" or "WARN", or a Level

    Returns:
        The matching Level
    """
    if isinstance(level, Level):
        return level
    if not isinstance(level, str):
        return Level.INFO
    return _LEVELS_BY_NAME.get(level.lower(), Level.INFO)
