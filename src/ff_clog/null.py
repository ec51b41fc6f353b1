"""
Backends that write nothing to a stream: a discard sink and a capture
sink for tests.
"""

import threading
from collections.abc import Mapping
from typing import Any

import structlog
from structlog.testing import LogCapture

from .base import Backend, Context, LeveledBackend
from .config import LoggerConfig, coerce_config
from .levels import LOG_DEFAULT_SKIP, Level
from .processors import add_level_text, add_trace_id


class NullBackend(Backend):
    """
    A backend that discards every message.

    Useful to keep a name registered while silencing it, or as the
    placeholder sink in environments with no console.
    """

    def init(self, config: LoggerConfig | Mapping[str, Any] | None) -> None:
        coerce_config(config)

    def reopen(self) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass

    def set_skip(self, skip: int) -> None:
        pass

    def fatal(self, ctx: Context, fmt: str, *args: Any) -> None:
        pass

    def warn(self, ctx: Context, fmt: str, *args: Any) -> None:
        pass

    def info(self, ctx: Context, fmt: str, *args: Any) -> None:
        pass

    def debug(self, ctx: Context, fmt: str, *args: Any) -> None:
        pass

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return "NullBackend()"


class CaptureBackend(LeveledBackend):
    """
    A backend that captures log lines for testing.

    Filters by level and attributes the call site exactly like the
    console backend, but keeps each line as an event dict instead of
    printing it. Useful for verifying that your code logs the right things.
    """

    def __init__(self, skip: int = LOG_DEFAULT_SKIP):
        super().__init__(skip=skip)
        self._capture = LogCapture()
        self._logger = structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[add_trace_id, add_level_text, self._capture],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
        )
        self._state_lock = threading.Lock()
        self.reopen_count = 0
        self.closed = False

    @property
    def entries(self) -> list[dict[str, Any]]:
        """Get captured log entries."""
        with self._state_lock:
            return list(self._capture.entries)

    @property
    def messages(self) -> list[str]:
        return [entry["event"] for entry in self.entries]

    def clear(self) -> None:
        """Clear captured entries."""
        with self._state_lock:
            self._capture.entries.clear()

    def reopen(self) -> None:
        with self._state_lock:
            self.reopen_count += 1

    def close(self) -> None:
        with self._state_lock:
            self.closed = True

    def _emit(self, level: Level, ctx: Context, message: str, **fields: Any) -> None:
        with self._state_lock:
            getattr(self._logger, level.name.lower())(message, ctx=ctx, level=level, **fields)
