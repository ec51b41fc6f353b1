"""
Backend contract shared by every ff-clog sink.
"""

import logging
import socket
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .config import LoggerConfig, coerce_config
from .exceptions import HostResolutionError
from .levels import LOG_DEFAULT_SKIP, Level, level_from_str
from .utils import format_message, get_runtime_info

logger = logging.getLogger(__name__)

Context = Mapping[str, Any] | None


class Backend(ABC):
    """
    The capability set every logger backend implements.

    New sinks are added by subclassing this and registering an instance
    with the registry; the registry never needs to know the concrete type.
    """

    @abstractmethod
    def init(self, config: LoggerConfig | Mapping[str, Any] | None) -> None:
        """
        Apply a configuration. May be called again to re-initialize.

        Raises:
            InvalidConfigError: If config is None
            HostResolutionError: If the host name cannot be resolved
        """

    @abstractmethod
    def reopen(self) -> None:
        """Reopen the underlying sink. Raises on failure."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold; unknown names fall back to info."""

    @abstractmethod
    def set_skip(self, skip: int) -> None:
        """Change the caller frame depth; ignored unless skip > 0."""

    @abstractmethod
    def fatal(self, ctx: Context, fmt: str, *args: Any) -> None:
        """Log at FATAL. Does not exit the process."""

    @abstractmethod
    def warn(self, ctx: Context, fmt: str, *args: Any) -> None:
        """Log at WARN."""

    @abstractmethod
    def info(self, ctx: Context, fmt: str, *args: Any) -> None:
        """Log at INFO."""

    @abstractmethod
    def debug(self, ctx: Context, fmt: str, *args: Any) -> None:
        """Log at DEBUG."""

    @abstractmethod
    def close(self) -> None:
        """Release sink resources. Safe to call more than once."""


class LeveledBackend(Backend):
    """
    Base for backends that filter by level and attribute the call site.

    Holds the level, skip depth, service name and host name behind a
    private lock so set_level can race with emits from other threads.
    Subclasses implement ``_emit`` to write one already-filtered record.
    """

    def __init__(self, skip: int = LOG_DEFAULT_SKIP):
        self._lock = threading.Lock()
        self._level = Level.DEBUG
        self._skip = skip
        self._service = ""
        self._hostname = ""

    def init(self, config: LoggerConfig | Mapping[str, Any] | None) -> None:
        config = coerce_config(config)
        hostname = self._resolve_hostname()

        with self._lock:
            self._level = level_from_str(config.level)
            self._service = config.service
            if config.skip > 0:
                self._skip = config.skip
            self._hostname = hostname

    def reopen(self) -> None:
        return None

    def set_level(self, level: str) -> None:
        resolved = level_from_str(level)
        with self._lock:
            self._level = resolved

    def set_skip(self, skip: int) -> None:
        if skip <= 0:
            return
        with self._lock:
            self._skip = skip

    def close(self) -> None:
        return None

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @property
    def skip(self) -> int:
        with self._lock:
            return self._skip

    @property
    def hostname(self) -> str:
        with self._lock:
            return self._hostname

    @property
    def service(self) -> str:
        with self._lock:
            return self._service

    def enabled_for(self, level: Level) -> bool:
        """True if a call at level would be written."""
        with self._lock:
            threshold = self._level
        return threshold != Level.NONE and level >= threshold

    def fatal(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._log(Level.FATAL, ctx, fmt, args)

    def warn(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._log(Level.WARN, ctx, fmt, args)

    def info(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._log(Level.INFO, ctx, fmt, args)

    def debug(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._log(Level.DEBUG, ctx, fmt, args)

    def _log(self, level: Level, ctx: Context, fmt: str, args: tuple) -> None:
        # Frame 0 is get_runtime_info, 1 is _log and 2 the level method,
        # so the skip depth counts from here.
        with self._lock:
            threshold = self._level
            skip = self._skip
            service = self._service
            hostname = self._hostname

        if threshold == Level.NONE or level < threshold:
            return

        try:
            message = format_message(fmt, args)
            function, filename, lineno = get_runtime_info(skip)
            self._emit(
                level,
                ctx,
                message,
                func_name=function,
                filename=filename,
                lineno=lineno,
                service=service,
                hostname=hostname,
            )
        except Exception:
            # A failed write is dropped; logging never breaks the caller.
            logger.debug("dropped %s log line from %r", level.text, self, exc_info=True)

    @abstractmethod
    def _emit(self, level: Level, ctx: Context, message: str, **fields: Any) -> None:
        """Write one record that passed the level filter."""

    @staticmethod
    def _resolve_hostname() -> str:
        try:
            return socket.gethostname()
        except OSError as e:
            raise HostResolutionError(f"init logger failed, cannot resolve hostname: {e}") from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(level={self.level.text}, service={self.service!r})"
