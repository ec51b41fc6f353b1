"""
Registry of named backends and fan-out of log calls.

Every registered backend lives in a ``LogInstance`` that tracks whether
it has been initialized and whether it currently receives log calls.
Log verbs take a shared lock and forward to each enabled backend; every
structural change takes the exclusive lock.
"""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .base import Backend, Context
from .config import LoggerConfig
from .exceptions import (
    DuplicateLoggerError,
    InvalidConfigError,
    LoggerNotFoundError,
    ReopenError,
)
from .levels import SOURCE_AUTO
from .utils import ReadWriteLock

logger = logging.getLogger(__name__)


@dataclass
class LogInstance:
    """Registry entry for one backend."""

    backend: Backend
    enabled: bool = False
    initialized: bool = False
    source: str = ""

    @property
    def active(self) -> bool:
        return self.backend is not None and self.enabled


@dataclass
class ReopenResult:
    """
    Outcome of ``Registry.reopen``.

    ``str(result)`` is the combined failure report, one line per backend,
    and is the empty string when every backend reopened.
    """

    failures: list[tuple[str, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def message(self) -> str:
        return "".join(f"logger: {name} reload failed, err:{err} \n" for name, err in self.failures)

    def raise_for_failures(self) -> None:
        """
        Raises:
            ReopenError: If any backend failed to reopen
        """
        if self.failures:
            raise ReopenError(self.failures)

    def __str__(self) -> str:
        return self.message


class Registry:
    """
    Process-lifetime table of named logger backends.

    Example:
        registry = Registry()
        registry.register_logger("console", ConsoleBackend())
        registry.init_logger("console", LoggerConfig(level="info", service="api"))
        registry.info(ctx, "listening on %s", port)
    """

    def __init__(self):
        self._instances: dict[str, LogInstance] = {}
        self._lock = ReadWriteLock()

    def register_logger(self, name: str, backend: Backend) -> None:
        """
        Add a backend under name, disabled and uninitialized.

        Raises:
            DuplicateLoggerError: If name is already registered
        """
        if backend is None:
            raise TypeError(f"cannot register logger {name}: backend is None")

        with self._lock.write_locked():
            if name in self._instances:
                raise DuplicateLoggerError(name)
            self._instances[name] = LogInstance(backend=backend)

        logger.debug("registered logger %s: %r", name, backend)

    def init_logger(
        self,
        name: str,
        config: LoggerConfig | Mapping[str, Any] | None,
        source: str = "",
    ) -> None:
        """
        Initialize and enable a backend.

        The first explicit initialization silences the auto-registered
        console logger: every other enabled entry whose source is "auto"
        is disabled.

        Args:
            name: Registered backend name
            config: Settings passed to the backend
            source: Free-text tag recorded on the entry; "auto" is reserved

        Raises:
            LoggerNotFoundError: If name is not registered
            InvalidConfigError: If config is None or source is "auto"
            HostResolutionError: If the backend cannot resolve the host name
        """
        if source == SOURCE_AUTO:
            raise InvalidConfigError(
                f'init logger {name} failed, source "{SOURCE_AUTO}" is reserved'
            )

        with self._lock.write_locked():
            self._init_locked(name, config, source)

            for other, instance in self._instances.items():
                if other == name or not instance.active:
                    continue
                if instance.source == SOURCE_AUTO:
                    instance.enabled = False
                    logger.debug("disabled auto logger %s", other)

    def _init_logger(
        self, name: str, config: LoggerConfig | Mapping[str, Any] | None, source: str
    ) -> None:
        """Initialize with an explicit source tag and without silencing auto loggers."""
        with self._lock.write_locked():
            self._init_locked(name, config, source)

    def _init_locked(
        self, name: str, config: LoggerConfig | Mapping[str, Any] | None, source: str
    ) -> None:
        instance = self._get_locked(name)
        instance.backend.init(config)

        instance.source = source or ""
        instance.enabled = True
        instance.initialized = True
        logger.debug("initialized logger %s (source=%r)", name, instance.source)

    def enable_logger(self, name: str, enable: bool) -> None:
        """
        Turn fan-out to a backend on or off.

        A backend that was never initialized stays disabled.

        Raises:
            LoggerNotFoundError: If name is not registered
        """
        with self._lock.write_locked():
            instance = self._get_locked(name)
            if not instance.initialized:
                instance.enabled = False
                return
            instance.enabled = bool(enable)

    def get_logger(self, name: str) -> Backend:
        """
        Raises:
            LoggerNotFoundError: If name is not registered
        """
        with self._lock.read_locked():
            return self._get_locked(name).backend

    def get_instance(self, name: str) -> LogInstance:
        """Return a snapshot of the entry for name."""
        with self._lock.read_locked():
            return dataclasses.replace(self._get_locked(name))

    def list_loggers(self) -> list[str]:
        with self._lock.read_locked():
            return list(self._instances)

    def unregister_logger(self, name: str) -> None:
        """
        Close a backend and remove it.

        Raises:
            LoggerNotFoundError: If name is not registered
        """
        with self._lock.write_locked():
            instance = self._get_locked(name)
            if instance.backend is not None:
                instance.backend.close()
            del self._instances[name]

        logger.debug("unregistered logger %s", name)

    def reopen(self) -> ReopenResult:
        """
        Reopen every enabled backend.

        All backends are attempted even if some fail; failures are
        collected in the result rather than raised.
        """
        result = ReopenResult()

        with self._lock.write_locked():
            for name, instance in self._instances.items():
                if not instance.active:
                    continue
                try:
                    instance.backend.reopen()
                except Exception as e:
                    logger.warning("logger %s reopen failed: %s", name, e)
                    result.failures.append((name, e))

        return result

    def set_level_all(self, level: str) -> None:
        with self._lock.write_locked():
            for instance in self._instances.values():
                if instance.active:
                    instance.backend.set_level(level)

    def set_level(self, name: str, level: str) -> None:
        """
        Raises:
            LoggerNotFoundError: If name is not registered
        """
        with self._lock.write_locked():
            self._get_locked(name).backend.set_level(level)

    def fatal(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._dispatch("fatal", ctx, fmt, args)

    def warn(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._dispatch("warn", ctx, fmt, args)

    def info(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._dispatch("info", ctx, fmt, args)

    def debug(self, ctx: Context, fmt: str, *args: Any) -> None:
        self._dispatch("debug", ctx, fmt, args)

    def close(self) -> None:
        """Close every enabled backend. Entries stay registered."""
        with self._lock.read_locked():
            for instance in self._instances.values():
                if instance.active:
                    instance.backend.close()

    def shutdown(self) -> None:
        """Close and remove every entry."""
        with self._lock.write_locked():
            instances, self._instances = self._instances, {}

        for name, instance in instances.items():
            if instance.backend is None:
                continue
            try:
                instance.backend.close()
            except Exception:
                logger.exception("closing logger %s failed", name)

    def _dispatch(self, method: str, ctx: Context, fmt: str, args: tuple) -> None:
        # Backends count this frame when resolving the caller. Exactly one
        # frame (Registry.info or manager.info) sits between it and the
        # caller, so LOG_DEFAULT_SKIP holds on both paths.
        with self._lock.read_locked():
            for instance in self._instances.values():
                if not instance.active:
                    continue
                try:
                    getattr(instance.backend, method)(ctx, fmt, *args)
                except Exception:
                    logger.debug("logger %r failed to write", instance.backend, exc_info=True)

    def _get_locked(self, name: str) -> LogInstance:
        instance = self._instances.get(name)
        if instance is None:
            raise LoggerNotFoundError(name)
        return instance

    def __contains__(self, name: str) -> bool:
        with self._lock.read_locked():
            return name in self._instances

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._instances)

    def __repr__(self) -> str:
        return f"Registry(loggers={self.list_loggers()!r})"
