"""
Process-wide registry and the module-level logging API.

Importing ff_clog registers a ConsoleBackend under "console" and
initializes it at debug level with source "auto", so logging works
before any setup. The first ``init_logger`` call for any backend
silences that auto logger.

Example:
    import ff_clog

    ff_clog.init_logger("console", ff_clog.LoggerConfig(level="info", service="billing"))
    ctx = ff_clog.with_trace_id("req-42")
    ff_clog.warn(ctx, "card declined for order %s", order_id)
"""

import atexit
import logging
import threading
from collections.abc import Mapping
from typing import Any

from .base import Backend, Context
from .config import ClogSettings, LoggerConfig
from .console import ConsoleBackend
from .exceptions import ClogError
from .levels import CONSOLE, LEVEL_DEBUG, SOURCE_AUTO
from .registry import Registry, ReopenResult

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
_registry: Registry = Registry()


def bootstrap(registry: Registry) -> Registry:
    """Register and auto-initialize the console backend on registry."""
    registry.register_logger(CONSOLE, ConsoleBackend())
    try:
        registry._init_logger(CONSOLE, LoggerConfig(level=LEVEL_DEBUG), SOURCE_AUTO)
    except ClogError as e:
        logger.warning("auto console logger not initialized: %s", e)
    return registry


def get_registry() -> Registry:
    """Get the process-wide registry."""
    return _registry


def use_registry(registry: Registry) -> Registry:
    """
    Install registry as the process-wide registry.

    Returns:
        The previously installed registry, so callers (mostly tests) can
        restore it
    """
    global _registry
    with _registry_lock:
        previous, _registry = _registry, registry
    return previous


def register_logger(name: str, backend: Backend) -> None:
    _registry.register_logger(name, backend)


def init_logger(
    name: str, config: LoggerConfig | Mapping[str, Any] | None, source: str = ""
) -> None:
    _registry.init_logger(name, config, source)


def init_from_env(name: str | None = None, **overrides: Any) -> LoggerConfig:
    """
    Initialize a backend from CLOG_* environment variables.

    CLOG_SOURCE is recorded as the entry's source tag.

    Args:
        name: Registered backend name (default: CLOG_BACKEND, then "console")
        **overrides: Settings that take precedence over the environment

    Returns:
        The config that was applied

    Raises:
        InvalidConfigError: If CLOG_SOURCE is the reserved "auto"
    """
    settings = ClogSettings(**overrides)
    config = settings.to_logger_config()
    _registry.init_logger(name or settings.backend, config, config.source)
    return config


def enable_logger(name: str, enable: bool) -> None:
    _registry.enable_logger(name, enable)


def get_logger(name: str) -> Backend:
    return _registry.get_logger(name)


def unregister_logger(name: str) -> None:
    _registry.unregister_logger(name)


def reopen() -> ReopenResult:
    return _registry.reopen()


def set_level_all(level: str) -> None:
    _registry.set_level_all(level)


def set_level(name: str, level: str) -> None:
    _registry.set_level(name, level)


# The verbs call _dispatch directly so the caller sits as many frames
# away as it does through Registry.info.
def fatal(ctx: Context, fmt: str, *args: Any) -> None:
    """Log at FATAL on every enabled backend. Does not exit."""
    _registry._dispatch("fatal", ctx, fmt, args)


def warn(ctx: Context, fmt: str, *args: Any) -> None:
    _registry._dispatch("warn", ctx, fmt, args)


def info(ctx: Context, fmt: str, *args: Any) -> None:
    _registry._dispatch("info", ctx, fmt, args)


def debug(ctx: Context, fmt: str, *args: Any) -> None:
    _registry._dispatch("debug", ctx, fmt, args)


def close() -> None:
    _registry.close()


def shutdown() -> None:
    """Close and unregister every backend of the process-wide registry."""
    _registry.shutdown()


bootstrap(_registry)
atexit.register(shutdown)
