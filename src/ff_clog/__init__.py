"""
ff-clog: Pluggable leveled logging for Fenixflow applications.

Provides a process-wide registry of named logger backends with fan-out
of every log call to the enabled ones, and a colored console backend.
"""

__version__ = "0.1.0"

from .base import Backend, LeveledBackend
from .config import ClogSettings, LoggerConfig
from .console import ConsoleBackend
from .exceptions import (
    ClogError,
    DuplicateLoggerError,
    HostResolutionError,
    InvalidConfigError,
    LoggerNotFoundError,
    ReopenError,
)
from .levels import CONSOLE, SOURCE_AUTO, TRACE_ID, Level, level_from_str
from .manager import (
    close,
    debug,
    enable_logger,
    fatal,
    get_logger,
    get_registry,
    info,
    init_from_env,
    init_logger,
    register_logger,
    reopen,
    set_level,
    set_level_all,
    shutdown,
    unregister_logger,
    use_registry,
    warn,
)
from .null import CaptureBackend, NullBackend
from .registry import LogInstance, Registry, ReopenResult
from .utils import get_trace_id, with_trace_id

__all__ = [
    "Backend",
    "LeveledBackend",
    "ConsoleBackend",
    "CaptureBackend",
    "NullBackend",
    "Registry",
    "LogInstance",
    "ReopenResult",
    "LoggerConfig",
    "ClogSettings",
    "Level",
    "level_from_str",
    "CONSOLE",
    "SOURCE_AUTO",
    "TRACE_ID",
    "ClogError",
    "DuplicateLoggerError",
    "HostResolutionError",
    "InvalidConfigError",
    "LoggerNotFoundError",
    "ReopenError",
    "get_trace_id",
    "with_trace_id",
    "register_logger",
    "init_logger",
    "init_from_env",
    "enable_logger",
    "get_logger",
    "unregister_logger",
    "reopen",
    "set_level_all",
    "set_level",
    "fatal",
    "warn",
    "info",
    "debug",
    "close",
    "shutdown",
    "get_registry",
    "use_registry",
]
