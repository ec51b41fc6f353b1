"""
Console backend writing colored, bracketed lines to stdout/stderr.
"""

import sys
import threading
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from .base import Context, LeveledBackend
from .levels import LOG_DEFAULT_SKIP, Level
from .processors import BracketRenderer, add_level_text, add_trace_id

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_WRITE_LOCK = threading.Lock()


class ConsoleSink:
    """
    The structlog logger at the end of the console pipeline.

    debug/info lines go to stdout, warn/fatal lines to stderr. A stream
    left as None is looked up on ``sys`` at write time so redirected or
    captured streams are honoured.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        self._stdout = stdout
        self._stderr = stderr

    def debug(self, message: str) -> None:
        self._write(sys.stdout if self._stdout is None else self._stdout, message)

    info = debug

    def warn(self, message: str) -> None:
        self._write(sys.stderr if self._stderr is None else self._stderr, message)

    fatal = warn

    @staticmethod
    def _write(stream: TextIO, message: str) -> None:
        # One write per line so concurrent lines never interleave.
        with _WRITE_LOCK:
            stream.write(message + "\n")
            stream.flush()


class ConsoleBackend(LeveledBackend):
    """
    A backend that prints human-readable lines to the console.

    Each line looks like::

        [2024-05-01 10:00:00] [billing] [web-1] [WARN] [req-42] [charge:billing.py:88] card declined

    ``fatal`` is only the highest severity; it does not exit the process.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        colors: bool = True,
        skip: int = LOG_DEFAULT_SKIP,
    ):
        """
        Initialize a console backend.

        Args:
            stdout: Stream for debug/info lines (default: sys.stdout at write time)
            stderr: Stream for warn/fatal lines (default: sys.stderr at write time)
            colors: Whether to wrap the level tag and message in ANSI colors
            skip: Caller frame depth used for call-site attribution
        """
        super().__init__(skip=skip)
        self.colors = colors
        self._logger = structlog.wrap_logger(
            ConsoleSink(stdout=stdout, stderr=stderr),
            processors=self._get_default_processors(),
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    def _get_default_processors(self) -> list[Processor]:
        """Get console-specific processors."""
        return [
            structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False),
            add_trace_id,
            add_level_text,
            BracketRenderer(colors=self.colors),
        ]

    def _emit(self, level: Level, ctx: Context, message: str, **fields: Any) -> None:
        getattr(self._logger, level.name.lower())(message, ctx=ctx, level=level, **fields)
