"""
Helpers shared by the registry and the backends.
"""

import os
import sys
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from .levels import TRACE_ID

UNKNOWN_CALLER = "???"


def format_message(fmt: str, args: tuple) -> str:
    """
    Render a printf-style message.

    The format string is returned untouched when there are no args, so
    literal ``%`` signs survive. A single mapping argument is used for
    ``%(name)s`` style formats, as the stdlib logging module does. A
    mismatched format never raises; the args are appended instead.
    """
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        values = args.values() if isinstance(args, Mapping) else args
        return f"{fmt} %!(BADFORMAT {', '.join(repr(v) for v in values)})"


def get_runtime_info(skip: int) -> tuple[str, str, int]:
    """
    Resolve the caller ``skip`` frames above this function.

    Returns:
        (function, filename, lineno); ("???", "???", 0) when the stack is
        not deep enough
    """
    try:
        frame = sys._getframe(skip)
    except ValueError:
        return UNKNOWN_CALLER, UNKNOWN_CALLER, 0

    code = frame.f_code
    function = getattr(code, "co_qualname", code.co_name)
    return function, code.co_filename, frame.f_lineno


def format_callsite(function: str, filename: str, lineno: int) -> str:
    return f"[{function}:{os.path.basename(filename)}:{lineno}]"


def format_log(body: str, *fields: str) -> str:
    """Prefix body with each field in brackets: ``[a] [b] body``."""
    parts = [f"[{field}] " for field in fields]
    parts.append(body)
    return "".join(parts)


def get_trace_id(ctx: Mapping[str, Any] | None) -> str:
    """
    Extract the trace id carried by a call context as display text.

    Args:
        ctx: Request/call context mapping, or None

    Returns:
        The trace id, or "" if the context or the key is absent
    """
    if ctx is None:
        return ""

    try:
        value = ctx.get(TRACE_ID)
    except AttributeError:
        return ""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    return str(value)


def with_trace_id(trace_id: Any, ctx: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Return a copy of ctx carrying trace_id, normalized to a string.

    Example:
        ctx = with_trace_id(request.headers["X-Trace-Id"])
        ff_clog.info(ctx, "handled %s", request.path)
    """
    new_ctx = dict(ctx or {})
    new_ctx[TRACE_ID] = trace_id if isinstance(trace_id, str) else get_trace_id({TRACE_ID: trace_id})
    return new_ctx


class ReadWriteLock:
    """
    A lock that admits many readers or a single writer.

    Waiting writers block new readers so structural changes are not
    starved by a steady stream of log calls. Not reentrant.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
