"""
structlog processors used by the ff-clog backends.

The backends hand structlog an event dict carrying the message, the
resolved call site and the caller's context; these processors turn it
into the bracketed console line.
"""

from collections.abc import Callable
from typing import Any

from .levels import Level
from .utils import format_callsite, format_log, get_trace_id

Brush = Callable[[str], str]

RESET = "\033[0m"


def new_brush(color: str) -> Brush:
    """Return a function wrapping text in the given ANSI SGR color."""
    prefix = f"\033[{color}m"

    def brush(text: str) -> str:
        return prefix + text + RESET

    return brush


def plain_brush(text: str) -> str:
    return text


# Indexed by Level. White is reserved; no emitted level uses it.
COLORS: list[Brush] = [
    new_brush("1;36"),  # debug cyan
    new_brush("1;32"),  # info  green
    new_brush("1;33"),  # warn  yellow
    new_brush("1;31"),  # fatal red
]
WHITE = new_brush("1;37")


def brush_for(level: Level) -> Brush:
    if level == Level.NONE:
        return WHITE
    return COLORS[level]


def add_trace_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Replace the caller's context with the trace id it carries.

    The context itself never reaches the renderer.
    """
    ctx = event_dict.pop("ctx", None)
    event_dict["trace_id"] = get_trace_id(ctx)
    return event_dict


def add_level_text(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    level = event_dict.get("level")
    if not isinstance(level, Level):
        level = Level[method_name.upper()]
        event_dict["level"] = level
    event_dict["level_text"] = level.text
    return event_dict


class BracketRenderer:
    """
    Render an event dict as a console line:

        [2024-05-01 10:00:00] [svc] [host] [INFO] [trace] [func:file.py:12] message

    The level tag and the call-site/message segment are colored by level.
    The trailing newline is added by the sink.
    """

    def __init__(self, colors: bool = True):
        self.colors = colors

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
        level = event_dict["level"]
        brush = brush_for(level) if self.colors else plain_brush

        callsite = format_callsite(
            event_dict.get("func_name", "???"),
            event_dict.get("filename", "???"),
            event_dict.get("lineno", 0),
        )
        body = brush(f"{callsite} {event_dict.get('event', '')}")

        return format_log(
            body,
            event_dict.get("timestamp", ""),
            event_dict.get("service", ""),
            event_dict.get("hostname", ""),
            brush(event_dict.get("level_text", level.text)),
            event_dict.get("trace_id", ""),
        )
