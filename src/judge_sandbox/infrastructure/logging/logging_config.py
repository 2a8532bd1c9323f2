"""
Logging configuration for the judge sandbox.

Configures structlog for human-readable text logging (default) with optional
JSON format. Context bound with bind_context() is attached to every event.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import EventDict, Processor

# Color codes for terminal output
COLORS = {
    "debug": "\033[36m",     # Cyan
    "info": "\033[32m",      # Green
    "warning": "\033[33m",   # Yellow
    "error": "\033[31m",     # Red
    "critical": "\033[35m",  # Magenta
    "reset": "\033[0m",
}


def add_color(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ANSI color codes to the log level."""
    level_color = COLORS.get(method_name, COLORS["reset"])
    if "level" in event_dict:
        event_dict["level"] = f"{level_color}{event_dict['level'].upper()}{COLORS['reset']}"
    return event_dict


def human_readable_renderer(
    logger: Any,
    method_name: str,
    event_dict: EventDict
) -> str:
    """
    Human-readable log format renderer.

    Format: [timestamp] [level] [logger] message key=value key2=value2
    Example: [2025-01-14 10:30:45] [INFO] [judge0.client] Submission accepted token=abc123
    """
    timestamp = event_dict.pop("timestamp", "")
    level = event_dict.pop("level", "info")
    # add_color has already upper-cased and wrapped the level
    if not level.startswith("\033"):
        level = level.upper()
    logger_name = event_dict.pop("logger_name", event_dict.pop("logger", "unknown"))
    message = event_dict.pop("event", "")
    exception = event_dict.pop("exception", None)

    parts = []
    if timestamp:
        parts.append(f"[{timestamp}]")
    parts.append(f"[{level}]")
    if logger_name != "root":
        parts.append(f"[{logger_name}]")
    parts.append(str(message))

    # Sorted for stable output
    for key, value in sorted(event_dict.items()):
        if key == "stack_info":
            continue
        if isinstance(value, (str, int, float, bool)):
            parts.append(f"{key}={value}")
        else:
            parts.append(f"{key}={repr(value)}")

    log_line = " ".join(parts)
    if exception:
        log_line += "\n" + exception
    return log_line


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "text",
    stream: Optional[Any] = None,
    colors: Optional[bool] = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "text" (default) or "json"
        stream: Output stream, stderr by default so CLI output stays clean
        colors: Color the text level; on when the stream is a terminal
    """
    use_json = log_format.lower() == "json"
    stream = stream or sys.stderr
    if colors is None:
        colors = hasattr(stream, "isatty") and stream.isatty()

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        if colors:
            processors.append(add_color)
        processors.append(human_readable_renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None, **context) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional bound context.

    Example:
        logger = get_logger(__name__)
        logger.info("Submission accepted", token="abc", language="python")
    """
    if name:
        return structlog.get_logger(name, **context)
    return structlog.get_logger(**context)


def bind_context(**context) -> None:
    """Bind context to every logger in the current task."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
