"""
Structured logging for appsettings-di.

Every line follows the same schema so startup problems can be grepped:
    t=<ISO8601> level=<LEVEL> mod=<module> op=<function> [ms=<dur>] msg="..." k=v
"""

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
    }
)

_loggers: dict[str, "StructuredLogger"] = {}


def _escape(text: str) -> str:
    """Keep a value inside one quoted field on one line."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


class StructuredFormatter(logging.Formatter):
    """Formatter producing single-line key=value records."""

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        mod = parts[-1] if parts else record.name
        op = getattr(record, "op", record.funcName or "-")

        duration = getattr(record, "ms", None)
        ms_part = f" ms={duration:.1f}" if duration is not None else ""

        timestamp = datetime.now(UTC).isoformat()
        msg = _escape(record.getMessage())

        extra_fields = ""
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in {"op", "ms"}:
                continue
            extra_fields += f" {key}={value}"

        line = f't={timestamp} level={record.levelname} mod={mod} op={op}{ms_part} msg="{msg}"{extra_fields}'
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger:
    """Thin wrapper over ``logging.Logger`` taking structured fields as kwargs."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        extra = {k: v for k, v in kwargs.items() if k not in _RECORD_ATTRS}
        # stacklevel points funcName at the caller, not at this wrapper
        self.logger.log(level, msg, exc_info=exc_info, extra=extra, stacklevel=3)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def timed(self, msg: str, duration_ms: float, **kwargs):
        """Log at INFO with a duration attached."""
        kwargs["ms"] = duration_ms
        self._log(logging.INFO, msg, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for the given module."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Install the structured formatter on the root logger.

    Logs go to stderr by default; stdout is reserved for program output.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))
