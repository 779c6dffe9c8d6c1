"""Structured logging for protokit.

Provides JSON or colored console output. Nothing is configured on import;
call ``setup_logging()`` from an application entry point.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from colorama import Fore, Style


# Context keys that become attributes on the log record
CONTEXT_FIELDS = ("component", "subject", "target", "source", "count", "success")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for human-readable output."""

    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA,
    }
    RESET = Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%H:%M:%S")

        prefix = f"{color}[{timestamp}] {record.levelname:8}{self.RESET}"

        if hasattr(record, "component"):
            prefix += f" [{record.component}]"

        message = record.getMessage()

        extras = []
        if hasattr(record, "subject"):
            extras.append(f"subject={record.subject}")
        if hasattr(record, "source"):
            extras.append(f"source={record.source}")
        if hasattr(record, "count"):
            extras.append(f"count={record.count}")

        if extras:
            message += f" ({', '.join(extras)})"

        return f"{prefix} {message}"


class ProtokitLogger:
    """Logger wrapper accepting keyword context."""

    def __init__(self, name: str, logger: logging.Logger):
        self._name = name
        self._logger = logger

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def _log(self, level: int, message: str, **kwargs):
        """Log with extra context fields."""
        if not self._logger.isEnabledFor(level):
            return

        extra = {}

        for key in CONTEXT_FIELDS:
            if key in kwargs:
                extra[key] = kwargs.pop(key)

        if kwargs:
            extra["extra_data"] = kwargs

        self._logger.log(level, message, extra=extra)

    def protocol_built(self, subject: str, names: list[str]):
        self.debug(
            f"Protocol built for {subject}",
            component="protocols",
            subject=subject,
            count=len(names),
        )

    def capabilities_checked(self, subject: str, requested: int, success: bool):
        self.debug(
            f"Capabilities checked on {subject}",
            component="capabilities",
            subject=subject,
            count=requested,
            success=success,
        )

    def extension_copied(self, target: str, source: str, count: int):
        self.debug(
            f"Copied {count} members onto {target}",
            component="extensions",
            target=target,
            source=source,
            count=count,
        )


# Global logger registry
_loggers: dict[str, ProtokitLogger] = {}
_initialized = False


def setup_logging(
    level: str = "WARNING",
    format_type: str = "text",
    console_enabled: bool = True,
    stream: Optional[object] = None,
    force: bool = False,
) -> None:
    """Initialize the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text"
        console_enabled: Write logs to the console
        stream: Console stream, defaults to stderr
        force: Reconfigure even if already initialized
    """
    global _initialized

    if _initialized and not force:
        return

    root = logging.getLogger("protokit")
    root.setLevel(getattr(logging, level.upper()))
    root.handlers.clear()

    if console_enabled:
        console = logging.StreamHandler(stream or sys.stderr)
        console.setLevel(logging.DEBUG)

        if format_type == "json":
            console.setFormatter(JSONFormatter())
        else:
            console.setFormatter(ColoredFormatter())

        root.addHandler(console)
    else:
        root.addHandler(logging.NullHandler())

    _initialized = True


def get_logger(name: str = "protokit") -> ProtokitLogger:
    """Get a protokit logger instance."""
    if name not in _loggers:
        logger = logging.getLogger(f"protokit.{name}")
        _loggers[name] = ProtokitLogger(name, logger)
    return _loggers[name]


def describe(obj: object) -> str:
    """Short label for an object in log messages."""
    if isinstance(obj, type):
        return obj.__qualname__
    return f"<{type(obj).__qualname__} instance>"
