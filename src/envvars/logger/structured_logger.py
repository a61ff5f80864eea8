"""
Structured logger backed by the standard ``logging`` module.

Keyword context passed to a log call travels on the ``LogRecord`` and is
rendered either as ``key=value`` pairs or as fields of a JSON object.
"""

import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .interface import Logger

# Attributes the logging module sets on every LogRecord
_RECORD_ATTRS = frozenset(
    {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread",
        "threadName", "taskName",
    }
)


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the caller-supplied context attached to a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and key != "session_id"
    }


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        session_id = getattr(record, "session_id", None)
        if session_id:
            payload["session_id"] = str(session_id)
        payload.update(_context_fields(record))
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Render records as text with context appended as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = _context_fields(record)
        if context:
            text += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return text


class StructuredLogger(Logger):
    """Logger writing text or JSON records to stdout and optionally a file.

    Example:
        logger = StructuredLogger(name="envvars", level=logging.DEBUG)
        logger.debug("dotenv file loaded", path="/srv/app/.env", keys=3)
    """

    def __init__(
        self,
        name: str = "envvars",
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        json_format: bool = False,
        configure: bool = True,
    ):
        """Initialize the structured logger.

        Args:
            name: Name of the underlying ``logging`` logger
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            log_file: Optional file path receiving the same records
            json_format: Emit JSON objects instead of text lines
            configure: Install level and handlers; when False, log through
                whatever the named logger is already set up with
        """
        self._name = name
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = logging.getLogger(name)
        if configure:
            self._configure(level, log_file, json_format)

    def _configure(self, level: int, log_file: Optional[str], json_format: bool) -> None:
        self._logger.setLevel(level)

        # Re-creating a logger with the same name must not duplicate output
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        self._logger.propagate = False

        if json_format:
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = TextFormatter(
                "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s"
            )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError as e:
                print(f"Failed to open log file {log_file}: {e}", file=sys.stderr)
            else:
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    @property
    def name(self) -> str:
        return self._name

    def get_session_id(self) -> str:
        return self._session_id

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra: Dict[str, Any] = {"session_id": self._session_id}
        for key, value in kwargs.items():
            # LogRecord refuses extras that shadow its own attributes
            extra[f"_{key}" if key in _RECORD_ATTRS else key] = value
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
