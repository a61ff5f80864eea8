"""
envvars logging.

Usage:
    from envvars.logger import Logger, create_logger, get_logger

    logger = get_logger()
    logger.debug("dotenv file loaded", path="/srv/app/.env")

    # Explicit configuration
    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (ENVVARS for "envvars").
"""

import logging
import os
from typing import Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

DEFAULT_LOGGER_NAME = "envvars"


def _get_env_prefix(name: str) -> str:
    """Convert a logger name to its environment variable prefix.

    Examples:
        "envvars" -> "ENVVARS"
        "envvars.dotenv" -> "ENVVARS_DOTENV"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a logger, filling unspecified settings from the environment.

    Args:
        name: Logger name
        level: Logging level (defaults to {PREFIX}_LOG_LEVEL, then WARNING)
        log_file: Optional file path (defaults to {PREFIX}_LOG_FILE)
        json_format: JSON output (defaults to {PREFIX}_LOG_JSON == "true")

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_name = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """Get a logger configured entirely from environment variables."""
    return create_logger(name=name)


_default_logger: Optional[Logger] = None


def default_logger() -> Logger:
    """Return the logger shared by components built without one.

    Created on first use. If the "envvars" logger already has handlers, for
    example from a caller's own ``StructuredLogger``, that setup is kept
    instead of being reset from the environment.
    """
    global _default_logger
    if _default_logger is None:
        if logging.getLogger(DEFAULT_LOGGER_NAME).handlers:
            _default_logger = StructuredLogger(name=DEFAULT_LOGGER_NAME, configure=False)
        else:
            _default_logger = create_logger(DEFAULT_LOGGER_NAME)
    return _default_logger


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "DEFAULT_LOGGER_NAME",
    "create_logger",
    "get_logger",
    "default_logger",
]
