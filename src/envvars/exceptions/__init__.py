"""Exceptions raised by envvars.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (missing key names, offending raw value)

Usage:
    from envvars.exceptions import (
        EnvVarsError,
        MissingKeysError,
        CouldNotMapError,
    )

Parsing and file discovery never raise; only lookups of unusable keys or
values surface as exceptions.
"""

from envvars.exceptions.base import (
    ConfigurationError,
    CouldNotMapError,
    EnvVarsError,
    MissingKeysError,
    ValidationError,
)

__all__ = [
    "EnvVarsError",
    "ConfigurationError",
    "ValidationError",
    "MissingKeysError",
    "CouldNotMapError",
]
