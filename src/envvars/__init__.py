"""envvars - Typed, fail-fast configuration from the environment and .env files.

This package provides:
- dotenv: A parser for the common ``.env`` dialect
- loaders: Key/value sources (environment, .env files, dictionaries, Vault)
  and their priority composition
- config: TypedConfig, resolving an enumerated key set once at startup
- exceptions: Structured errors for missing keys and unmappable values
- logger: Structured logging configured from the environment
"""

__version__ = "1.0.0"

# Re-export commonly used items for convenience
from envvars.config import TypedConfig, key_name
from envvars.dotenv import DotEnvParser, EnvMap, parse
from envvars.exceptions import (
    ConfigurationError,
    CouldNotMapError,
    EnvVarsError,
    MissingKeysError,
    ValidationError,
)
from envvars.loaders import (
    DotEnvLoader,
    EnvironmentLoader,
    Location,
    MappingLoader,
    PriorityLoader,
    SourceLoader,
    VaultLoader,
    default_loader,
)
from envvars.logger import Logger, StructuredLogger, create_logger, default_logger, get_logger

__all__ = [
    "__version__",
    # Config
    "TypedConfig",
    "key_name",
    # Parser
    "DotEnvParser",
    "EnvMap",
    "parse",
    # Loaders
    "SourceLoader",
    "EnvironmentLoader",
    "MappingLoader",
    "DotEnvLoader",
    "Location",
    "VaultLoader",
    "PriorityLoader",
    "default_loader",
    # Exceptions
    "EnvVarsError",
    "ConfigurationError",
    "ValidationError",
    "MissingKeysError",
    "CouldNotMapError",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "default_logger",
    "get_logger",
]
