"""Key/value sources for envvars.

Provides pluggable sources, all answering ``get(key) -> Optional[str]``:
- EnvironmentLoader - The process environment
- MappingLoader - A caller-supplied dictionary
- DotEnvLoader - A discovered ``.env`` file
- VaultLoader - A HashiCorp Vault KV v2 secret (requires hvac)
- PriorityLoader - First hit across an ordered list of sources

Usage:
    from envvars.loaders import (
        DotEnvLoader,
        EnvironmentLoader,
        Location,
        PriorityLoader,
        default_loader,
    )

    loader = PriorityLoader([
        EnvironmentLoader(),
        DotEnvLoader(Location.CURRENT_WORKING_DIR),
    ])

    # Or the standard stack: environment, cwd .env, executable dir .env
    loader = default_loader()
"""

from .base import Lookup, SourceLike, SourceLoader, as_lookup
from .dotenv import DOTENV_FILENAME, DotEnvLoader, Location, LocationLike
from .factory import default_loader
from .memory import EnvironmentLoader, MappingLoader
from .priority import PriorityLoader
from .vault import VaultLoader

__all__ = [
    # Protocol
    "SourceLoader",
    "Lookup",
    "SourceLike",
    "as_lookup",
    # Sources
    "EnvironmentLoader",
    "MappingLoader",
    "DotEnvLoader",
    "Location",
    "LocationLike",
    "DOTENV_FILENAME",
    "VaultLoader",
    # Composition
    "PriorityLoader",
    "default_loader",
]
