"""Factory for the standard source stack."""

from __future__ import annotations

from typing import Mapping, Optional

from envvars.dotenv import FileSystem
from envvars.logger import Logger

from .dotenv import DotEnvLoader, Location
from .memory import EnvironmentLoader
from .priority import PriorityLoader


def default_loader(
    *,
    filesystem: Optional[FileSystem] = None,
    environ: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> PriorityLoader:
    """Create the default source stack.

    Priority (high -> low):
        1. Process environment
        2. ``.env`` in the current working directory
        3. ``.env`` next to the running program

    Real environment variables therefore always override file-based defaults.

    Args:
        filesystem: File system accessors (default: the local file system)
        environ: Environment to use instead of ``os.environ``
        logger: Optional logger passed to the dotenv loaders
    """
    return PriorityLoader(
        [
            EnvironmentLoader(environ),
            DotEnvLoader(Location.CURRENT_WORKING_DIR, filesystem=filesystem, logger=logger),
            DotEnvLoader(Location.EXECUTABLE_DIR, filesystem=filesystem, logger=logger),
        ]
    )


__all__ = ["default_loader"]
