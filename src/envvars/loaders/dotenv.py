"""Source backed by a ``.env`` file.

The file is located, read and parsed once at construction. Every failure on
the way (no such file, unreadable file, bytes that are not UTF-8) leaves the
loader empty instead of raising: optional configuration files must never
crash a program that only needs its environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from envvars.dotenv import FileSystem, LocalFileSystem, decode_utf8, parse
from envvars.logger import Logger, default_logger

DOTENV_FILENAME = ".env"


class Location(Enum):
    """Well-known places to look for a ``.env`` file."""

    CURRENT_WORKING_DIR = "cwd"
    """The process's current working directory."""

    EXECUTABLE_DIR = "executable_dir"
    """The directory containing the running program."""


LocationLike = Union[Location, str, "os.PathLike[str]"]


class DotEnvLoader:
    """Source reading values from a discovered ``.env`` file.

    ``location`` is a :class:`Location` or an explicit path. A directory has
    ``.env`` appended; any other path is read as a dotenv file whatever its
    name.

    Example:
        loader = DotEnvLoader(Location.CURRENT_WORKING_DIR)
        loader.get("DATABASE_URL")

        loader = DotEnvLoader("/etc/myapp/production.env")
    """

    def __init__(
        self,
        location: LocationLike = Location.CURRENT_WORKING_DIR,
        filesystem: Optional[FileSystem] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._fs: FileSystem = filesystem or LocalFileSystem()
        self.logger = logger or default_logger()
        self.location = location
        self.path: Optional[Path] = None
        self._values: Dict[str, str] = self._load(self._target(location))

    def _target(self, location: LocationLike) -> Path:
        if location is Location.CURRENT_WORKING_DIR:
            return self._fs.cwd()
        if location is Location.EXECUTABLE_DIR:
            return self._fs.executable_path().parent
        return Path(location)

    def _load(self, target: Path) -> Dict[str, str]:
        path = target / DOTENV_FILENAME if self._fs.is_dir(target) else target

        data = self._fs.read_bytes(path)
        if data is None:
            self.logger.debug("No dotenv file found", path=str(path))
            return {}

        text = decode_utf8(data)
        if text is None:
            self.logger.debug("Ignoring dotenv file that is not valid UTF-8", path=str(path))
            return {}

        values = parse(text)
        self.path = path
        self.logger.debug("Loaded dotenv file", path=str(path), keys=len(values))
        return values

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    @property
    def values(self) -> Dict[str, str]:
        """Copy of the parsed file contents (empty if nothing was loaded)."""
        return self._values.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!s}, keys={len(self._values)})"


__all__ = ["DOTENV_FILENAME", "DotEnvLoader", "Location", "LocationLike"]
