"""File system access used to discover and read ``.env`` files.

``DotEnvLoader`` only touches the disk through a :class:`FileSystem`, so tests
can hand it a fake with canned files, working directory and executable path.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the file system accessors a dotenv loader needs."""

    def read_bytes(self, path: Path) -> Optional[bytes]:
        """Return the file's bytes, or None if it does not exist or can't be read."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True if ``path`` is an existing directory."""
        ...

    def cwd(self) -> Path:
        """Return the current working directory."""
        ...

    def executable_path(self) -> Path:
        """Return the path of the running program."""
        ...


class LocalFileSystem:
    """The real file system and process."""

    def read_bytes(self, path: Path) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except OSError:
            return None

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def cwd(self) -> Path:
        return Path.cwd()

    def executable_path(self) -> Path:
        # argv[0] is the script or entry point; empty in an interactive session
        if sys.argv and sys.argv[0]:
            return Path(sys.argv[0]).resolve()
        return Path(sys.executable)


def decode_utf8(data: bytes) -> Optional[str]:
    """Decode UTF-8 bytes, tolerating a BOM; None when the bytes are not UTF-8."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return None


__all__ = ["FileSystem", "LocalFileSystem", "PathLike", "decode_utf8"]
