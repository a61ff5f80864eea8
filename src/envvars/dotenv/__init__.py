"""``.env`` file parsing and file system access.

Example:
    from envvars.dotenv import parse

    values = parse(Path(".env").read_text())
"""

from envvars.dotenv.filesystem import FileSystem, LocalFileSystem, PathLike, decode_utf8
from envvars.dotenv.parser import DotEnvParser, EnvMap, parse

__all__ = [
    "DotEnvParser",
    "EnvMap",
    "parse",
    "FileSystem",
    "LocalFileSystem",
    "PathLike",
    "decode_utf8",
]
