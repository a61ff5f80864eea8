"""Shared fixtures for envvars tests."""

import logging
from pathlib import Path
from typing import Dict, Optional

import pytest

import envvars.logger

DATA_DIR = Path(__file__).parent / "data"


class FakeFileSystem:
    """In-memory FileSystem with canned files, cwd and executable path."""

    def __init__(
        self,
        files: Optional[Dict[str, bytes]] = None,
        cwd: str = "/work",
        executable: str = "/opt/app/bin/app",
    ) -> None:
        self.files = {Path(p): data for p, data in (files or {}).items()}
        self._cwd = Path(cwd)
        self._executable = Path(executable)
        self.reads = []

    def read_bytes(self, path: Path) -> Optional[bytes]:
        self.reads.append(Path(path))
        return self.files.get(Path(path))

    def is_dir(self, path: Path) -> bool:
        path = Path(path)
        return path not in self.files and any(path in f.parents for f in self.files)

    def cwd(self) -> Path:
        return self._cwd

    def executable_path(self) -> Path:
        return self._executable


@pytest.fixture(autouse=True)
def fresh_default_logger(monkeypatch: pytest.MonkeyPatch):
    """Give every test its own shared "envvars" logger."""
    monkeypatch.setattr(envvars.logger, "_default_logger", None)
    yield
    shared = logging.getLogger(envvars.logger.DEFAULT_LOGGER_NAME)
    for handler in list(shared.handlers):
        shared.removeHandler(handler)
        handler.close()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem(
        files={
            "/work/.env": b"root=123\nshared=cwd\n",
            "/opt/app/bin/.env": b"nested=456\nshared=exe\n",
        }
    )


@pytest.fixture
def make_fs():
    """Build a FakeFileSystem from a ``{path: bytes}`` mapping."""

    def factory(files: Optional[Dict[str, bytes]] = None, **kwargs) -> FakeFileSystem:
        return FakeFileSystem(files=files, **kwargs)

    return factory
