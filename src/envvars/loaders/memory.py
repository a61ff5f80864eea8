"""In-memory sources.

``MappingLoader`` wraps a caller-supplied dictionary; ``EnvironmentLoader``
wraps the process environment. Both copy their data at construction so later
changes to the original mapping are not observed.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional


class MappingLoader:
    """Source backed by a plain ``str -> str`` mapping.

    Example:
        loader = MappingLoader({"DATABASE_URL": "sqlite://"})
        loader.get("DATABASE_URL")  # "sqlite://"
        loader.get("OTHER")         # None
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    @property
    def values(self) -> Dict[str, str]:
        """Copy of the wrapped mapping."""
        return self._values.copy()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={sorted(self._values)})"


class EnvironmentLoader(MappingLoader):
    """Source backed by the process environment.

    Args:
        environ: Environment to snapshot (default: ``os.environ``)
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(os.environ if environ is None else environ)


__all__ = ["MappingLoader", "EnvironmentLoader"]
