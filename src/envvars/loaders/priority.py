"""Composition of several sources in priority order."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .base import Lookup, SourceLike, as_lookup


class PriorityLoader:
    """Source that asks each wrapped source in turn and returns the first hit.

    Sources may overlap; an earlier source shadows later ones. An empty
    string counts as a value, only ``None`` falls through to the next source.

    Example:
        loader = PriorityLoader([
            EnvironmentLoader(),
            DotEnvLoader(Location.CURRENT_WORKING_DIR),
            {"LOG_LEVEL": "INFO"},
        ])
    """

    def __init__(self, loaders: Iterable[SourceLike]) -> None:
        self.loaders: List[Lookup] = [as_lookup(loader) for loader in loaders]

    def get(self, key: str) -> Optional[str]:
        for lookup in self.loaders:
            value = lookup(key)
            if value is not None:
                return value
        return None

    def __len__(self) -> int:
        return len(self.loaders)


__all__ = ["PriorityLoader"]
