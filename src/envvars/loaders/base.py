"""Base protocol for key/value sources.

A source answers one question: "what is the value for this key string?".
Uses Python's Protocol for structural subtyping, so any object with a
matching ``get`` is a source.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol, Union, runtime_checkable

Lookup = Callable[[str], Optional[str]]


@runtime_checkable
class SourceLoader(Protocol):
    """Protocol for read-only key/value sources.

    Example:
        class StaticLoader:
            def get(self, key: str) -> Optional[str]:
                return "42" if key == "ANSWER" else None

        loader: SourceLoader = StaticLoader()
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key``, or None if this source has no value."""
        ...


SourceLike = Union[SourceLoader, Mapping[str, str], Lookup]


def as_lookup(source: SourceLike) -> Lookup:
    """Normalise a loader, a plain mapping or a lookup function into a lookup function.

    Mappings are checked before loaders because ``dict`` also has a ``get``.

    Raises:
        TypeError: If ``source`` is none of the accepted kinds
    """
    if isinstance(source, Mapping):
        return source.get
    if isinstance(source, SourceLoader):
        return source.get
    if callable(source):
        return source
    raise TypeError(f"Expected a SourceLoader, mapping or callable, got {type(source).__name__}")


__all__ = ["Lookup", "SourceLike", "SourceLoader", "as_lookup"]
