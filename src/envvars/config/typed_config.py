"""Typed access to a fixed set of configuration keys.

The key set is an ``Enum``. Every key is looked up exactly once when the
config is built; afterwards lookups only read the resolved snapshot, so a
``TypedConfig`` can be shared freely between threads.

Example:
    class Keys(str, Enum):
        DATABASE_URL = "DATABASE_URL"
        WORKERS = "WORKERS"
        DEBUG = "DEBUG"

    config = TypedConfig(Keys)
    config.assert_present([Keys.DATABASE_URL])

    url = config.get(Keys.DATABASE_URL)
    workers = config.get(Keys.WORKERS, int, default=4)
    debug = config.get(Keys.DEBUG, default="false")
"""

from __future__ import annotations

import asyncio
import inspect
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from envvars.exceptions import CouldNotMapError, MissingKeysError
from envvars.loaders import MappingLoader, SourceLike, as_lookup, default_loader
from envvars.logger import Logger, default_logger

KeyT = TypeVar("KeyT", bound=Enum)
T = TypeVar("T")

Mapper = Callable[[str], Optional[T]]
AsyncLookup = Callable[[str], Awaitable[Optional[str]]]

# Marks "no default supplied"; None is a legitimate default value
_NO_DEFAULT: Any = object()


def key_name(key: Enum) -> str:
    """Return the configuration key string for an enum member.

    String-valued members use their value, everything else its name.
    """
    return key.value if isinstance(key.value, str) else key.name


class TypedConfig(Generic[KeyT]):
    """Resolved configuration for one enumerated key set.

    Args:
        keys: Enum class listing every key the program uses
        loader: Source to resolve keys from; a SourceLoader, a mapping or a
            lookup function. Defaults to :func:`envvars.loaders.default_loader`.
        logger: Optional logger instance

    Missing keys never fail construction. They are recorded and reported by
    :meth:`assert_all_present`, :meth:`assert_present` and :meth:`get`.
    """

    def __init__(
        self,
        keys: Type[KeyT],
        loader: Optional[SourceLike] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        lookup = as_lookup(loader if loader is not None else default_loader())
        self._init(keys, [lookup(key_name(key)) for key in keys], logger)

    def _init(
        self,
        keys: Type[KeyT],
        results: Sequence[Optional[str]],
        logger: Optional[Logger],
    ) -> None:
        self.keys = keys
        self.logger = logger or default_logger()
        self._values: Dict[KeyT, Optional[str]] = dict(zip(keys, results))
        self._missing: Tuple[str, ...] = tuple(
            key_name(key) for key, value in self._values.items() if value is None
        )
        self.logger.debug(
            "Resolved configuration keys",
            key_set=keys.__name__,
            resolved=len(self._values) - len(self._missing),
            missing=len(self._missing),
        )

    @classmethod
    def from_mapping(
        cls,
        keys: Type[KeyT],
        values: Mapping[str, str],
        logger: Optional[Logger] = None,
    ) -> "TypedConfig[KeyT]":
        """Resolve ``keys`` against a plain dictionary."""
        return cls(keys, MappingLoader(values), logger=logger)

    @classmethod
    async def aload(
        cls,
        keys: Type[KeyT],
        loader: Union[AsyncLookup, Any],
        logger: Optional[Logger] = None,
    ) -> "TypedConfig[KeyT]":
        """Resolve ``keys`` through an asynchronous source.

        ``loader`` is either an async function ``(key) -> Optional[str]`` or an
        object whose ``get`` is one. Lookups run concurrently; the result is
        identical to resolving the same values synchronously.
        """
        lookup = loader.get if hasattr(loader, "get") else loader
        if not callable(lookup):
            raise TypeError(f"Expected an async lookup, got {type(loader).__name__}")

        async def resolve(key: KeyT) -> Optional[str]:
            value = lookup(key_name(key))
            if inspect.isawaitable(value):
                value = await value
            return value

        results = await asyncio.gather(*(resolve(key) for key in keys))
        config = cls.__new__(cls)
        config._init(keys, results, logger)
        return config

    @property
    def missing_keys(self) -> Tuple[str, ...]:
        """Names of the keys that were unresolved, in enumeration order."""
        return self._missing

    def is_present(self, key: KeyT) -> bool:
        return self._value(key) is not None

    def as_dict(self) -> Dict[str, str]:
        """Resolved values keyed by key string; missing keys are left out."""
        return {key_name(key): value for key, value in self._values.items() if value is not None}

    def assert_all_present(self) -> None:
        """Raise if any key of the key set is missing.

        Raises:
            MissingKeysError: Naming every unresolved key
        """
        if self._missing:
            raise MissingKeysError(self._missing)

    def assert_present(self, keys: Iterable[KeyT]) -> None:
        """Raise if any of ``keys`` is missing.

        Raises:
            MissingKeysError: Naming the unresolved members of ``keys``, in the order given
        """
        missing: List[str] = [key_name(key) for key in keys if self._value(key) is None]
        if missing:
            raise MissingKeysError(missing)

    def get(
        self,
        key: KeyT,
        mapper: Optional[Mapper[Any]] = None,
        *,
        default: Any = _NO_DEFAULT,
    ) -> Any:
        """Return the value for ``key``, optionally converted by ``mapper``.

        Without a default:
            - a missing key raises :class:`MissingKeysError` naming *all*
              unresolved keys, and the mapper is not called
            - a mapper returning None or raising ``ValueError`` raises
              :class:`CouldNotMapError` carrying the raw value
            - any other mapper exception propagates unchanged

        With a default, a missing key or a failed conversion returns the
        default instead. Mapper exceptions other than ``ValueError`` still
        propagate.
        """
        value = self._value(key)

        if value is None:
            if default is not _NO_DEFAULT:
                return default
            raise MissingKeysError(self._missing)

        if mapper is None:
            return value

        try:
            mapped = mapper(value)
        except ValueError as e:
            if default is not _NO_DEFAULT:
                return default
            raise CouldNotMapError(value, key=key_name(key)) from e

        if mapped is None:
            if default is not _NO_DEFAULT:
                return default
            raise CouldNotMapError(value, key=key_name(key))
        return mapped

    def _value(self, key: KeyT) -> Optional[str]:
        if not isinstance(key, self.keys):
            raise TypeError(f"{key!r} is not a member of {self.keys.__name__}")
        return self._values[key]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keys.__name__}, missing={list(self._missing)})"


__all__ = ["TypedConfig", "key_name"]
