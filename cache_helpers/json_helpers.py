"""
Typed JSON helpers layered over a byte-oriented distributed cache.

Values are stored as UTF-8 encoded JSON text. Reads that find no entry,
or an entry with an empty value, return ``None`` rather than raising.
"""

from datetime import timedelta
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar, Union

from .codec import JsonCodec, default_codec
from .errors import DecodeError, ValidationError
from .logging import get_logger
from .options import EntryOptions, coerce_options
from .store import DistributedCache

T = TypeVar("T")

logger = get_logger("cache_helpers.json")


def _check_key(key: str) -> None:
    if not isinstance(key, str):
        raise ValidationError("Cache key must be a string", {"type": type(key).__name__})


async def set_json(
    cache: DistributedCache,
    key: str,
    value: Any,
    options: Union[EntryOptions, timedelta, None] = None,
    *,
    codec: Optional[JsonCodec] = None
) -> None:
    """Serialize ``value`` to JSON and store it under ``key``.

    ``options`` may be an ``EntryOptions``, a ``timedelta`` meaning "expire
    this long from now", or ``None`` for the backend default. Serialization
    happens before the store is called, so a ``SerializationError`` means
    nothing was written. Store errors propagate unchanged.
    """
    _check_key(key)
    entry_options = coerce_options(options)
    data = (codec or default_codec).encode(value)
    await cache.set(key, data, entry_options)
    logger.debug(
        "Cached value",
        key=key,
        size=len(data),
        expires_in=entry_options.absolute_expiration_relative_to_now
    )


async def get_json(
    cache: DistributedCache,
    key: str,
    model: Type[T] = Any,
    *,
    codec: Optional[JsonCodec] = None
) -> Optional[T]:
    """Fetch ``key`` and decode it as ``model``.

    Returns ``None`` when the entry is missing or its value is empty.
    A stored JSON ``null`` comes back as ``None`` only when ``model`` accepts
    ``None`` (``Any`` or ``Optional[...]``); other models raise ``DecodeError``.
    Raises ``DecodeError`` if a non-empty value is not valid UTF-8 JSON for
    ``model``.
    """
    _check_key(key)
    data = await cache.get(key)
    if data is None or len(data) == 0:
        logger.debug("Cache miss", key=key)
        return None

    try:
        value = (codec or default_codec).decode(data, model)
    except DecodeError as e:
        logger.warning("Undecodable cache entry", key=key, error=str(e))
        raise

    logger.debug("Cache hit", key=key)
    return value


async def get_or_create_json(
    cache: DistributedCache,
    key: str,
    factory: Callable[[], T],
    model: Type[T] = Any,
    *,
    codec: Optional[JsonCodec] = None
) -> T:
    """Return the cached value for ``key``, populating it from ``factory`` on a miss.

    The new value is stored with default options. Concurrent callers missing
    on the same key each run the factory and write; the last write wins.
    """
    # A miss is decided on the fetched value, never on the cache handle.
    cached = await get_json(cache, key, model, codec=codec)
    if cached is not None:
        return cached

    logger.info("Populating cache entry from factory", key=key)
    created = factory()
    await set_json(cache, key, created, codec=codec)
    return created


async def get_or_create_json_async(
    cache: DistributedCache,
    key: str,
    factory: Callable[[], Awaitable[T]],
    model: Type[T] = Any,
    *,
    codec: Optional[JsonCodec] = None
) -> T:
    """Like ``get_or_create_json`` but awaits ``factory`` on a miss."""
    cached = await get_json(cache, key, model, codec=codec)
    if cached is not None:
        return cached

    logger.info("Populating cache entry from async factory", key=key)
    created = await factory()
    await set_json(cache, key, created, codec=codec)
    return created


class TypedCache:
    """A distributed cache bound to a JSON codec.

    Thin object form of the module functions for callers that prefer to
    pass one handle around.
    """

    def __init__(self, cache: DistributedCache, codec: Optional[JsonCodec] = None):
        self.cache = cache
        self.codec = codec or default_codec

    async def set(
        self,
        key: str,
        value: Any,
        options: Union[EntryOptions, timedelta, None] = None
    ) -> None:
        await set_json(self.cache, key, value, options, codec=self.codec)

    async def get(self, key: str, model: Type[T] = Any) -> Optional[T]:
        return await get_json(self.cache, key, model, codec=self.codec)

    async def get_or_create(self, key: str, factory: Callable[[], T], model: Type[T] = Any) -> T:
        return await get_or_create_json(self.cache, key, factory, model, codec=self.codec)

    async def get_or_create_async(
        self,
        key: str,
        factory: Callable[[], Awaitable[T]],
        model: Type[T] = Any
    ) -> T:
        return await get_or_create_json_async(self.cache, key, factory, model, codec=self.codec)
