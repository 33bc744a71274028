"""
Distributed cache interface consumed by the helpers, plus an in-process store.
"""

import time
from typing import Callable, Dict, Optional, Protocol, Tuple, runtime_checkable

from .logging import get_logger
from .options import EntryOptions


@runtime_checkable
class DistributedCache(Protocol):
    """Byte-oriented key/value store with optional per-entry expiry."""

    async def get(self, key: str) -> Optional[bytes]: ...

    async def set(self, key: str, value: bytes, options: EntryOptions) -> None: ...


class MemoryDistributedCache:
    """Dict-backed distributed cache for local development and tests.

    Expired entries are dropped when read. Safe for use from a single
    event loop only.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[bytes, Optional[float]]] = {}
        self._clock = clock
        self.logger = get_logger("cache_helpers.memory")

    async def get(self, key: str) -> Optional[bytes]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and expires_at <= self._clock():
            del self._entries[key]
            self.logger.debug("Expired entry dropped", key=key)
            return None

        return value

    async def set(self, key: str, value: bytes, options: EntryOptions) -> None:
        expires_at = None
        expiry = options.absolute_expiration_relative_to_now
        if expiry is not None:
            expires_at = self._clock() + expiry.total_seconds()

        self._entries[key] = (bytes(value), expires_at)

    async def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
