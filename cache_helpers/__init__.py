"""
Typed JSON helpers for distributed caches.

- json_helpers: set/get/get-or-create of JSON-serialized values
- codec: pydantic-backed JSON codec
- options: per-entry expiration options
- store: the cache interface and an in-memory store
- redis_store: Redis-backed store
- config: settings via pydantic-settings
- errors: error types
- logging: structlog configuration
"""

from .codec import JsonCodec
from .config import CacheSettings, create_distributed_cache, get_settings, setup_logging
from .errors import (
    CacheHelpersException,
    DecodeError,
    ErrorResponse,
    SerializationError,
    StoreError,
    ValidationError,
)
from .json_helpers import (
    TypedCache,
    get_json,
    get_or_create_json,
    get_or_create_json_async,
    set_json,
)
from .options import EntryOptions
from .redis_store import RedisDistributedCache
from .store import DistributedCache, MemoryDistributedCache

__all__ = [
    "CacheHelpersException",
    "CacheSettings",
    "DecodeError",
    "DistributedCache",
    "EntryOptions",
    "ErrorResponse",
    "JsonCodec",
    "MemoryDistributedCache",
    "RedisDistributedCache",
    "SerializationError",
    "StoreError",
    "TypedCache",
    "ValidationError",
    "create_distributed_cache",
    "get_json",
    "get_or_create_json",
    "get_or_create_json_async",
    "get_settings",
    "set_json",
    "setup_logging",
]
