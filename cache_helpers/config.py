"""
Configuration for the cache helpers.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ValidationError
from .logging import configure_logging
from .store import DistributedCache, MemoryDistributedCache
from .redis_store import RedisDistributedCache


class CacheSettings(BaseSettings):
    """Settings read from ``CACHE_HELPERS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CACHE_HELPERS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="info")

    # Backend
    backend: str = Field(default="memory")
    redis_url: str = Field(default="redis://localhost:6379/0")
    key_prefix: str = Field(default="")
    default_ttl_seconds: Optional[int] = Field(default=None)
    socket_timeout: float = Field(default=5.0)


def get_settings() -> CacheSettings:
    """Load settings from the environment."""
    return CacheSettings()


def setup_logging(settings: Optional[CacheSettings] = None, service_name: str = "cache_helpers") -> None:
    """Configure structlog at the level named by ``settings.log_level``."""
    settings = settings or get_settings()
    configure_logging(service_name, settings.log_level)


def create_distributed_cache(settings: Optional[CacheSettings] = None) -> DistributedCache:
    """Build the store selected by ``settings.backend``."""
    settings = settings or get_settings()
    backend = settings.backend.lower()

    if backend == "memory":
        return MemoryDistributedCache()
    if backend == "redis":
        return RedisDistributedCache(
            settings.redis_url,
            key_prefix=settings.key_prefix,
            default_ttl=settings.default_ttl_seconds,
            socket_timeout=settings.socket_timeout
        )

    raise ValidationError("Unknown cache backend", {"backend": settings.backend})
