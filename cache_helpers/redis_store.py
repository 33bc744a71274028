"""
Redis-backed distributed cache.
"""

import math
from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .errors import StoreError
from .logging import get_logger
from .options import EntryOptions


def _milliseconds(expiry: timedelta) -> int:
    # PX takes whole milliseconds and rejects 0.
    return max(1, math.ceil(expiry / timedelta(milliseconds=1)))


class RedisDistributedCache:
    """Distributed cache storing raw bytes in Redis."""

    def __init__(
        self,
        redis_url: str,
        *,
        key_prefix: str = "",
        default_ttl: Optional[int] = None,
        socket_timeout: float = 5.0
    ):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.default_ttl = default_ttl
        self.socket_timeout = socket_timeout
        self.logger = get_logger("cache_helpers.redis")
        self.redis: Optional[redis.Redis] = None

    async def start(self):
        """Connect to Redis and verify the connection."""
        try:
            self._connect()
            await self.redis.ping()
            self.logger.info("Redis cache started", key_prefix=self.key_prefix)

        except RedisError as e:
            self.logger.error("Failed to start Redis cache", error=str(e))
            raise StoreError("redis", str(e), {"operation": "start"}) from e

    async def stop(self):
        """Close the Redis connection."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self.logger.info("Redis cache stopped")

    def _connect(self) -> redis.Redis:
        if self.redis is None:
            self.redis = redis.from_url(
                self.redis_url,
                decode_responses=False,
                socket_connect_timeout=self.socket_timeout,
                socket_timeout=self.socket_timeout,
                health_check_interval=30
            )
        return self.redis

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> Optional[bytes]:
        try:
            return await self._connect().get(self._key(key))
        except RedisError as e:
            self.logger.error("Redis get failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"operation": "get", "key": key}) from e

    async def set(self, key: str, value: bytes, options: EntryOptions) -> None:
        expiry = options.absolute_expiration_relative_to_now
        try:
            client = self._connect()
            if expiry is not None:
                await client.set(self._key(key), value, px=_milliseconds(expiry))
            elif self.default_ttl:
                await client.set(self._key(key), value, ex=self.default_ttl)
            else:
                await client.set(self._key(key), value)
        except RedisError as e:
            self.logger.error("Redis set failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"operation": "set", "key": key}) from e

    async def remove(self, key: str) -> None:
        try:
            await self._connect().delete(self._key(key))
        except RedisError as e:
            self.logger.error("Redis delete failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"operation": "remove", "key": key}) from e

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            await self._connect().ping()
            return True
        except RedisError:
            return False
