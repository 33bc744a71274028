"""
Tests for settings and store construction.
"""

import pytest
from unittest.mock import patch

from cache_helpers import (
    CacheSettings,
    MemoryDistributedCache,
    RedisDistributedCache,
    ValidationError,
    create_distributed_cache,
    get_settings,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("BACKEND", "REDIS_URL", "KEY_PREFIX", "DEFAULT_TTL_SECONDS", "LOG_LEVEL", "SOCKET_TIMEOUT"):
        monkeypatch.delenv(f"CACHE_HELPERS_{name}", raising=False)


def test_defaults():
    settings = CacheSettings()

    assert settings.backend == "memory"
    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.default_ttl_seconds is None
    assert settings.log_level == "info"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CACHE_HELPERS_BACKEND", "redis")
    monkeypatch.setenv("CACHE_HELPERS_REDIS_URL", "redis://cache:6379/2")
    monkeypatch.setenv("CACHE_HELPERS_KEY_PREFIX", "svc:")
    monkeypatch.setenv("CACHE_HELPERS_DEFAULT_TTL_SECONDS", "120")

    settings = get_settings()

    assert settings.backend == "redis"
    assert settings.redis_url == "redis://cache:6379/2"
    assert settings.key_prefix == "svc:"
    assert settings.default_ttl_seconds == 120


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("CACHE_HELPERS_KEY_PREFIX=dotenv:\n")

    assert CacheSettings().key_prefix == "dotenv:"


def test_create_memory_store():
    assert isinstance(create_distributed_cache(CacheSettings()), MemoryDistributedCache)


def test_create_redis_store():
    settings = CacheSettings(
        backend="REDIS",
        redis_url="redis://cache:6379/1",
        key_prefix="svc:",
        default_ttl_seconds=60,
        socket_timeout=2.5
    )

    store = create_distributed_cache(settings)

    assert isinstance(store, RedisDistributedCache)
    assert store.redis_url == "redis://cache:6379/1"
    assert store.key_prefix == "svc:"
    assert store.default_ttl == 60
    assert store.socket_timeout == 2.5
    assert store.redis is None


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError) as exc_info:
        create_distributed_cache(CacheSettings(backend="memcached"))

    assert exc_info.value.details == {"backend": "memcached"}


def test_setup_logging_uses_configured_level(monkeypatch):
    monkeypatch.setenv("CACHE_HELPERS_LOG_LEVEL", "debug")

    with patch("cache_helpers.config.configure_logging") as configure:
        setup_logging(service_name="pricing")

    configure.assert_called_once_with("pricing", "debug")


def test_setup_logging_with_explicit_settings():
    with patch("cache_helpers.config.configure_logging") as configure:
        setup_logging(CacheSettings(log_level="warning"))

    configure.assert_called_once_with("cache_helpers", "warning")
