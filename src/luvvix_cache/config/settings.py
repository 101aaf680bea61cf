"""Configuration settings for the cache service."""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from luvvix_cache.core.schemas import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_SIZE,
    DEFAULT_SWEEP_INTERVAL_S,
    DEFAULT_TTL_MS,
    CacheConfig,
)

load_dotenv()


def _env(name: str, default):
    return os.getenv(name, str(default))


@dataclass
class Settings:
    # Raw strings; CacheConfig does the parsing and range checks
    cache_default_ttl_ms: str = field(default_factory=lambda: _env("CACHE_DEFAULT_TTL_MS", DEFAULT_TTL_MS))
    cache_max_size: str = field(default_factory=lambda: _env("CACHE_MAX_SIZE", DEFAULT_MAX_SIZE))
    cache_sweep_interval_s: str = field(
        default_factory=lambda: _env("CACHE_SWEEP_INTERVAL_S", DEFAULT_SWEEP_INTERVAL_S)
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", DEFAULT_LOG_LEVEL))
    service_name: str = "luvvix-cache"

    def cache_config(self) -> CacheConfig:
        return CacheConfig.build(
            default_ttl=self.cache_default_ttl_ms,
            max_size=self.cache_max_size,
            sweep_interval=self.cache_sweep_interval_s,
            log_level=self.log_level,
        )
