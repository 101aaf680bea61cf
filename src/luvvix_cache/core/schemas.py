"""
Pydantic models for cache configuration and stats snapshots.
Why: validate env-sourced config once; give /metrics a fixed shape.
"""

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, computed_field, field_validator

from .errors import InvalidConfiguration

DEFAULT_TTL_MS = 300_000
DEFAULT_MAX_SIZE = 100
DEFAULT_SWEEP_INTERVAL_S = 60.0
DEFAULT_LOG_LEVEL = "INFO"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CacheConfig(BaseModel):
    default_ttl: int = Field(default=DEFAULT_TTL_MS, ge=0)
    max_size: int = Field(default=DEFAULT_MAX_SIZE, gt=0)
    sweep_interval: float = Field(default=DEFAULT_SWEEP_INTERVAL_S, gt=0)
    log_level: LogLevel = DEFAULT_LOG_LEVEL

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @classmethod
    def build(cls, **values) -> "CacheConfig":
        """Validate ``values``, raising InvalidConfiguration instead of pydantic's error."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidConfiguration(f"invalid cache configuration: {e}") from e


class CacheStats(BaseModel):
    model_config = {"frozen": True}

    hits: int = 0
    misses: int = 0

    @computed_field  # type: ignore[misc]
    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class CacheMetrics(CacheStats):
    size: int
    max_size: int
