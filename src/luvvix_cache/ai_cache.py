"""
AI response cache keyed by prompt + context.
Why: identical questions in the same context should not hit the model twice.
"""

import hashlib
import json
from typing import Any, Callable, Mapping, Optional

from luvvix_cache.core.cache import BoundedTTLCache
from luvvix_cache.core.logging import get_logger
from luvvix_cache.core.schemas import CacheStats

logger = get_logger(__name__)

KEY_PREFIX = "ai:"


def make_key(prompt: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """Build a stable cache key; prompt case and surrounding whitespace are ignored."""
    normalized = prompt.strip().lower()
    ctx = json.dumps(context or {}, sort_keys=True, ensure_ascii=False, default=str)
    digest = hashlib.sha256(f"{normalized}\x00{ctx}".encode("utf-8")).hexdigest()
    return KEY_PREFIX + digest


class AIResponseCache:
    def __init__(self, cache: Optional[BoundedTTLCache[str]] = None) -> None:
        self.cache: BoundedTTLCache[str] = cache if cache is not None else BoundedTTLCache()

    def get_response(
        self, prompt: str, context: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        return self.cache.get(make_key(prompt, context))

    def set_response(
        self,
        prompt: str,
        response: str,
        context: Optional[Mapping[str, Any]] = None,
        ttl: Optional[int] = None,
    ) -> None:
        self.cache.set(make_key(prompt, context), response, ttl)

    def get_or_compute(
        self,
        prompt: str,
        compute: Callable[[], str],
        context: Optional[Mapping[str, Any]] = None,
        ttl: Optional[int] = None,
    ) -> str:
        key = make_key(prompt, context)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        response = compute()
        if response is None:
            # indistinguishable from a miss once stored; leave it uncached
            return response
        self.cache.set(key, response, ttl)
        logger.debug("cached AI response", extra={"key": key[:16], "length": len(response)})
        return response

    @property
    def stats(self) -> CacheStats:
        return self.cache.stats

    def clear(self) -> None:
        self.cache.clear()
