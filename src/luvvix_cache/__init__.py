from luvvix_cache.ai_cache import AIResponseCache, make_key
from luvvix_cache.core.cache import BoundedTTLCache, CacheEntry
from luvvix_cache.core.errors import InvalidConfiguration, LuvvixCacheError
from luvvix_cache.core.schemas import CacheStats

__all__ = [
    "AIResponseCache",
    "BoundedTTLCache",
    "CacheEntry",
    "CacheStats",
    "InvalidConfiguration",
    "LuvvixCacheError",
    "make_key",
]
