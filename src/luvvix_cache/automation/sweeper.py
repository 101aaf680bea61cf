"""
APScheduler job that periodically drops expired cache entries.
"""

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from luvvix_cache.core.cache import BoundedTTLCache
from luvvix_cache.core.errors import InvalidConfiguration
from luvvix_cache.core.logging import get_logger
from luvvix_cache.core.schemas import DEFAULT_SWEEP_INTERVAL_S

logger = get_logger(__name__)


class CacheSweeper:
    """Background sweep of a cache's expired entries.

    Memory hygiene only: ``get`` already ignores stale entries, so the
    sweep cadence never affects what callers see. Use as a context manager
    (or pair ``start``/``stop``) so the scheduler thread does not outlive
    the cache's owner.
    """

    JOB_ID = "cache_sweep"

    def __init__(
        self,
        cache: BoundedTTLCache,
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL_S,
    ):
        if interval_seconds <= 0:
            raise InvalidConfiguration(
                f"interval_seconds must be positive, got {interval_seconds}"
            )
        self.cache = cache
        self.interval_seconds = interval_seconds
        self.scheduler = BackgroundScheduler()

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def sweep(self) -> int:
        """Run one cleanup pass now."""
        removed = self.cache.cleanup_expired()
        logger.debug("cache sweep finished", extra={"removed": removed})
        return removed

    def start(self):
        """Start the periodic sweep."""
        if self.running:
            return
        self.scheduler.add_job(
            self.sweep,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=self.JOB_ID,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        self.scheduler.start()
        logger.info(f"Cache sweeper started (every {self.interval_seconds}s)")

    def stop(self):
        """Stop the sweep; safe to call when not running."""
        if not self.running:
            return
        self.scheduler.shutdown(wait=False)
        # fresh scheduler so a later start() begins with no leftover jobs
        self.scheduler = BackgroundScheduler()
        logger.info("Cache sweeper stopped")

    def __enter__(self) -> "CacheSweeper":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
