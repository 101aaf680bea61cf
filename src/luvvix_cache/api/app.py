"""FastAPI diagnostics surface for the AI response cache (debug panel backend)."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from luvvix_cache.ai_cache import AIResponseCache
from luvvix_cache.automation.sweeper import CacheSweeper
from luvvix_cache.config.settings import Settings
from luvvix_cache.core.cache import BoundedTTLCache
from luvvix_cache.core.logging import get_logger, setup_logging
from luvvix_cache.core.middleware import ObservabilityMiddleware
from luvvix_cache.core.schemas import CacheMetrics

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app; cache and sweeper live exactly as long as the app does."""
    settings = settings or Settings()
    config = settings.cache_config()
    setup_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cache: BoundedTTLCache[str] = BoundedTTLCache(
            default_ttl=config.default_ttl, max_size=config.max_size
        )
        app.state.cache = cache
        app.state.ai_cache = AIResponseCache(cache)
        with CacheSweeper(cache, interval_seconds=config.sweep_interval) as sweeper:
            app.state.sweeper = sweeper
            logger.info(
                f"Cache ready (default_ttl={config.default_ttl}ms, max_size={config.max_size})"
            )
            yield

    app = FastAPI(title="LuvviX Cache", version="1.0.0", lifespan=lifespan)
    app.add_middleware(ObservabilityMiddleware)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "service": settings.service_name})

    @app.get("/metrics")
    async def get_metrics(request: Request) -> JSONResponse:
        """Cache hit/miss counters and occupancy."""
        cache = request.app.state.cache
        stats = cache.stats
        snapshot = CacheMetrics(
            hits=stats.hits, misses=stats.misses, size=cache.size, max_size=cache.max_size
        )
        return JSONResponse(snapshot.model_dump())

    @app.post("/cache/cleanup")
    async def cleanup(request: Request) -> JSONResponse:
        removed = request.app.state.cache.cleanup_expired()
        return JSONResponse({"removed": removed})

    @app.delete("/cache")
    async def clear(request: Request) -> JSONResponse:
        request.app.state.cache.clear()
        logger.info("Cache cleared via API")
        return JSONResponse({"cleared": True})

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info("Starting LuvviX cache diagnostics API...")
    uvicorn.run(app, host="0.0.0.0", port=7860)
