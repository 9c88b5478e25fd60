"""FastAPI application exposing the NBC exchange rate snapshot."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from nbc_rates.cache import RateCache
from nbc_rates.config import Settings, load_settings
from nbc_rates.errors import ConfigurationError, ScrapeError
from nbc_rates.ingestion.strategy import PageFetcherFactory
from nbc_rates.service import ExchangeRateService
from nbc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    cache: RateCache | None = None,
    fetcher_factory: PageFetcherFactory | None = None,
) -> FastAPI:
    """Build the application with its own cache and rate service.

    The cache sweeper runs for the lifetime of the app; the cache is emptied
    on shutdown.
    """

    settings = settings or load_settings()
    cache = cache or RateCache(ttl=settings.cache_ttl, sweep_interval=settings.cache_sweep_interval)
    service = ExchangeRateService(settings, cache, fetcher_factory)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        cache.start_sweeper()
        LOGGER.info("Server is running at http://localhost:%s", settings.port)
        yield
        await cache.stop_sweeper()
        cache.clear()

    app = FastAPI(title="NBC Exchange Rates", lifespan=lifespan)
    app.state.settings = settings
    app.state.cache = cache
    app.state.rate_service = service

    @app.exception_handler(ConfigurationError)
    async def _configuration_error(_request: Request, exc: ConfigurationError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(ScrapeError)
    async def _scrape_error(_request: Request, exc: ScrapeError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/")
    async def get_exchange_rates() -> JSONResponse:
        """Return the latest NBC exchange rates, official KHR/USD rate first."""

        snapshot = await service.get_snapshot()
        return JSONResponse(snapshot.to_dict())

    return app


__all__ = ["create_app"]
