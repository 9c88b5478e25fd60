"""Cache-or-fetch orchestration behind the exchange rate endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from nbc_rates.cache import RateCache
from nbc_rates.config import CACHE_KEY, Settings
from nbc_rates.errors import ConfigurationError, ScrapeError
from nbc_rates.ingestion.models import ExchangeRateSnapshot
from nbc_rates.ingestion.nbc_selenium import NBCSeleniumClient
from nbc_rates.ingestion.nbc_table import combine_rates, parse_exchange_rates
from nbc_rates.ingestion.strategy import PageFetcher, PageFetcherFactory
from nbc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


def selenium_fetcher_factory(settings: Settings) -> PageFetcherFactory:
    """Return a factory launching a fresh headless browser per fetch."""

    def _factory() -> PageFetcher:
        return NBCSeleniumClient(headless=settings.headless, timeout=settings.browser_timeout)

    return _factory


class ExchangeRateService:
    """Serve the cached snapshot, scraping the NBC page on a cache miss.

    A failed scrape is logged and surfaced as :class:`ScrapeError`; nothing is
    cached for it and no retry is made. Concurrent misses each scrape on their
    own.
    """

    def __init__(
        self,
        settings: Settings,
        cache: RateCache,
        fetcher_factory: PageFetcherFactory | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.settings = settings
        self.cache = cache
        self.fetcher_factory = fetcher_factory or selenium_fetcher_factory(settings)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def get_snapshot(self) -> ExchangeRateSnapshot:
        url = self.settings.nbc_url
        if not url:
            LOGGER.error("The NBC environment variable is not set")
            raise ConfigurationError()

        cached = self.cache.get(CACHE_KEY)
        if cached is not None:
            LOGGER.debug("Serving exchange rates cached at %s", cached.date)
            return cached

        try:
            snapshot = await run_in_threadpool(self._scrape, url)
            self.cache.set(CACHE_KEY, snapshot, ttl=self.settings.cache_ttl)
        except Exception as exc:
            LOGGER.exception("Error occurred while scraping NBC exchange rates: %s", exc)
            raise ScrapeError() from exc

        LOGGER.info("Cached %s exchange rates fetched at %s", len(snapshot.rates), snapshot.date)
        return snapshot

    def _scrape(self, url: str) -> ExchangeRateSnapshot:
        with self.fetcher_factory() as fetcher:
            html = fetcher.fetch_page_source(url)
        result = parse_exchange_rates(html)
        return ExchangeRateSnapshot.build(combine_rates(result), fetched_at=self._clock())


__all__ = ["ExchangeRateService", "selenium_fetcher_factory"]
