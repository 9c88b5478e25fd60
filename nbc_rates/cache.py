"""In-memory TTL cache holding the latest exchange rate snapshot."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from cachetools import TLRUCache

from nbc_rates.config import CACHE_SWEEP_SECONDS, CACHE_TTL_SECONDS
from nbc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

CACHE_MAXSIZE = 128


@dataclass(frozen=True, slots=True)
class _Entry:
    value: Any
    ttl: float


def _time_to_use(_key: Hashable, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class RateCache:
    """Key/value store whose entries expire a fixed time after insertion.

    Expired entries are invisible to :meth:`get` straight away and are
    physically removed by :meth:`expire`, which the background sweeper calls
    every ``sweep_interval`` seconds. Expiry uses wall-clock time unless a
    ``timer`` is injected.
    """

    def __init__(
        self,
        *,
        ttl: float = CACHE_TTL_SECONDS,
        sweep_interval: float = CACHE_SWEEP_SECONDS,
        maxsize: int = CACHE_MAXSIZE,
        timer: Callable[[], float] = time.time,
    ) -> None:
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self._cache: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        self._sweeper: asyncio.Task | None = None

    def get(self, key: Hashable) -> Any | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        return entry.value

    def set(self, key: Hashable, value: Any, ttl: float | None = None) -> None:
        """Store ``value`` under ``key``, replacing whatever was there."""

        self._cache[key] = _Entry(value=value, ttl=self.ttl if ttl is None else ttl)

    def expire(self) -> None:
        self._cache.expire()

    def clear(self) -> None:
        self._cache.clear()

    async def run_sweeper(self, interval: float | None = None) -> None:
        """Evict expired entries every ``interval`` seconds until cancelled."""

        period = self.sweep_interval if interval is None else interval
        while True:
            await asyncio.sleep(period)
            self.expire()

    def start_sweeper(self) -> asyncio.Task:
        """Schedule :meth:`run_sweeper` on the running event loop."""

        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.get_running_loop().create_task(self.run_sweeper())
            LOGGER.debug("Started cache sweeper (every %ss)", self.sweep_interval)
        return self._sweeper

    async def stop_sweeper(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None


__all__ = ["CACHE_MAXSIZE", "RateCache"]
