"""Runtime configuration read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

NBC_URL_ENV: Final[str] = "NBC"
DEFAULT_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 3000
CACHE_KEY: Final[str] = "exchangeRates"
CACHE_TTL_SECONDS: Final[int] = 43_200
CACHE_SWEEP_SECONDS: Final[int] = 600
BROWSER_TIMEOUT_SECONDS: Final[int] = 30


@dataclass(frozen=True)
class Settings:
    """Values the service needs at runtime.

    ``nbc_url`` may be ``None``: the endpoint reports the missing URL on every
    request instead of refusing to start.
    """

    nbc_url: str | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cache_ttl: int = CACHE_TTL_SECONDS
    cache_sweep_interval: int = CACHE_SWEEP_SECONDS
    browser_timeout: int = BROWSER_TIMEOUT_SECONDS
    headless: bool = True


def load_settings() -> Settings:
    """Build :class:`Settings` from ``os.environ`` after loading ``.env``."""

    load_dotenv()
    nbc_url = os.getenv(NBC_URL_ENV, "").strip()
    return Settings(nbc_url=nbc_url or None)


__all__ = [
    "BROWSER_TIMEOUT_SECONDS",
    "CACHE_KEY",
    "CACHE_SWEEP_SECONDS",
    "CACHE_TTL_SECONDS",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "NBC_URL_ENV",
    "Settings",
    "load_settings",
]
