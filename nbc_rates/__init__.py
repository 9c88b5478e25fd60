"""Public interface for the nbc_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from nbc_rates.api import create_app
from nbc_rates.cache import RateCache
from nbc_rates.config import Settings, load_settings
from nbc_rates.errors import ConfigurationError, NBCRatesError, ScrapeError
from nbc_rates.ingestion.models import (
    ExchangeRateParseResult,
    ExchangeRateRow,
    ExchangeRateSnapshot,
)
from nbc_rates.ingestion.nbc_selenium import NBCSeleniumClient
from nbc_rates.ingestion.nbc_table import combine_rates, parse_exchange_rates
from nbc_rates.service import ExchangeRateService

__all__ = [
    "__version__",
    "ConfigurationError",
    "ExchangeRateParseResult",
    "ExchangeRateRow",
    "ExchangeRateService",
    "ExchangeRateSnapshot",
    "NBCRatesError",
    "NBCSeleniumClient",
    "RateCache",
    "ScrapeError",
    "Settings",
    "combine_rates",
    "create_app",
    "load_settings",
    "parse_exchange_rates",
]

try:
    __version__ = importlib_metadata.version("nbc-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
