"""Exception types raised by the nbc_rates service."""

from __future__ import annotations

CONFIGURATION_ERROR_MESSAGE = "NBC_MUST_VALID"
SCRAPE_ERROR_MESSAGE = "An error occurred while processing the request."


class NBCRatesError(Exception):
    """Base class for errors surfaced by :mod:`nbc_rates`."""


class ConfigurationError(NBCRatesError):
    """Raised when the NBC source URL is missing from the environment."""

    def __init__(self, message: str = CONFIGURATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


class ScrapeError(NBCRatesError):
    """Raised when fetching, parsing or caching the rate table fails.

    The underlying failure is chained as ``__cause__``; callers only ever see
    the generic message.
    """

    def __init__(self, message: str = SCRAPE_ERROR_MESSAGE) -> None:
        super().__init__(message)


__all__ = [
    "CONFIGURATION_ERROR_MESSAGE",
    "SCRAPE_ERROR_MESSAGE",
    "ConfigurationError",
    "NBCRatesError",
    "ScrapeError",
]
