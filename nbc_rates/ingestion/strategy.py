"""Abstractions for pluggable page fetchers."""

from __future__ import annotations

from typing import Callable, Protocol


class PageFetcher(Protocol):
    """Contract for loading the NBC rate page.

    Implementations navigate to ``url``, submit the rate form and return the
    rendered HTML once the result table exists. They are used as context
    managers so any browser they start is released on exit.
    """

    def fetch_page_source(self, url: str) -> str:
        ...  # pragma: no cover - protocol definition

    def __enter__(self) -> "PageFetcher":
        ...  # pragma: no cover - protocol definition

    def __exit__(self, exc_type, exc, tb) -> None:
        ...  # pragma: no cover - protocol definition


PageFetcherFactory = Callable[[], PageFetcher]


__all__ = ["PageFetcher", "PageFetcherFactory"]
