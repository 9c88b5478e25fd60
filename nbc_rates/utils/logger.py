"""Logging utilities for the nbc_rates package."""

from __future__ import annotations

import logging
import os
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def _resolve_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "nbc_rates") -> logging.Logger:
    """Return a module-level logger writing to the console.

    The root handler is configured on first use; ``LOG_LEVEL`` overrides the
    default ``INFO`` level.
    """
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=_resolve_level(os.getenv("LOG_LEVEL", "INFO")),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)
