"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Sequence

OFFICIAL_RATE_CURRENCY = "Official Exchange Rate"
OFFICIAL_RATE_SYMBOL = "KHR/USD"


@dataclass(frozen=True, slots=True)
class ExchangeRateRow:
    """A single currency row from the NBC exchange rate table."""

    currency: str
    symbol: str
    unit: int = 1
    bid: float = 0.0
    ask: float = 0.0
    average: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "currency": self.currency,
            "symbol": self.symbol,
            "unit": self.unit,
            "bid": self.bid,
            "ask": self.ask,
            "average": self.average,
        }


def official_rate_row(value: float) -> ExchangeRateRow:
    """Return the synthetic row representing the official KHR/USD rate."""

    return ExchangeRateRow(
        currency=OFFICIAL_RATE_CURRENCY,
        symbol=OFFICIAL_RATE_SYMBOL,
        unit=1,
        bid=value,
        ask=value,
        average=value,
    )


@dataclass(slots=True)
class ExchangeRateParseResult:
    """Rows and the raw official rate text extracted from one page."""

    rows: list[ExchangeRateRow] = field(default_factory=list)
    official_rate: str | None = None


@dataclass(frozen=True, slots=True)
class ExchangeRateSnapshot:
    """Timestamped collection of rates served to clients and cached."""

    date: datetime
    rates: tuple[ExchangeRateRow, ...]

    @classmethod
    def build(
        cls,
        rows: Sequence[ExchangeRateRow],
        *,
        fetched_at: datetime | None = None,
    ) -> "ExchangeRateSnapshot":
        return cls(date=fetched_at or datetime.now(timezone.utc), rates=tuple(rows))

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": _isoformat_utc(self.date),
            "rates": [row.to_dict() for row in self.rates],
        }


def _isoformat_utc(value: datetime) -> str:
    # 2024-05-01T03:04:05.123Z
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = [
    "OFFICIAL_RATE_CURRENCY",
    "OFFICIAL_RATE_SYMBOL",
    "ExchangeRateParseResult",
    "ExchangeRateRow",
    "ExchangeRateSnapshot",
    "official_rate_row",
]
