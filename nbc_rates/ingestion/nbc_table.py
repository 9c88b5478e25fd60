"""Parse the NBC exchange rate table out of rendered page HTML."""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from nbc_rates.ingestion.models import (
    ExchangeRateParseResult,
    ExchangeRateRow,
    official_rate_row,
)
from nbc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

EXPECTED_COLUMNS = 6


@dataclass(frozen=True)
class NBCTableSelectors:
    """CSS selectors tied to the markup of the NBC exchange rate page."""

    rows_css: str = "table.tbl-responsive tbody tr"
    official_rate_css: str = "#fm-ex > table > tbody > tr:nth-child(2) > td > font"


def _cell_text(cell) -> str:
    return " ".join(cell.stripped_strings).strip()


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_int(value: str | None, default: int = 1) -> int:
    """Parse the leading integer of ``value``; units must be positive."""

    if not value:
        return default
    match = _INT_PREFIX.match(value.replace(",", ""))
    if match is None:
        return default
    number = int(match.group(1))
    return number if number > 0 else default


def _parse_float(value: str | None, default: float = 0.0) -> float:
    if not value:
        return default
    match = _FLOAT_PREFIX.match(value.replace(",", ""))
    if match is None:
        return default
    return float(match.group(1))


def parse_exchange_rates(
    html: str, selectors: NBCTableSelectors | None = None
) -> ExchangeRateParseResult:
    """Extract currency rows and the official rate text from ``html``.

    Rows that do not have exactly six cells (currency, symbol, unit, bid, ask,
    average) are skipped. Only the leading number of a cell is read. Unparseable or non-positive
    units fall back to ``1`` and unparseable prices to ``0.0`` instead of
    raising.
    """

    selectors = selectors or NBCTableSelectors()
    soup = BeautifulSoup(html, "html.parser")

    rows: list[ExchangeRateRow] = []
    skipped = 0
    for tr in soup.select(selectors.rows_css):
        cells = [_cell_text(td) for td in tr.find_all("td")]
        if len(cells) != EXPECTED_COLUMNS:
            skipped += 1
            continue
        currency, symbol, unit, bid, ask, average = cells
        rows.append(
            ExchangeRateRow(
                currency=currency,
                symbol=symbol,
                unit=_parse_int(unit),
                bid=_parse_float(bid),
                ask=_parse_float(ask),
                average=_parse_float(average),
            )
        )
    if skipped:
        LOGGER.debug("Skipped %s NBC table rows without %s cells", skipped, EXPECTED_COLUMNS)

    official = soup.select_one(selectors.official_rate_css)
    official_text = official.get_text().strip() if official is not None else ""
    return ExchangeRateParseResult(rows=rows, official_rate=official_text or None)


def combine_rates(result: ExchangeRateParseResult) -> list[ExchangeRateRow]:
    """Return table rows with the official rate row first, when present."""

    rates = list(result.rows)
    if result.official_rate is not None:
        rates.insert(0, official_rate_row(_parse_float(result.official_rate)))
    return rates


__all__ = ["EXPECTED_COLUMNS", "NBCTableSelectors", "combine_rates", "parse_exchange_rates"]
