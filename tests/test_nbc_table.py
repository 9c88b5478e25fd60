from __future__ import annotations

from nbc_rates.ingestion.models import OFFICIAL_RATE_SYMBOL, ExchangeRateRow
from nbc_rates.ingestion.nbc_table import (
    NBCTableSelectors,
    combine_rates,
    parse_exchange_rates,
)

NBC_PAGE = """
<html><body>
<form id="fm-ex">
  <table>
    <tbody>
      <tr><td>Exchange Rate on : <input id="datepicker" value="2024-05-01"></td></tr>
      <tr><td>Official Exchange Rate : <font color="red"> 4083 </font> KHR / USD</td></tr>
    </tbody>
  </table>
  <input type="submit" value="Search">
</form>
<table class="tbl-responsive">
  <thead><tr><th>Currency</th><th>Symbol</th><th>Unit</th><th>Bid</th><th>Ask</th><th>Average</th></tr></thead>
  <tbody>
    <tr><td>Euro</td><td>KHR/EUR</td><td>1</td><td>4366</td><td>4410</td><td>4388</td></tr>
    <tr><td>Japanese Yen</td><td>KHR/JPY</td><td>100</td><td>2,614.50</td><td>2,640.20</td><td>2,627.35</td></tr>
    <tr><td colspan="6">Source: NBC</td></tr>
    <tr><td>Thai Baht</td><td>KHR/THB</td><td>1</td><td>110</td><td>111</td></tr>
  </tbody>
</table>
</body></html>
"""


def test_parse_exchange_rates_keeps_six_cell_rows_in_order() -> None:
    result = parse_exchange_rates(NBC_PAGE)

    assert [row.symbol for row in result.rows] == ["KHR/EUR", "KHR/JPY"]
    assert result.rows[0] == ExchangeRateRow(
        currency="Euro", symbol="KHR/EUR", unit=1, bid=4366.0, ask=4410.0, average=4388.0
    )
    yen = result.rows[1]
    assert yen.unit == 100
    assert (yen.bid, yen.ask, yen.average) == (2614.5, 2640.2, 2627.35)


def test_parse_exchange_rates_reads_trimmed_official_rate() -> None:
    result = parse_exchange_rates(NBC_PAGE)

    assert result.official_rate == "4083"


def test_parse_exchange_rates_falls_back_on_blank_and_malformed_numbers() -> None:
    html = """
    <table class="tbl-responsive"><tbody>
      <tr><td>Blank</td><td>KHR/AAA</td><td></td><td></td><td> </td><td></td></tr>
      <tr><td>Garbled</td><td>KHR/BBB</td><td>n/a</td><td>-</td><td>abc</td><td>N/A</td></tr>
      <tr><td>Fractional</td><td>KHR/CCC</td><td>1.5</td><td>1e3</td><td>12.5 KHR</td><td>.5</td></tr>
      <tr><td>Padded</td><td>KHR/DDD</td><td>100.00</td><td>4,100.25</td><td>7.1.2</td><td>+3</td></tr>
    </tbody></table>
    """

    result = parse_exchange_rates(html)

    assert [(row.unit, row.bid, row.ask, row.average) for row in result.rows] == [
        (1, 0.0, 0.0, 0.0),
        (1, 0.0, 0.0, 0.0),
        (1, 1000.0, 12.5, 0.5),
        (100, 4100.25, 7.1, 3.0),
    ]
    assert result.official_rate is None


def test_parse_exchange_rates_ignores_rows_outside_the_rate_table() -> None:
    html = """
    <table class="other"><tbody>
      <tr><td>a</td><td>b</td><td>1</td><td>2</td><td>3</td><td>4</td></tr>
    </tbody></table>
    """

    result = parse_exchange_rates(html)

    assert result.rows == []


def test_parse_exchange_rates_treats_empty_official_rate_as_missing() -> None:
    html = """
    <div id="fm-ex"><table><tbody>
      <tr><td>date</td></tr>
      <tr><td><font>   </font></td></tr>
    </tbody></table></div>
    """

    assert parse_exchange_rates(html).official_rate is None


def test_parse_exchange_rates_accepts_custom_selectors() -> None:
    html = """
    <table id="rates"><tbody>
      <tr><td>Euro</td><td>KHR/EUR</td><td>1</td><td>1</td><td>2</td><td>1.5</td></tr>
    </tbody></table>
    <span class="official">4100</span>
    """
    selectors = NBCTableSelectors(rows_css="#rates tbody tr", official_rate_css="span.official")

    result = parse_exchange_rates(html, selectors)

    assert [row.symbol for row in result.rows] == ["KHR/EUR"]
    assert result.official_rate == "4100"


def test_combine_rates_puts_official_rate_first() -> None:
    rates = combine_rates(parse_exchange_rates(NBC_PAGE))

    official = rates[0]
    assert official.symbol == OFFICIAL_RATE_SYMBOL
    assert official.currency == "Official Exchange Rate"
    assert official.unit == 1
    assert official.bid == official.ask == official.average == 4083.0
    assert [row.symbol for row in rates[1:]] == ["KHR/EUR", "KHR/JPY"]


def test_combine_rates_without_official_rate_returns_table_rows_only() -> None:
    html = """
    <table class="tbl-responsive"><tbody>
      <tr><td>Euro</td><td>KHR/EUR</td><td>1</td><td>4366</td><td>4410</td><td>4388</td></tr>
    </tbody></table>
    """

    rates = combine_rates(parse_exchange_rates(html))

    assert [row.symbol for row in rates] == ["KHR/EUR"]
    assert all(row.symbol != OFFICIAL_RATE_SYMBOL for row in rates)


def test_parse_exchange_rates_replaces_non_positive_units() -> None:
    html = """
    <table class="tbl-responsive"><tbody>
      <tr><td>Zero</td><td>KHR/AAA</td><td>0</td><td>1</td><td>2</td><td>1.5</td></tr>
      <tr><td>Negative</td><td>KHR/BBB</td><td>-5</td><td>1</td><td>2</td><td>1.5</td></tr>
      <tr><td>Thousand</td><td>KHR/CCC</td><td>1,000</td><td>1</td><td>2</td><td>1.5</td></tr>
    </tbody></table>
    """

    result = parse_exchange_rates(html)

    assert [row.unit for row in result.rows] == [1, 1, 1000]
