from __future__ import annotations

import pytest

RATE_PAGE = """
<html><body>
<form id="fm-ex"><table><tbody>
  <tr><td><input id="datepicker"></td></tr>
  <tr><td>Official Exchange Rate : <font color="red">4083</font> KHR / USD</td></tr>
</tbody></table></form>
<table class="tbl-responsive"><tbody>
  <tr><td>Euro</td><td>KHR/EUR</td><td>1</td><td>4366</td><td>4410</td><td>4388</td></tr>
  <tr><td>Thai Baht</td><td>KHR/THB</td><td>1</td><td>110</td><td>111</td><td>110.5</td></tr>
</tbody></table>
</body></html>
"""


class FakeFetcher:
    """Stands in for the Selenium client and records how it was used."""

    def __init__(self, calls: dict[str, int], html: str | None, error: Exception | None) -> None:
        self._calls = calls
        self._html = html
        self._error = error

    def __enter__(self) -> "FakeFetcher":
        self._calls["opened"] += 1
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._calls["closed"] += 1

    def fetch_page_source(self, url: str) -> str:
        self._calls["fetched"] += 1
        if self._error is not None:
            raise self._error
        assert self._html is not None
        return self._html


class FakeFetcherFactory:
    def __init__(self, html: str | None = RATE_PAGE, error: Exception | None = None) -> None:
        self.calls = {"created": 0, "opened": 0, "fetched": 0, "closed": 0}
        self.html = html
        self.error = error

    def __call__(self) -> FakeFetcher:
        self.calls["created"] += 1
        return FakeFetcher(self.calls, self.html, self.error)


@pytest.fixture
def fetcher_factory() -> FakeFetcherFactory:
    return FakeFetcherFactory()
