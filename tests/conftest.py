"""Shared fixtures: provider payload builders and a recording client."""

import logging
from datetime import datetime, timezone

import pytest

DAY = 86400
# 2024-01-02 14:30 UTC
START = int(datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc).timestamp())


def build_chart(
    closes,
    *,
    symbol="AAPL",
    timestamps=None,
    opens=None,
    highs=None,
    lows=None,
    volumes=None,
    adjclose=None,
    meta=None,
):
    """Chart envelope with parallel arrays; opens/highs/lows default to the closes."""
    if timestamps is None:
        timestamps = [START + i * DAY for i in range(len(closes))]
    present = [c for c in closes if c is not None]
    base_meta = {
        "symbol": symbol,
        "currency": "USD",
        "exchangeName": "NMS",
        "fullExchangeName": "NasdaqGS",
        "instrumentType": "EQUITY",
        "regularMarketPrice": present[-1] if present else None,
        "chartPreviousClose": present[0] if present else None,
        "fiftyTwoWeekHigh": max(present) if present else None,
        "fiftyTwoWeekLow": min(present) if present else None,
        "regularMarketTime": timestamps[-1] if timestamps else None,
    }
    base_meta.update(meta or {})
    indicators = {
        "quote": [
            {
                "open": list(closes) if opens is None else opens,
                "high": list(closes) if highs is None else highs,
                "low": list(closes) if lows is None else lows,
                "close": list(closes),
                "volume": [1000] * len(closes) if volumes is None else volumes,
            }
        ]
    }
    if adjclose is not None:
        indicators["adjclose"] = [{"adjclose": adjclose}]
    result = {"meta": base_meta, "timestamp": timestamps, "indicators": indicators}
    return {"chart": {"result": [result], "error": None}}


def build_quote(**meta):
    """Chart envelope carrying only a metadata block."""
    base = {"symbol": "AAPL", "currency": "USD", "regularMarketPrice": 150.0, "previousClose": 148.0}
    base.update(meta)
    return {"chart": {"result": [{"meta": base}], "error": None}}


def build_search(count, start_time=1700000000):
    return {
        "quotes": [{"symbol": "AAPL"}],
        "news": [
            {
                "uuid": f"id-{i}",
                "title": f"Headline {i}",
                "publisher": "Wire",
                "link": f"https://example.com/{i}",
                "providerPublishTime": start_time + i * 60,
                "type": "STORY",
                "relatedTickers": ["AAPL", "MSFT"],
            }
            for i in range(count)
        ],
    }


class FakeClient:
    """Stands in for ProviderClient; answers chart requests by (range, interval)."""

    def __init__(self, charts=None, search=None, error=None):
        self.charts = charts or {}
        self.search_body = search
        self.error = error
        self.calls = []

    def chart(self, symbol, range, interval, **extra):
        self.calls.append(("chart", symbol, range, interval, extra))
        if self.error is not None:
            raise self.error
        if (range, interval) in self.charts:
            return self.charts[(range, interval)]
        return self.charts[None]

    def search(self, query, news_count):
        self.calls.append(("search", query, news_count))
        if self.error is not None:
            raise self.error
        return self.search_body


@pytest.fixture
def make_chart():
    return build_chart


@pytest.fixture
def make_quote():
    return build_quote


@pytest.fixture
def make_search():
    return build_search


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI invocations so they never outlive a test."""
    yield
    package_logger = logging.getLogger("marketlens")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
