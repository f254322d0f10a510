"""
Market data module - quotes, price series and news from the provider's chart and search endpoints.
"""

from marketlens.market.quotes import fetch_current_price, fetch_quote, get_price, get_quote, get_quotes
from marketlens.market.charts import (
    VALID_INTERVALS,
    VALID_RANGES,
    fetch_series,
    fetch_technical_series,
    get_chart,
    get_technical_series,
)
from marketlens.market.news import get_news, search_news

__all__ = [
    "MarketData",
    "VALID_INTERVALS",
    "VALID_RANGES",
    "fetch_current_price",
    "fetch_quote",
    "fetch_series",
    "fetch_technical_series",
    "get_chart",
    "get_news",
    "get_price",
    "get_quote",
    "get_quotes",
    "get_technical_series",
    "search_news",
]


class MarketData:
    """High-level interface for market data operations."""

    @staticmethod
    def quote(symbol: str, output: str = "record") -> dict | str:
        """Get the quote snapshot for a symbol."""
        return get_quote(symbol, output)

    @staticmethod
    def quotes(symbols: list[str]) -> dict:
        """Get quote snapshots for multiple symbols."""
        return get_quotes(symbols)

    @staticmethod
    def price(symbol: str, output: str = "record") -> dict | str:
        """Get the current price and day change."""
        return get_price(symbol, output)

    @staticmethod
    def chart(symbol: str, range: str = "1mo", interval: str = "1d", output: str = "record") -> dict | str:
        """Get historical price bars."""
        return get_chart(symbol, range, interval, output)

    @staticmethod
    def technical(symbol: str, period: str = "1y", output: str = "record") -> dict | str:
        """Get daily bars with adjusted closes."""
        return get_technical_series(symbol, period, output)

    @staticmethod
    def news(query: str, count: int = 3, output: str = "record") -> dict | str:
        """Get recent news items."""
        return get_news(query, count, output)
