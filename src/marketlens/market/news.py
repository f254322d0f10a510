"""
News headlines from the search endpoint.
"""

from typing import Any

from marketlens.client import ProviderClient, open_client
from marketlens.errors import InvalidParameter, MarketDataError, NetworkError
from marketlens.market import payload
from marketlens.models import NewsItem
from marketlens.shaping import run_operation

DEFAULT_NEWS_COUNT = 3


def parse_news_item(raw: dict[str, Any]) -> NewsItem:
    tickers = raw.get("relatedTickers")
    if not isinstance(tickers, list):
        tickers = []
    return NewsItem(
        title=payload.text(raw.get("title")),
        publisher=payload.text(raw.get("publisher")),
        link=payload.text(raw.get("link")),
        publish_time=payload.utc_time(raw.get("providerPublishTime")),
        type=payload.text(raw.get("type")),
        related_tickers=tuple(t for t in tickers if isinstance(t, str)),
    )


def search_news(
    query: str,
    count: int = DEFAULT_NEWS_COUNT,
    client: ProviderClient | None = None,
) -> list[NewsItem]:
    """
    Search recent news for a query, usually a ticker symbol.

    Args:
        query: Search text
        count: Maximum number of items; the provider may return fewer
        client: Optional client to reuse

    Returns:
        Up to `count` items in the provider's order

    Raises:
        InvalidParameter: count is negative
        NetworkError: the request failed or the response was malformed
    """
    try:
        if count < 0:
            raise InvalidParameter(f"News count must not be negative, got {count}")
        with open_client(client) as http:
            body = http.search(query, news_count=count)
        news = body.get("news")
        if news is None:
            news = []
        if not isinstance(news, list):
            raise NetworkError("Malformed search response: 'news' is not a list")
    except MarketDataError as e:
        e.symbol, e.operation = query, "search_news"
        raise

    return [parse_news_item(raw) for raw in news if isinstance(raw, dict)][:count]


def get_news(query: str, count: int = DEFAULT_NEWS_COUNT, output: str = "record") -> dict[str, Any] | str:
    """Get news items wrapped in a result envelope."""
    return run_operation("search_news", query, search_news, query, count, output=output)
