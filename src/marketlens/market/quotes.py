"""
Quote retrieval from the chart endpoint's metadata block.
"""

from typing import Any

from marketlens.client import ProviderClient, open_client
from marketlens.errors import MarketDataError
from marketlens.indicators import percent_change, round_or_none
from marketlens.market import payload
from marketlens.models import PriceQuote, QuoteSnapshot
from marketlens.shaping import run_operation


def parse_quote(meta: Any, symbol: str) -> QuoteSnapshot:
    """
    Build a QuoteSnapshot from a chart result's metadata block.

    Args:
        meta: The result's "meta" object (anything else yields an empty snapshot)
        symbol: Requested symbol, used when the block does not name one
    """
    if not isinstance(meta, dict):
        meta = {}

    previous_close = payload.number(meta.get("previousClose"))
    if previous_close is None:
        previous_close = payload.number(meta.get("chartPreviousClose"))

    return QuoteSnapshot(
        symbol=payload.text(meta.get("symbol")) or symbol,
        price=payload.number(meta.get("regularMarketPrice")),
        previous_close=previous_close,
        currency=payload.text(meta.get("currency")),
        exchange_name=payload.text(meta.get("exchangeName")),
        full_exchange_name=payload.text(meta.get("fullExchangeName")),
        short_name=payload.text(meta.get("shortName")),
        long_name=payload.text(meta.get("longName")),
        fifty_two_week_high=payload.number(meta.get("fiftyTwoWeekHigh")),
        fifty_two_week_low=payload.number(meta.get("fiftyTwoWeekLow")),
        day_high=payload.number(meta.get("regularMarketDayHigh")),
        day_low=payload.number(meta.get("regularMarketDayLow")),
        volume=payload.integer(meta.get("regularMarketVolume")),
        instrument_type=payload.text(meta.get("instrumentType")),
        market_time=payload.utc_time(meta.get("regularMarketTime")),
    )


def fetch_quote(symbol: str, client: ProviderClient | None = None) -> QuoteSnapshot:
    """
    Get the current quote snapshot for a symbol.

    Args:
        symbol: Ticker symbol, passed to the provider as given (e.g. AAPL, ^GSPC)
        client: Optional client to reuse; a fresh one is used otherwise

    Raises:
        NetworkError: the request failed or the response was malformed
        DataUnavailable: the provider has no result for the symbol
    """
    try:
        with open_client(client) as http:
            result = payload.chart_result(http.chart(symbol, range="1d", interval="1d"))
    except MarketDataError as e:
        e.symbol, e.operation = symbol, "fetch_quote"
        raise
    return parse_quote(result.get("meta"), symbol)


def to_price_quote(quote: QuoteSnapshot) -> PriceQuote:
    """Reduce a snapshot to its price and day change."""
    change = None
    if quote.price is not None and quote.previous_close is not None:
        change = round_or_none(quote.price - quote.previous_close, 4)

    return PriceQuote(
        symbol=quote.symbol,
        price=quote.price,
        previous_close=quote.previous_close,
        change=change,
        change_pct=round_or_none(percent_change(quote.price, quote.previous_close, positive_base=True), 2),
        currency=quote.currency,
        market_time=quote.market_time,
    )


def fetch_current_price(symbol: str, client: ProviderClient | None = None) -> PriceQuote:
    """Get the current price and day change for a symbol."""
    return to_price_quote(fetch_quote(symbol, client))


def get_quote(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """
    Get a quote snapshot wrapped in a result envelope.

    Args:
        symbol: Ticker symbol
        output: "record" for a dict envelope, "json" for JSON text

    Returns:
        {"ok": True, "data": {...}} or {"ok": False, "error": ...}
    """
    return run_operation("fetch_quote", symbol, fetch_quote, symbol, output=output)


def get_price(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """Get the current price and day change wrapped in a result envelope."""
    return run_operation("fetch_current_price", symbol, fetch_current_price, symbol, output=output)


def get_quotes(symbols: list[str]) -> dict[str, Any]:
    """
    Get quotes for multiple symbols, one after another.

    Args:
        symbols: List of ticker symbols

    Returns:
        Dictionary containing quotes for all symbols and per-symbol errors
    """
    results = []
    errors = []

    for symbol in symbols:
        quote = get_quote(symbol)
        if quote.get("ok"):
            results.append(quote["data"])
        else:
            errors.append({"symbol": symbol, "error": quote.get("error"), "error_type": quote.get("error_type")})

    return {
        "ok": len(results) > 0,
        "data": {"quotes": results, "errors": errors if errors else None},
    }
