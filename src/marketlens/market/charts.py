"""
Historical price series retrieval from the chart endpoint.
"""

from typing import Any

from marketlens.client import ProviderClient, open_client
from marketlens.errors import InvalidParameter, MarketDataError, NetworkError
from marketlens.logger import get_logger
from marketlens.market import payload
from marketlens.market.quotes import parse_quote
from marketlens.models import Bar, PriceSeries
from marketlens.shaping import run_operation

logger = get_logger(__name__)

VALID_RANGES = ("1d", "5d", "1mo", "3mo", "6mo", "1y", "2y", "5y", "10y", "ytd", "max")
VALID_INTERVALS = ("1d", "5d", "1wk", "1mo", "3mo")


def validate_range(range: str) -> None:
    if range not in VALID_RANGES:
        raise InvalidParameter(f"Invalid range {range!r}. Valid ranges: {', '.join(VALID_RANGES)}")


def validate_interval(interval: str) -> None:
    if interval not in VALID_INTERVALS:
        raise InvalidParameter(f"Invalid interval {interval!r}. Valid intervals: {', '.join(VALID_INTERVALS)}")


def _first_block(container: Any, key: str) -> dict[str, Any]:
    """First object of a list-valued key, e.g. indicators["quote"][0]."""
    if not isinstance(container, dict):
        return {}
    blocks = container.get(key)
    if isinstance(blocks, list) and blocks and isinstance(blocks[0], dict):
        return blocks[0]
    return {}


def parse_series(result: dict[str, Any], symbol: str, range: str, interval: str) -> PriceSeries:
    """
    Zip a chart result's parallel arrays into bars.

    One bar is produced per timestamp. Arrays shorter than the timestamp array,
    and null entries, yield None for the affected fields.

    Raises:
        NetworkError: timestamps are not a list of Unix seconds
    """
    timestamps = result.get("timestamp") or []
    if not isinstance(timestamps, list):
        raise NetworkError("Malformed chart response: 'timestamp' is not a list")

    indicators = result.get("indicators")
    quote_block = _first_block(indicators, "quote")
    adjclose_block = _first_block(indicators, "adjclose") or _first_block(result, "adjclose")

    bars = []
    for i, raw_ts in enumerate(timestamps):
        timestamp = payload.utc_time(raw_ts)
        if timestamp is None:
            raise NetworkError(f"Malformed chart response: bad timestamp {raw_ts!r} at index {i}")
        bars.append(
            Bar(
                timestamp=timestamp,
                open=payload.number(payload.column(quote_block.get("open"), i)),
                high=payload.number(payload.column(quote_block.get("high"), i)),
                low=payload.number(payload.column(quote_block.get("low"), i)),
                close=payload.number(payload.column(quote_block.get("close"), i)),
                volume=payload.integer(payload.column(quote_block.get("volume"), i)),
                adj_close=payload.number(payload.column(adjclose_block.get("adjclose"), i)),
            )
        )

    # Stable sort keeps provider order for equal timestamps
    bars.sort(key=lambda bar: bar.timestamp)

    return PriceSeries(
        symbol=symbol,
        range=range,
        interval=interval,
        bars=tuple(bars),
        quote=parse_quote(result.get("meta"), symbol),
    )


def _fetch(
    symbol: str,
    range: str,
    interval: str,
    client: ProviderClient | None,
    operation: str,
    **extra: Any,
) -> PriceSeries:
    try:
        validate_range(range)
        validate_interval(interval)
        with open_client(client) as http:
            result = payload.chart_result(http.chart(symbol, range=range, interval=interval, **extra))
        series = parse_series(result, symbol, range, interval)
    except MarketDataError as e:
        e.symbol, e.operation = symbol, operation
        raise
    logger.debug(f"{operation}: {len(series.bars)} bars for {symbol} ({range}/{interval})")
    return series


def fetch_series(
    symbol: str,
    range: str = "1mo",
    interval: str = "1d",
    client: ProviderClient | None = None,
) -> PriceSeries:
    """
    Get historical OHLCV bars for a symbol.

    Args:
        symbol: Ticker symbol
        range: Time range (1d, 5d, 1mo, 3mo, 6mo, 1y, 2y, 5y, 10y, ytd, max)
        interval: Bar interval (1d, 5d, 1wk, 1mo, 3mo)
        client: Optional client to reuse

    Raises:
        InvalidParameter: range or interval not in the accepted sets; no request is made
        NetworkError: the request failed or the response was malformed
        DataUnavailable: the provider has no result for the symbol
    """
    return _fetch(symbol, range, interval, client, "fetch_series")


def fetch_technical_series(
    symbol: str,
    period: str = "1y",
    client: ProviderClient | None = None,
) -> PriceSeries:
    """Daily bars over a period, with the provider's adjusted closes."""
    return _fetch(symbol, period, "1d", client, "fetch_technical_series", includeAdjustedClose="true")


def get_chart(
    symbol: str,
    range: str = "1mo",
    interval: str = "1d",
    output: str = "record",
) -> dict[str, Any] | str:
    """Get historical bars wrapped in a result envelope."""
    return run_operation("fetch_series", symbol, fetch_series, symbol, range, interval, output=output)


def get_technical_series(symbol: str, period: str = "1y", output: str = "record") -> dict[str, Any] | str:
    """Get daily bars with adjusted closes wrapped in a result envelope."""
    return run_operation("fetch_technical_series", symbol, fetch_technical_series, symbol, period, output=output)
