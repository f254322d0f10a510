"""
52-week range position of the current price.
"""

from typing import Any

from marketlens.client import ProviderClient
from marketlens.indicators import percent_change, round_or_none
from marketlens.market.quotes import fetch_quote
from marketlens.models import Fundamentals, QuoteSnapshot
from marketlens.shaping import run_operation


def compute_fundamentals(quote: QuoteSnapshot) -> Fundamentals:
    """
    Describe where the current price sits in its 52-week range.

    Args:
        quote: Snapshot from fetch_quote

    Returns:
        Fundamentals record; pct_from_52w_high and pct_from_52w_low are None
        when the price or the bound is missing, or the bound is zero
    """
    high = quote.fifty_two_week_high
    low = quote.fifty_two_week_low

    return Fundamentals(
        symbol=quote.symbol,
        name=quote.long_name or quote.short_name,
        currency=quote.currency,
        exchange=quote.full_exchange_name or quote.exchange_name,
        instrument_type=quote.instrument_type,
        price=quote.price,
        previous_close=quote.previous_close,
        day_high=quote.day_high,
        day_low=quote.day_low,
        volume=quote.volume,
        fifty_two_week_high=high,
        fifty_two_week_low=low,
        pct_from_52w_high=round_or_none(percent_change(quote.price, high), 2),
        pct_from_52w_low=round_or_none(percent_change(quote.price, low), 2),
    )


def fetch_fundamentals(symbol: str, client: ProviderClient | None = None) -> Fundamentals:
    return compute_fundamentals(fetch_quote(symbol, client))


def get_fundamentals(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """Get the fundamentals snapshot wrapped in a result envelope."""
    return run_operation("fundamentals", symbol, fetch_fundamentals, symbol, output=output)
