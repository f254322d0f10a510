"""
Return and risk ratios from a quote, a year of daily bars and the year-to-date series.
"""

from typing import Any

from marketlens.client import ProviderClient, open_client
from marketlens.indicators import (
    annualized_volatility,
    daily_returns,
    first_present,
    last_present,
    mean_return,
    percent_change,
    round_or_none,
)
from marketlens.market.charts import fetch_series
from marketlens.market.quotes import fetch_quote
from marketlens.models import KeyRatios, PriceSeries, QuoteSnapshot
from marketlens.shaping import run_operation


def compute_key_ratios(quote: QuoteSnapshot, daily: PriceSeries, ytd: PriceSeries) -> KeyRatios:
    """
    Compute day change, average daily return, volatility and YTD return.

    Args:
        quote: Current snapshot
        daily: One year of daily bars
        ytd: Year-to-date bars (any interval)

    Returns:
        KeyRatios record:
        - day_change_pct: change from previous close, None if it is missing or <= 0
        - average_daily_return_pct: mean daily return x 100, 4 decimals
        - annualized_volatility_pct: sample stdev of daily returns x sqrt(252) x 100,
          None with fewer than 2 returns
        - ytd_return_pct: first YTD open to last YTD close, None if the open is
          missing or <= 0
    """
    returns = daily_returns(daily.closes())

    average = mean_return(returns)
    volatility = annualized_volatility(returns)

    first_open = first_present(bar.open for bar in ytd.bars)
    last_close = last_present(bar.close for bar in ytd.bars)

    return KeyRatios(
        symbol=quote.symbol,
        price=quote.price,
        previous_close=quote.previous_close,
        day_change_pct=round_or_none(percent_change(quote.price, quote.previous_close, positive_base=True), 2),
        fifty_two_week_high=quote.fifty_two_week_high,
        fifty_two_week_low=quote.fifty_two_week_low,
        average_daily_return_pct=round_or_none(average * 100, 4) if average is not None else None,
        annualized_volatility_pct=round_or_none(volatility * 100, 2) if volatility is not None else None,
        ytd_return_pct=round_or_none(percent_change(last_close, first_open, positive_base=True), 2),
        trading_days=len(returns),
    )


def fetch_key_ratios(symbol: str, client: ProviderClient | None = None) -> KeyRatios:
    """Key ratios for a symbol; makes three requests on one client."""
    with open_client(client) as http:
        quote = fetch_quote(symbol, http)
        daily = fetch_series(symbol, range="1y", interval="1d", client=http)
        ytd = fetch_series(symbol, range="ytd", interval="1mo", client=http)
    return compute_key_ratios(quote, daily, ytd)


def get_key_ratios(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """Get key ratios wrapped in a result envelope."""
    return run_operation("key_ratios", symbol, fetch_key_ratios, symbol, output=output)
