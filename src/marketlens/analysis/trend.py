"""
Moving-average trend and momentum from six months of daily bars.
"""

from typing import Any

from marketlens.client import ProviderClient
from marketlens.indicators import momentum, percent_change, round_or_none, sma
from marketlens.market.charts import fetch_series
from marketlens.models import PriceSeries, TrendAnalysis
from marketlens.shaping import run_operation

SMA_WINDOWS = (20, 50, 100)
MOMENTUM_SESSIONS = (5, 20)


def classify_trend(
    price: float | None,
    sma_20: float | None,
    sma_50: float | None,
) -> tuple[str, str]:
    """
    Classify the moving-average alignment.

    Returns:
        (trend, signal): ("bullish", "buy") when price > SMA20 > SMA50,
        ("bearish", "sell") when price < SMA20 < SMA50, else ("neutral", "hold")
    """
    if price is None or sma_20 is None or sma_50 is None:
        return "neutral", "hold"
    if price > sma_20 > sma_50:
        return "bullish", "buy"
    if price < sma_20 < sma_50:
        return "bearish", "sell"
    return "neutral", "hold"


def compute_trend(series: PriceSeries) -> TrendAnalysis:
    """
    Compute SMAs, trend classification and momentum for a series.

    The current price is the series' quoted price, or the last close when the
    metadata has none.
    """
    closes = series.closes()
    quote = series.quote

    price = quote.price if quote is not None and quote.price is not None else (closes[-1] if closes else None)
    high_52w = quote.fifty_two_week_high if quote is not None else None

    sma_20, sma_50, sma_100 = (round_or_none(sma(closes, window), 2) for window in SMA_WINDOWS)
    momentum_5d, momentum_20d = (round_or_none(momentum(closes, k), 2) for k in MOMENTUM_SESSIONS)
    trend, signal = classify_trend(price, sma_20, sma_50)

    return TrendAnalysis(
        symbol=series.symbol,
        current_price=price,
        sma_20=sma_20,
        sma_50=sma_50,
        sma_100=sma_100,
        trend=trend,
        signal=signal,
        momentum_5d=momentum_5d,
        momentum_20d=momentum_20d,
        fifty_two_week_high=high_52w,
        pct_from_52w_high=round_or_none(percent_change(price, high_52w), 2),
    )


def fetch_trend_analysis(symbol: str, client: ProviderClient | None = None) -> TrendAnalysis:
    return compute_trend(fetch_series(symbol, range="6mo", interval="1d", client=client))


def get_trend_analysis(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """Get the trend analysis wrapped in a result envelope."""
    return run_operation("trend_analysis", symbol, fetch_trend_analysis, symbol, output=output)
