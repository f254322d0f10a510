"""
Calendar-year performance from monthly bars.
"""

from collections import defaultdict
from typing import Any

from marketlens.client import ProviderClient
from marketlens.indicators import first_present, last_present, percent_change, round_or_none
from marketlens.market.charts import fetch_series
from marketlens.models import Bar, PriceSeries, YearlyPerformance, YearStats
from marketlens.shaping import run_operation


def _year_stats(year: int, bars: list[Bar]) -> YearStats:
    open_price = first_present(bar.open for bar in bars)
    close_price = last_present(bar.close for bar in bars)
    highs = [bar.high for bar in bars if bar.high is not None]
    lows = [bar.low for bar in bars if bar.low is not None]
    closes = [bar.close for bar in bars if bar.close is not None]
    volumes = [bar.volume for bar in bars if bar.volume is not None]

    return YearStats(
        year=year,
        open=open_price,
        close=close_price,
        high=max(highs) if highs else None,
        low=min(lows) if lows else None,
        average_close=round_or_none(sum(closes) / len(closes), 2) if closes else None,
        total_volume=sum(volumes) if volumes else None,
        return_pct=round_or_none(percent_change(close_price, open_price, positive_base=True), 2),
    )


def compute_yearly_performance(series: PriceSeries) -> YearlyPerformance:
    """
    Aggregate bars by UTC calendar year.

    Args:
        series: Price series, typically 5 years of monthly bars

    Returns:
        YearlyPerformance with one YearStats per year, most recent year first
    """
    by_year: dict[int, list[Bar]] = defaultdict(list)
    for bar in series.bars:
        by_year[bar.timestamp.year].append(bar)

    return YearlyPerformance(
        symbol=series.symbol,
        years={year: _year_stats(year, by_year[year]) for year in sorted(by_year, reverse=True)},
    )


def fetch_yearly_performance(symbol: str, client: ProviderClient | None = None) -> YearlyPerformance:
    return compute_yearly_performance(fetch_series(symbol, range="5y", interval="1mo", client=client))


def get_yearly_performance(symbol: str, output: str = "record") -> dict[str, Any] | str:
    """Get year-by-year performance wrapped in a result envelope."""
    return run_operation("yearly_performance", symbol, fetch_yearly_performance, symbol, output=output)
