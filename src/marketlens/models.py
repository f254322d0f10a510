"""
Records produced by marketlens.

Every numeric field is Optional: None means the provider did not supply the
value and is never substituted with zero.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class QuoteSnapshot:
    symbol: str
    price: float | None
    previous_close: float | None
    currency: str | None
    exchange_name: str | None
    full_exchange_name: str | None
    short_name: str | None
    long_name: str | None
    fifty_two_week_high: float | None
    fifty_two_week_low: float | None
    day_high: float | None
    day_low: float | None
    volume: int | None
    instrument_type: str | None
    market_time: datetime | None = None


@dataclass(frozen=True)
class Bar:
    timestamp: datetime
    open: float | None
    high: float | None
    low: float | None
    close: float | None
    volume: int | None
    adj_close: float | None = None


@dataclass(frozen=True)
class PriceSeries:
    symbol: str
    range: str
    interval: str
    bars: tuple[Bar, ...]
    quote: QuoteSnapshot | None = None

    def closes(self) -> list[float]:
        """Present closes in bar order."""
        return [bar.close for bar in self.bars if bar.close is not None]


@dataclass(frozen=True)
class NewsItem:
    title: str | None
    publisher: str | None
    link: str | None
    publish_time: datetime | None
    type: str | None
    related_tickers: tuple[str, ...] = ()


@dataclass(frozen=True)
class PriceQuote:
    symbol: str
    price: float | None
    previous_close: float | None
    change: float | None
    change_pct: float | None
    currency: str | None
    market_time: datetime | None


@dataclass(frozen=True)
class Fundamentals:
    symbol: str
    name: str | None
    currency: str | None
    exchange: str | None
    instrument_type: str | None
    price: float | None
    previous_close: float | None
    day_high: float | None
    day_low: float | None
    volume: int | None
    fifty_two_week_high: float | None
    fifty_two_week_low: float | None
    pct_from_52w_high: float | None
    pct_from_52w_low: float | None


@dataclass(frozen=True)
class YearStats:
    year: int
    open: float | None
    close: float | None
    high: float | None
    low: float | None
    average_close: float | None
    total_volume: int | None
    return_pct: float | None


@dataclass(frozen=True)
class YearlyPerformance:
    symbol: str
    # Most recent year first
    years: dict[int, YearStats] = field(default_factory=dict)


@dataclass(frozen=True)
class KeyRatios:
    symbol: str
    price: float | None
    previous_close: float | None
    day_change_pct: float | None
    fifty_two_week_high: float | None
    fifty_two_week_low: float | None
    average_daily_return_pct: float | None
    annualized_volatility_pct: float | None
    ytd_return_pct: float | None
    trading_days: int


@dataclass(frozen=True)
class TrendAnalysis:
    symbol: str
    current_price: float | None
    sma_20: float | None
    sma_50: float | None
    sma_100: float | None
    trend: str
    signal: str
    momentum_5d: float | None
    momentum_20d: float | None
    fifty_two_week_high: float | None
    pct_from_52w_high: float | None
