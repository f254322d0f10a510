"""
Analysis module - 52-week position, yearly performance, key ratios and trend signals.
"""

from marketlens.analysis.fundamentals import compute_fundamentals, fetch_fundamentals, get_fundamentals
from marketlens.analysis.performance import (
    compute_yearly_performance,
    fetch_yearly_performance,
    get_yearly_performance,
)
from marketlens.analysis.ratios import compute_key_ratios, fetch_key_ratios, get_key_ratios
from marketlens.analysis.trend import compute_trend, fetch_trend_analysis, get_trend_analysis

__all__ = [
    "Analysis",
    "compute_fundamentals",
    "compute_key_ratios",
    "compute_trend",
    "compute_yearly_performance",
    "fetch_fundamentals",
    "fetch_key_ratios",
    "fetch_trend_analysis",
    "fetch_yearly_performance",
    "get_fundamentals",
    "get_key_ratios",
    "get_trend_analysis",
    "get_yearly_performance",
]


class Analysis:
    """High-level interface for derived metrics."""

    @staticmethod
    def fundamentals(symbol: str, output: str = "record") -> dict | str:
        """Get price position within the 52-week range."""
        return get_fundamentals(symbol, output)

    @staticmethod
    def yearly(symbol: str, output: str = "record") -> dict | str:
        """Get calendar-year performance over five years."""
        return get_yearly_performance(symbol, output)

    @staticmethod
    def ratios(symbol: str, output: str = "record") -> dict | str:
        """Get day change, average daily return, volatility and YTD return."""
        return get_key_ratios(symbol, output)

    @staticmethod
    def trend(symbol: str, output: str = "record") -> dict | str:
        """Get moving averages, trend signal and momentum."""
        return get_trend_analysis(symbol, output)
