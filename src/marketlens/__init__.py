"""
marketlens - Market data retrieval and descriptive price statistics

This package provides tools for:
- Quote snapshots, historical OHLCV bars and news from the provider's public endpoints
- 52-week range position, yearly performance, key ratios and trend signals
- Record and JSON presentation of every result
"""

__version__ = "0.1.0"

from marketlens.analysis import Analysis
from marketlens.errors import DataUnavailable, InvalidParameter, MarketDataError, NetworkError
from marketlens.market import MarketData

__all__ = [
    "Analysis",
    "DataUnavailable",
    "InvalidParameter",
    "MarketData",
    "MarketDataError",
    "NetworkError",
    "__version__",
]
