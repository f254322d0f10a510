"""
Error types raised by marketlens retrieval and analysis operations.
"""


class MarketDataError(Exception):
    """Base error for market data operations."""

    def __init__(self, message: str, *, symbol: str | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.operation = operation


class InvalidParameter(MarketDataError, ValueError):
    """Raised when a range, interval or count is outside the accepted set.

    Always raised before any request is sent.
    """


class NetworkError(MarketDataError):
    """Raised when the HTTP call fails or the response body is not the expected envelope."""

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


class DataUnavailable(MarketDataError):
    """Raised when the provider answers but has no usable result for the symbol."""
