"""
Opt-in concurrent fetching across symbols.

Operations are independent and stateless, so each symbol runs on its own
worker with its own HTTP session. Nothing here is used unless a caller asks
for it.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable

from marketlens.analysis import get_fundamentals, get_key_ratios, get_trend_analysis, get_yearly_performance
from marketlens.errors import InvalidParameter
from marketlens.logger import get_logger
from marketlens.market import get_chart, get_news, get_price, get_quote, get_technical_series

logger = get_logger(__name__)

OPERATIONS: dict[str, Callable[..., Any]] = {
    "quote": get_quote,
    "price": get_price,
    "chart": get_chart,
    "technical": get_technical_series,
    "news": get_news,
    "fundamentals": get_fundamentals,
    "yearly": get_yearly_performance,
    "ratios": get_key_ratios,
    "trend": get_trend_analysis,
}


def fetch_many(
    operation: str | Callable[..., Any],
    symbols: list[str],
    max_workers: int,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Run one operation for many symbols on a bounded thread pool.

    Args:
        operation: Name from OPERATIONS, or any callable taking a symbol first
        symbols: Ticker symbols; duplicates are fetched once
        max_workers: Upper bound on concurrent requests, at least 1
        **kwargs: Extra arguments passed to every call (e.g. range, interval)

    Returns:
        Mapping of symbol to the operation's result, in input order

    Raises:
        InvalidParameter: unknown operation name or max_workers below 1
    """
    if isinstance(operation, str):
        if operation not in OPERATIONS:
            raise InvalidParameter(f"Unknown operation {operation!r}. Available: {', '.join(OPERATIONS)}")
        func = OPERATIONS[operation]
    else:
        func = operation
    if max_workers < 1:
        raise InvalidParameter(f"max_workers must be at least 1, got {max_workers}")

    unique = list(dict.fromkeys(symbols))
    results: dict[str, Any] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_symbol = {executor.submit(func, symbol, **kwargs): symbol for symbol in unique}
        for future in as_completed(future_to_symbol):
            results[future_to_symbol[future]] = future.result()

    logger.debug(f"fetch_many: {len(unique)} symbols with {max_workers} workers")
    return {symbol: results[symbol] for symbol in unique}
