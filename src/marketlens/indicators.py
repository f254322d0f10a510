"""
Descriptive statistics over price sequences.

All helpers take plain lists of present values or Optional operands and
return None instead of raising when an input is missing or a ratio is
undefined.
"""

import math
from typing import Iterable

import numpy as np

TRADING_DAYS_PER_YEAR = 252


def round_or_none(value: float | None, digits: int) -> float | None:
    """Round to a number of decimals, passing None through."""
    if value is None:
        return None
    return round(float(value), digits)


def percent_change(
    current: float | None,
    base: float | None,
    positive_base: bool = False,
) -> float | None:
    """
    Percentage change from base to current.

    Args:
        current: New value
        base: Reference value
        positive_base: Also treat a negative base as undefined

    Returns:
        (current - base) / base * 100, or None when an operand is missing,
        the base is zero, or the base is negative and positive_base is set
    """
    if current is None or base is None:
        return None
    if base == 0 or (positive_base and base < 0):
        return None
    return (current - base) / base * 100


def first_present(values: Iterable[float | None]) -> float | None:
    for value in values:
        if value is not None:
            return value
    return None


def last_present(values: Iterable[float | None]) -> float | None:
    result = None
    for value in values:
        if value is not None:
            result = value
    return result


def sma(closes: list[float], window: int) -> float | None:
    """
    Simple moving average over exactly the last `window` closes.

    Returns None when fewer than `window` closes are available.
    """
    if window <= 0 or len(closes) < window:
        return None
    return float(np.mean(closes[-window:]))


def momentum(closes: list[float], sessions: int) -> float | None:
    """
    Percentage change from closes[-sessions] to the latest close.

    Returns None with fewer than sessions + 1 closes or a non-positive reference.
    """
    if sessions <= 0 or len(closes) < sessions + 1:
        return None
    return percent_change(closes[-1], closes[-sessions], positive_base=True)


def daily_returns(closes: list[float]) -> list[float]:
    """Fractional returns between consecutive closes with a positive prior close."""
    returns = []
    for previous, current in zip(closes, closes[1:]):
        if previous > 0:
            returns.append((current - previous) / previous)
    return returns


def mean_return(returns: list[float]) -> float | None:
    if not returns:
        return None
    return float(np.mean(returns))


def annualized_volatility(returns: list[float], periods: int = TRADING_DAYS_PER_YEAR) -> float | None:
    """
    Sample standard deviation of returns scaled to a year.

    Returns None with fewer than two returns.
    """
    if len(returns) < 2:
        return None
    return float(np.std(returns, ddof=1) * math.sqrt(periods))
