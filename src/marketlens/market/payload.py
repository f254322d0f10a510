"""
Helpers for reading the provider's JSON envelopes.
"""

import math
from datetime import datetime, timezone
from typing import Any

from marketlens.errors import DataUnavailable, NetworkError


def chart_result(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Return the first result of a chart envelope.

    Raises:
        NetworkError: the envelope does not have the chart shape
        DataUnavailable: the envelope has no result
    """
    chart = payload.get("chart")
    if not isinstance(chart, dict):
        raise NetworkError("Malformed chart response: missing 'chart' object")

    results = chart.get("result")
    if not results:
        error = chart.get("error")
        if isinstance(error, dict) and error.get("description"):
            raise DataUnavailable(str(error["description"]))
        raise DataUnavailable("No chart data returned")
    if not isinstance(results, list) or not isinstance(results[0], dict):
        raise NetworkError("Malformed chart response: 'result' is not a list of objects")
    return results[0]


def number(value: Any) -> float | None:
    """A float for finite numeric payload values, None for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        parsed = float(value)
    except OverflowError:
        return None
    return parsed if math.isfinite(parsed) else None


def integer(value: Any) -> int | None:
    """An int for numeric payload values, None for anything else."""
    parsed = number(value)
    return int(parsed) if parsed is not None else None


def text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def utc_time(value: Any) -> datetime | None:
    """Convert provider Unix seconds to a UTC datetime."""
    seconds = number(value)
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def column(values: Any, index: int) -> Any:
    """Value at index of a parallel array; None past its end or when the array is absent."""
    if not isinstance(values, list) or index >= len(values):
        return None
    return values[index]
