"""
Output shaping for marketlens records.

Two presentation modes share one field set: a plain-dict record for
programmatic use and JSON text for exchange. None (JSON null) marks a
missing value in both.
"""

import json
from dataclasses import fields, is_dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable

from marketlens.errors import InvalidParameter, MarketDataError
from marketlens.logger import get_logger

logger = get_logger(__name__)

OUTPUT_MODES = ("record", "json")
TIMESTAMP_KEYS = ("timestamp", "market_time", "publish_time")


def format_utc(value: datetime) -> str:
    """ISO-8601 text for a UTC instant, e.g. 2024-01-02T14:30:00Z."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_local(value: datetime, tz: tzinfo | None = None) -> str:
    """
    Render an instant in a display time zone.

    Args:
        value: Timezone-aware instant
        tz: Target zone; the machine's local zone when None
    """
    return value.astimezone(tz).isoformat()


def to_record(value: Any) -> Any:
    """
    Convert a marketlens object into JSON-compatible builtins.

    Dataclasses become dicts in field order, datetimes become UTC ISO strings,
    tuples become lists and mapping keys become strings.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_record(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, datetime):
        return format_utc(value)
    if isinstance(value, dict):
        return {str(key): to_record(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_record(item) for item in value]
    if isinstance(value, float):
        return float(value)
    return value


def to_json(value: Any, indent: int | None = None) -> str:
    """Serialize a record (or any marketlens object) to JSON text."""
    return json.dumps(to_record(value), indent=indent, allow_nan=False)


def from_json(text: str) -> Any:
    """Parse JSON text produced by to_json back into a record."""
    return json.loads(text)


def localize(record: Any, tz: tzinfo | None = None) -> Any:
    """
    Rewrite the UTC timestamps of a record into a display time zone.

    Only keys named in TIMESTAMP_KEYS are touched; the record is copied.
    """
    if isinstance(record, dict):
        result = {}
        for key, item in record.items():
            if key in TIMESTAMP_KEYS and isinstance(item, str):
                parsed = datetime.strptime(item, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
                result[key] = format_local(parsed, tz)
            else:
                result[key] = localize(item, tz)
        return result
    if isinstance(record, list):
        return [localize(item, tz) for item in record]
    return record


def check_output(output: str) -> None:
    if output not in OUTPUT_MODES:
        raise InvalidParameter(f"Unknown output mode {output!r}. Use one of: {', '.join(OUTPUT_MODES)}")


def run_operation(
    operation: str,
    symbol: str,
    func: Callable[..., Any],
    *args: Any,
    output: str = "record",
    **kwargs: Any,
) -> dict[str, Any] | str:
    """
    Run a retrieval or analysis function and wrap its outcome.

    Returns:
        {"ok": True, "data": record} on success, or
        {"ok": False, "error": ..., "error_type": ..., "symbol": ..., "operation": ...}
        when the function raised a MarketDataError. JSON text of the same
        envelope when output is "json".
    """
    check_output(output)
    try:
        result = func(*args, **kwargs)
    except MarketDataError as e:
        logger.warning(f"{operation} failed for {symbol}: {e}")
        envelope: dict[str, Any] = {
            "ok": False,
            "error": f"{operation} failed for {symbol}: {e}",
            "error_type": type(e).__name__,
            "symbol": symbol,
            "operation": operation,
        }
    else:
        envelope = {"ok": True, "data": to_record(result)}

    if output == "json":
        return to_json(envelope)
    return envelope
