"""
Environment-based configuration.

Values are read on every call so that tests and long-lived hosts can change
them without reloading the package.
"""

import logging
import os

from marketlens.logger import get_logger

DEFAULT_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart"
DEFAULT_SEARCH_URL = "https://query1.finance.yahoo.com/v1/finance/search"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_LOG_LEVEL = "WARNING"

logger = get_logger(__name__)


def get_chart_url() -> str:
    """Base URL of the chart endpoint, without a trailing slash."""
    return os.environ.get("MARKETLENS_CHART_URL", DEFAULT_CHART_URL).rstrip("/")


def get_search_url() -> str:
    """URL of the search endpoint."""
    return os.environ.get("MARKETLENS_SEARCH_URL", DEFAULT_SEARCH_URL)


def get_user_agent() -> str:
    """User-Agent header value; the provider rejects requests without one."""
    return os.environ.get("MARKETLENS_USER_AGENT") or DEFAULT_USER_AGENT


def get_timeout() -> float | None:
    """
    Request timeout in seconds.

    Returns None (the transport default) when MARKETLENS_TIMEOUT is unset or
    cannot be parsed.
    """
    raw = os.environ.get("MARKETLENS_TIMEOUT")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid MARKETLENS_TIMEOUT value: {raw!r}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive MARKETLENS_TIMEOUT value: {raw!r}")
        return None
    return timeout


def get_log_level() -> str:
    level = os.environ.get("MARKETLENS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Ignoring unknown MARKETLENS_LOG_LEVEL value: {level!r}")
        return DEFAULT_LOG_LEVEL
    return level


def get_log_dir() -> str | None:
    """Directory for dated log files, None to log to the console only."""
    return os.environ.get("MARKETLENS_LOG_DIR") or None


def get_settings() -> dict[str, object]:
    """Effective configuration, as reported by the status command."""
    return {
        "chart_url": get_chart_url(),
        "search_url": get_search_url(),
        "user_agent": get_user_agent(),
        "timeout": get_timeout(),
        "log_level": get_log_level(),
        "log_dir": get_log_dir(),
    }
