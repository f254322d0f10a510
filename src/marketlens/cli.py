"""
marketlens CLI - Command line interface for market data and price statistics.
"""

import json
import logging
import sys
from importlib import metadata
from typing import Any

import click

from marketlens import __version__, config
from marketlens.logger import setup_logger
from marketlens.market.charts import VALID_INTERVALS, VALID_RANGES
from marketlens.shaping import localize


def _output_json(data: dict[str, Any]) -> None:
    """Output data as JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


def _output_result(result: dict[str, Any], local_time: bool = False) -> None:
    """Output a result, handling errors."""
    if not result.get("ok"):
        click.echo(json.dumps(result), err=True)
        sys.exit(1)
    if local_time:
        result = {**result, "data": localize(result["data"])}
    _output_json(result)


@click.group()
@click.version_option(version=__version__, prog_name="marketlens")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and failures to stderr")
def main(verbose: bool) -> None:
    """marketlens - Market data retrieval and price statistics."""
    setup_logger(
        "marketlens",
        logging.DEBUG if verbose else config.get_log_level(),
        log_dir=config.get_log_dir(),
    )


# =============================================================================
# Market Commands
# =============================================================================


@main.group()
def market() -> None:
    """Quotes, price series and news."""
    pass


@market.command()
@click.argument("symbol")
def quote(symbol: str) -> None:
    """Get the quote snapshot for a symbol."""
    from marketlens.market.quotes import get_quote

    _output_result(get_quote(symbol))


@market.command()
@click.argument("symbol")
def price(symbol: str) -> None:
    """Get the current price and day change."""
    from marketlens.market.quotes import get_price

    _output_result(get_price(symbol))


@market.command()
@click.argument("symbol")
@click.option("--range", "-r", "range_", default="1mo", type=click.Choice(VALID_RANGES), help="Time range")
@click.option("--interval", "-i", default="1d", type=click.Choice(VALID_INTERVALS), help="Bar interval")
@click.option("--local-time", is_flag=True, help="Show timestamps in the local time zone")
def chart(symbol: str, range_: str, interval: str, local_time: bool) -> None:
    """Get historical price bars."""
    from marketlens.market.charts import get_chart

    _output_result(get_chart(symbol, range_, interval), local_time)


@market.command()
@click.argument("symbol")
@click.option("--period", "-p", default="1y", type=click.Choice(VALID_RANGES), help="Time range")
@click.option("--local-time", is_flag=True, help="Show timestamps in the local time zone")
def technical(symbol: str, period: str, local_time: bool) -> None:
    """Get daily bars with adjusted closes."""
    from marketlens.market.charts import get_technical_series

    _output_result(get_technical_series(symbol, period), local_time)


@market.command()
@click.argument("query")
@click.option("--count", "-n", default=3, type=click.IntRange(min=0), help="Maximum number of items")
def news(query: str, count: int) -> None:
    """Search recent news."""
    from marketlens.market.news import get_news

    _output_result(get_news(query, count))


# =============================================================================
# Analysis Commands
# =============================================================================


@main.group()
def analysis() -> None:
    """Derived price statistics."""
    pass


@analysis.command()
@click.argument("symbol")
def fundamentals(symbol: str) -> None:
    """Get price position within the 52-week range."""
    from marketlens.analysis.fundamentals import get_fundamentals

    _output_result(get_fundamentals(symbol))


@analysis.command()
@click.argument("symbol")
def yearly(symbol: str) -> None:
    """Get calendar-year performance over five years."""
    from marketlens.analysis.performance import get_yearly_performance

    _output_result(get_yearly_performance(symbol))


@analysis.command()
@click.argument("symbol")
def ratios(symbol: str) -> None:
    """Get day change, average daily return, volatility and YTD return."""
    from marketlens.analysis.ratios import get_key_ratios

    _output_result(get_key_ratios(symbol))


@analysis.command()
@click.argument("symbol")
def trend(symbol: str) -> None:
    """Get moving averages, trend signal and momentum."""
    from marketlens.analysis.trend import get_trend_analysis

    _output_result(get_trend_analysis(symbol))


# =============================================================================
# Batch Command
# =============================================================================


@main.command()
@click.argument("operation")
@click.option("--symbols", "-s", required=True, help="Comma-separated symbols")
@click.option("--workers", "-w", default=4, type=click.IntRange(min=1), help="Maximum concurrent requests")
def batch(operation: str, symbols: str, workers: int) -> None:
    """Run one operation for several symbols concurrently."""
    from marketlens.batch import OPERATIONS, fetch_many

    if operation not in OPERATIONS:
        _output_result(
            {
                "ok": False,
                "error": f"Unknown operation: {operation}. Available: {', '.join(OPERATIONS)}",
            }
        )

    symbol_list = [s.strip() for s in symbols.split(",") if s.strip()]
    results = fetch_many(operation, symbol_list, workers)
    _output_result({"ok": any(r.get("ok") for r in results.values()), "data": results})


# =============================================================================
# Status Command
# =============================================================================


@main.command()
def status() -> None:
    """Check marketlens dependencies and configuration."""
    status_data: dict[str, Any] = {
        "version": __version__,
        "python_version": sys.version,
        "dependencies": {},
        "config": config.get_settings(),
    }

    for package in ("requests", "numpy", "click"):
        try:
            status_data["dependencies"][package] = {"installed": True, "version": metadata.version(package)}
        except metadata.PackageNotFoundError:
            status_data["dependencies"][package] = {"installed": False}

    _output_result({"ok": True, "data": status_data})


if __name__ == "__main__":
    main()
