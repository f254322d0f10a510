"""
HTTP access to the provider's chart and search endpoints.

Every retrieval operation goes through ProviderClient, which owns the base
URLs, the required User-Agent header and JSON decoding.
"""

from contextlib import contextmanager
from typing import Any, Iterator
from urllib.parse import quote

import requests

from marketlens import config
from marketlens.errors import DataUnavailable, NetworkError
from marketlens.logger import get_logger

logger = get_logger(__name__)


class ProviderClient:
    """Thin wrapper around a requests session for the provider's endpoints."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        chart_url: str | None = None,
        search_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.chart_url = (chart_url or config.get_chart_url()).rstrip("/")
        self.search_url = search_url or config.get_search_url()
        self.timeout = timeout if timeout is not None else config.get_timeout()
        self.headers = {
            "User-Agent": user_agent or config.get_user_agent(),
            "Accept": "application/json",
        }
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> "ProviderClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        """
        Issue one GET request and decode the JSON object it returns.

        Raises:
            DataUnavailable: the provider answered 404 with its own error body
            NetworkError: transport failure, any other non-2xx status, or a body
                that is not a JSON object
        """
        logger.debug(f"GET {url} params={params}")
        try:
            response = self._session.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request failed: {e}") from e

        if not response.ok:
            description = _provider_error(response)
            # Only the provider's own not-found body means "no such symbol"
            if response.status_code == 404 and description is not None:
                raise DataUnavailable(f"Provider returned no data ({description})")
            logger.warning(f"HTTP {response.status_code} from {url}: {response.text[:200]}")
            raise NetworkError(
                f"HTTP {response.status_code}: {description or response.reason or 'unknown error'}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkError(f"Response from {url} is not valid JSON") from e
        if not isinstance(payload, dict):
            raise NetworkError(f"Unexpected response type from {url}: {type(payload).__name__}")
        return payload

    def chart(self, symbol: str, range: str, interval: str, **extra: Any) -> dict[str, Any]:
        """Fetch the raw chart envelope for a symbol."""
        params: dict[str, Any] = {"range": range, "interval": interval, **extra}
        return self.get_json(f"{self.chart_url}/{quote(symbol, safe='')}", params)

    def search(self, query: str, news_count: int) -> dict[str, Any]:
        """Fetch the raw search envelope for a query."""
        params = {"q": query, "newsCount": news_count, "quotesCount": 1}
        return self.get_json(self.search_url, params)


def _provider_error(response: requests.Response) -> str | None:
    """The description from a chart or finance error body, None for any other body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("chart", "finance"):
        section = body.get(key)
        if not isinstance(section, dict):
            continue
        error = section.get("error")
        if isinstance(error, dict) and error.get("description"):
            return str(error["description"])
    return None


@contextmanager
def open_client(client: ProviderClient | None = None) -> Iterator[ProviderClient]:
    """Yield the given client, or a fresh one that is closed afterwards."""
    if client is not None:
        yield client
        return
    with ProviderClient() as owned:
        yield owned
