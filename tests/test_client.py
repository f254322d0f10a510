"""Tests for the provider HTTP client."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests


def _response(status_code=200, body=None, content=None, reason="OK"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = "https://provider.test/chart/AAPL"
    if content is None:
        content = json.dumps(body).encode() if body is not None else b""
    response._content = content
    return response


def _client(response=None, side_effect=None, **kwargs):
    from marketlens.client import ProviderClient

    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    return ProviderClient(session=session, chart_url="https://provider.test/chart", **kwargs), session


class TestProviderClient:
    """Test request construction and error mapping."""

    def test_sends_user_agent_and_params(self):
        """Test that chart requests carry range, interval and a User-Agent."""
        client, session = _client(_response(body={"chart": {"result": []}}), user_agent="test-agent/1.0")

        client.chart("AAPL", range="1y", interval="1d")

        args, kwargs = session.get.call_args
        assert args[0] == "https://provider.test/chart/AAPL"
        assert kwargs["params"] == {"range": "1y", "interval": "1d"}
        assert kwargs["headers"]["User-Agent"] == "test-agent/1.0"

    def test_default_user_agent_is_never_empty(self):
        """Test that a User-Agent is sent even without configuration."""
        client, session = _client(_response(body={}))

        client.chart("AAPL", range="1d", interval="1d")

        assert session.get.call_args.kwargs["headers"]["User-Agent"]

    def test_symbol_is_escaped_in_path(self):
        """Test that index symbols are passed as one path segment."""
        client, session = _client(_response(body={}))

        client.chart("^GSPC", range="1d", interval="1d")

        assert session.get.call_args.args[0] == "https://provider.test/chart/%5EGSPC"

    def test_search_params(self):
        """Test search query construction."""
        client, session = _client(_response(body={"news": []}), search_url="https://provider.test/search")

        client.search("AAPL", news_count=7)

        args, kwargs = session.get.call_args
        assert args[0] == "https://provider.test/search"
        assert kwargs["params"] == {"q": "AAPL", "newsCount": 7, "quotesCount": 1}

    def test_connection_error_becomes_network_error(self):
        """Test that transport failures raise NetworkError."""
        from marketlens.errors import NetworkError

        client, _ = _client(side_effect=requests.ConnectionError("refused"))

        with pytest.raises(NetworkError, match="refused"):
            client.chart("AAPL", range="1d", interval="1d")

    def test_timeout_becomes_network_error(self):
        """Test that timeouts raise NetworkError."""
        from marketlens.errors import NetworkError

        client, _ = _client(side_effect=requests.Timeout("slow"))

        with pytest.raises(NetworkError):
            client.chart("AAPL", range="1d", interval="1d")

    def test_server_error_status(self):
        """Test that a 5xx answer raises NetworkError with the status code."""
        from marketlens.errors import NetworkError

        client, _ = _client(_response(status_code=503, content=b"busy", reason="Service Unavailable"))

        with pytest.raises(NetworkError) as exc_info:
            client.chart("AAPL", range="1d", interval="1d")
        assert exc_info.value.status_code == 503

    def test_not_found_is_data_unavailable(self):
        """Test that a 404 with the provider's error body raises DataUnavailable."""
        from marketlens.errors import DataUnavailable

        body = {"chart": {"result": None, "error": {"code": "Not Found", "description": "No data found, symbol may be delisted"}}}
        client, _ = _client(_response(status_code=404, body=body, reason="Not Found"))

        with pytest.raises(DataUnavailable, match="delisted"):
            client.chart("NOPE", range="1d", interval="1d")

    def test_html_not_found_is_network_error(self):
        """Test that a 404 without the provider's error body is a transport failure."""
        from marketlens.errors import NetworkError

        client, _ = _client(_response(status_code=404, content=b"<html>Not Found</html>", reason="Not Found"))

        with pytest.raises(NetworkError) as exc_info:
            client.chart("AAPL", range="1d", interval="1d")
        assert exc_info.value.status_code == 404

    def test_not_found_without_error_description(self):
        from marketlens.errors import NetworkError

        client, _ = _client(_response(status_code=404, body={"detail": "no route"}, reason="Not Found"))

        with pytest.raises(NetworkError, match="HTTP 404"):
            client.search("AAPL", news_count=3)

    def test_invalid_json(self):
        """Test that a non-JSON body raises NetworkError."""
        from marketlens.errors import NetworkError

        client, _ = _client(_response(content=b"<html>oops</html>"))

        with pytest.raises(NetworkError, match="not valid JSON"):
            client.chart("AAPL", range="1d", interval="1d")

    def test_non_object_json(self):
        """Test that a JSON array body raises NetworkError."""
        from marketlens.errors import NetworkError

        client, _ = _client(_response(body=[1, 2, 3]))

        with pytest.raises(NetworkError):
            client.chart("AAPL", range="1d", interval="1d")


class TestClientLifecycle:
    """Test session ownership and configuration."""

    def test_injected_session_is_not_closed(self):
        """Test that a caller's session survives close()."""
        client, session = _client(_response(body={}))

        client.close()

        session.close.assert_not_called()

    def test_open_client_closes_owned_session(self):
        """Test that open_client closes the client it creates."""
        from marketlens.client import open_client

        with patch("marketlens.client.requests.Session") as mock_session_cls:
            with open_client() as client:
                assert client is not None
            mock_session_cls.return_value.close.assert_called_once()

    def test_open_client_passes_through_given_client(self):
        """Test that open_client yields an existing client unchanged."""
        from marketlens.client import open_client

        existing = MagicMock()
        with open_client(existing) as client:
            assert client is existing
        existing.close.assert_not_called()

    def test_timeout_from_environment(self, monkeypatch):
        """Test that MARKETLENS_TIMEOUT is applied to requests."""
        monkeypatch.setenv("MARKETLENS_TIMEOUT", "2.5")
        client, session = _client(_response(body={}))

        client.chart("AAPL", range="1d", interval="1d")

        assert session.get.call_args.kwargs["timeout"] == 2.5

    def test_no_timeout_by_default(self, monkeypatch):
        """Test that the transport default applies without configuration."""
        monkeypatch.delenv("MARKETLENS_TIMEOUT", raising=False)
        client, session = _client(_response(body={}))

        client.chart("AAPL", range="1d", interval="1d")

        assert session.get.call_args.kwargs["timeout"] is None

    def test_invalid_timeout_is_ignored(self, monkeypatch):
        """Test that an unparseable timeout falls back to the transport default."""
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_TIMEOUT", "soon")

        assert config.get_timeout() is None

    def test_base_urls_from_environment(self, monkeypatch):
        """Test that endpoint URLs can be overridden."""
        from marketlens.client import ProviderClient

        monkeypatch.setenv("MARKETLENS_CHART_URL", "http://localhost:9000/chart/")
        monkeypatch.setenv("MARKETLENS_SEARCH_URL", "http://localhost:9000/search")

        client = ProviderClient(session=MagicMock(spec=requests.Session))

        assert client.chart_url == "http://localhost:9000/chart"
        assert client.search_url == "http://localhost:9000/search"
