"""
Tests for the TimeForged HTTP client.
"""

import asyncio
import time

import httpx
import pytest

from timeforged_mcp.api.client import (
    BackendConnectionError,
    BackendError,
    BackendHTTPError,
    BackendTimeoutError,
    TimeForgedClient,
)
from timeforged_mcp.settings import Settings


class TestResponseHandling:
    """Test body interpretation."""

    def test_json_body_decoded(self, client, backend):
        backend.reply({"status": "ok", "count": 3})
        assert asyncio.run(client.send("/api/v1/status")) == {"status": "ok", "count": 3}

    def test_json_list_decoded(self, client, backend):
        backend.reply([])
        assert asyncio.run(client.send("/api/v1/reports/sessions")) == []

    def test_non_json_body_returned_as_text(self, client, backend):
        backend.reply(text="pong")
        assert asyncio.run(client.send("/ping")) == "pong"

    def test_http_error_embeds_status_and_body(self, client, backend):
        backend.reply(text="not found", status_code=404)

        with pytest.raises(BackendHTTPError) as exc_info:
            asyncio.run(client.send("/api/v1/missing"))

        assert "404" in str(exc_info.value)
        assert "not found" in str(exc_info.value)
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "not found"

    def test_http_error_with_json_body_not_decoded(self, client, backend):
        backend.reply({"error": "bad"}, status_code=400)

        with pytest.raises(BackendHTTPError) as exc_info:
            asyncio.run(client.send("/api/v1/events", method="POST"))

        assert str(exc_info.value) == 'HTTP 400: {"error": "bad"}'


class TestTransportErrors:
    """Test timeout and connection failures."""

    def test_timeout_raises_timeout_error(self, client, backend):
        backend.fail(httpx.ReadTimeout)

        with pytest.raises(BackendTimeoutError) as exc_info:
            asyncio.run(client.send("/api/v1/status"))

        assert not isinstance(exc_info.value, BackendHTTPError)
        assert str(exc_info.value) == "Request to http://tf.test/api/v1/status timed out after 10s"

    def test_connect_error(self, client, backend):
        backend.fail(httpx.ConnectError)

        with pytest.raises(BackendConnectionError, match="Cannot reach http://tf.test/api/v1/status"):
            asyncio.run(client.send("/api/v1/status"))

    def test_errors_share_base_class(self):
        assert issubclass(BackendTimeoutError, BackendError)
        assert issubclass(BackendHTTPError, BackendError)
        assert issubclass(BackendConnectionError, BackendError)

    def test_fixed_timeout(self, client):
        assert client.timeout == 10.0


class TestRequestBuilding:
    """Test URL and header construction."""

    def test_url_concatenated_verbatim(self, client, backend):
        asyncio.run(client.send("/api/v1/reports/summary?project=x"))
        assert str(backend.last_request.url) == "http://tf.test/api/v1/reports/summary?project=x"

    def test_default_headers(self, client, backend):
        asyncio.run(client.send("/api/v1/status"))

        headers = backend.last_request.headers
        assert headers["Content-Type"] == "application/json"
        assert headers["X-Api-Key"] == "secret"

    def test_no_api_key_header_when_unset(self, backend):
        client = TimeForgedClient(
            Settings(server_url="http://tf.test", api_key=""),
            transport=httpx.MockTransport(backend),
        )
        asyncio.run(client.send("/api/v1/status"))

        assert "X-Api-Key" not in backend.last_request.headers
        assert backend.last_request.headers["Content-Type"] == "application/json"

    def test_caller_headers_override_defaults(self, client, backend):
        asyncio.run(client.send(
            "/api/v1/status",
            headers={"Content-Type": "text/plain", "X-Api-Key": "other"},
        ))

        headers = backend.last_request.headers
        assert headers["Content-Type"] == "text/plain"
        assert headers["X-Api-Key"] == "other"

    def test_method_and_body(self, client, backend):
        asyncio.run(client.send("/api/v1/events", method="POST", body=b'{"a": 1}'))

        assert backend.last_request.method == "POST"
        assert backend.last_request.content == b'{"a": 1}'

    def test_get_skips_empty_params(self, client, backend):
        asyncio.run(client.get("/api/v1/reports/summary", {"from": None, "to": "", "project": "x"}))
        assert str(backend.last_request.url) == "http://tf.test/api/v1/reports/summary?project=x"

    def test_post_json(self, client, backend):
        asyncio.run(client.post_json("/api/v1/events", {"entity": "main.py"}))

        assert backend.last_request.method == "POST"
        assert backend.last_json() == {"entity": "main.py"}


def _dripping_backend(chunks: int, interval: float):
    """Backend that answers at once, then streams the body one byte at a time."""
    async def drip():
        for _ in range(chunks):
            await asyncio.sleep(interval)
            yield b" "

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=drip())

    return httpx.MockTransport(handler)


class TestDeadline:
    """The timeout bounds the whole call, body read included."""

    def test_slow_body_cancelled_at_deadline(self, settings):
        client = TimeForgedClient(settings, transport=_dripping_backend(chunks=50, interval=0.1))
        client.timeout = 0.3

        started = time.monotonic()
        with pytest.raises(BackendTimeoutError, match="timed out after 0.3s"):
            asyncio.run(client.send("/api/v1/status"))

        assert time.monotonic() - started < 2.0

    def test_body_within_deadline_returned(self, settings):
        client = TimeForgedClient(settings, transport=_dripping_backend(chunks=3, interval=0.01))

        assert asyncio.run(client.send("/api/v1/status")) == "   "
