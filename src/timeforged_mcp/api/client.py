"""
TimeForged HTTP client.

Handles:
- URL construction from the configured server URL
- X-Api-Key header injection
- Fixed total deadline per request (connect, send and body read together)
- JSON decoding with raw-text fallback for non-JSON bodies
"""

import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from timeforged_mcp.settings import REQUEST_TIMEOUT, Settings
from timeforged_mcp.utils.formatting import build_query


logger = logging.getLogger(__name__)


# ============================================================================
# Exception Classes
# ============================================================================

class BackendError(Exception):
    """Base class for TimeForged backend errors."""
    pass


class BackendTimeoutError(BackendError):
    """Request did not complete within the timeout."""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout:g}s")


class BackendHTTPError(BackendError):
    """
    Backend responded with a non-2xx status.

    The message embeds the status code and the raw response body.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")

    def to_dict(self) -> dict:
        """Convert to dictionary for structured logging."""
        return {
            "error": "http_error",
            "status_code": self.status_code,
            "body": self.body,
        }


class BackendConnectionError(BackendError):
    """Backend could not be reached (connection refused, DNS failure...)."""
    pass


# ============================================================================
# Client
# ============================================================================

class TimeForgedClient:
    """
    Async client for the TimeForged REST API.

    Each call opens its own connection; there is no retry and no caching.
    The whole call, body included, is cancelled once the timeout elapses.

    Args:
        settings: Process-wide settings (server URL, API key).
        transport: Optional httpx transport, used by tests to stub the backend.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.timeout = REQUEST_TIMEOUT
        self._transport = transport

    def build_headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Default headers, then the API key, then caller-supplied headers."""
        headers = {"Content-Type": "application/json"}
        if self.settings.has_api_key:
            headers["X-Api-Key"] = self.settings.api_key
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        url: str,
        body: Optional[bytes],
        headers: dict[str, str],
    ) -> tuple[httpx.Response, str]:
        """Issue the request and read the full body as text."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.request(method, url, content=body, headers=headers)
            return response, response.text

    async def send(
        self,
        path: str,
        method: str = "GET",
        body: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Send one request to the backend.

        Args:
            path: Path appended verbatim to the server URL, including any query string
            method: HTTP method (default GET)
            body: Raw request body
            headers: Extra headers, override the defaults

        Returns:
            Decoded JSON value, or the raw body text when it is not valid JSON.

        Raises:
            BackendTimeoutError: Request exceeded the timeout
            BackendHTTPError: Non-2xx response, message embeds status and body
            BackendConnectionError: Transport-level failure
        """
        url = f"{self.settings.server_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response, text = await asyncio.wait_for(
                self._request(method, url, body, self.build_headers(headers)),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"{method} {url} timed out after {self.timeout:g}s")
            raise BackendTimeoutError(url, self.timeout) from e
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise BackendConnectionError(f"Cannot reach {url}: {e}") from e

        if not response.is_success:
            logger.warning(f"{method} {url} returned {response.status_code}: {text[:200]}")
            raise BackendHTTPError(response.status_code, text)

        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text

    async def get(self, path: str, params: Optional[dict[str, Optional[str]]] = None) -> Any:
        """GET with a query string built from the non-empty params."""
        return await self.send(f"{path}{build_query(params or {})}")

    async def post_json(self, path: str, payload: dict) -> Any:
        """POST a JSON-encoded payload."""
        return await self.send(path, method="POST", body=json.dumps(payload).encode("utf-8"))
