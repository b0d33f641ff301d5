"""
Shared fixtures: settings and a stubbed TimeForged backend.
"""

import json
from typing import Optional

import httpx
import pytest

from timeforged_mcp.api.client import TimeForgedClient
from timeforged_mcp.settings import Settings


SERVER_URL = "http://tf.test"


class FakeBackend:
    """httpx.MockTransport handler recording requests and replaying one response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = "{}"
        self.error: Optional[type] = None

    def reply(self, payload=None, *, text: Optional[str] = None, status_code: int = 200):
        self.body = text if text is not None else json.dumps(payload)
        self.status_code = status_code

    def fail(self, error: type):
        """Raise an httpx transport error of this class on the next request."""
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated failure", request=request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def settings():
    return Settings(server_url=SERVER_URL, api_key="secret")


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(settings, backend):
    return TimeForgedClient(settings, transport=httpx.MockTransport(backend))
