"""
Pytest fixtures for the Google Places client tests.
Provides a PlacesClient wired to an in-memory httpx transport.
"""

import json

import httpx
import pytest

from places_client import PlacesClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replies with a fixed response and keeps every request."""

    def __init__(self, status_code: int = 200, payload=None, content: bytes | None = None, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_client():
    """Return a factory building a (client, transport) pair for a canned reply."""

    def _make(**reply):
        transport = RecordingTransport(**reply)
        return PlacesClient("test-key", transport=transport), transport

    return _make
