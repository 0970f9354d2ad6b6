"""Shared fixtures."""

import json

import httpx
import pytest

from kraken_sdk import KrakenClient, NoopLogger, NonceGenerator

# Secret from Kraken's published signing example
SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
API_KEY = "test-api-key"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request and replies with a fixed response."""

    def __init__(self, status_code=200, body=None, text=None, exc=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"error": [], "result": {}} if body is None else body
        self.text = text
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("simulated failure", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_transport():
    """Factory for RecordingTransport with a custom response or failure."""
    return RecordingTransport


@pytest.fixture
def transport():
    """Transport answering every request with an empty success body."""
    return RecordingTransport()


@pytest.fixture
def make_client():
    """Build a client over a given transport with a deterministic clock."""

    def _make(transport, key=API_KEY, secret=SECRET, otp=None, clock=None, **kwargs):
        return KrakenClient(
            key,
            secret,
            otp,
            logger=NoopLogger(),
            nonce_generator=NonceGenerator(clock=clock or (lambda: 1616161616000000)),
            transport=transport,
            **kwargs,
        )

    return _make
