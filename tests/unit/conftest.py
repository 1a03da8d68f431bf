"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always mocked.
HTTP exchanges go through httpx.MockTransport and are recorded so tests
can assert on method, path, headers and body.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from logplex_cli.core.config import LogplexConfig

TEST_ENDPOINT = "https://logplex.test"
TEST_AUTH_KEY = "dGVzdDpzZWNyZXQ="


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replies with a canned response and keeps every request."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes = b"",
        error: Exception | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content.decode())


@pytest.fixture
def config() -> LogplexConfig:
    """Resolved configuration pointing at a test endpoint."""
    return LogplexConfig(endpoint=TEST_ENDPOINT, auth_key=TEST_AUTH_KEY)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """
    Factory for recording transports.

    Usage:
        def test_create(make_transport):
            transport = make_transport(201, json_body={"channel_id": 1, "tokens": {}})
    """
    return RecordingTransport


@pytest.fixture
def logplex_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Minimal valid environment: explicit endpoint plus auth key."""
    monkeypatch.setenv("LOGPLEX_ENDPOINT", TEST_ENDPOINT)
    monkeypatch.setenv("LOGPLEX_AUTH_KEY", TEST_AUTH_KEY)
