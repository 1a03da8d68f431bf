"""
Logplex API Client.

Synchronous HTTP client for the Logplex administrative API.
Every request carries the configured credential as a Basic
Authorization header, copied verbatim.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from logplex_cli import __version__
from logplex_cli.core.config import LogplexConfig
from logplex_cli.core.exceptions import DecodeError, TransportError, UnexpectedStatusError
from logplex_cli.core.logging import get_logger, log_with_source
from logplex_cli.schemas import (
    ChannelCreateRequest,
    ChannelCreateResponse,
    DrainAddRequest,
    DrainAddResponse,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class LogplexClient:
    """
    HTTP client for Logplex API communication.

    Features:
    - Base URL, TLS verification and timeout from the resolved config
    - Basic Authorization header built from the auth key
    - Structured logging of requests/responses
    - Status checking and typed response parsing

    Usage:
        with LogplexClient(config) as client:
            channel = client.create_channel("app", ["app"])
    """

    def __init__(
        self,
        config: LogplexConfig,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            config: Resolved configuration.
            http_transport: Optional httpx transport, used in place of the
                default network transport.
        """
        transport = config.transport
        self.base_url = config.endpoint.rstrip("/")
        self.timeout = transport.timeout
        self.verify = transport.verify
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=transport.timeout,
            verify=transport.verify,
            transport=http_transport,
            headers={
                "Authorization": f"Basic {config.auth_key}",
                "User-Agent": f"logplex-cli/{__version__}",
            },
        )

    def __enter__(self) -> "LogplexClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Make an HTTP request to Logplex.

        The response body is read in full and the connection released
        before this returns.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path (e.g., /channels)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            TransportError: On connection, TLS or timeout failure
        """
        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "debug",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise TransportError(str(e) or type(e).__name__) from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    def create_channel(self, name: str, tokens: list[str]) -> ChannelCreateResponse:
        """Create a channel with the given token names."""
        payload = ChannelCreateRequest(name=name, tokens=tokens)
        response = self.request("POST", "/channels", json=payload.model_dump())
        _expect_status(response, 201)
        return _parse(response, ChannelCreateResponse)

    def destroy_channel(self, channel_id: str) -> None:
        """Delete a channel."""
        response = self.request("DELETE", f"/v2/channels/{channel_id}")
        _expect_status(response, 200)

    def add_drain(self, channel_id: str, drain_url: str) -> DrainAddResponse:
        """Attach a drain URL to a channel."""
        payload = DrainAddRequest(url=drain_url)
        response = self.request(
            "POST",
            f"/v2/channels/{channel_id}/drains",
            json=payload.model_dump(),
        )
        _expect_status(response, 201)
        return _parse(response, DrainAddResponse)

    def remove_drain(self, channel_id: str, drain_id: str) -> None:
        """Detach a drain from a channel."""
        response = self.request("DELETE", f"/v2/channels/{channel_id}/drains/{drain_id}")
        _expect_status(response, 200)


def _expect_status(response: httpx.Response, expected: int) -> None:
    """Raise UnexpectedStatusError unless the response has the expected status."""
    if response.status_code != expected:
        raise UnexpectedStatusError(response.status_code, response.reason_phrase, expected)


def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a JSON response body into the given model."""
    try:
        return model.model_validate(response.json())
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        raise DecodeError(f"Invalid response from logplex: {e}") from e
