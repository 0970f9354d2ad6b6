"""HTTP dispatch and response normalization."""

import asyncio
import json
from typing import Any, Mapping, Optional

import httpx

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .exceptions import APIError, RequestTimeoutError, ResponseFormatError, TransportError
from .format import encode_params
from .logger import Logger, NoopLogger

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_response(
    text: str, status_code: Optional[int] = None, logger: Optional[Logger] = None
) -> Any:
    """
    Decode a response body and surface server-side errors.

    Kraken returns ``{"error": [...], "result": ...}``. Entries starting with
    ``E`` are errors; anything else (``W...``) is a warning. A body whose error
    list holds only warnings is returned as-is.

    Args:
        text: Raw response body
        status_code: HTTP status, attached to format errors
        logger: Receives warnings from the error list

    Returns:
        The decoded JSON value, unmodified

    Raises:
        ResponseFormatError: If the body is not JSON
        APIError: If the error list contains an E-prefixed entry
    """
    try:
        data = json.loads(text)
    except ValueError:
        raise ResponseFormatError(text, status_code) from None

    errors = data.get("error") if isinstance(data, dict) else None
    if isinstance(errors, list) and errors:
        for entry in errors:
            if isinstance(entry, str) and entry.startswith("E"):
                raise APIError(entry[1:], errors)
        if logger:
            for entry in errors:
                logger.warn(f"Kraken API warning: {entry}")

    return data


class Dispatcher:
    """
    Sends form-encoded POST requests and normalizes the outcome.

    Every call either returns the decoded JSON body or raises exactly one
    KrakenError subclass. There are no retries.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize dispatcher.

        Args:
            timeout: Default request deadline in seconds
            user_agent: User-Agent header sent on every request
            logger: Logger instance
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = logger or NoopLogger()
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def send(
        self,
        url: str,
        headers: Mapping[str, str],
        params: Mapping[str, Any],
        timeout: Optional[float] = None,
    ) -> Any:
        """
        POST ``params`` to ``url``.

        Args:
            url: Full request URL
            headers: Extra headers (API-Key / API-Sign for private calls)
            params: Form body
            timeout: Deadline in seconds, overriding the default

        Returns:
            Decoded JSON body

        Raises:
            TransportError: Connection failure (RequestTimeoutError on timeout)
            ResponseFormatError: Body is not JSON
            APIError: Server reported an error
        """
        request_headers = {
            **headers,
            "User-Agent": self.user_agent,
            "Content-Type": FORM_CONTENT_TYPE,
        }
        body = encode_params(params)
        deadline = self.timeout if timeout is None else timeout

        try:
            # Deadline covers connect through the last body byte
            response = await asyncio.wait_for(
                self._client.post(
                    url, content=body.encode(), headers=request_headers, timeout=deadline
                ),
                timeout=deadline,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            self.logger.error(f"Request to {url} timed out after {deadline}s")
            raise RequestTimeoutError(f"timed out after {deadline}s: {e!r}") from e
        except httpx.RequestError as e:
            self.logger.error(f"Request to {url} failed: {e!r}")
            raise TransportError(repr(e)) from e

        self.logger.debug(f"POST {url} -> {response.status_code}")
        try:
            return parse_response(response.text, response.status_code, self.logger)
        except ResponseFormatError:
            self.logger.error(f"Non-JSON response from {url} (status {response.status_code})")
            raise
