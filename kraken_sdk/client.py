"""Kraken REST client with public and private endpoints."""

from typing import Any, Awaitable, Mapping, Optional, Union

import httpx

from .config import ClientConfig
from .dispatcher import Dispatcher
from .exceptions import InvalidMethodError, MissingCredentialsError
from .logger import ConsoleLogger, Logger, LogLevel
from .nonce import NonceGenerator
from .signer import sign
from .types import (
    ApiMethod,
    Credentials,
    PrivateMethod,
    PublicMethod,
    SignedRequest,
    is_private,
    resolve_method,
)


def _coerce(catalog, method):
    try:
        return catalog(method)
    except ValueError:
        raise InvalidMethodError(str(method)) from None


class KrakenClient:
    """
    Client for the Kraken REST API.

    Example:
        ```python
        async with KrakenClient(key, secret) as client:
            server_time = await client.call("Time")
            balance = await client.call("Balance")
        ```
    """

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        otp: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        logger: Optional[Logger] = None,
        log_level: LogLevel = LogLevel.INFO,
        nonce_generator: Optional[NonceGenerator] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            key: API key (required for private methods)
            secret: Base64-encoded API secret (required for private methods)
            otp: Two-factor password. Sent with every private call. Kraken's
                handling of it is not guaranteed to work.
            config: Endpoint, version, timeout and User-Agent settings
            logger: Custom logger instance
            log_level: Minimum log level for the default console logger
            nonce_generator: Nonce source (inject a fixed clock in tests)
            transport: Custom httpx transport
        """
        self.config = config or ClientConfig()
        self.credentials: Optional[Credentials] = None
        if key is not None and secret is not None:
            self.credentials = Credentials(key=key, secret=secret, otp=otp)

        self.logger = logger or ConsoleLogger(level=log_level)
        self.nonces = nonce_generator or NonceGenerator()
        self.dispatcher = Dispatcher(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            logger=self.logger,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the HTTP connection pool."""
        await self.dispatcher.close()

    def call(
        self, method: Union[str, ApiMethod], params: Optional[Mapping[str, Any]] = None
    ) -> Awaitable[Any]:
        """
        Make a public or private API request.

        The method name is checked before anything else happens, so an unknown
        name raises here instead of from the returned awaitable.

        Args:
            method: API method name, e.g. ``"Ticker"`` or ``"AddOrder"``
            params: POST body arguments

        Returns:
            Awaitable resolving to the decoded JSON response

        Raises:
            InvalidMethodError: If the method is in neither catalog
        """
        resolved = resolve_method(method)
        if is_private(resolved):
            return self.private_method(resolved, params)
        return self.public_method(resolved, params)

    async def public_method(
        self, method: Union[str, PublicMethod], params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Make an unauthenticated request."""
        method = _coerce(PublicMethod, method)
        url = self.config.url + self.config.public_path(method.value)
        self.logger.debug(f"Public request {method.value}")
        return await self.dispatcher.send(url, {}, dict(params or {}))

    async def private_method(
        self, method: Union[str, PrivateMethod], params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Make a signed request."""
        request = self.build_private_request(method, params)
        self.logger.debug(f"Private request {request.url}")
        return await self.dispatcher.send(request.url, request.headers, request.params)

    def build_private_request(
        self, method: Union[str, PrivateMethod], params: Optional[Mapping[str, Any]] = None
    ) -> SignedRequest:
        """
        Build the URL, augmented params and auth headers for a private call.

        Raises:
            MissingCredentialsError: If the client has no key/secret
            EncodingError: If the secret is not valid base64
        """
        method = _coerce(PrivateMethod, method)
        if self.credentials is None:
            raise MissingCredentialsError(method.value)

        path = self.config.private_path(method.value)
        signed_params = self.augment_params(params)
        signature = sign(path, signed_params, signed_params["nonce"], self.credentials.secret)

        return SignedRequest(
            url=self.config.url + path,
            headers={"API-Key": self.credentials.key, "API-Sign": signature},
            params=signed_params,
        )

    def augment_params(self, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Return a copy of ``params`` with ``nonce`` (and ``otp`` if configured) set.

        A nonce already present in ``params`` is kept.
        """
        augmented = dict(params or {})
        if augmented.get("nonce") is None:
            augmented["nonce"] = self.nonces.next()
        else:
            supplied = augmented["nonce"]
            numeric_str = isinstance(supplied, str) and supplied.isascii() and supplied.isdigit()
            if isinstance(supplied, int) or numeric_str:
                self.nonces.observe(int(supplied))

        if self.credentials is not None and self.credentials.otp is not None:
            augmented["otp"] = self.credentials.otp
        return augmented
