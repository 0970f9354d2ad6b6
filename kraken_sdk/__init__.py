"""Kraken REST API SDK for Python."""

# Main client
from .client import KrakenClient

# Building blocks
from .config import ClientConfig
from .dispatcher import Dispatcher, parse_response
from .nonce import NonceGenerator
from .signer import sign
from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel
from .format import encode_params, to_form_value

# Types
from .types import (
    PublicMethod,
    PrivateMethod,
    ApiMethod,
    Credentials,
    SignedRequest,
    resolve_method,
    is_private,
)

# Exceptions
from .exceptions import (
    KrakenError,
    InvalidMethodError,
    MissingCredentialsError,
    EncodingError,
    TransportError,
    RequestTimeoutError,
    ResponseFormatError,
    APIError,
)

__all__ = [
    # Main client
    "KrakenClient",
    # Building blocks
    "ClientConfig",
    "Dispatcher",
    "parse_response",
    "NonceGenerator",
    "sign",
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "LogLevel",
    "encode_params",
    "to_form_value",
    # Types
    "PublicMethod",
    "PrivateMethod",
    "ApiMethod",
    "Credentials",
    "SignedRequest",
    "resolve_method",
    "is_private",
    # Exceptions
    "KrakenError",
    "InvalidMethodError",
    "MissingCredentialsError",
    "EncodingError",
    "TransportError",
    "RequestTimeoutError",
    "ResponseFormatError",
    "APIError",
]

__version__ = "0.1.0"
