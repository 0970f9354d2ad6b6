"""Exception hierarchy for the Kraken SDK."""

from typing import Any, Optional


class KrakenError(Exception):
    """Base exception for all SDK errors."""

    pass


class InvalidMethodError(KrakenError):
    """Raised when a method name is in neither the public nor the private catalog."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"{method} is not a valid API method.")


class MissingCredentialsError(KrakenError):
    """Raised when a private method is called on a client without key/secret."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"{method} is a private method and requires an API key and secret")


class EncodingError(KrakenError):
    """Raised when the API secret is not valid base64."""

    pass


class TransportError(KrakenError):
    """Raised when the request never produced a response (connection, DNS, protocol)."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error in server response: {detail}")


class RequestTimeoutError(TransportError):
    """Raised when the request exceeded its deadline."""

    pass


class ResponseFormatError(KrakenError):
    """Raised when the response body is not JSON. Keeps the raw body."""

    def __init__(self, body: str, status_code: Optional[int] = None):
        self.body = body
        self.status_code = status_code
        super().__init__(f"Could not understand response from server: {body}")


class APIError(KrakenError):
    """
    Server-reported error.

    Kraken reports errors as strings like ``EGeneral:Invalid arguments``. The
    message is the string without its leading severity character.
    """

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        self.message = message
        self.errors = list(errors) if errors is not None else [f"E{message}"]
        category, sep, detail = message.partition(":")
        self.category = category if sep else None
        self.detail = detail if sep else message
        super().__init__(message)
