"""Request signing for private endpoints."""

import base64
import binascii
import hashlib
import hmac
from typing import Any, Mapping, Union

from pydantic import SecretStr

from .exceptions import EncodingError
from .format import encode_params


def decode_secret(secret: Union[str, bytes, SecretStr]) -> bytes:
    """
    Decode a base64 API secret into HMAC key bytes.

    Raises:
        EncodingError: If the secret is not valid base64
    """
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"API secret is not valid base64: {e}") from e


def sign(
    path: str,
    params: Mapping[str, Any],
    nonce: Union[int, str],
    secret: Union[str, bytes, SecretStr],
) -> str:
    """
    Compute the ``API-Sign`` header value for a private request.

    ``base64(HMAC-SHA512(b64decode(secret), path + SHA256(nonce + postdata)))``

    Args:
        path: Request path, e.g. ``/0/private/Balance``
        params: POST body, already containing the nonce
        nonce: The nonce, concatenated as its decimal string
        secret: Base64-encoded API secret

    Returns:
        Base64-encoded signature

    Raises:
        EncodingError: If the secret is not valid base64
    """
    key = decode_secret(secret)
    message = encode_params(params)
    digest = hashlib.sha256(f"{nonce}{message}".encode()).digest()
    mac = hmac.new(key, path.encode() + digest, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode()
