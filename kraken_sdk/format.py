"""Form encoding for request parameters.

The signer hashes the encoded string and the dispatcher sends the very same
string as the POST body, so both must go through ``encode_params``.
"""

from decimal import Decimal
from typing import Any, Mapping
from urllib.parse import urlencode


def to_form_value(value: Any) -> str:
    """
    Convert a scalar parameter to its form representation.

    Args:
        value: str, int, float, Decimal, bool or None

    Returns:
        String value as it appears in the form body
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        # Avoid exponent notation such as 1E-8
        return format(value, "f")
    if isinstance(value, (list, tuple)):
        return ",".join(to_form_value(item) for item in value)
    return str(value)


def encode_params(params: Mapping[str, Any]) -> str:
    """
    URL-encode parameters in their iteration order.

    Args:
        params: Request parameters

    Returns:
        ``application/x-www-form-urlencoded`` string
    """
    return urlencode([(key, to_form_value(value)) for key, value in params.items()])
